import datetime
from typing import Optional, Union

from models import ExperienceLevel, TrainingAgeInfo
from errors import InvalidInput

DateLike = Union[datetime.date, datetime.datetime, str, None]


class TrainingAgeEstimator:
    """Derive experience tier and volume tolerance from a training start date."""

    # (upper bound in years, tier); the elite tier has no upper bound
    EXPERIENCE_THRESHOLDS: tuple = (
        (1.0, ExperienceLevel.NOVICE),
        (3.0, ExperienceLevel.INTERMEDIATE),
        (6.0, ExperienceLevel.ADVANCED),
    )
    VOLUME_TOLERANCE: dict = {
        ExperienceLevel.NOVICE: 0.85,
        ExperienceLevel.INTERMEDIATE: 1.0,
        ExperienceLevel.ADVANCED: 1.15,
        ExperienceLevel.ELITE: 1.25,
    }
    UNKNOWN_MULTIPLIER: float = 1.0

    @staticmethod
    def parse_date(value: DateLike) -> Optional[datetime.date]:
        """Return ``value`` as a date, rejecting malformed strings."""
        if value is None:
            return None
        if isinstance(value, datetime.datetime):
            return value.date()
        if isinstance(value, datetime.date):
            return value
        if isinstance(value, str):
            text = value.strip()
            if not text:
                return None
            try:
                if len(text) > 10:
                    return datetime.datetime.fromisoformat(text).date()
                return datetime.date.fromisoformat(text)
            except ValueError as exc:
                raise InvalidInput(f"malformed date: {value!r}") from exc
        raise InvalidInput(f"unsupported date value: {value!r}")

    @staticmethod
    def elapsed_months(start: datetime.date, today: datetime.date) -> int:
        """Return the number of whole calendar months from ``start`` to ``today``."""
        months = (today.year - start.year) * 12 + (today.month - start.month)
        if today.day < start.day:
            months -= 1
        return max(months, 0)

    @classmethod
    def experience_level(cls, years: float) -> ExperienceLevel:
        for upper, level in cls.EXPERIENCE_THRESHOLDS:
            if years < upper:
                return level
        if years <= cls.EXPERIENCE_THRESHOLDS[-1][0]:
            return ExperienceLevel.ADVANCED
        return ExperienceLevel.ELITE

    @classmethod
    def volume_tolerance(cls, level: ExperienceLevel) -> float:
        return cls.VOLUME_TOLERANCE[level]

    @classmethod
    def estimate(
        cls, start_date: DateLike, today: DateLike = None
    ) -> TrainingAgeInfo:
        """Return training age info for ``start_date`` as of ``today``."""
        start = cls.parse_date(start_date)
        if start is None:
            return TrainingAgeInfo(
                start_date=None,
                years=0,
                months=0,
                experience_level=ExperienceLevel.NOVICE,
                volume_tolerance_multiplier=cls.UNKNOWN_MULTIPLIER,
            )
        reference = cls.parse_date(today) or datetime.date.today()
        if start > reference:
            raise InvalidInput("training start date lies in the future")

        total_months = cls.elapsed_months(start, reference)
        level = cls.experience_level(total_months / 12)
        return TrainingAgeInfo(
            start_date=start,
            years=total_months // 12,
            months=total_months % 12,
            experience_level=level,
            volume_tolerance_multiplier=cls.volume_tolerance(level),
        )
