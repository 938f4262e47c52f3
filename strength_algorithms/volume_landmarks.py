import logging
from types import MappingProxyType
from typing import Mapping, Optional, Union

from pydantic import ValidationError

from models import LandmarkOverride, VolumeLandmarks
from errors import InvalidInput, from_validation_error
from .math_tools import MathTools

logger = logging.getLogger(__name__)


def _landmarks(mev: int, mav_low: int, mav_high: int, mrv: int) -> VolumeLandmarks:
    return VolumeLandmarks(mev=mev, mav_low=mav_low, mav_high=mav_high, mrv=mrv)


DEFAULT_VOLUME_LANDMARKS: Mapping[str, VolumeLandmarks] = MappingProxyType(
    {
        "chest": _landmarks(8, 12, 20, 22),
        "back": _landmarks(8, 12, 20, 25),
        "shoulders": _landmarks(8, 12, 20, 22),
        "biceps": _landmarks(6, 10, 16, 20),
        "triceps": _landmarks(6, 10, 16, 20),
        "quads": _landmarks(8, 12, 18, 22),
        "hamstrings": _landmarks(6, 10, 16, 20),
        "glutes": _landmarks(6, 10, 16, 20),
        "calves": _landmarks(8, 12, 16, 20),
        "abs": _landmarks(6, 12, 20, 25),
        "traps": _landmarks(6, 10, 16, 20),
        "forearms": _landmarks(4, 8, 14, 18),
        "lats": _landmarks(8, 12, 20, 25),
        "lower_back": _landmarks(4, 8, 12, 16),
    }
)
GENERIC_LANDMARKS: VolumeLandmarks = _landmarks(6, 10, 16, 20)

OverrideLike = Union[VolumeLandmarks, LandmarkOverride, Mapping[str, int], None]


class VolumeLandmarkResolver(MathTools):
    """Resolve per-muscle MEV/MAV/MRV landmarks scaled to the lifter."""

    FIELDS: tuple = ("mev", "mav_low", "mav_high", "mrv")

    @staticmethod
    def normalize_muscle(muscle_group: str) -> str:
        return "_".join(str(muscle_group).strip().lower().split())

    @classmethod
    def default_for(cls, muscle_group: str) -> VolumeLandmarks:
        """Return the table default or the generic fallback for ``muscle_group``."""
        key = cls.normalize_muscle(muscle_group)
        found = DEFAULT_VOLUME_LANDMARKS.get(key)
        if found is None:
            logger.debug("no default landmarks for %s, using generic fallback", key)
            return GENERIC_LANDMARKS
        return found

    @classmethod
    def merge_override(
        cls, base: VolumeLandmarks, override: OverrideLike
    ) -> VolumeLandmarks:
        """Apply the fields present in ``override`` on top of ``base``."""
        if override is None:
            return base
        try:
            if isinstance(override, VolumeLandmarks):
                return override
            if not isinstance(override, LandmarkOverride):
                override = LandmarkOverride(**dict(override))
            values = base.model_dump()
            values.update(override.model_dump(exclude_none=True))
            return VolumeLandmarks(**values)
        except ValidationError as exc:
            raise from_validation_error(exc) from exc

    @classmethod
    def scale(cls, landmarks: VolumeLandmarks, multiplier: float) -> VolumeLandmarks:
        """Scale every landmark, round to whole sets and keep them ordered."""
        if multiplier is None or multiplier <= 0:
            raise InvalidInput("volume multiplier must be positive")
        scaled: list[int] = []
        for name in cls.FIELDS:
            value = int(cls.round_half_up(getattr(landmarks, name) * multiplier))
            if scaled and value < scaled[-1]:
                value = scaled[-1]
            scaled.append(value)
        return VolumeLandmarks(**dict(zip(cls.FIELDS, scaled)))

    @classmethod
    def resolve(
        cls,
        muscle_group: str,
        override: OverrideLike = None,
        multiplier: float = 1.0,
    ) -> VolumeLandmarks:
        base = cls.default_for(muscle_group)
        return cls.scale(cls.merge_override(base, override), multiplier)

    @classmethod
    def find_override(
        cls, muscle_group: str, overrides: Optional[Mapping[str, OverrideLike]]
    ) -> OverrideLike:
        """Look up ``muscle_group`` in ``overrides`` ignoring name formatting."""
        if not overrides:
            return None
        key = cls.normalize_muscle(muscle_group)
        for name, value in overrides.items():
            if cls.normalize_muscle(name) == key:
                return value
        return None
