from typing import Optional

from models import (
    FrequencyAnalysis,
    VolumeLandmarks,
    VolumeStatus,
    VolumeStatusResult,
)
from errors import InvalidInput
from .math_tools import MathTools


class VolumeStatusClassifier(MathTools):
    """Place a weekly hard-set count against a muscle's volume landmarks."""

    OPTIMAL_FREQUENCY: int = 2

    @staticmethod
    def classify(hard_sets: float, landmarks: VolumeLandmarks) -> VolumeStatus:
        if hard_sets < landmarks.mev:
            return VolumeStatus.BELOW_MEV
        if hard_sets < landmarks.mav_low:
            return VolumeStatus.APPROACHING_MEV
        if hard_sets <= landmarks.mav_high:
            return VolumeStatus.IN_MAV
        if hard_sets <= landmarks.mrv:
            return VolumeStatus.APPROACHING_MRV
        return VolumeStatus.OVER_MRV

    @staticmethod
    def _format_sets(value: float) -> str:
        return str(int(value)) if float(value).is_integer() else f"{value:g}"

    @classmethod
    def recommendation(
        cls, status: VolumeStatus, hard_sets: float, landmarks: VolumeLandmarks, muscle: str
    ) -> str:
        if status is VolumeStatus.BELOW_MEV:
            missing = cls._format_sets(landmarks.mev - hard_sets)
            return (
                f"Add {missing} more sets for {muscle} to reach minimum effective volume "
                f"({landmarks.mev} sets)."
            )
        if status is VolumeStatus.APPROACHING_MEV:
            return (
                f"Just above minimum for {muscle}; build toward {landmarks.mav_low} sets "
                "for better growth."
            )
        if status is VolumeStatus.IN_MAV:
            return f"Good volume for {muscle}, within the optimal range for growth."
        if status is VolumeStatus.APPROACHING_MRV:
            return f"High volume for {muscle}; monitor recovery closely."
        return (
            f"Exceeding maximum recoverable volume for {muscle}; reduce sets "
            "or schedule a deload."
        )

    @classmethod
    def analyze(
        cls,
        hard_sets: float,
        landmarks: VolumeLandmarks,
        muscle_group: Optional[str] = None,
    ) -> VolumeStatusResult:
        """Return the status, range position and advice for ``hard_sets``."""
        if hard_sets is None or hard_sets < 0:
            raise InvalidInput("hard sets must not be negative")
        status = cls.classify(hard_sets, landmarks)
        percentage = cls.percent_of_range(hard_sets, landmarks.mev, landmarks.mrv)
        return VolumeStatusResult(
            muscle_group=muscle_group,
            hard_sets=hard_sets,
            landmarks=landmarks,
            status=status,
            percentage_within_range=cls.round_half_up(percentage, 1),
            recommendation=cls.recommendation(
                status, hard_sets, landmarks, muscle_group or "this muscle"
            ),
        )

    @classmethod
    def frequency(cls, sessions_per_week: int, muscle_group: str) -> FrequencyAnalysis:
        """Judge how often ``muscle_group`` was trained this week."""
        if sessions_per_week < 0:
            raise InvalidInput("sessions per week must not be negative")
        if sessions_per_week == 0:
            advice = f"{muscle_group} not trained this week; add a session if it is a priority."
        elif sessions_per_week == 1:
            advice = f"Add a second session for {muscle_group}; 2+ sessions per week is optimal."
        elif sessions_per_week <= 3:
            advice = f"Good frequency for {muscle_group}."
        else:
            advice = f"High frequency for {muscle_group}; make sure recovery keeps up."
        return FrequencyAnalysis(
            muscle_group=muscle_group,
            sessions_per_week=sessions_per_week,
            is_optimal=sessions_per_week >= cls.OPTIMAL_FREQUENCY,
            recommendation=advice,
        )
