from __future__ import annotations
import datetime
import logging
from typing import Optional

from errors import InvalidInput
from models import (
    EstimateSource,
    ExerciseEstimate,
    StrengthTestResult,
    StrengthTestType,
)
from strength_algorithms import MathTools, OneRepMaxEstimator

logger = logging.getLogger(__name__)


class StrengthTestEvaluator:
    """Score a logged strength test against the previous estimate."""

    @staticmethod
    def improvement_percent(new: float, previous: Optional[float]) -> Optional[float]:
        if previous is None or previous <= 0:
            return None
        return MathTools.round_half_up((new - previous) / previous * 100, 1)

    @classmethod
    def evaluate(
        cls,
        exercise_id: str,
        test_type: StrengthTestType | str,
        weight: float,
        reps: int,
        previous_1rm: Optional[float] = None,
        tested_at: Optional[datetime.datetime] = None,
    ) -> StrengthTestResult:
        try:
            test_type = StrengthTestType(test_type)
        except ValueError as exc:
            raise InvalidInput(f"unknown test type: {test_type}") from exc
        result = OneRepMaxEstimator.estimate(weight, reps)
        tested_at = tested_at or datetime.datetime.now(datetime.timezone.utc)
        improvement = cls.improvement_percent(result.estimated_1rm, previous_1rm)
        logger.info(
            "%s test for %s: %s x %d -> %.1f",
            test_type.value,
            exercise_id,
            weight,
            reps,
            result.estimated_1rm,
        )
        return StrengthTestResult(
            estimated_1rm=result.estimated_1rm,
            confidence=result.confidence,
            previous_1rm=previous_1rm,
            improvement_percent=improvement,
            estimate=ExerciseEstimate(
                exercise_id=exercise_id,
                estimated_1rm=result.estimated_1rm,
                source=EstimateSource.TESTED,
                last_updated=tested_at,
            ),
        )
