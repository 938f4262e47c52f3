from models import ConfidenceLevel, OneRMFormula, OneRepMaxResult
from errors import InvalidInput
from .math_tools import MathTools


class OneRepMaxEstimator(MathTools):
    """Estimate a one-rep max from a single set, picking the formula by rep range."""

    # (highest rep count in bucket, formula, confidence)
    REP_BUCKETS: tuple = (
        (1, OneRMFormula.ACTUAL, ConfidenceLevel.HIGH),
        (5, OneRMFormula.BRZYCKI, ConfidenceLevel.HIGH),
        (10, OneRMFormula.BLENDED, ConfidenceLevel.MEDIUM),
        (15, OneRMFormula.EPLEY, ConfidenceLevel.MEDIUM),
    )
    HIGH_REP_BUCKET: tuple = (OneRMFormula.EPLEY, ConfidenceLevel.LOW)

    @staticmethod
    def _validate(weight: float, reps: int) -> None:
        if weight is None or weight <= 0:
            raise InvalidInput("weight must be positive")
        if reps is None or int(reps) != reps or reps < 1:
            raise InvalidInput("reps must be a whole number of at least 1")

    @classmethod
    def select_formula(cls, reps: int) -> tuple[OneRMFormula, ConfidenceLevel]:
        """Return the formula and confidence used for ``reps``."""
        for upper, formula, confidence in cls.REP_BUCKETS:
            if reps <= upper:
                return formula, confidence
        return cls.HIGH_REP_BUCKET

    @classmethod
    def _apply(cls, formula: OneRMFormula, weight: float, reps: int) -> float:
        if formula is OneRMFormula.ACTUAL:
            return weight
        if formula is OneRMFormula.BRZYCKI:
            return cls.brzycki_1rm(weight, reps)
        if formula is OneRMFormula.BLENDED:
            return (cls.brzycki_1rm(weight, reps) + cls.epley_1rm(weight, reps)) / 2
        return cls.epley_1rm(weight, reps)

    @classmethod
    def estimate(cls, weight: float, reps: int) -> OneRepMaxResult:
        """Return the estimated 1RM for ``weight`` lifted for ``reps``."""
        cls._validate(weight, reps)
        reps = int(reps)
        formula, confidence = cls.select_formula(reps)
        if formula is OneRMFormula.ACTUAL:
            value = float(weight)
        else:
            value = max(cls.round_half_up(cls._apply(formula, weight, reps), 1), float(weight))
        return OneRepMaxResult(
            estimated_1rm=value,
            formula_used=formula,
            confidence=confidence,
        )

    @classmethod
    def weight_for_reps(
        cls, e1rm: float, target_reps: int, increment: float = 2.5
    ) -> float:
        """Return a working weight for ``target_reps`` given an estimated 1RM."""
        if e1rm is None or e1rm <= 0:
            raise InvalidInput("estimated 1RM must be positive")
        if int(target_reps) != target_reps or target_reps < 1:
            raise InvalidInput("target reps must be a whole number of at least 1")
        if target_reps == 1:
            return float(e1rm)
        return cls.round_to_increment(cls.inverse_brzycki(e1rm, int(target_reps)), increment)
