from typing import Optional

import numpy as np

from models import EffectiveRepsResult
from errors import InvalidInput
from .math_tools import MathTools


class EffectiveRepsCalculator(MathTools):
    """Weight the reps of a set by how close each one was to failure.

    Every rep has its own distance from failure: the last rep sits at the
    set's RIR, the one before it at RIR + 1, and so on. Reps at a distance of
    ``FULL_CREDIT_RIR`` or less count fully, which gives a full-credit window
    of the last ``(10 - RIR) - 5`` reps. Past that window credit falls off
    linearly and reaches zero at ``ZERO_CREDIT_RIR``, so sets stopped with six
    or more reps in reserve contribute nothing.
    """

    DEFAULT_RPE: float = 7.0
    FULL_CREDIT_RIR: float = 4.0
    ZERO_CREDIT_RIR: float = 6.0

    @classmethod
    def resolve_rpe(cls, rpe: Optional[float], rir: Optional[float]) -> float:
        """Return the RPE to use, preferring ``rpe`` over ``rir``."""
        if rpe is not None:
            if not cls.RPE_MIN <= rpe <= cls.RPE_MAX:
                raise InvalidInput("rpe must be between 1 and 10")
            return float(rpe)
        if rir is not None:
            if not 0 <= rir <= 10:
                raise InvalidInput("rir must be between 0 and 10")
            return cls.rir_to_rpe(rir)
        return cls.DEFAULT_RPE

    @classmethod
    def rep_weights(cls, total_reps: int, rir: float) -> np.ndarray:
        """Return the credit of each rep, last rep first."""
        distance = rir + np.arange(total_reps, dtype=float)
        decay = (cls.ZERO_CREDIT_RIR - distance) / (cls.ZERO_CREDIT_RIR - cls.FULL_CREDIT_RIR)
        return np.clip(decay, 0.0, 1.0)

    @classmethod
    def calculate(
        cls,
        total_reps: int,
        rpe: Optional[float] = None,
        rir: Optional[float] = None,
    ) -> EffectiveRepsResult:
        if total_reps is None or int(total_reps) != total_reps or total_reps < 0:
            raise InvalidInput("total reps must be a non-negative whole number")
        total_reps = int(total_reps)
        used_rpe = cls.resolve_rpe(rpe, rir)
        used_rir = cls.rpe_to_rir(used_rpe)

        weights = cls.rep_weights(total_reps, used_rir)
        fully_weighted = int(np.count_nonzero(weights >= 1.0))
        decayed = float(np.sum(weights[weights < 1.0]))
        effective = min(total_reps, fully_weighted) + decayed

        return EffectiveRepsResult(
            effective_reps=cls.round_half_up(effective, 1),
            total_reps=total_reps,
            rpe=rpe if rpe is not None else (used_rpe if rir is not None else None),
            rir=rir if rir is not None else (used_rir if rpe is not None else None),
        )
