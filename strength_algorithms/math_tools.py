import math
from typing import Iterable

import numpy as np

from errors import InvalidInput


class MathTools:
    """Provides essential mathematical utilities for strength calculations."""

    BRZYCKI_NUMERATOR: float = 36.0
    BRZYCKI_LIMIT: int = 37
    EPLEY_DIVISOR: float = 30.0
    RPE_MIN: float = 1.0
    RPE_MAX: float = 10.0

    @staticmethod
    def clamp(value: float, min_value: float, max_value: float) -> float:
        """Clamp ``value`` to the inclusive range [min_value, max_value]."""
        if min_value > max_value:
            raise ValueError("min_value must not exceed max_value")
        return max(min_value, min(value, max_value))

    @staticmethod
    def round_half_up(value: float, digits: int = 0) -> float:
        """Round ``value`` with halves going up, as plate math expects."""
        scale = 10**digits
        return math.floor(value * scale + 0.5) / scale

    @classmethod
    def brzycki_1rm(cls, weight: float, reps: int) -> float:
        """Return the estimated one-rep max using the Brzycki formula."""
        if reps >= cls.BRZYCKI_LIMIT:
            raise InvalidInput("Brzycki is undefined for 37 or more reps")
        return weight * cls.BRZYCKI_NUMERATOR / (cls.BRZYCKI_LIMIT - reps)

    @classmethod
    def epley_1rm(cls, weight: float, reps: int) -> float:
        """Return the estimated one-rep max using the Epley formula."""
        return weight * (1 + reps / cls.EPLEY_DIVISOR)

    @classmethod
    def inverse_brzycki(cls, e1rm: float, reps: int) -> float:
        """Return the load that ``e1rm`` predicts for ``reps`` reps."""
        if reps >= cls.BRZYCKI_LIMIT:
            raise InvalidInput("Brzycki is undefined for 37 or more reps")
        return e1rm * (cls.BRZYCKI_LIMIT - reps) / cls.BRZYCKI_NUMERATOR

    @staticmethod
    def round_to_increment(weight: float, increment: float = 2.5) -> float:
        """Round ``weight`` to the nearest loadable ``increment``."""
        if increment <= 0:
            raise InvalidInput("increment must be positive")
        return MathTools.round_half_up(weight / increment) * increment

    @staticmethod
    def volume(sets: Iterable[tuple[int, float]]) -> float:
        """Compute training volume as the sum of reps times weight."""
        vol = 0.0
        for reps, weight in sets:
            vol += reps * weight
        return vol

    @staticmethod
    def mean(values: Iterable[float]) -> float | None:
        """Return the arithmetic mean or ``None`` for no samples."""
        data = list(values)
        if not data:
            return None
        return float(np.mean(np.array(data, dtype=float)))

    @staticmethod
    def percent_of_range(value: float, low: float, high: float) -> float:
        """Map ``value`` linearly so ``low`` is 0% and ``high`` is 100%."""
        span = high - low
        if span <= 0:
            return 0.0 if value <= low else 100.0
        return (value - low) / span * 100

    @classmethod
    def rir_to_rpe(cls, rir: float) -> float:
        return cls.clamp(cls.RPE_MAX - rir, cls.RPE_MIN, cls.RPE_MAX)

    @classmethod
    def rpe_to_rir(cls, rpe: float) -> float:
        return max(0.0, cls.RPE_MAX - rpe)
