from types import MappingProxyType
from typing import Mapping, Optional

from models import LiftBalance, LiftBalanceStatus
from .math_tools import MathTools

# Expected 1RM of each lift as a fraction of the squat.
DEFAULT_LIFT_RATIOS: Mapping[str, float] = MappingProxyType(
    {
        "bench": 0.75,
        "deadlift": 1.25,
        "ohp": 0.50,
        "row": 0.65,
    }
)

LIFT_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "bench": "Bench Press",
        "deadlift": "Deadlift",
        "ohp": "Overhead Press",
        "row": "Barbell Row",
    }
)


class LiftBalanceAnalyzer(MathTools):
    """Compare main lifts against the squat to find weak points."""

    TOLERANCE: float = 0.10

    @classmethod
    def analyze(
        cls,
        lifts: Mapping[str, Optional[float]],
        target_ratios: Optional[Mapping[str, float]] = None,
    ) -> list[LiftBalance]:
        squat = lifts.get("squat")
        if not squat or squat <= 0:
            return []
        ratios = dict(DEFAULT_LIFT_RATIOS)
        if target_ratios:
            ratios.update(target_ratios)

        results: list[LiftBalance] = []
        for key, name in LIFT_NAMES.items():
            current = lifts.get(key)
            if not current or current <= 0:
                continue
            expected = ratios[key]
            actual = current / squat
            deviation = (actual - expected) / expected
            if deviation > cls.TOLERANCE:
                status = LiftBalanceStatus.STRONG
                advice = f"{name} is strong relative to squat; consider more squat focus."
            elif deviation < -cls.TOLERANCE:
                status = LiftBalanceStatus.WEAK
                advice = f"{name} is lagging; consider prioritizing {name} training."
            else:
                status = LiftBalanceStatus.BALANCED
                advice = f"{name} is well balanced relative to squat."
            results.append(
                LiftBalance(
                    lift=name,
                    current_1rm=float(current),
                    expected_ratio=expected,
                    actual_ratio=cls.round_half_up(actual, 2),
                    status=status,
                    recommendation=advice,
                )
            )
        return results
