from typing import Optional

from models import IntensityZone
from errors import InvalidInput
from .math_tools import MathTools


class RelativeIntensityCalculator(MathTools):
    """Express a lift as a percentage of the lifter's estimated 1RM."""

    ZONES: tuple = (
        (90.0, "Maximal", "Strength/Neural"),
        (80.0, "Heavy", "Strength"),
        (70.0, "Moderate", "Hypertrophy"),
        (60.0, "Light", "Volume/Endurance"),
    )
    FLOOR_ZONE: tuple = ("Very Light", "Warmup/Recovery")

    @classmethod
    def calculate(cls, weight: float, estimated_1rm: Optional[float]) -> Optional[float]:
        """Return ``weight`` as % of ``estimated_1rm`` or ``None`` without a usable 1RM."""
        if weight is None or weight < 0:
            raise InvalidInput("weight must not be negative")
        if estimated_1rm is None or estimated_1rm <= 0:
            return None
        return cls.round_half_up(100 * weight / estimated_1rm, 1)

    @classmethod
    def intensity_zone(cls, relative_intensity: float) -> IntensityZone:
        for floor, name, purpose in cls.ZONES:
            if relative_intensity >= floor:
                return IntensityZone(zone=name, purpose=purpose)
        name, purpose = cls.FLOOR_ZONE
        return IntensityZone(zone=name, purpose=purpose)
