import datetime
from typing import Dict, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from models import LandmarkOverride, ProgressionModel, RpeTargets


class StrengthPreferences(BaseModel):
    progression_model: ProgressionModel = ProgressionModel.DOUBLE
    linear_increment: float = Field(default=5.0, gt=0)
    double_rep_target_low: int = Field(default=8, ge=1)
    double_rep_target_high: int = Field(default=12, ge=1)
    double_weight_increase: float = Field(default=5.0, gt=0)
    rpe_target_low: float = Field(default=7.0, ge=1, le=10)
    rpe_target_high: float = Field(default=9.0, ge=1, le=10)
    plateau_weeks_threshold: int = Field(default=3, ge=1)
    rounding_increment: Optional[float] = Field(default=2.5, gt=0)
    weight_unit: str = "lbs"

    @model_validator(mode="after")
    def _ranges(self) -> "StrengthPreferences":
        if self.double_rep_target_low > self.double_rep_target_high:
            raise ValueError("double_rep_target_low must not exceed double_rep_target_high")
        if self.rpe_target_low > self.rpe_target_high:
            raise ValueError("rpe_target_low must not exceed rpe_target_high")
        return self

    def increment_for(self, model: ProgressionModel) -> float:
        """Return the weight step used by ``model``."""
        if model is ProgressionModel.LINEAR:
            return self.linear_increment
        return self.double_weight_increase

    def rpe_targets(self) -> RpeTargets:
        return RpeTargets(low=self.rpe_target_low, high=self.rpe_target_high)


class SettingsSchema(BaseModel):
    training_start_date: Optional[datetime.date] = None
    strength: StrengthPreferences = Field(default_factory=StrengthPreferences)
    volume_landmarks: Dict[str, LandmarkOverride] = Field(default_factory=dict)


def validate_settings(data: dict) -> SettingsSchema:
    try:
        return SettingsSchema(**data)
    except ValidationError as e:
        raise ValueError(str(e))
