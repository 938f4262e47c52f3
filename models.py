from __future__ import annotations
import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, use_enum_values=False)


class OneRMFormula(str, Enum):
    ACTUAL = "actual"
    BRZYCKI = "brzycki"
    BLENDED = "brzycki_epley"
    EPLEY = "epley"


class ConfidenceLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class EstimateSource(str, Enum):
    CALCULATED = "calculated"
    TESTED = "tested"
    MANUAL = "manual"


class ExperienceLevel(str, Enum):
    NOVICE = "novice"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ELITE = "elite"


class VolumeStatus(str, Enum):
    BELOW_MEV = "below_mev"
    APPROACHING_MEV = "approaching_mev"
    IN_MAV = "in_mav"
    APPROACHING_MRV = "approaching_mrv"
    OVER_MRV = "over_mrv"


class ProgressionModel(str, Enum):
    LINEAR = "linear"
    DOUBLE = "double"
    RPE_BASED = "rpe_based"


class AlertType(str, Enum):
    VOLUME = "volume"
    FREQUENCY = "frequency"
    PLATEAU = "plateau"


class AlertSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


class StrengthTestType(str, Enum):
    ONE_RM = "1rm"
    THREE_RM = "3rm"
    FIVE_RM = "5rm"
    AMRAP = "amrap"


class LiftBalanceStatus(str, Enum):
    STRONG = "strong"
    BALANCED = "balanced"
    WEAK = "weak"


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


class LoggedSet(_Record):
    """A single logged set as stored by the workout log."""

    weight: float = Field(ge=0)
    reps: int = Field(ge=0)
    rpe: Optional[float] = Field(default=None, ge=1, le=10)
    rir: Optional[float] = Field(default=None, ge=0, le=10)
    completed: bool = True
    is_warmup: bool = False


class WorkoutExercise(_Record):
    exercise_id: str
    name: Optional[str] = None
    primary_muscles: List[str] = Field(default_factory=list)
    sets: List[LoggedSet] = Field(default_factory=list)


class CompletedWorkout(_Record):
    date: datetime.date
    completed: bool = True
    exercises: List[WorkoutExercise] = Field(default_factory=list)


class ExerciseEstimate(_Record):
    exercise_id: str
    estimated_1rm: float = Field(gt=0)
    source: EstimateSource = EstimateSource.CALCULATED
    last_updated: Optional[datetime.datetime] = None


class VolumeLandmarks(_Record):
    """Weekly hard-set landmarks for one muscle group."""

    mev: int = Field(ge=0)
    mav_low: int = Field(ge=0)
    mav_high: int = Field(ge=0)
    mrv: int = Field(ge=0)

    @model_validator(mode="after")
    def _ordered(self) -> "VolumeLandmarks":
        if not (self.mev <= self.mav_low <= self.mav_high <= self.mrv):
            raise ValueError("landmarks must satisfy mev <= mav_low <= mav_high <= mrv")
        return self


class LandmarkOverride(_Record):
    """User supplied landmarks; missing fields use the muscle's default."""

    mev: Optional[int] = Field(default=None, ge=0)
    mav_low: Optional[int] = Field(default=None, ge=0)
    mav_high: Optional[int] = Field(default=None, ge=0)
    mrv: Optional[int] = Field(default=None, ge=0)


class RpeTargets(_Record):
    low: float = Field(default=7, ge=1, le=10)
    high: float = Field(default=9, ge=1, le=10)

    @model_validator(mode="after")
    def _ordered(self) -> "RpeTargets":
        if self.low > self.high:
            raise ValueError("rpe target low must not exceed high")
        return self


class E1RMPoint(_Record):
    period: str
    best_estimated_1rm: float


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------


class OneRepMaxResult(_Record):
    estimated_1rm: float
    formula_used: OneRMFormula
    confidence: ConfidenceLevel


class EffectiveRepsResult(_Record):
    effective_reps: float
    total_reps: int
    rpe: Optional[float] = None
    rir: Optional[float] = None


class IntensityZone(_Record):
    zone: str
    purpose: str


class TrainingAgeInfo(_Record):
    start_date: Optional[datetime.date] = None
    years: int = 0
    months: int = 0
    experience_level: ExperienceLevel = ExperienceLevel.NOVICE
    volume_tolerance_multiplier: float = 1.0


class VolumeStatusResult(_Record):
    muscle_group: Optional[str] = None
    hard_sets: float
    landmarks: VolumeLandmarks
    status: VolumeStatus
    percentage_within_range: float
    recommendation: str


class FrequencyAnalysis(_Record):
    muscle_group: str
    sessions_per_week: int
    is_optimal: bool
    recommendation: str


class MuscleVolumeAnalysis(_Record):
    muscle_group: str
    hard_sets: int
    effective_reps: float
    total_volume: float
    avg_relative_intensity: Optional[float] = None
    sessions_count: int
    volume_status: VolumeStatusResult
    frequency_status: FrequencyAnalysis


class VolumeAlert(_Record):
    type: AlertType
    severity: AlertSeverity
    muscle_group: Optional[str] = None
    exercise_id: Optional[str] = None
    message: str
    recommendation: str


class WeeklySummary(_Record):
    total_hard_sets: int
    total_effective_reps: float
    total_volume: float
    muscles_below_mev: int
    muscles_over_mrv: int


class WeeklyVolumeAnalysis(_Record):
    week_start_date: datetime.date
    training_age: TrainingAgeInfo
    muscles: List[MuscleVolumeAnalysis]
    alerts: List[VolumeAlert]
    summary: WeeklySummary


class ProgressionSuggestion(_Record):
    model: ProgressionModel
    current_weight: float
    current_reps: int
    suggested_weight: float
    suggested_reps: int
    reasoning: str


class PlateauResult(_Record):
    plateau: bool
    weeks_stagnant: int


class PlateauInfo(_Record):
    detected: bool
    weeks_stagnant: int
    last_pr_date: Optional[str] = None
    last_pr_e1rm: Optional[float] = None
    suggestion: str


class StrengthTestResult(_Record):
    estimated_1rm: float
    confidence: ConfidenceLevel
    previous_1rm: Optional[float] = None
    improvement_percent: Optional[float] = None
    estimate: ExerciseEstimate


class LiftBalance(_Record):
    lift: str
    current_1rm: float
    expected_ratio: float
    actual_ratio: float
    status: LiftBalanceStatus
    recommendation: str


class SessionBest(_Record):
    date: datetime.date
    weight: float
    reps: int
    rpe: Optional[float] = None
    e1rm: float


class ProgressionReport(_Record):
    suggestion: ProgressionSuggestion
    plateau: Optional[PlateauInfo] = None
    alerts: List[VolumeAlert] = Field(default_factory=list)
    history: List[SessionBest] = Field(default_factory=list)
