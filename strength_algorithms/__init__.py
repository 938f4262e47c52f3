from .math_tools import MathTools
from .one_rep_max import OneRepMaxEstimator
from .effective_reps import EffectiveRepsCalculator
from .relative_intensity import RelativeIntensityCalculator
from .training_age import TrainingAgeEstimator
from .volume_landmarks import VolumeLandmarkResolver, DEFAULT_VOLUME_LANDMARKS, GENERIC_LANDMARKS
from .volume_status import VolumeStatusClassifier
from .progression import ProgressionSuggester
from .plateau import PlateauDetector
from .lift_balance import LiftBalanceAnalyzer, DEFAULT_LIFT_RATIOS

__all__ = [
    "MathTools",
    "OneRepMaxEstimator",
    "EffectiveRepsCalculator",
    "RelativeIntensityCalculator",
    "TrainingAgeEstimator",
    "VolumeLandmarkResolver",
    "DEFAULT_VOLUME_LANDMARKS",
    "GENERIC_LANDMARKS",
    "VolumeStatusClassifier",
    "ProgressionSuggester",
    "PlateauDetector",
    "LiftBalanceAnalyzer",
    "DEFAULT_LIFT_RATIOS",
]
