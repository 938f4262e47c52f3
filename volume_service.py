from __future__ import annotations
import datetime
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError

from errors import InvalidInput, from_validation_error
from models import (
    AlertSeverity,
    AlertType,
    CompletedWorkout,
    ExerciseEstimate,
    LoggedSet,
    MuscleVolumeAnalysis,
    TrainingAgeInfo,
    VolumeAlert,
    VolumeStatus,
    WeeklySummary,
    WeeklyVolumeAnalysis,
)
from strength_algorithms import (
    EffectiveRepsCalculator,
    MathTools,
    RelativeIntensityCalculator,
    TrainingAgeEstimator,
    VolumeLandmarkResolver,
    VolumeStatusClassifier,
)

logger = logging.getLogger(__name__)

STATUS_PRIORITY: Dict[VolumeStatus, int] = {
    VolumeStatus.OVER_MRV: 0,
    VolumeStatus.APPROACHING_MRV: 1,
    VolumeStatus.BELOW_MEV: 2,
    VolumeStatus.APPROACHING_MEV: 3,
    VolumeStatus.IN_MAV: 4,
}
UNKNOWN_PRIORITY = len(STATUS_PRIORITY)

EstimateLike = Union[ExerciseEstimate, Mapping, float, int]


@dataclass
class WeeklyMuscleStats:
    """Per-muscle accumulator for one analysis call."""

    hard_sets: int = 0
    effective_reps: float = 0.0
    total_volume: float = 0.0
    relative_intensities: List[float] = field(default_factory=list)
    session_dates: set = field(default_factory=set)

    def add_set(
        self,
        logged: LoggedSet,
        session: datetime.date,
        effective_reps: float,
        relative_intensity: Optional[float],
    ) -> None:
        self.hard_sets += 1
        self.effective_reps += effective_reps
        self.total_volume += logged.weight * logged.reps
        if relative_intensity is not None:
            self.relative_intensities.append(relative_intensity)
        self.session_dates.add(session)


def week_start_for(day: datetime.date) -> datetime.date:
    """Return the Monday of the week containing ``day``."""
    return day - datetime.timedelta(days=day.weekday())


def is_hard_set(logged: LoggedSet) -> bool:
    return logged.completed and not logged.is_warmup and logged.reps >= 1


def estimate_value(estimate) -> Optional[float]:
    """Return the 1RM held by a number, an ``ExerciseEstimate`` or its mapping form."""
    if estimate is None:
        return None
    if isinstance(estimate, Mapping):
        try:
            estimate = ExerciseEstimate.model_validate(estimate)
        except ValidationError as exc:
            raise from_validation_error(exc) from exc
    if isinstance(estimate, ExerciseEstimate):
        return estimate.estimated_1rm
    try:
        return float(estimate)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"unsupported 1RM estimate: {estimate!r}") from exc


class WeeklyVolumeAggregator:
    """Build the per-muscle weekly volume report from completed workouts."""

    def __init__(
        self,
        resolver: type[VolumeLandmarkResolver] = VolumeLandmarkResolver,
        classifier: type[VolumeStatusClassifier] = VolumeStatusClassifier,
    ) -> None:
        self.resolver = resolver
        self.classifier = classifier

    @staticmethod
    def _workouts(workouts: Iterable) -> List[CompletedWorkout]:
        parsed: List[CompletedWorkout] = []
        try:
            for w in workouts:
                parsed.append(
                    w if isinstance(w, CompletedWorkout) else CompletedWorkout.model_validate(w)
                )
        except ValidationError as exc:
            raise from_validation_error(exc) from exc
        return parsed

    def _training_age(
        self,
        training_age: Optional[TrainingAgeInfo],
        training_start_date,
        today,
    ) -> TrainingAgeInfo:
        if training_age is not None:
            return training_age
        return TrainingAgeEstimator.estimate(training_start_date, today)

    def accumulate(
        self,
        workouts: Iterable[CompletedWorkout],
        estimates: Mapping[str, EstimateLike],
        week_start: datetime.date,
    ) -> Dict[str, WeeklyMuscleStats]:
        """Attribute every hard set to each primary muscle of its exercise."""
        week_end = week_start + datetime.timedelta(days=7)
        stats: Dict[str, WeeklyMuscleStats] = {}
        for workout in workouts:
            if not workout.completed:
                continue
            if not week_start <= workout.date < week_end:
                logger.debug("skipping workout on %s outside week %s", workout.date, week_start)
                continue
            for exercise in workout.exercises:
                muscles = [self.resolver.normalize_muscle(m) for m in exercise.primary_muscles]
                if not muscles:
                    logger.debug("exercise %s has no primary muscles", exercise.exercise_id)
                    continue
                one_rm = estimate_value(estimates.get(exercise.exercise_id))
                for logged in exercise.sets:
                    if not is_hard_set(logged):
                        continue
                    eff = EffectiveRepsCalculator.calculate(
                        logged.reps, logged.rpe, logged.rir
                    ).effective_reps
                    intensity = None
                    if logged.weight > 0:
                        intensity = RelativeIntensityCalculator.calculate(logged.weight, one_rm)
                    for muscle in dict.fromkeys(muscles):
                        stats.setdefault(muscle, WeeklyMuscleStats()).add_set(
                            logged, workout.date, eff, intensity
                        )
        return stats

    def _alerts(self, row: MuscleVolumeAnalysis) -> List[VolumeAlert]:
        alerts: List[VolumeAlert] = []
        status = row.volume_status
        muscle = row.muscle_group
        if status.status is VolumeStatus.BELOW_MEV:
            alerts.append(
                VolumeAlert(
                    type=AlertType.VOLUME,
                    severity=AlertSeverity.WARNING,
                    muscle_group=muscle,
                    message=f"{muscle} volume is below MEV ({row.hard_sets}/{status.landmarks.mev} sets)",
                    recommendation=status.recommendation,
                )
            )
        if status.status is VolumeStatus.OVER_MRV:
            alerts.append(
                VolumeAlert(
                    type=AlertType.VOLUME,
                    severity=AlertSeverity.CRITICAL,
                    muscle_group=muscle,
                    message=f"{muscle} volume exceeds MRV ({row.hard_sets}/{status.landmarks.mrv} sets)",
                    recommendation=status.recommendation,
                )
            )
        if row.sessions_count < self.classifier.OPTIMAL_FREQUENCY:
            alerts.append(
                VolumeAlert(
                    type=AlertType.FREQUENCY,
                    severity=AlertSeverity.INFO,
                    muscle_group=muscle,
                    message=f"{muscle} trained only {row.sessions_count}x this week",
                    recommendation=row.frequency_status.recommendation,
                )
            )
        return alerts

    def analyze(
        self,
        workouts: Iterable,
        estimates: Optional[Mapping[str, EstimateLike]] = None,
        landmark_overrides: Optional[Mapping] = None,
        training_start_date=None,
        *,
        training_age: Optional[TrainingAgeInfo] = None,
        week_start: Optional[datetime.date] = None,
        today: Optional[datetime.date] = None,
    ) -> WeeklyVolumeAnalysis:
        """Return the weekly per-muscle volume report with alerts and totals."""
        parsed = self._workouts(workouts)
        age = self._training_age(training_age, training_start_date, today)
        multiplier = age.volume_tolerance_multiplier

        if week_start is None:
            dates = [w.date for w in parsed if w.completed]
            anchor = min(dates) if dates else (today or datetime.date.today())
            week_start = week_start_for(anchor)
        else:
            week_start = TrainingAgeEstimator.parse_date(week_start)
            if week_start is None:
                raise InvalidInput("week_start must be a date")

        stats = self.accumulate(parsed, estimates or {}, week_start)

        muscles: List[MuscleVolumeAnalysis] = []
        alerts: List[VolumeAlert] = []
        for muscle, acc in stats.items():
            if acc.hard_sets < 1:
                continue
            override = self.resolver.find_override(muscle, landmark_overrides)
            landmarks = self.resolver.resolve(muscle, override, multiplier)
            status = self.classifier.analyze(acc.hard_sets, landmarks, muscle)
            avg_ri = MathTools.mean(acc.relative_intensities)
            if avg_ri is None:
                logger.debug("no 1RM estimates for %s, relative intensity omitted", muscle)
            sessions = len(acc.session_dates)
            row = MuscleVolumeAnalysis(
                muscle_group=muscle,
                hard_sets=acc.hard_sets,
                effective_reps=MathTools.round_half_up(acc.effective_reps, 1),
                total_volume=MathTools.round_half_up(acc.total_volume, 1),
                avg_relative_intensity=(
                    MathTools.round_half_up(avg_ri, 1) if avg_ri is not None else None
                ),
                sessions_count=sessions,
                volume_status=status,
                frequency_status=self.classifier.frequency(sessions, muscle),
            )
            muscles.append(row)
            alerts.extend(self._alerts(row))

        muscles.sort(
            key=lambda m: STATUS_PRIORITY.get(m.volume_status.status, UNKNOWN_PRIORITY)
        )
        summary = WeeklySummary(
            total_hard_sets=sum(m.hard_sets for m in muscles),
            total_effective_reps=MathTools.round_half_up(
                sum(m.effective_reps for m in muscles), 1
            ),
            total_volume=MathTools.round_half_up(sum(m.total_volume for m in muscles), 1),
            muscles_below_mev=sum(
                1 for m in muscles if m.volume_status.status is VolumeStatus.BELOW_MEV
            ),
            muscles_over_mrv=sum(
                1 for m in muscles if m.volume_status.status is VolumeStatus.OVER_MRV
            ),
        )
        logger.info(
            "weekly volume for %s: %d muscles, %d alerts", week_start, len(muscles), len(alerts)
        )
        return WeeklyVolumeAnalysis(
            week_start_date=week_start,
            training_age=age,
            muscles=muscles,
            alerts=alerts,
            summary=summary,
        )
