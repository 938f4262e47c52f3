from __future__ import annotations
import logging
from typing import Iterable, List

import pandas as pd
from pydantic import ValidationError

from errors import from_validation_error
from models import (
    AlertSeverity,
    AlertType,
    CompletedWorkout,
    E1RMPoint,
    ProgressionReport,
    ProgressionSuggestion,
    SessionBest,
    VolumeAlert,
)
from settings_schema import StrengthPreferences
from strength_algorithms import (
    OneRepMaxEstimator,
    PlateauDetector,
    ProgressionSuggester,
)
from volume_service import EstimateLike, estimate_value, is_hard_set

logger = logging.getLogger(__name__)


class ProgressionService:
    """Turn an exercise's recent sessions into a next-session prescription."""

    HISTORY_LIMIT = 10
    PLATEAU_NOTE = " Note: plateau detected, consider varying rep range or exercise selection."

    def __init__(self, preferences: StrengthPreferences | None = None) -> None:
        self.preferences = preferences or StrengthPreferences()

    @staticmethod
    def session_history(
        exercise_id: str, workouts: Iterable
    ) -> List[SessionBest]:
        """Return the best set by estimated 1RM for each session, newest first."""
        history: List[SessionBest] = []
        try:
            parsed = [
                w if isinstance(w, CompletedWorkout) else CompletedWorkout.model_validate(w)
                for w in workouts
            ]
        except ValidationError as exc:
            raise from_validation_error(exc) from exc
        for workout in parsed:
            if not workout.completed:
                continue
            best: SessionBest | None = None
            for exercise in workout.exercises:
                if exercise.exercise_id != exercise_id:
                    continue
                for logged in exercise.sets:
                    if not is_hard_set(logged) or logged.weight <= 0:
                        continue
                    e1rm = OneRepMaxEstimator.estimate(logged.weight, logged.reps).estimated_1rm
                    if best is None or e1rm > best.e1rm:
                        best = SessionBest(
                            date=workout.date,
                            weight=logged.weight,
                            reps=logged.reps,
                            rpe=logged.rpe,
                            e1rm=e1rm,
                        )
            if best is not None:
                history.append(best)
        history.sort(key=lambda s: s.date, reverse=True)
        return history

    @staticmethod
    def weekly_best(history: List[SessionBest]) -> List[E1RMPoint]:
        """Bucket sessions into Monday-start weeks keeping the best e1RM, oldest first."""
        if not history:
            return []
        df = pd.DataFrame(
            {
                "date": pd.to_datetime([s.date for s in history]),
                "e1rm": [s.e1rm for s in history],
            }
        )
        weekly = df.groupby(df["date"].dt.to_period("W-SUN"))["e1rm"].max().sort_index()
        return [
            E1RMPoint(period=period.start_time.date().isoformat(), best_estimated_1rm=float(value))
            for period, value in weekly.items()
        ]

    def _starting_suggestion(
        self, estimate: EstimateLike | None
    ) -> ProgressionSuggestion:
        prefs = self.preferences
        reps = prefs.double_rep_target_low
        one_rm = estimate_value(estimate)
        if one_rm:
            weight = OneRepMaxEstimator.weight_for_reps(
                one_rm, reps, prefs.rounding_increment or 2.5
            )
            reasoning = (
                f"No workout history yet, so start at {weight:g} {prefs.weight_unit} for {reps} reps "
                f"based on your estimated 1RM of {one_rm:g} {prefs.weight_unit}."
            )
        else:
            weight = 0.0
            reasoning = (
                f"No workout history yet, so start with a weight you can lift for "
                f"{reps} reps with good form."
            )
        return ProgressionSuggestion(
            model=prefs.progression_model,
            current_weight=0.0,
            current_reps=reps,
            suggested_weight=weight,
            suggested_reps=reps,
            reasoning=reasoning,
        )

    def report(
        self,
        exercise_id: str,
        workouts: Iterable,
        estimate: EstimateLike | None = None,
    ) -> ProgressionReport:
        """Return the progression suggestion, plateau info and recent history."""
        prefs = self.preferences
        history = self.session_history(exercise_id, workouts)
        if not history:
            logger.debug("no history for exercise %s", exercise_id)
            return ProgressionReport(suggestion=self._starting_suggestion(estimate))

        series = self.weekly_best(history)
        plateau = PlateauDetector.plateau_info(series, prefs.plateau_weeks_threshold)

        last = history[0]
        model = prefs.progression_model
        suggestion = ProgressionSuggester.suggest(
            model,
            last.weight,
            last.reps,
            prefs.double_rep_target_low,
            prefs.double_rep_target_high,
            prefs.increment_for(model),
            prefs.rpe_targets(),
            last.rpe,
            rounding_increment=prefs.rounding_increment,
            unit=prefs.weight_unit,
        )

        alerts: List[VolumeAlert] = []
        if plateau.detected:
            long_plateau = plateau.weeks_stagnant >= PlateauDetector.DELOAD_AFTER_WEEKS
            if long_plateau:
                suggestion = suggestion.model_copy(
                    update={"reasoning": suggestion.reasoning + self.PLATEAU_NOTE}
                )
            alerts.append(
                VolumeAlert(
                    type=AlertType.PLATEAU,
                    severity=AlertSeverity.WARNING if long_plateau else AlertSeverity.INFO,
                    exercise_id=exercise_id,
                    message=(
                        f"No new best e1RM for {plateau.weeks_stagnant} weeks "
                        f"(best {plateau.last_pr_e1rm:g} in week of {plateau.last_pr_date})"
                    ),
                    recommendation=plateau.suggestion,
                )
            )
            logger.info("plateau detected for %s: %d weeks", exercise_id, plateau.weeks_stagnant)

        return ProgressionReport(
            suggestion=suggestion,
            plateau=plateau,
            alerts=alerts,
            history=history[: self.HISTORY_LIMIT],
        )
