from typing import Optional, Union

from pydantic import ValidationError

from models import ProgressionModel, ProgressionSuggestion, RpeTargets
from errors import InvalidInput, from_validation_error
from .math_tools import MathTools


class ProgressionSuggester(MathTools):
    """Propose the next session's load and reps for a progression model."""

    @staticmethod
    def _fmt(value: float) -> str:
        return f"{value:g}"

    @classmethod
    def _load(cls, value: float, unit: Optional[str]) -> str:
        return f"{cls._fmt(value)} {unit}" if unit else cls._fmt(value)

    @staticmethod
    def _model(model: Union[ProgressionModel, str]) -> ProgressionModel:
        try:
            return ProgressionModel(model)
        except ValueError as exc:
            raise InvalidInput(f"unknown progression model: {model!r}") from exc

    @staticmethod
    def _targets(rpe_targets) -> RpeTargets:
        if rpe_targets is None:
            return RpeTargets()
        if isinstance(rpe_targets, RpeTargets):
            return rpe_targets
        try:
            return RpeTargets(**dict(rpe_targets))
        except ValidationError as exc:
            raise from_validation_error(exc) from exc

    @classmethod
    def _linear(cls, weight, reps, low, high, inc, targets, rpe, unit):
        return (
            weight + inc,
            low,
            "Linear progression: add weight every session regardless of performance.",
        )

    @classmethod
    def _double(cls, weight, reps, low, high, inc, targets, rpe, unit):
        if reps < high:
            return (
                weight,
                reps + 1,
                f"You got {reps} of {high} target reps, so keep "
                f"{cls._load(weight, unit)} and aim for {reps + 1} reps before adding weight.",
            )
        return (
            weight + inc,
            low,
            f"You reached the top of the rep range ({reps}/{high}), so add "
            f"{cls._load(inc, unit)} and restart at {low} reps.",
        )

    @classmethod
    def _rpe_based(cls, weight, reps, low, high, inc, targets, rpe, unit):
        if rpe is None:
            weight, reps, reason = cls._double(weight, reps, low, high, inc, targets, rpe, unit)
            return weight, reps, "Without a logged RPE, " + reason[0].lower() + reason[1:]
        band = f"{cls._fmt(targets.low)}-{cls._fmt(targets.high)}"
        if rpe < targets.low:
            return (
                weight + inc,
                reps,
                f"RPE {cls._fmt(rpe)} was below the target band ({band}), so the load "
                f"was too easy: add {cls._load(inc, unit)}.",
            )
        if rpe > targets.high:
            return (
                max(weight - inc, 0.0),
                reps,
                f"RPE {cls._fmt(rpe)} was above the target band ({band}), so the load "
                f"was too hard: drop {cls._load(inc, unit)}.",
            )
        return (
            weight,
            reps,
            f"RPE {cls._fmt(rpe)} was within the target band ({band}), so repeat "
            "the same weight and reps.",
        )

    @classmethod
    def suggest(
        cls,
        model: Union[ProgressionModel, str],
        last_weight: float,
        last_reps: int,
        rep_range_low: int,
        rep_range_high: int,
        weight_increment: float,
        rpe_targets=None,
        last_rpe: Optional[float] = None,
        *,
        rounding_increment: Optional[float] = None,
        unit: Optional[str] = None,
    ) -> ProgressionSuggestion:
        """Return the next target for ``model`` given the last performance."""
        progression = cls._model(model)
        if last_weight is None or last_weight < 0:
            raise InvalidInput("last weight must not be negative")
        if last_reps is None or int(last_reps) != last_reps or last_reps < 1:
            raise InvalidInput("last reps must be a whole number of at least 1")
        if rep_range_low < 1 or rep_range_low > rep_range_high:
            raise InvalidInput("rep range must satisfy 1 <= low <= high")
        if weight_increment is None or weight_increment <= 0:
            raise InvalidInput("weight increment must be positive")
        if last_rpe is not None and not cls.RPE_MIN <= last_rpe <= cls.RPE_MAX:
            raise InvalidInput("rpe must be between 1 and 10")
        targets = cls._targets(rpe_targets)

        branch = {
            ProgressionModel.LINEAR: cls._linear,
            ProgressionModel.DOUBLE: cls._double,
            ProgressionModel.RPE_BASED: cls._rpe_based,
        }[progression]
        weight, reps, reasoning = branch(
            float(last_weight),
            int(last_reps),
            int(rep_range_low),
            int(rep_range_high),
            float(weight_increment),
            targets,
            last_rpe,
            unit,
        )
        if rounding_increment:
            weight = cls.round_to_increment(weight, rounding_increment)

        return ProgressionSuggestion(
            model=progression,
            current_weight=float(last_weight),
            current_reps=int(last_reps),
            suggested_weight=weight,
            suggested_reps=reps,
            reasoning=reasoning,
        )
