from typing import Iterable, Mapping, Sequence, Union

import numpy as np

from models import E1RMPoint, PlateauInfo, PlateauResult
from errors import InvalidInput

PointLike = Union[E1RMPoint, Mapping[str, object]]


class PlateauDetector:
    """Detect stagnation in a chronological series of best estimated 1RMs."""

    DEFAULT_THRESHOLD: int = 3
    DELOAD_AFTER_WEEKS: int = 4

    @staticmethod
    def _points(series: Iterable[PointLike]) -> list[E1RMPoint]:
        points: list[E1RMPoint] = []
        for item in series:
            if isinstance(item, E1RMPoint):
                points.append(item)
                continue
            try:
                points.append(
                    E1RMPoint(
                        period=str(item["period"]),
                        best_estimated_1rm=float(item["best_estimated_1rm"]),
                    )
                )
            except (KeyError, TypeError, ValueError) as exc:
                raise InvalidInput(f"malformed e1RM entry: {item!r}") from exc
        return points

    @staticmethod
    def stagnant_periods(values: Sequence[float]) -> int:
        """Count the trailing periods at or below the best of earlier periods.

        The period that set the standing best is counted as part of the
        plateau once at least one later period failed to beat it.
        """
        if len(values) < 2:
            return 0
        arr = np.asarray(values, dtype=float)
        prior_best = np.maximum.accumulate(arr)[:-1]
        count = 0
        for idx in range(len(arr) - 1, 0, -1):
            if arr[idx] > prior_best[idx - 1]:
                break
            count += 1
        return count + 1 if count else 0

    @classmethod
    def detect(
        cls, series: Iterable[PointLike], consecutive_weeks_threshold: int = DEFAULT_THRESHOLD
    ) -> PlateauResult:
        if consecutive_weeks_threshold < 1:
            raise InvalidInput("plateau threshold must be at least 1")
        points = cls._points(series)
        weeks = cls.stagnant_periods([p.best_estimated_1rm for p in points])
        return PlateauResult(
            plateau=weeks >= consecutive_weeks_threshold,
            weeks_stagnant=weeks,
        )

    @classmethod
    def plateau_info(
        cls, series: Iterable[PointLike], consecutive_weeks_threshold: int = DEFAULT_THRESHOLD
    ) -> PlateauInfo:
        """Return plateau status together with the last PR and advice."""
        points = cls._points(series)
        result = cls.detect(points, consecutive_weeks_threshold)
        if not points:
            return PlateauInfo(
                detected=False,
                weeks_stagnant=0,
                suggestion="Log a few weeks of training to track progress.",
            )
        values = np.array([p.best_estimated_1rm for p in points], dtype=float)
        best_idx = int(np.argmax(values))
        if not result.plateau:
            suggestion = "Still progressing; keep following the current plan."
        elif result.weeks_stagnant >= cls.DELOAD_AFTER_WEEKS:
            suggestion = "Consider a deload week, then try a different rep range or variation."
        else:
            suggestion = "Push through with small increments or add an extra set."
        return PlateauInfo(
            detected=result.plateau,
            weeks_stagnant=result.weeks_stagnant,
            last_pr_date=points[best_idx].period,
            last_pr_e1rm=float(values[best_idx]),
            suggestion=suggestion,
        )
