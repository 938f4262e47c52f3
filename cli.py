import argparse
import json
import logging
import sys
from typing import Optional

import yaml

from config import YamlConfig
from errors import InvalidInput
from progression_service import ProgressionService
from strength_algorithms import (
    EffectiveRepsCalculator,
    LiftBalanceAnalyzer,
    OneRepMaxEstimator,
)
from strength_test_service import StrengthTestEvaluator
from volume_service import WeeklyVolumeAggregator

logger = logging.getLogger(__name__)


def load_data(path: str):
    """Read a YAML or JSON document (JSON is valid YAML)."""
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _workouts_and_estimates(path: str) -> tuple[list, dict]:
    data = load_data(path) or []
    if isinstance(data, list):
        return data, {}
    if isinstance(data, dict):
        return list(data.get("workouts") or []), dict(data.get("estimates") or {})
    raise InvalidInput(f"{path} must contain a list of workouts or a mapping")


def _emit(result) -> None:
    if isinstance(result, list):
        payload = [r.model_dump(mode="json") for r in result]
    else:
        payload = result.model_dump(mode="json")
    print(json.dumps(payload, indent=2))


def cmd_e1rm(args: argparse.Namespace) -> None:
    _emit(OneRepMaxEstimator.estimate(args.weight, args.reps))


def cmd_effective_reps(args: argparse.Namespace) -> None:
    _emit(EffectiveRepsCalculator.calculate(args.reps, args.rpe, args.rir))


def cmd_analyze(args: argparse.Namespace) -> None:
    config = YamlConfig(args.settings)
    workouts, estimates = _workouts_and_estimates(args.workouts)
    report = WeeklyVolumeAggregator().analyze(
        workouts,
        estimates,
        config.landmark_overrides(),
        config.training_start_date(),
        week_start=args.week_start,
    )
    _emit(report)


def cmd_progress(args: argparse.Namespace) -> None:
    config = YamlConfig(args.settings)
    workouts, estimates = _workouts_and_estimates(args.workouts)
    estimate = args.estimate if args.estimate is not None else estimates.get(args.exercise)
    service = ProgressionService(config.preferences())
    _emit(service.report(args.exercise, workouts, estimate))


def cmd_test(args: argparse.Namespace) -> None:
    _emit(
        StrengthTestEvaluator.evaluate(
            args.exercise, args.type, args.weight, args.reps, args.previous
        )
    )


def cmd_balance(args: argparse.Namespace) -> None:
    lifts = {
        "squat": args.squat,
        "bench": args.bench,
        "deadlift": args.deadlift,
        "ohp": args.ohp,
        "row": args.row,
    }
    _emit(LiftBalanceAnalyzer.analyze(lifts))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Strength training analytics")
    parser.add_argument("--verbose", "-v", action="store_true")
    sub = parser.add_subparsers(dest="cmd", required=True)

    e1rm = sub.add_parser("e1rm", help="estimate a one-rep max")
    e1rm.add_argument("--weight", type=float, required=True)
    e1rm.add_argument("--reps", type=int, required=True)
    e1rm.set_defaults(func=cmd_e1rm)

    eff = sub.add_parser("effective-reps", help="reps close enough to failure")
    eff.add_argument("--reps", type=int, required=True)
    eff.add_argument("--rpe", type=float)
    eff.add_argument("--rir", type=float)
    eff.set_defaults(func=cmd_effective_reps)

    ana = sub.add_parser("analyze", help="weekly volume per muscle group")
    ana.add_argument("--workouts", required=True)
    ana.add_argument("--settings")
    ana.add_argument("--week-start", dest="week_start")
    ana.set_defaults(func=cmd_analyze)

    prog = sub.add_parser("progress", help="next-session suggestion for an exercise")
    prog.add_argument("--exercise", required=True)
    prog.add_argument("--workouts", required=True)
    prog.add_argument("--settings")
    prog.add_argument("--estimate", type=float)
    prog.set_defaults(func=cmd_progress)

    test = sub.add_parser("test", help="evaluate a strength test")
    test.add_argument("--exercise", required=True)
    test.add_argument("--type", default="1rm", choices=["1rm", "3rm", "5rm", "amrap"])
    test.add_argument("--weight", type=float, required=True)
    test.add_argument("--reps", type=int, required=True)
    test.add_argument("--previous", type=float)
    test.set_defaults(func=cmd_test)

    bal = sub.add_parser("balance", help="compare lifts against the squat")
    for lift in ("squat", "bench", "deadlift", "ohp", "row"):
        bal.add_argument(f"--{lift}", type=float)
    bal.set_defaults(func=cmd_balance)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("running %s", args.cmd)
    try:
        args.func(args)
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
