import argparse
import logging
from datetime import datetime
from typing import List

from config.settings import get_settings, to_local_naive
from exercises import available_exercises, get_exercise
from exercises.base import Exercise
from services.reporting import Section, print_sections
from utils.clock import reference_now
from utils.logging_setup import init_logging


logger = logging.getLogger(__name__)


def _resolve_now(args) -> datetime:
    if getattr(args, "now", None):
        return args.now
    return reference_now()


def _run_exercises(names: List[str], now: datetime) -> List[Section]:
    sections: List[Section] = []
    for name in names:
        exercise: Exercise = get_exercise(name)
        logger.info("running exercise", extra={"exercise": name})
        sections.extend(exercise.run(now))
    return sections


def cmd_list(args):
    for name, factory in available_exercises().items():
        print(f"{name}: {factory.title}")


def cmd_run(args):
    names = args.names or list(available_exercises().keys())
    unknown = [n for n in names if n not in available_exercises()]
    if unknown:
        args.parser.error(f"unknown exercise(s): {', '.join(unknown)}")
    print_sections(_run_exercises(names, _resolve_now(args)))


def cmd_demo(args):
    ns = argparse.Namespace(**vars(args))
    ns.names = []
    cmd_run(ns)


def _iso_timestamp(value: str) -> datetime:
    try:
        return to_local_naive(datetime.fromisoformat(value))
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO 8601 timestamp: {value!r}") from None


def main():
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Query exercises over in-memory collections")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default from settings)")
    parser.add_argument(
        "--now",
        type=_iso_timestamp,
        default=None,
        help="Reference time for date queries (ISO 8601; default QUERY_NOW or wall clock)",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_list = sub.add_parser("list", help="List registered exercises")
    p_list.set_defaults(func=cmd_list)

    p_run = sub.add_parser("run", help="Run the named exercises (all when none given)")
    p_run.add_argument("names", nargs="*", help="Exercise names, e.g. cities students")
    p_run.set_defaults(func=cmd_run)

    p_demo = sub.add_parser("demo", help="Run every exercise in order")
    p_demo.set_defaults(func=cmd_demo)

    args = parser.parse_args()
    args.parser = parser
    init_logging(args.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
