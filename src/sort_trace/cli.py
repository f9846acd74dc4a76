from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from random import Random

from sort_trace.config import ConfigError, load_config
from sort_trace.domain.errors import ArrayParseError, ArrayTooLargeError, UnknownAlgorithmError
from sort_trace.domain.events import Compare, Done, SetValue, SortEvent, Swap
from sort_trace.sim.parsing import format_array, parse_array
from sort_trace.sim.registry import AlgorithmRegistry, build_default_registry
from sort_trace.sim.runner import run_sort
from sort_trace.sim.selftest import run_selftest

logger = logging.getLogger(__name__)


def format_step(position: int, event: SortEvent) -> str:
    if isinstance(event, Compare):
        return f"{position:3d}: COMPARE i={event.i} j={event.j}"
    if isinstance(event, Swap):
        return f"{position:3d}: SWAP    i={event.i} j={event.j}"
    if isinstance(event, SetValue):
        return f"{position:3d}: SET     index={event.index} value={event.value}"
    if isinstance(event, Done):
        return f"{position:3d}: DONE"
    raise TypeError(f"Unsupported event: {event!r}")


def _cmd_steps(args: argparse.Namespace, registry: AlgorithmRegistry) -> int:
    try:
        values = parse_array(args.array)
        run = run_sort(registry, args.algorithm, values)
    except (ArrayParseError, UnknownAlgorithmError, ArrayTooLargeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        from sort_trace.web.api import mappers

        print(mappers.build_run_response(run).model_dump_json(by_alias=True))
        return 0

    print(f"Algorithm: {run.algorithm_name}")
    print(f"Initial  : {format_array(run.initial)}")
    print(f"Sorted   : {format_array(run.sorted)}")
    print(f"Steps    : {len(run.steps)}")
    limit = min(args.limit, len(run.steps))
    for position, event in enumerate(run.steps[:limit]):
        print(format_step(position, event))
    if len(run.steps) > limit:
        print(f"... ({len(run.steps) - limit} more events)")
    return 0


def _cmd_selftest(args: argparse.Namespace, registry: AlgorithmRegistry) -> int:
    results = run_selftest(
        registry,
        Random(args.seed),
        trials=args.trials,
        size=args.size,
        bound=args.bound,
    )
    algorithms = registry.all()
    for key, passed in results.items():
        print(f"{algorithms[key].name} test result: {passed}")
    return 0 if all(results.values()) else 1


def _cmd_list(args: argparse.Namespace, registry: AlgorithmRegistry) -> int:
    for key, algorithm in registry.all().items():
        print(f"{key:<10} {algorithm.name}")
    return 0


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m sort_trace",
        description="Run instrumented sorting algorithms and inspect their steps.",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON config file.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: %(default)s).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    steps = sub.add_parser("steps", help="Print the recorded steps for one run.")
    steps.add_argument("--algorithm", "-a", default="selection", help="Algorithm key (default: %(default)s).")
    steps.add_argument("--array", default="5,1,4,2,8", help="Array as [5,1,4] or 5,1,4 (default: %(default)s).")
    steps.add_argument("--limit", type=_non_negative_int, default=40, help="Steps to print (default: %(default)s).")
    steps.add_argument("--json", action="store_true", help="Print the run as JSON instead.")
    steps.set_defaults(handler=_cmd_steps)

    selftest = sub.add_parser("selftest", help="Check every algorithm against random arrays.")
    selftest.add_argument("--trials", type=_non_negative_int, default=100)
    selftest.add_argument("--size", type=_non_negative_int, default=20)
    selftest.add_argument("--bound", type=_positive_int, default=1000)
    selftest.add_argument("--seed", type=int, default=None)
    selftest.set_defaults(handler=_cmd_selftest)

    listing = sub.add_parser("list", help="List registered algorithms.")
    listing.set_defaults(handler=_cmd_list)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    registry = build_default_registry(config.algorithms)
    logger.debug("Loaded %d algorithms", len(registry))
    return args.handler(args, registry)


if __name__ == "__main__":
    raise SystemExit(main())
