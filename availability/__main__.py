"""CLI entry point for applying availability operations to a day."""

import argparse

from pydantic import ValidationError
from rich.console import Console

from availability.clock import parse_clock
from availability.config import Config
from availability.display import (
    configure_logging,
    display_day,
    display_error,
    display_operation,
)
from availability.schedule import DaySchedule

OPERATIONS = ("add", "remove")

DEMO_STEPS = [
    ("add", 1, 5),
    ("remove", 2, 3),
    ("add", 6, 8),
    ("remove", 4, 7),
    ("add", 2, 7),
]


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser with apply and demo subcommands.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="availability")
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log every interval operation",
    )
    subcommands = parser.add_subparsers(dest="command", required=True)

    apply_parser = subcommands.add_parser("apply")
    apply_parser.add_argument(
        "operations", nargs="+",
        help="Triples of OP FROM TO, where OP is add or remove",
    )
    mode = apply_parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--integers", dest="with_time", action="store_false", default=None,
        help="Treat bounds as plain integers",
    )
    mode.add_argument(
        "--clock", dest="with_time", action="store_true", default=None,
        help="Treat bounds as minutes since midnight or HH:MM",
    )

    subcommands.add_parser("demo")
    return parser


def parse_operations(
    tokens: list[str], with_time: bool
) -> list[tuple[str, int, int]]:
    """Group CLI tokens into ``(operation, from, to)`` triples.

    Args:
        tokens: Flat token list such as ``["add", "1", "5"]``.
        with_time: Parse bounds as clock values instead of integers.

    Returns:
        Parsed operations in the order given.
    """
    if len(tokens) % 3:
        raise ValueError("Operations must be given as OP FROM TO triples")

    operations = []
    for index in range(0, len(tokens), 3):
        name, first, second = tokens[index:index + 3]
        if name not in OPERATIONS:
            raise ValueError(f"Unknown operation: {name}")
        operations.append(
            (name, _parse_bound(first, with_time), _parse_bound(second, with_time))
        )
    return operations


def _parse_bound(text: str, with_time: bool) -> int:
    if with_time:
        return parse_clock(text)
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"Invalid integer bound: {text!r}") from None


def run_operations(
    schedule: DaySchedule,
    operations: list[tuple[str, int, int]],
    console: Console | None = None,
) -> list[tuple[int, int]]:
    """Apply operations in order, printing each resulting day.

    Args:
        schedule: Schedule to mutate.
        operations: Parsed ``(operation, from, to)`` triples.
        console: Optional console override for tests.

    Returns:
        The final day.
    """
    for name, first, second in operations:
        day = getattr(schedule, name)(first, second)
        display_operation(
            name, first, second, day, with_time=schedule.with_time, console=console
        )
    display_day(schedule.day, with_time=schedule.with_time, console=console)
    return schedule.day


def run_demo(console: Console | None = None) -> None:
    """Replay the sample day in integer units, then in clock minutes."""
    run_operations(DaySchedule(with_time=False), DEMO_STEPS, console=console)
    clock_steps = [(name, first * 100, second * 100) for name, first, second in DEMO_STEPS]
    run_operations(DaySchedule(with_time=True), clock_steps, console=console)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args and dispatch to apply or demo behavior.

    Args:
        argv: Optional argument vector for testing.
    """
    args = build_parser().parse_args(argv)
    try:
        config = Config()
    except ValidationError as exc:
        display_error(f"Invalid configuration: {exc.errors()[0]['msg']}")
        raise SystemExit(1)
    configure_logging("DEBUG" if args.verbose else config.log_level)

    if args.command == "apply":
        with_time = config.clock_mode if args.with_time is None else args.with_time
        try:
            operations = parse_operations(args.operations, with_time)
        except ValueError as exc:
            display_error(str(exc))
            raise SystemExit(1)
        run_operations(DaySchedule(with_time=with_time), operations)
    elif args.command == "demo":
        run_demo()


if __name__ == "__main__":
    main()
