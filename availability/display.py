"""Rich terminal display helpers and logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from availability.clock import format_clock, format_clock_range

_console = Console()

_OPERATION_STYLES = {"add": "green", "remove": "red"}


def configure_logging(level: str | int = "WARNING") -> None:
    """Route log records through a rich handler.

    Args:
        level: Logging level name or number for the ``availability`` loggers.
    """
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger("availability")
    root.handlers = [handler]
    root.setLevel(level.upper() if isinstance(level, str) else level)
    root.propagate = False


def _format_bound(value: int, with_time: bool) -> str:
    return format_clock(value) if with_time else str(value)


def display_day(
    day: list[tuple[int, int]],
    with_time: bool = False,
    console: Console | None = None,
) -> None:
    """Print a table of the available intervals of a day.

    Args:
        day: Ordered ``(start, end)`` pairs.
        with_time: Render bounds as ``HH:MM`` clock times.
        console: Optional console override for tests.
    """
    c = console or _console
    if not day:
        c.print("[yellow]No availability[/yellow]")
        return

    table = Table(title="Availability")
    table.add_column("Start")
    table.add_column("End")
    table.add_column("Length", justify="right")

    for start, end in day:
        table.add_row(
            _format_bound(start, with_time),
            _format_bound(end, with_time),
            str(end - start),
        )
    c.print(table)


def display_operation(
    operation: str,
    first: int,
    second: int,
    day: list[tuple[int, int]],
    with_time: bool = False,
    console: Console | None = None,
) -> None:
    """Print one applied operation and the resulting day.

    Args:
        operation: ``add`` or ``remove``.
        first: First bound passed to the operation.
        second: Second bound passed to the operation.
        day: Day returned by the operation.
        with_time: Render bounds as ``HH:MM`` clock times.
        console: Optional console override for tests.
    """
    c = console or _console
    color = _OPERATION_STYLES.get(operation, "white")
    if with_time:
        request = format_clock_range(*sorted((first, second)))
        result = ", ".join(format_clock_range(start, end) for start, end in day)
    else:
        request = f"{first}, {second}"
        result = ", ".join(f"[{start}, {end}]" for start, end in day)
    c.print(f"[{color}]{operation}({request})[/{color}] -> [{result}]")


def display_error(message: str, console: Console | None = None) -> None:
    """Print an error message in red.

    Args:
        message: Error message to display.
        console: Optional console override for tests.
    """
    c = console or _console
    c.print(f"[red]Error: {escape(message)}[/red]")
