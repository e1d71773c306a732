"""Conversions between minutes since midnight and time of day."""

import re
from datetime import time

MINUTES_PER_DAY = 24 * 60

_CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


def minutes_to_time(minutes: int) -> time:
    """Convert minutes since midnight into a time of day.

    Args:
        minutes: Minutes elapsed since midnight, within a single day.

    Returns:
        Matching time of day.
    """
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        raise ValueError(f"Minutes must be an integer, got {minutes!r}")
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise ValueError(
            f"Minutes must be within 0..{MINUTES_PER_DAY - 1}, got {minutes}"
        )
    return time(hour=minutes // 60, minute=minutes % 60)


def time_to_minutes(value: time) -> int:
    """Convert a time of day into minutes since midnight."""
    return value.hour * 60 + value.minute


def parse_clock(text: str) -> int:
    """Parse ``HH:MM`` or a bare minute count into minutes since midnight.

    Args:
        text: Clock text such as ``"07:30"`` or ``"450"``.

    Returns:
        Minutes since midnight.
    """
    text = text.strip()
    if text.isdigit():
        return time_to_minutes(minutes_to_time(int(text)))
    match = _CLOCK_PATTERN.match(text)
    if match is None:
        raise ValueError(f"Invalid clock value: {text!r}")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValueError(f"Invalid clock value: {text!r}")
    return hour * 60 + minute


def format_clock(minutes: int) -> str:
    """Render minutes since midnight as ``HH:MM``."""
    return minutes_to_time(minutes).strftime("%H:%M")


def format_clock_range(start: int, end: int) -> str:
    """Render a pair of minute bounds as ``HH:MM-HH:MM``."""
    return f"{format_clock(start)}-{format_clock(end)}"
