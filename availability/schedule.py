"""Day schedule facade over the interval set, with optional clock units."""

import logging
from datetime import time

from availability.clock import format_clock, minutes_to_time, time_to_minutes
from availability.config import Config
from availability.interval import Interval
from availability.interval_set import IntervalSet

logger = logging.getLogger(__name__)


class DaySchedule:
    """Availability of one mechanic over one day.

    In clock mode every bound is a number of minutes since midnight (or a
    ``datetime.time``) and must fall within the day. In integer mode bounds
    are passed to the interval set untouched.
    """

    def __init__(self, with_time: bool | None = None) -> None:
        if with_time is None:
            with_time = Config().clock_mode
        self.with_time = with_time
        self._intervals = IntervalSet()

    def add(self, first: int | time, second: int | time) -> list[tuple[int, int]]:
        """Mark a range as available.

        Args:
            first: One bound of the range.
            second: The other bound of the range.

        Returns:
            The day as ordered ``(start, end)`` pairs.
        """
        self._intervals.add(self._to_point(first), self._to_point(second))
        return self.day

    def remove(
        self, first: int | time, second: int | time
    ) -> list[tuple[int, int]]:
        """Mark a range as unavailable.

        Args:
            first: One bound of the range.
            second: The other bound of the range.

        Returns:
            The day as ordered ``(start, end)`` pairs.
        """
        self._intervals.remove(self._to_point(first), self._to_point(second))
        return self.day

    @property
    def day(self) -> list[tuple[int, int]]:
        return self._intervals.snapshot()

    def clock_day(self) -> list[tuple[str, str]]:
        """Return the day as ``("HH:MM", "HH:MM")`` pairs.

        Returns:
            Ordered clock-time pairs.
        """
        if not self.with_time:
            raise ValueError("Clock rendering requires a schedule in clock mode")
        return [(format_clock(start), format_clock(end)) for start, end in self.day]

    def available_minutes(self) -> int:
        return self._intervals.covered_length()

    def is_available(self, first: int | time, second: int | time) -> bool:
        """Check whether a whole range lies inside a single available interval.

        Args:
            first: One bound of the range.
            second: The other bound of the range.

        Returns:
            True when one interval of the day covers the range.
        """
        request = Interval.between(self._to_point(first), self._to_point(second))
        return any(interval.fully_includes(request) for interval in self._intervals)

    def _to_point(self, value: int | time) -> int:
        """Normalize a bound into the integer the interval set stores."""
        if not self.with_time:
            return value
        if isinstance(value, time):
            return time_to_minutes(value)
        try:
            return time_to_minutes(minutes_to_time(value))
        except ValueError:
            logger.debug("rejected clock bound %r", value)
            raise

    def __repr__(self) -> str:
        mode = "clock" if self.with_time else "integer"
        return f"DaySchedule({mode}, {self.day!r})"
