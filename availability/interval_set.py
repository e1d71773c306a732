"""Ordered set of disjoint, non-touching integer intervals."""

import bisect
import logging
from collections.abc import Iterator

from availability.interval import Interval

logger = logging.getLogger(__name__)


def _sort_key(interval: Interval) -> tuple[int, int]:
    return (interval.start, interval.end)


class IntervalSet:
    """Minimal collection of disjoint closed intervals ordered by start.

    Touching intervals are merged, so any two stored intervals are separated
    by at least one uncovered point. Instances are not thread-safe.
    """

    def __init__(self) -> None:
        self._intervals: list[Interval] = []

    def add(self, first: int, second: int) -> list[tuple[int, int]]:
        """Mark a range as covered, merging it with what it overlaps or touches.

        Args:
            first: One bound of the range.
            second: The other bound of the range; bounds may come in any order.

        Returns:
            The resulting intervals as ordered ``(start, end)`` pairs.
        """
        request = Interval.between(first, second)
        if request.is_degenerate:
            logger.debug("add %s ignored: zero width", request)
            return self.snapshot()
        self._insert(request)
        logger.debug("add %s -> %d interval(s)", request, len(self._intervals))
        return self.snapshot()

    def remove(self, first: int, second: int) -> list[tuple[int, int]]:
        """Mark a range as uncovered, shrinking or splitting what it overlaps.

        Args:
            first: One bound of the range.
            second: The other bound of the range; bounds may come in any order.

        Returns:
            The resulting intervals as ordered ``(start, end)`` pairs.
        """
        request = Interval.between(first, second)
        if request.is_degenerate:
            logger.debug("remove %s ignored: zero width", request)
            return self.snapshot()
        if request in self._intervals:
            self._intervals.remove(request)
            logger.debug("remove %s matched exactly", request)
            return self.snapshot()

        for current in list(self._intervals):
            if not request.overlaps(current):
                continue
            self._intervals.remove(current)
            for piece in current.subtract(request):
                self._insert(piece)
        logger.debug("remove %s -> %d interval(s)", request, len(self._intervals))
        return self.snapshot()

    def snapshot(self) -> list[tuple[int, int]]:
        """Return the current intervals as ordered ``(start, end)`` pairs."""
        return [interval.as_pair() for interval in self._intervals]

    def covered_length(self) -> int:
        """Return the summed width of all stored intervals."""
        return sum(interval.width for interval in self._intervals)

    def _insert(self, interval: Interval) -> None:
        """Insert at the sorted position, then merge overlapping neighbours."""
        index = bisect.bisect_left(
            self._intervals, _sort_key(interval), key=_sort_key
        )
        self._intervals.insert(index, interval)
        self._coalesce()

    def _coalesce(self) -> None:
        merged: list[Interval] = []
        for interval in self._intervals:
            if merged and merged[-1].overlaps(interval):
                merged[-1] = merged[-1].merge(interval)
            else:
                merged.append(interval)
        self._intervals = merged

    def __iter__(self) -> Iterator[Interval]:
        """Iterate over the stored intervals in ascending order."""
        return iter(self._intervals)

    def __len__(self) -> int:
        return len(self._intervals)

    def __bool__(self) -> bool:
        return bool(self._intervals)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IntervalSet):
            return self._intervals == other._intervals
        return NotImplemented

    def __repr__(self) -> str:
        return f"IntervalSet({self.snapshot()!r})"
