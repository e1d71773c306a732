"""Closed integer interval value type and its relations."""

from pydantic import BaseModel, ConfigDict, model_validator


class Interval(BaseModel):
    """A closed range of integer points ``[start, end]``."""

    model_config = ConfigDict(frozen=True, strict=True)

    start: int
    end: int

    @model_validator(mode="after")
    def check_bounds(self) -> "Interval":
        """Reject intervals whose end precedes their start.

        Returns:
            The validated Interval instance.
        """
        if self.start > self.end:
            raise ValueError(
                f"Interval start {self.start} is after its end {self.end}"
            )
        return self

    @classmethod
    def between(cls, first: int, second: int) -> "Interval":
        """Build an interval from two bounds given in either order.

        Args:
            first: One bound of the range.
            second: The other bound of the range.

        Returns:
            Interval spanning both bounds.
        """
        if first > second:
            first, second = second, first
        return cls(start=first, end=second)

    @property
    def width(self) -> int:
        """Distance between the two bounds."""
        return self.end - self.start

    @property
    def is_degenerate(self) -> bool:
        """Whether the interval has zero width."""
        return self.start == self.end

    def as_pair(self) -> tuple[int, int]:
        """Return the bounds as a ``(start, end)`` tuple."""
        return (self.start, self.end)

    def overlaps(self, other: "Interval") -> bool:
        """Check whether two intervals share at least one point.

        Intervals touching at a single boundary point count as overlapping.

        Args:
            other: Interval to compare against.

        Returns:
            True when the intervals share a point.
        """
        return self.start <= other.end and other.start <= self.end

    def intersection(self, other: "Interval") -> "Interval":
        """Return the common part of two overlapping intervals.

        Args:
            other: Interval overlapping this one.

        Returns:
            Interval covered by both.
        """
        return Interval(
            start=max(self.start, other.start), end=min(self.end, other.end)
        )

    def fully_includes(self, other: "Interval") -> bool:
        """Check whether ``other`` lies entirely inside (or equals) this interval."""
        return self.overlaps(other) and self.intersection(other) == other

    def merge(self, other: "Interval") -> "Interval":
        """Return the smallest interval spanning both intervals."""
        return Interval(
            start=min(self.start, other.start), end=max(self.end, other.end)
        )

    def subtract(self, other: "Interval") -> list["Interval"]:
        """Return the pieces of this interval left after removing ``other``.

        Zero-width pieces are dropped, so the result holds zero, one or two
        intervals.

        Args:
            other: Interval to cut out of this one.

        Returns:
            Surviving pieces ordered by start.
        """
        if not self.overlaps(other):
            return [self]
        if other.fully_includes(self):
            return []
        if self.fully_includes(other):
            pieces = [
                Interval(start=self.start, end=other.start),
                Interval(start=other.end, end=self.end),
            ]
        elif self.start <= other.start:
            pieces = [Interval(start=self.start, end=other.start)]
        else:
            pieces = [Interval(start=other.end, end=self.end)]
        return [piece for piece in pieces if not piece.is_degenerate]

    def __str__(self) -> str:
        return f"[{self.start}, {self.end}]"
