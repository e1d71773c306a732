"""Tests for the Interval value type."""

import pytest
from pydantic import ValidationError

from availability.interval import Interval


def _iv(start: int, end: int) -> Interval:
    return Interval(start=start, end=end)


# --- construction ---


class TestIntervalConstruction:
    """Tests for building intervals."""

    def test_interval_rejects_reversed_bounds(self):
        """Test that an end before the start is refused."""
        with pytest.raises(ValidationError):
            Interval(start=5, end=1)

    def test_interval_rejects_non_integers(self):
        """Test that floats, strings and booleans are refused."""
        with pytest.raises(ValidationError):
            Interval(start=1.5, end=3)
        with pytest.raises(ValidationError):
            Interval(start="1", end=3)
        with pytest.raises(ValidationError):
            Interval(start=True, end=3)

    def test_interval_is_frozen_and_hashable(self):
        """Test that intervals are immutable values usable in sets."""
        interval = _iv(1, 3)
        with pytest.raises(ValidationError):
            interval.start = 0
        assert {interval, _iv(1, 3)} == {interval}

    def test_between_swaps_reversed_bounds(self):
        """Test that between orders its bounds."""
        assert Interval.between(8, 2) == _iv(2, 8)
        assert Interval.between(2, 8) == _iv(2, 8)

    def test_width_and_degenerate(self):
        """Test width and zero-width detection."""
        assert _iv(3, 7).width == 4
        assert _iv(4, 4).is_degenerate is True
        assert _iv(4, 5).is_degenerate is False


# --- overlaps ---


class TestOverlaps:
    """Tests for Interval.overlaps."""

    @pytest.mark.parametrize(
        "a, b",
        [
            ((1, 5), (3, 8)),
            ((1, 3), (3, 6)),
            ((1, 10), (4, 5)),
            ((2, 4), (2, 4)),
        ],
    )
    def test_overlaps_true(self, a, b):
        """Test overlapping, touching, nested and identical pairs in both orders."""
        assert _iv(*a).overlaps(_iv(*b))
        assert _iv(*b).overlaps(_iv(*a))

    def test_overlaps_false_for_gap(self):
        """Test that intervals separated by a gap do not overlap."""
        assert not _iv(1, 2).overlaps(_iv(3, 5))
        assert not _iv(3, 5).overlaps(_iv(1, 2))


# --- intersection, fully_includes, merge ---


class TestCombinators:
    """Tests for intersection, fully_includes and merge."""

    def test_intersection_of_partial_overlap(self):
        """Test that intersection keeps the shared part."""
        assert _iv(1, 5).intersection(_iv(3, 8)) == _iv(3, 5)

    def test_intersection_of_touching_is_a_point(self):
        """Test that touching intervals intersect in a zero-width interval."""
        assert _iv(1, 3).intersection(_iv(3, 6)) == _iv(3, 3)

    def test_fully_includes_nested_and_equal(self):
        """Test that containment includes equality and shared edges."""
        outer = _iv(1, 10)
        assert outer.fully_includes(_iv(4, 5))
        assert outer.fully_includes(_iv(1, 10))
        assert outer.fully_includes(_iv(1, 4))
        assert not _iv(4, 5).fully_includes(outer)

    def test_fully_includes_rejects_partial_and_disjoint(self):
        """Test that partial overlaps and gaps are not containment."""
        assert not _iv(1, 5).fully_includes(_iv(3, 8))
        assert not _iv(1, 2).fully_includes(_iv(5, 6))

    def test_merge_spans_both(self):
        """Test that merge returns the smallest covering interval."""
        assert _iv(1, 3).merge(_iv(3, 6)) == _iv(1, 6)
        assert _iv(4, 9).merge(_iv(1, 5)) == _iv(1, 9)
        assert _iv(1, 10).merge(_iv(2, 3)) == _iv(1, 10)


# --- subtract ---


class TestSubtract:
    """Tests for Interval.subtract."""

    def test_subtract_disjoint_is_unchanged(self):
        """Test that removing a distant interval keeps the original."""
        assert _iv(1, 3).subtract(_iv(5, 8)) == [_iv(1, 3)]

    def test_subtract_swallowing_interval_is_empty(self):
        """Test that removing a covering interval leaves nothing."""
        assert _iv(3, 4).subtract(_iv(1, 8)) == []
        assert _iv(3, 4).subtract(_iv(3, 4)) == []

    def test_subtract_inner_interval_splits(self):
        """Test that removing a strictly inner interval leaves two pieces."""
        assert _iv(1, 5).subtract(_iv(2, 3)) == [_iv(1, 2), _iv(3, 5)]

    def test_subtract_inner_interval_sharing_left_edge(self):
        """Test that a zero-width left piece is dropped."""
        assert _iv(1, 5).subtract(_iv(1, 3)) == [_iv(3, 5)]

    def test_subtract_inner_interval_sharing_right_edge(self):
        """Test that a zero-width right piece is dropped."""
        assert _iv(1, 5).subtract(_iv(3, 5)) == [_iv(1, 3)]

    def test_subtract_right_overlap_keeps_left(self):
        """Test that an overlap on the right edge keeps the left remainder."""
        assert _iv(3, 5).subtract(_iv(4, 7)) == [_iv(3, 4)]

    def test_subtract_left_overlap_keeps_right(self):
        """Test that an overlap on the left edge keeps the right remainder."""
        assert _iv(6, 8).subtract(_iv(4, 7)) == [_iv(7, 8)]

    def test_subtract_touching_keeps_whole(self):
        """Test that a removal touching one endpoint keeps the whole interval."""
        assert _iv(1, 3).subtract(_iv(3, 6)) == [_iv(1, 3)]
        assert _iv(6, 8).subtract(_iv(3, 6)) == [_iv(6, 8)]
