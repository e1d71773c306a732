import pytest


@pytest.fixture
def empty_set():
    """Provide an IntervalSet with no intervals.

    Returns:
        Fresh, empty IntervalSet.
    """
    from availability.interval_set import IntervalSet

    return IntervalSet()


@pytest.fixture
def split_set():
    """Provide an IntervalSet holding three separated intervals.

    Returns:
        IntervalSet containing [1, 2], [3, 5] and [6, 8].
    """
    from availability.interval_set import IntervalSet

    intervals = IntervalSet()
    intervals.add(1, 5)
    intervals.remove(2, 3)
    intervals.add(6, 8)
    return intervals


@pytest.fixture
def clock_env(monkeypatch):
    """Clear availability environment overrides so Config uses its defaults.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
    """
    monkeypatch.delenv("AVAILABILITY_CLOCK_MODE", raising=False)
    monkeypatch.delenv("AVAILABILITY_LOG_LEVEL", raising=False)
