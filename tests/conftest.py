"""Shared test fixtures."""

import pytest

from fancy_duration.adapters import _REGISTRY
from fancy_duration.adapters.relativedelta import RelativedeltaAdapter
from fancy_duration.adapters.timedelta import TimedeltaAdapter


@pytest.fixture
def timedelta_adapter():
    return TimedeltaAdapter()


@pytest.fixture
def relativedelta_adapter():
    return RelativedeltaAdapter()


@pytest.fixture
def restore_registry():
    """Undo register_adapter() calls made by a test."""
    saved = dict(_REGISTRY)
    yield
    _REGISTRY.clear()
    _REGISTRY.update(saved)


# (seconds, nanos, text) in standard format
FORMAT_CASES = [
    (0, 0, "0s"),
    (20, 0, "20s"),
    (120, 0, "2m"),
    (185, 0, "3m 5s"),
    (324, 0, "5m 24s"),
    (600, 0, "10m"),
    (86_400, 0, "1d"),
    (86_400 + 324, 0, "1d 5m 24s"),
    (27 * 86_400 + 324, 0, "3w 6d 5m 24s"),
    (99 * 86_400 + 324, 0, "3mo 1w 16h 38m 6s"),
    (31_556_952, 0, "1y"),
    (2_629_746, 0, "1mo"),
    (375 * 86_400, 0, "1y 1w 2d 18h 10m 48s"),
    (3, 500_000_000, "3.5s"),
    (0, 5_000_000, "0.005s"),
    (0, 600, "0.0000006s"),
    (1, 999_999_999, "1.999999999s"),
    (3_723, 250_000_000, "1h 2m 3.25s"),
    (-185, 0, "-3m 5s"),
    (-4, 500_000_000, "-3.5s"),
    (-1, 500_000_000, "-0.5s"),
]
