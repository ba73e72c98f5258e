"""datetime.timedelta adapter."""

from __future__ import annotations

from datetime import timedelta

from fancy_duration._formatter import to_magnitude
from fancy_duration.adapters._base import Adapter


class TimedeltaAdapter(Adapter[timedelta]):
    """Adapter for :class:`datetime.timedelta`.

    timedelta stores microseconds, so sub-microsecond precision is
    truncated toward zero when building values.
    """

    def to_seconds_and_nanos(self, value: timedelta) -> tuple[int, int]:
        return value.days * 86_400 + value.seconds, value.microseconds * 1_000

    def from_terms(self, total_seconds: int, nanos: int) -> timedelta:
        negative, seconds, nanos = to_magnitude(total_seconds, nanos)
        result = timedelta(seconds=seconds, microseconds=nanos // 1_000)
        return -result if negative else result
