"""cel-python DurationType adapter."""

from __future__ import annotations

from celpy.celtypes import DurationType

from fancy_duration.adapters.timedelta import TimedeltaAdapter


class CelDurationAdapter(TimedeltaAdapter):
    """Adapter for :class:`celpy.celtypes.DurationType`.

    DurationType is a timedelta subclass limited to the CEL range of
    +/-315,576,000,000 seconds; out-of-range values raise ValueError.
    """

    def from_terms(self, total_seconds: int, nanos: int) -> DurationType:
        # Truncate to microseconds first, then rebuild from the normalized pair
        td = super().from_terms(total_seconds, nanos)
        return DurationType(td.days * 86_400 + td.seconds, td.microseconds * 1_000)
