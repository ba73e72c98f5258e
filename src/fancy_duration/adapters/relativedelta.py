"""dateutil relativedelta adapter."""

from __future__ import annotations

from dateutil.relativedelta import relativedelta

from fancy_duration._formatter import Breakdown, to_magnitude
from fancy_duration.adapters._base import Adapter
from fancy_duration.units import DAYS, HOURS, MINUTES, MONTHS, YEARS

# Absolute (date-replacing) fields that have no duration meaning
_ABSOLUTE_FIELDS = (
    "year", "month", "day", "weekday", "hour", "minute", "second", "microsecond",
)


class RelativedeltaAdapter(Adapter[relativedelta]):
    """Adapter for :class:`dateutil.relativedelta.relativedelta`.

    Years and months project through the fixed average lengths in the unit
    table. Built values keep the decomposed units, so ``"1y 2mo"`` becomes
    ``relativedelta(years=1, months=2)``. Only relative fields are
    supported; sub-microsecond precision is truncated toward zero.
    """

    def to_seconds_and_nanos(self, value: relativedelta) -> tuple[int, int]:
        absolute = [name for name in _ABSOLUTE_FIELDS if getattr(value, name) is not None]
        if absolute or value.leapdays:
            raise ValueError(
                f"relativedelta with absolute fields is not a duration: {value!r}"
            )
        value = value.normalized()
        seconds = (
            int(value.years) * YEARS.seconds_per_unit
            + int(value.months) * MONTHS.seconds_per_unit
            + int(value.days) * DAYS.seconds_per_unit
            + int(value.hours) * HOURS.seconds_per_unit
            + int(value.minutes) * MINUTES.seconds_per_unit
            + int(value.seconds)
        )
        extra, micros = divmod(int(value.microseconds), 1_000_000)
        return seconds + extra, micros * 1_000

    def from_terms(self, total_seconds: int, nanos: int) -> relativedelta:
        negative, seconds, nanos = to_magnitude(total_seconds, nanos)
        b = Breakdown.from_times(seconds, nanos)
        sign = -1 if negative else 1
        return relativedelta(
            years=sign * b.years,
            months=sign * b.months,
            days=sign * (b.weeks * 7 + b.days),
            hours=sign * b.hours,
            minutes=sign * b.minutes,
            seconds=sign * b.seconds,
            microseconds=sign * (b.nanoseconds // 1_000),
        )
