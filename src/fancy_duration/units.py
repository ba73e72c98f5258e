"""Unit table shared by the formatter and the parser.

Years and months are fixed averages of the Gregorian calendar
(365.2425 days and one twelfth of that), not calendar-aware lengths.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UnitSpec:
    """A single time unit.

    Whole-second units carry ``seconds_per_unit``; sub-second units carry
    ``nanos_per_unit`` and leave ``seconds_per_unit`` at zero.
    """

    symbol: str
    name: str
    seconds_per_unit: int = 0
    nanos_per_unit: int = 0

    @property
    def is_subsecond(self) -> bool:
        return self.seconds_per_unit == 0


YEARS = UnitSpec("y", "years", seconds_per_unit=31_556_952)
MONTHS = UnitSpec("mo", "months", seconds_per_unit=2_629_746)
WEEKS = UnitSpec("w", "weeks", seconds_per_unit=604_800)
DAYS = UnitSpec("d", "days", seconds_per_unit=86_400)
HOURS = UnitSpec("h", "hours", seconds_per_unit=3_600)
MINUTES = UnitSpec("m", "minutes", seconds_per_unit=60)
SECONDS = UnitSpec("s", "seconds", seconds_per_unit=1)

MILLISECONDS = UnitSpec("ms", "milliseconds", nanos_per_unit=1_000_000)
MICROSECONDS = UnitSpec("us", "microseconds", nanos_per_unit=1_000)
NANOSECONDS = UnitSpec("ns", "nanoseconds", nanos_per_unit=1)

WHOLE_UNITS: tuple[UnitSpec, ...] = (
    YEARS,
    MONTHS,
    WEEKS,
    DAYS,
    HOURS,
    MINUTES,
    SECONDS,
)

SUBSECOND_UNITS: tuple[UnitSpec, ...] = (MILLISECONDS, MICROSECONDS, NANOSECONDS)

ALL_UNITS: tuple[UnitSpec, ...] = WHOLE_UNITS + SUBSECOND_UNITS

# Lowercased symbol -> unit
_SYMBOLS: dict[str, UnitSpec] = {u.symbol: u for u in ALL_UNITS}
_SYMBOLS["µs"] = MICROSECONDS  # micro sign
_SYMBOLS["μs"] = MICROSECONDS  # greek mu


def unit_for_symbol(text: str) -> UnitSpec | None:
    """Look up a unit by symbol, ignoring case. Returns None if unknown."""
    return _SYMBOLS.get(text.lower())


def units_largest_first() -> tuple[UnitSpec, ...]:
    """Whole-second units ordered from years down to seconds."""
    return WHOLE_UNITS
