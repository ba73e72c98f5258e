"""Duration decomposition and text rendering."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from decimal import Decimal

from fancy_duration._constants import NANOS_PER_SECOND, ZERO_LITERAL
from fancy_duration.units import (
    DAYS,
    HOURS,
    MINUTES,
    MONTHS,
    NANOSECONDS,
    SECONDS,
    WEEKS,
    YEARS,
    UnitSpec,
    unit_for_symbol,
)


@dataclass(frozen=True)
class Term:
    """A count of one unit. Only the seconds count may be a Decimal."""

    unit: UnitSpec
    count: int | Decimal

    def render(self) -> str:
        if isinstance(self.count, Decimal):
            return f"{self.count:f}{self.unit.symbol}"
        return f"{self.count}{self.unit.symbol}"


@dataclass(frozen=True)
class Breakdown:
    """Per-unit counts of a non-negative duration, largest unit first.

    The sub-second remainder is kept whole in ``nanoseconds`` and is
    rendered as the fraction of the seconds term.
    """

    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    nanoseconds: int = 0

    @classmethod
    def from_times(cls, seconds: int, nanos: int) -> Breakdown:
        """Greedily decompose a non-negative (seconds, nanos) pair."""
        counts = {}
        remaining = seconds
        for name, unit in _SLOTS[:-2]:
            counts[name], remaining = divmod(remaining, unit.seconds_per_unit)
        return cls(**counts, seconds=remaining, nanoseconds=nanos)

    def as_times(self) -> tuple[int, int]:
        total = sum(
            getattr(self, name) * unit.seconds_per_unit for name, unit in _SLOTS[:-1]
        )
        extra, nanos = divmod(self.nanoseconds, NANOS_PER_SECOND)
        return total + extra, nanos

    def truncate(self, limit: int) -> Breakdown:
        """Keep the ``limit`` most significant consecutive slots.

        Counting starts at the first nonzero slot and includes zero slots
        after it, so truncating ``1h 2m 30us`` to 3 drops the sub-second
        part because the (empty) seconds slot used up the third place.
        """
        if limit < 0:
            raise ValueError(f"truncate limit must be non-negative, got {limit}")
        changes = {}
        started = False
        for name, _ in _SLOTS:
            if not started and getattr(self, name) == 0:
                continue
            started = True
            if limit == 0:
                changes[name] = 0
            else:
                limit -= 1
        return replace(self, **changes)

    def filter(self, symbols: Iterable[str]) -> Breakdown:
        """Zero out every slot whose unit is not named in ``symbols``.

        Symbols are matched like parsed units, ignoring case and accepting
        aliases. Any of ``ms``, ``us`` or ``ns`` keeps the whole sub-second slot.

        Raises:
            ValueError: If a symbol names no known unit.
        """
        keep = set()
        for symbol in symbols:
            unit = unit_for_symbol(symbol)
            if unit is None:
                raise ValueError(f"unknown unit symbol: {symbol!r}")
            keep.add(NANOSECONDS if unit.is_subsecond else unit)
        return replace(
            self, **{name: 0 for name, unit in _SLOTS if unit not in keep}
        )

    def terms(self) -> list[Term]:
        result = []
        for name, unit in _SLOTS[:-2]:
            count = getattr(self, name)
            if count > 0:
                result.append(Term(unit, count))
        if self.seconds > 0 or self.nanoseconds > 0:
            result.append(Term(SECONDS, seconds_count(self.seconds, self.nanoseconds)))
        return result


# Breakdown field name -> unit, in decomposition order
_SLOTS: tuple[tuple[str, UnitSpec], ...] = (
    ("years", YEARS),
    ("months", MONTHS),
    ("weeks", WEEKS),
    ("days", DAYS),
    ("hours", HOURS),
    ("minutes", MINUTES),
    ("seconds", SECONDS),
    ("nanoseconds", NANOSECONDS),
)


def seconds_count(seconds: int, nanos: int) -> int | Decimal:
    if nanos == 0:
        return seconds
    fraction = f"{nanos:09d}".rstrip("0")
    return Decimal(f"{seconds}.{fraction}")


def validate_times(total_seconds: int, nanos: int) -> None:
    """Reject values that are not a well-formed (seconds, nanos) pair."""
    for name, value in (("seconds", total_seconds), ("nanos", nanos)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= nanos < NANOS_PER_SECOND:
        raise ValueError(f"nanos must be in [0, {NANOS_PER_SECOND}), got {nanos}")


def to_magnitude(total_seconds: int, nanos: int) -> tuple[bool, int, int]:
    """Split a floor-normalized pair into (negative, abs_seconds, abs_nanos)."""
    total = total_seconds * NANOS_PER_SECOND + nanos
    seconds, nanos = divmod(abs(total), NANOS_PER_SECOND)
    return total < 0, seconds, nanos


def from_magnitude(negative: bool, seconds: int, nanos: int) -> tuple[int, int]:
    """Inverse of :func:`to_magnitude`: rebuild a floor-normalized pair."""
    total = seconds * NANOS_PER_SECOND + nanos
    return divmod(-total if negative else total, NANOS_PER_SECOND)


def decompose(total_seconds: int, nanos: int = 0) -> tuple[bool, list[Term]]:
    """Decompose a duration into its sign and canonical term sequence."""
    validate_times(total_seconds, nanos)
    negative, seconds, nanos = to_magnitude(total_seconds, nanos)
    return negative, Breakdown.from_times(seconds, nanos).terms()


def render(negative: bool, terms: list[Term], separator: str = " ") -> str:
    if not terms:
        return ZERO_LITERAL
    text = separator.join(term.render() for term in terms)
    return f"-{text}" if negative else text


def format_duration(total_seconds: int, nanos: int = 0) -> str:
    """Render a duration as space-separated terms, e.g. ``"3m 5s"``.

    Args:
        total_seconds: Whole seconds; negative for negative durations.
        nanos: Sub-second remainder in ``[0, 1_000_000_000)``, counted
            forward from ``total_seconds`` (so -0.5s is ``(-1, 500_000_000)``).

    Returns:
        The fancy duration text. Zero renders as ``"0s"``.

    Raises:
        ValueError: If the pair is not well-formed.
    """
    return render(*decompose(total_seconds, nanos))


def format_duration_compact(total_seconds: int, nanos: int = 0) -> str:
    """Render a duration with no separator between terms, e.g. ``"3m5s"``."""
    return render(*decompose(total_seconds, nanos), separator="")


def truncate_times(total_seconds: int, nanos: int, limit: int) -> tuple[int, int]:
    """Truncate a duration to its ``limit`` most significant units."""
    validate_times(total_seconds, nanos)
    negative, seconds, nanos = to_magnitude(total_seconds, nanos)
    truncated = Breakdown.from_times(seconds, nanos).truncate(limit)
    return from_magnitude(negative, *truncated.as_times())


def filter_times(
    total_seconds: int, nanos: int, symbols: Iterable[str]
) -> tuple[int, int]:
    """Keep only the units named in ``symbols`` and recompute the duration."""
    validate_times(total_seconds, nanos)
    negative, seconds, nanos = to_magnitude(total_seconds, nanos)
    filtered = Breakdown.from_times(seconds, nanos).filter(symbols)
    return from_magnitude(negative, *filtered.as_times())
