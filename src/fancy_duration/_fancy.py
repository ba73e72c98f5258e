"""Value-level API: parse text into duration types and format duration values."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fancy_duration._errors import ERR_MSG_CONSTRUCTION_FAILED, ConstructionFailedError
from fancy_duration._formatter import (
    filter_times,
    format_duration,
    format_duration_compact,
    truncate_times,
)
from fancy_duration._parser import parse_to_ns
from fancy_duration.adapters import Adapter, get_adapter
from fancy_duration.duration import Duration

T = TypeVar("T")


def _build(adapter: Adapter[Any], into: type, seconds: int, nanos: int) -> Any:
    try:
        return adapter.from_terms(seconds, nanos)
    except (OverflowError, ValueError) as e:
        raise ConstructionFailedError(
            ERR_MSG_CONSTRUCTION_FAILED,
            f"cannot build {into.__qualname__} from ({seconds}, {nanos}): {e}",
            wrapped=e,
        ) from e


def parse(text: str, into: type[T] = Duration, *, max_length: int | None = None) -> T:
    """Parse fancy duration text into a concrete duration value.

    Args:
        text: The duration text, e.g. ``"1h 30m"``.
        into: Target duration type. Defaults to :class:`Duration`.
        max_length: Maximum accepted text length. Defaults to 1024.

    Returns:
        A new instance of ``into``.

    Raises:
        ParseError: If the text is not a valid duration.
        ConstructionFailedError: If ``into`` cannot represent the value.
        UnsupportedTypeError: If ``into`` has no adapter.
    """
    adapter = get_adapter(into)
    seconds, nanos = parse_to_ns(text, max_length=max_length)
    return _build(adapter, into, seconds, nanos)


def format_value(value: Any, *, compact: bool = False) -> str:
    """Format any supported duration value as fancy duration text.

    Raises:
        UnsupportedTypeError: If the value's type has no adapter.
    """
    seconds, nanos = get_adapter(value).to_seconds_and_nanos(value)
    if compact:
        return format_duration_compact(seconds, nanos)
    return format_duration(seconds, nanos)


@dataclass(frozen=True)
class FancyDuration(Generic[T]):
    """A duration value paired with its fancy text representation.

    ``str()`` gives the standard whitespace-separated format::

        >>> str(FancyDuration(Duration(185)))
        '3m 5s'
        >>> FancyDuration.parse("3m 5s").duration
        Duration(seconds=185, nanos=0)

    Units and their symbols, largest first: years ``y``, months ``mo``,
    weeks ``w``, days ``d``, hours ``h``, minutes ``m``, seconds ``s``.
    Years are 365.2425 days and months one twelfth of a year. Sub-second
    precision renders as a seconds fraction (``"1.25s"``); the parser
    also accepts ``ms``, ``us`` and ``ns`` terms.
    """

    duration: T

    def _times(self) -> tuple[int, int]:
        return get_adapter(self.duration).to_seconds_and_nanos(self.duration)

    def _rebuild(self, seconds: int, nanos: int) -> FancyDuration[T]:
        into = type(self.duration)
        return FancyDuration(_build(get_adapter(into), into, seconds, nanos))

    def format(self) -> str:
        """Standard format, terms separated by whitespace: ``"2m 5s"``."""
        return format_duration(*self._times())

    def format_compact(self) -> str:
        """Compact format with no whitespace: ``"2m5s"``."""
        return format_duration_compact(*self._times())

    def __str__(self) -> str:
        return self.format()

    def truncate(self, limit: int) -> FancyDuration[T]:
        """Keep the ``limit`` most significant consecutive units.

        ``"1y 2mo 3w 4d"`` truncated to 2 is ``"1y 2mo"``. Counting is
        consecutive from the first nonzero unit, so ``"1h 2m 0.00003s"``
        truncated to 3 is ``"1h 2m"``: the empty seconds place was counted
        and the sub-second part after it is dropped.
        """
        seconds, nanos = self._times()
        return self._rebuild(*truncate_times(seconds, nanos, limit))

    def filter(self, symbols: Iterable[str]) -> FancyDuration[T]:
        """Zero every unit not named in ``symbols`` and recompute the value.

        Sub-second units (``"ms"``, ``"us"``, ``"ns"``) all address the
        fractional part. Unknown symbols raise ``ValueError``.
        """
        seconds, nanos = self._times()
        return self._rebuild(*filter_times(seconds, nanos, symbols))

    @classmethod
    def parse(
        cls, text: str, into: type[T] = Duration, *, max_length: int | None = None
    ) -> FancyDuration[T]:
        """Parse fancy duration text into a wrapped value of type ``into``."""
        return cls(parse(text, into, max_length=max_length))
