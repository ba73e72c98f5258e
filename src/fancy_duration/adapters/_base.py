"""Adapter interface between duration types and the formatter/parser."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class SupportsFancyDuration(Protocol):
    """Capability a duration type implements to work with fancy durations directly.

    ``to_seconds_and_nanos`` returns whole seconds (negative for negative
    durations) and a forward-counting nanosecond remainder in
    ``[0, 1_000_000_000)``. ``from_terms`` is a classmethod building a new
    instance from the same pair.
    """

    def to_seconds_and_nanos(self) -> tuple[int, int]: ...

    @classmethod
    def from_terms(cls, total_seconds: int, nanos: int) -> Any: ...


class Adapter(ABC, Generic[T]):
    """Abstract base class exposing a foreign duration type as (seconds, nanos).

    Used for types that cannot implement :class:`SupportsFancyDuration`
    themselves. Implementations must not mutate the values they read.
    """

    @abstractmethod
    def to_seconds_and_nanos(self, value: T) -> tuple[int, int]: ...

    @abstractmethod
    def from_terms(self, total_seconds: int, nanos: int) -> T:
        """Build a new value. Raise OverflowError or ValueError when out of range."""


class ProtocolAdapter(Adapter[Any]):
    """Adapter for types implementing :class:`SupportsFancyDuration`."""

    def __init__(self, cls: type) -> None:
        self._cls = cls

    def to_seconds_and_nanos(self, value: Any) -> tuple[int, int]:
        return value.to_seconds_and_nanos()

    def from_terms(self, total_seconds: int, nanos: int) -> Any:
        return self._cls.from_terms(total_seconds, nanos)
