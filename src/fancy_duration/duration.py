"""Plain seconds/nanoseconds duration value."""

from __future__ import annotations

from dataclasses import dataclass

from fancy_duration._formatter import format_duration, validate_times


@dataclass(frozen=True, order=True)
class Duration:
    """An exact duration of whole seconds plus a sub-second remainder.

    ``nanos`` always lies in ``[0, 1_000_000_000)`` and counts forward from
    ``seconds``, so -0.5s is ``Duration(-1, 500_000_000)``.
    """

    seconds: int = 0
    nanos: int = 0

    def __post_init__(self) -> None:
        validate_times(self.seconds, self.nanos)

    @classmethod
    def from_terms(cls, total_seconds: int, nanos: int) -> Duration:
        return cls(total_seconds, nanos)

    def to_seconds_and_nanos(self) -> tuple[int, int]:
        return self.seconds, self.nanos

    def __str__(self) -> str:
        return format_duration(self.seconds, self.nanos)
