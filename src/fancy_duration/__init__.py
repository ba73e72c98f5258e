"""fancy_duration - Human-readable text for durations, e.g. "1h 20m 30s"."""

from __future__ import annotations

try:
    from fancy_duration._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from fancy_duration._errors import (
    ConstructionFailedError,
    DuplicateUnitError,
    EmptyInputError,
    FancyDurationError,
    InvalidFormatError,
    ParseError,
    UnknownUnitError,
    UnsupportedTypeError,
)
from fancy_duration._fancy import FancyDuration, format_value, parse
from fancy_duration._formatter import (
    Breakdown,
    Term,
    decompose,
    format_duration,
    format_duration_compact,
)
from fancy_duration._parser import ParsedDuration, parse_terms, parse_to_ns
from fancy_duration.adapters import (
    Adapter,
    SupportsFancyDuration,
    get_adapter,
    register_adapter,
)
from fancy_duration.duration import Duration
from fancy_duration.units import UnitSpec, unit_for_symbol, units_largest_first

__all__ = [
    "decompose",
    "format_duration",
    "format_duration_compact",
    "format_value",
    "get_adapter",
    "parse",
    "parse_terms",
    "parse_to_ns",
    "register_adapter",
    "unit_for_symbol",
    "units_largest_first",
    "Adapter",
    "Breakdown",
    "Duration",
    "FancyDuration",
    "ParsedDuration",
    "SupportsFancyDuration",
    "Term",
    "UnitSpec",
    "ConstructionFailedError",
    "DuplicateUnitError",
    "EmptyInputError",
    "FancyDurationError",
    "InvalidFormatError",
    "ParseError",
    "UnknownUnitError",
    "UnsupportedTypeError",
]
