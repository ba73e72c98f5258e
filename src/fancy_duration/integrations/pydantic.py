"""Pydantic field types that read and write durations as fancy text.

Example::

    class Job(BaseModel):
        timeout: FancyTimedelta

    Job(timeout="1m 30s").timeout           # timedelta(seconds=90)
    Job(timeout=timedelta(seconds=90)).model_dump_json()  # '{"timeout":"1m 30s"}'
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta
from typing import Annotated, Any

from dateutil.relativedelta import relativedelta
from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from fancy_duration._fancy import format_value, parse
from fancy_duration.duration import Duration

__all__ = [
    "FancyPlainDuration",
    "FancyRelativedelta",
    "FancyTimedelta",
    "fancy_field",
]

_JSON_SCHEMA = {"type": "string", "examples": ["3m 5s", "1.5s", "-2h"]}


def _validator(into: type) -> Callable[[Any], Any]:
    def validate(value: Any) -> Any:
        if isinstance(value, into):
            return value
        if isinstance(value, str):
            return parse(value, into)
        raise ValueError(
            f"expected {into.__qualname__} or fancy duration text, got {type(value).__name__}"
        )

    return validate


def fancy_field(into: type) -> Any:
    """Build an ``Annotated`` field type for ``into``.

    Validation accepts instances of ``into`` or fancy duration text; JSON
    serialization emits fancy duration text. Parse errors surface as
    pydantic validation errors.
    """
    return Annotated[
        into,
        PlainValidator(_validator(into)),
        PlainSerializer(format_value, return_type=str, when_used="json"),
        WithJsonSchema(_JSON_SCHEMA),
    ]


FancyTimedelta = fancy_field(timedelta)
FancyPlainDuration = fancy_field(Duration)
FancyRelativedelta = fancy_field(relativedelta)
