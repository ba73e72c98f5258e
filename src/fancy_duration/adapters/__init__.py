"""Adapter system connecting concrete duration types to fancy durations."""

from __future__ import annotations

import datetime
from typing import Any

from celpy.celtypes import DurationType
import dateutil.relativedelta

from fancy_duration._errors import ERR_MSG_UNSUPPORTED_TYPE, UnsupportedTypeError
from fancy_duration.adapters._base import Adapter, ProtocolAdapter, SupportsFancyDuration
from fancy_duration.adapters.cel import CelDurationAdapter
from fancy_duration.adapters.relativedelta import RelativedeltaAdapter
from fancy_duration.adapters.timedelta import TimedeltaAdapter

__all__ = [
    "Adapter",
    "CelDurationAdapter",
    "ProtocolAdapter",
    "RelativedeltaAdapter",
    "SupportsFancyDuration",
    "TimedeltaAdapter",
    "get_adapter",
    "register_adapter",
]

_REGISTRY: dict[type, Adapter[Any]] = {
    datetime.timedelta: TimedeltaAdapter(),
    DurationType: CelDurationAdapter(),
    dateutil.relativedelta.relativedelta: RelativedeltaAdapter(),
}


def register_adapter(cls: type, adapter: Adapter[Any]) -> None:
    """Register an adapter for a duration type that cannot implement the protocol.

    Subclasses of ``cls`` use the same adapter unless they register their own,
    and values parsed for them come back as whatever the adapter constructs.
    Meant to be called at import time.
    """
    if not isinstance(adapter, Adapter):
        raise TypeError(f"expected an Adapter instance, got {type(adapter).__name__}")
    _REGISTRY[cls] = adapter


def get_adapter(value_or_type: Any) -> Adapter[Any]:
    """Get the adapter for a duration value or type.

    Lookup order: an adapter registered for the exact type, the type's own
    :class:`SupportsFancyDuration` methods, then adapters registered for
    base classes. A base-class adapter builds instances of the base class,
    so parsing into a subclass of ``timedelta`` returns a plain ``timedelta``.

    Raises:
        UnsupportedTypeError: If no adapter applies.
    """
    cls = value_or_type if isinstance(value_or_type, type) else type(value_or_type)
    adapter = _REGISTRY.get(cls)
    if adapter is not None:
        return adapter
    if issubclass(cls, SupportsFancyDuration):
        return ProtocolAdapter(cls)
    for base in cls.__mro__[1:]:
        adapter = _REGISTRY.get(base)
        if adapter is not None:
            return adapter
    available = ", ".join(sorted(getattr(c, "__qualname__", repr(c)) for c in _REGISTRY))
    raise UnsupportedTypeError(
        ERR_MSG_UNSUPPORTED_TYPE,
        f"no adapter registered for {cls.__module__}.{cls.__qualname__}; "
        f"available: {available}",
    )
