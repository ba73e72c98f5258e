"""Adapter layer tests."""

from datetime import timedelta

import pytest
from celpy.celtypes import DurationType
from dateutil.relativedelta import relativedelta

from fancy_duration import (
    Adapter,
    ConstructionFailedError,
    Duration,
    SupportsFancyDuration,
    UnsupportedTypeError,
    format_value,
    get_adapter,
    parse,
    register_adapter,
)
from fancy_duration.adapters import _REGISTRY, ProtocolAdapter
from fancy_duration.adapters.cel import CelDurationAdapter
from fancy_duration.adapters.relativedelta import RelativedeltaAdapter
from fancy_duration.adapters.timedelta import TimedeltaAdapter


class Millis:
    """A foreign duration type storing integer milliseconds."""

    def __init__(self, ms):
        self.ms = ms

    def __eq__(self, other):
        return isinstance(other, Millis) and self.ms == other.ms


class MillisAdapter(Adapter[Millis]):
    def to_seconds_and_nanos(self, value):
        seconds, ms = divmod(value.ms, 1_000)
        return seconds, ms * 1_000_000

    def from_terms(self, total_seconds, nanos):
        return Millis(total_seconds * 1_000 + nanos // 1_000_000)


class Ticks:
    """A duration type implementing the capability methods itself."""

    def __init__(self, seconds, nanos=0):
        self.seconds = seconds
        self.nanos = nanos

    def to_seconds_and_nanos(self):
        return self.seconds, self.nanos

    @classmethod
    def from_terms(cls, total_seconds, nanos):
        return cls(total_seconds, nanos)


class TestDuration:
    def test_str(self):
        assert str(Duration(185)) == "3m 5s"

    def test_protocol(self):
        assert isinstance(Duration(1), SupportsFancyDuration)
        assert Duration(3, 5).to_seconds_and_nanos() == (3, 5)
        assert Duration.from_terms(3, 5) == Duration(3, 5)

    def test_rejects_bad_nanos(self):
        with pytest.raises(ValueError):
            Duration(1, 1_000_000_000)

    def test_ordering(self):
        assert Duration(-1, 500_000_000) < Duration(0) < Duration(0, 1)

    def test_parse_default_target(self):
        assert parse("3m 5s") == Duration(185, 0)
        assert parse("3.5s") == Duration(3, 500_000_000)


class TestTimedeltaAdapter:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (timedelta(seconds=185), "3m 5s"),
            (timedelta(hours=2), "2h"),
            (timedelta(microseconds=1_500), "0.0015s"),
            (timedelta(seconds=-185), "-3m 5s"),
            (timedelta(seconds=-0.5), "-0.5s"),
            (timedelta(0), "0s"),
        ],
    )
    def test_format(self, value, expected):
        assert format_value(value) == expected

    def test_projection(self, timedelta_adapter):
        assert timedelta_adapter.to_seconds_and_nanos(timedelta(seconds=-1.5)) == (
            -2,
            500_000_000,
        )

    def test_parse(self):
        assert parse("1h 30m", timedelta) == timedelta(hours=1, minutes=30)
        assert parse("-1.5s", timedelta) == timedelta(seconds=-1.5)

    def test_truncates_to_microseconds(self):
        assert parse("1.0000005s", timedelta) == timedelta(seconds=1)
        assert parse("1.0000015s", timedelta) == timedelta(seconds=1, microseconds=1)
        assert parse("-1.0000015s", timedelta) == -timedelta(seconds=1, microseconds=1)

    def test_overflow(self):
        with pytest.raises(ConstructionFailedError) as exc_info:
            parse("3000000y", timedelta)
        assert isinstance(exc_info.value.wrapped, OverflowError)
        assert "timedelta" in exc_info.value.internal()

    def test_construction_failure_is_parse_error(self):
        with pytest.raises(ValueError):
            parse("3000000y", timedelta)


class TestCelDurationAdapter:
    def test_lookup(self):
        assert isinstance(get_adapter(DurationType), CelDurationAdapter)

    def test_format(self):
        assert format_value(DurationType(185)) == "3m 5s"

    def test_parse(self):
        value = parse("3m 5s", DurationType)
        assert isinstance(value, DurationType)
        assert value == timedelta(seconds=185)

    def test_parse_negative_fraction(self):
        value = parse("-1.5s", DurationType)
        assert isinstance(value, DurationType)
        assert value == timedelta(seconds=-1.5)


class TestRelativedeltaAdapter:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (relativedelta(years=1, months=2), "1y 2mo"),
            (relativedelta(weeks=1, days=2, hours=3), "1w 2d 3h"),
            (relativedelta(months=-1), "-1mo"),
            (relativedelta(microseconds=1_500), "0.0015s"),
            (relativedelta(), "0s"),
        ],
    )
    def test_format(self, value, expected):
        assert format_value(value) == expected

    def test_parse_keeps_calendar_units(self):
        assert parse("1y 2mo 10d", relativedelta) == relativedelta(
            years=1, months=2, days=10
        )

    def test_parse_negative(self):
        assert parse("-1h 30m", relativedelta) == relativedelta(hours=-1, minutes=-30)

    def test_absolute_fields_rejected(self, relativedelta_adapter):
        with pytest.raises(ValueError, match="absolute"):
            relativedelta_adapter.to_seconds_and_nanos(relativedelta(year=2020))


class TestRegistry:
    def test_builtin_adapters(self):
        assert isinstance(get_adapter(timedelta(1)), TimedeltaAdapter)
        assert isinstance(get_adapter(relativedelta), RelativedeltaAdapter)

    def test_protocol_type(self):
        adapter = get_adapter(Ticks)
        assert isinstance(adapter, ProtocolAdapter)
        assert format_value(Ticks(185)) == "3m 5s"
        value = parse("2.5s", Ticks)
        assert isinstance(value, Ticks)
        assert (value.seconds, value.nanos) == (2, 500_000_000)

    def test_unsupported_type(self):
        with pytest.raises(UnsupportedTypeError, match="unsupported duration type"):
            format_value(185)
        with pytest.raises(UnsupportedTypeError):
            parse("3s", str)

    def test_unsupported_type_checked_before_parsing(self):
        with pytest.raises(UnsupportedTypeError):
            parse("not a duration", int)

    def test_register_adapter(self, restore_registry):
        register_adapter(Millis, MillisAdapter())
        assert format_value(Millis(1_500)) == "1.5s"
        assert parse("2m 3.25s", Millis) == Millis(123_250)

    def test_subclass_uses_base_adapter(self, restore_registry):
        class SubMillis(Millis):
            pass

        register_adapter(Millis, MillisAdapter())
        assert format_value(SubMillis(60_000)) == "1m"

    def test_register_requires_adapter(self, restore_registry):
        with pytest.raises(TypeError):
            register_adapter(Millis, object())

    def test_registry_keys_are_classes(self):
        assert all(isinstance(cls, type) for cls in _REGISTRY)
        assert timedelta in _REGISTRY
        assert relativedelta in _REGISTRY
        assert isinstance(get_adapter(timedelta), TimedeltaAdapter)
        assert isinstance(get_adapter(relativedelta(days=1)), RelativedeltaAdapter)
        assert isinstance(get_adapter(DurationType), CelDurationAdapter)

    def test_unsupported_type_lists_registered_types(self):
        with pytest.raises(UnsupportedTypeError) as exc_info:
            get_adapter(185)
        internal = exc_info.value.internal()
        assert "builtins.int" in internal
        assert "timedelta" in internal
        assert "relativedelta" in internal

    def test_builtin_subclass_rebuilds_base_type(self):
        class Interval(timedelta):
            pass

        assert format_value(Interval(seconds=185)) == "3m 5s"
        value = parse("1s", Interval)
        assert type(value) is timedelta
        assert value == timedelta(seconds=1)


class TestFormatValue:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (timedelta(seconds=185), "3m5s"),
            (timedelta(days=27, seconds=324), "3w6d5m24s"),
            (timedelta(seconds=-3, microseconds=-500_000), "-3.5s"),
            (relativedelta(hours=1, minutes=2), "1h2m"),
            (DurationType(3_723, 250_000_000), "1h2m3.25s"),
            (Duration(0), "0s"),
        ],
    )
    def test_compact(self, value, expected):
        assert format_value(value, compact=True) == expected

    def test_standard_is_default(self):
        assert format_value(timedelta(seconds=185)) == "3m 5s"
