"""Tests for parsing and constructing time values"""

import pytest

from clocktime.domain.exceptions import (
    InvalidModeError,
    TimeError,
    TimeFormatError,
    TimeRangeError,
    TimeTypeError,
)
from clocktime.domain.value_objects.time import Time
from clocktime.domain.value_objects.time_mode import TimeMode


def test_create_with_string() -> None:
    """Test creating a time from a string and copying it"""
    t0 = Time("10:00")
    assert str(t0) == "10:00:00"

    t1 = t0.add(10, "minutes").add(3, "seconds")
    assert str(Time(t1)) == "10:10:03"


@pytest.mark.parametrize("value", ["1:1:1:1", "0:0:0:0:0"])
def test_too_many_parts(value: str) -> None:
    """Test more than three parts is rejected"""
    with pytest.raises(TimeFormatError, match="too many parts"):
        Time(value)


@pytest.mark.parametrize("value", ["a:1:1", "1:a:1", "1:1:a", "", "10:", "1.5", "1:1:1.", "+1:00", "1:-1"])
def test_non_numeric_parts(value: str) -> None:
    """Test non-numeric fields are rejected"""
    with pytest.raises(TimeFormatError, match="non-numeric values"):
        Time(value)


@pytest.mark.parametrize(
    "value, message",
    [
        ("60:1:1", "Invalid hours"),
        ("24:00", "Invalid hours"),
        ("1:60:1", "Invalid minutes"),
        ("1:1:60", "Invalid seconds"),
        ("1:1:60.5", "Invalid seconds"),
    ],
)
def test_out_of_range_fields(value: str, message: str) -> None:
    """Test fields outside their legal range are rejected"""
    with pytest.raises(TimeRangeError, match=message):
        Time(value)


def test_hours_out_of_range_in_clock_mode() -> None:
    """Test 25 hours is not a valid clock time"""
    with pytest.raises(TimeRangeError, match="Invalid hours: 25"):
        Time("25:00")


def test_negative_clock_time() -> None:
    """Test a negative sign is rejected in clock mode"""
    with pytest.raises(TimeRangeError, match="clock time cannot be negative"):
        Time("-1:00")


def test_duration_allows_large_hours_but_checks_minutes() -> None:
    """Test duration hours are unbounded while minutes and seconds are not"""
    assert Time("25:00", mode="duration").hours == 25
    assert Time("-100:00", mode="duration").to_hours() == -100

    with pytest.raises(TimeRangeError, match="Invalid minutes"):
        Time("-1:60", mode="duration")


@pytest.mark.parametrize("value", [[], {}, None, True, object()])
def test_invalid_input_type(value: object) -> None:
    """Test unsupported input types raise a type error"""
    with pytest.raises(TimeTypeError, match="Time must be a string, number or Time"):
        Time(value)  # type: ignore[arg-type]


def test_errors_share_a_base_class() -> None:
    """Test every validation error is a TimeError and a ValueError"""
    with pytest.raises(TimeError):
        Time("x")
    with pytest.raises(ValueError):
        Time("25:00")
    with pytest.raises(TypeError):
        Time([])  # type: ignore[arg-type]


def test_getters() -> None:
    """Test component getters"""
    assert Time("09:22:44.567").hours == 9
    assert Time("13:22:44.567").hours == 13

    assert Time("09:22:44.567").minutes == 22
    assert Time("13:2:44.567").minutes == 2

    assert Time("09:22:44.567").seconds == 44
    assert Time("13:22:04.567").seconds == 4

    assert Time("09:22:44.567").milliseconds == 567
    assert Time("13:22:44.001").milliseconds == 1
    assert Time("13:22:44.1").milliseconds == 100


def test_fraction_keeps_millisecond_precision() -> None:
    """Test fraction digits beyond milliseconds are dropped"""
    assert Time("00:00:01.23456").to_milliseconds() == 1234


def test_hours_only_and_whitespace() -> None:
    """Test minutes and seconds are optional and whitespace is ignored"""
    assert Time("7").to_milliseconds() == 7 * 3_600_000
    assert Time("  10:30 ").format("HH:mm") == "10:30"


def test_modes() -> None:
    """Test default and explicit modes"""
    assert Time("13:22:44.1").mode is TimeMode.CLOCK
    assert Time("13:22:44.1", mode="duration").mode is TimeMode.DURATION
    assert Time("13:22:44.1", mode=TimeMode.CLOCK).mode is TimeMode.CLOCK
    assert Time("13:22:44.1", mode="duration").as_duration().mode is TimeMode.DURATION
    assert Time("13:22:44.1", mode="duration").as_clock().mode is TimeMode.CLOCK


def test_invalid_mode() -> None:
    """Test an unknown mode is rejected"""
    with pytest.raises(InvalidModeError):
        Time("10:00", mode="calendar")


def test_copy_keeps_mode_unless_overridden() -> None:
    """Test copying a Time keeps its mode and renormalizes on override"""
    duration = Time("22:00", mode="duration").add(10, "hours")

    assert Time(duration).mode is TimeMode.DURATION
    assert Time(duration).hours == 32
    assert Time(duration, mode="clock").format("HH:mm") == "08:00"


def test_create_from_number() -> None:
    """Test millisecond counts default to clock mode"""
    t = Time(3_600_000)

    assert t.mode is TimeMode.CLOCK
    assert t.hours == 1
    assert Time(1500.4).to_milliseconds() == 1500


def test_non_finite_number() -> None:
    """Test infinite and NaN millisecond counts are rejected"""
    with pytest.raises(TimeRangeError):
        Time(float("inf"))
    with pytest.raises(TimeRangeError):
        Time(float("nan"))


def test_time_is_immutable() -> None:
    """Test attributes cannot be assigned or deleted"""
    t = Time("10:00")

    with pytest.raises(AttributeError):
        t.hours = 5  # type: ignore[misc]
    with pytest.raises(AttributeError):
        t._milliseconds = 5
    with pytest.raises(AttributeError):
        del t._mode

    assert t.to_milliseconds() == 36_000_000
