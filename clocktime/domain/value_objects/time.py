"""Time value object

A Time is either a time of day (clock mode, always wrapped into a single
24 hour cycle) or a signed elapsed span (duration mode, never wrapped).
"""

import logging
import math
import re
from datetime import datetime
from datetime import time as datetime_time
from datetime import timedelta
from functools import cached_property
from numbers import Real
from typing import Any, Mapping, NamedTuple, Optional, Union

from clocktime.core.config import settings
from clocktime.domain.exceptions import (
    InvalidOperationError,
    ModeMismatchError,
    NullTimeInputError,
    TimeFormatError,
    TimeRangeError,
    TimeTypeError,
)
from clocktime.domain.value_objects.time_mode import TimeMode
from clocktime.domain.value_objects.time_unit import (
    DAY_MS,
    HOUR_MS,
    MINUTE_MS,
    SECOND_MS,
    TimeUnit,
)
from clocktime.presentation.schemas.time_schemas import TimeJSON

logger = logging.getLogger(__name__)

TimeInput = Union[str, int, float, "Time"]
ModeInput = Union[TimeMode, str]
UnitInput = Union[TimeUnit, str]

_INTEGER_FIELD = re.compile(r"[0-9]+")
_SECONDS_FIELD = re.compile(r"([0-9]+)(?:\.([0-9]+))?")

# Longest alternatives first so "HH" wins over "H"
_FORMAT_TOKENS = re.compile(r"HH|H|mm|m|ss|s|fff|f")


class TimeComponents(NamedTuple):
    """Non-negative hours/minutes/seconds/milliseconds breakdown"""

    hours: int
    minutes: int
    seconds: int
    milliseconds: int


def normalize(milliseconds: int, mode: ModeInput) -> int:
    """Canonicalize a raw millisecond total for the given mode

    Clock values wrap into [0, DAY_MS) using Euclidean modulo, so both
    multi-day overflow and negative totals land on the same time of day.
    Durations are returned unchanged.
    """
    if TimeMode.parse(mode) is TimeMode.CLOCK:
        return milliseconds % DAY_MS
    return milliseconds


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _round_milliseconds(value: Union[int, float]) -> int:
    """Round a numeric millisecond amount to an int"""
    if isinstance(value, int):
        return value
    if not math.isfinite(value):
        raise TimeRangeError(f"Invalid time: {value} is not a finite number")
    return int(round(value))


def _parse_time_string(text: str, mode: TimeMode) -> int:
    """Parse "[-]H[:MM[:SS[.fff]]]" into a signed millisecond total"""
    text = text.strip()

    negative = text.startswith("-")
    if negative:
        if mode is TimeMode.CLOCK:
            raise TimeRangeError("Invalid time: clock time cannot be negative")
        text = text[1:]

    parts = text.split(":")
    if len(parts) > 3:
        raise TimeFormatError("Invalid time format: too many parts")

    hours_part, minutes_part, seconds_part = (parts + ["0", "0"])[:3]

    seconds_match = _SECONDS_FIELD.fullmatch(seconds_part)
    if (
        not _INTEGER_FIELD.fullmatch(hours_part)
        or not _INTEGER_FIELD.fullmatch(minutes_part)
        or seconds_match is None
    ):
        raise TimeFormatError("Invalid time format: non-numeric values")

    hours = int(hours_part)
    minutes = int(minutes_part)
    seconds = int(seconds_match.group(1))
    # Millisecond precision, extra fraction digits are dropped
    milliseconds = int((seconds_match.group(2) or "")[:3].ljust(3, "0"))

    if mode is TimeMode.CLOCK and hours > 23:
        raise TimeRangeError(f"Invalid hours: {hours}. Must be between 0 and 23")
    if minutes > 59:
        raise TimeRangeError(f"Invalid minutes: {minutes}. Must be between 0 and 59")
    if seconds > 59:
        raise TimeRangeError(f"Invalid seconds: {seconds_part}. Must be between 0 and 59")

    total = ((hours * 60 + minutes) * 60 + seconds) * SECOND_MS + milliseconds
    return -total if negative else total


class Time:
    """Immutable time of day or duration with millisecond precision"""

    _milliseconds: int
    _mode: TimeMode

    def __init__(self, value: TimeInput, mode: Optional[ModeInput] = None) -> None:
        """Create a time from a string, a millisecond count or another Time"""
        if isinstance(value, Time):
            target_mode = value.mode if mode is None else TimeMode.parse(mode)
            total = value.to_milliseconds()
        elif isinstance(value, str):
            target_mode = self._resolve_mode(mode)
            total = _parse_time_string(value, target_mode)
        elif _is_number(value):
            target_mode = self._resolve_mode(mode)
            total = _round_milliseconds(value)
        else:
            raise TimeTypeError(
                f"Time must be a string, number or Time, got {type(value).__name__}"
            )

        object.__setattr__(self, "_mode", target_mode)
        object.__setattr__(self, "_milliseconds", normalize(total, target_mode))

    @staticmethod
    def _resolve_mode(mode: Optional[ModeInput]) -> TimeMode:
        return TimeMode.parse(settings.default_mode if mode is None else mode)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Time is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Time is immutable, cannot delete {name!r}")

    def __reduce__(self) -> tuple:
        return (type(self), (self._milliseconds, self._mode.value))

    # Factories

    @classmethod
    def now(cls) -> "Time":
        """Get the current local wall-clock time"""
        return cls.from_date(datetime.now())

    @classmethod
    def from_date(cls, value: Union[datetime, datetime_time]) -> "Time":
        """Create a clock time from the time-of-day part of a datetime or time"""
        if isinstance(value, datetime):
            value = value.time()
        if not isinstance(value, datetime_time):
            raise TimeTypeError(
                f"Expected a datetime or time, got {type(value).__name__}"
            )

        total = (
            (value.hour * 60 + value.minute) * 60 + value.second
        ) * SECOND_MS + value.microsecond // 1000
        return cls(total, mode=TimeMode.CLOCK)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Time":
        """Create a duration from a timedelta"""
        if not isinstance(delta, timedelta):
            raise TimeTypeError(f"Expected a timedelta, got {type(delta).__name__}")
        return cls(delta // timedelta(milliseconds=1), mode=TimeMode.DURATION)

    @classmethod
    def from_json(cls, data: Union[Mapping[str, Any], str, bytes]) -> "Time":
        """Restore a time from its JSON object or JSON text"""
        if isinstance(data, (str, bytes, bytearray)):
            payload = TimeJSON.model_validate_json(data)
        else:
            payload = TimeJSON.model_validate(data)

        total = (
            payload.hours * HOUR_MS
            + payload.minutes * MINUTE_MS
            + payload.seconds * SECOND_MS
            + payload.milliseconds
        )
        logger.debug(f"Restoring {payload.mode.value} time from JSON: {total}ms")
        return cls(total, mode=payload.mode)

    @classmethod
    def midnight(cls) -> "Time":
        """Get 00:00:00 as a clock time"""
        return cls(0, mode=TimeMode.CLOCK)

    @classmethod
    def noon(cls) -> "Time":
        """Get 12:00:00 as a clock time"""
        return cls(12 * HOUR_MS, mode=TimeMode.CLOCK)

    # Accessors

    @property
    def mode(self) -> TimeMode:
        """Get time mode"""
        return self._mode

    @cached_property
    def components(self) -> TimeComponents:
        """Get the hours/minutes/seconds/milliseconds breakdown

        Durations are decomposed by magnitude, so a negative duration still
        yields non-negative fields and the sign only lives in the total.
        """
        remainder = abs(self._milliseconds)
        hours, remainder = divmod(remainder, HOUR_MS)
        minutes, remainder = divmod(remainder, MINUTE_MS)
        seconds, milliseconds = divmod(remainder, SECOND_MS)
        return TimeComponents(hours, minutes, seconds, milliseconds)

    @property
    def hours(self) -> int:
        """Get hours component"""
        return self.components.hours

    @property
    def minutes(self) -> int:
        """Get minutes component"""
        return self.components.minutes

    @property
    def seconds(self) -> int:
        """Get seconds component"""
        return self.components.seconds

    @property
    def milliseconds(self) -> int:
        """Get milliseconds component"""
        return self.components.milliseconds

    # Conversions

    def to_milliseconds(self) -> int:
        """Get the raw signed millisecond total"""
        return self._milliseconds

    def to_seconds(self) -> float:
        """Get total in seconds"""
        return self._milliseconds / SECOND_MS

    def to_minutes(self) -> float:
        """Get total in minutes"""
        return self._milliseconds / MINUTE_MS

    def to_hours(self) -> float:
        """Get total in hours"""
        return self._milliseconds / HOUR_MS

    def to_full_seconds(self) -> int:
        """Get whole seconds, floored toward negative infinity"""
        return self._milliseconds // SECOND_MS

    def to_full_minutes(self) -> int:
        """Get whole minutes, floored toward negative infinity"""
        return self._milliseconds // MINUTE_MS

    def to_full_hours(self) -> int:
        """Get whole hours, floored toward negative infinity"""
        return self._milliseconds // HOUR_MS

    def to_timedelta(self) -> timedelta:
        """Get total as a timedelta"""
        return timedelta(milliseconds=self._milliseconds)

    def to_json(self) -> dict:
        """Serialize to a flat JSON object

        Negative durations carry the sign on every field so the fields
        always sum back to the exact total.
        """
        sign = -1 if self._milliseconds < 0 else 1
        hours, minutes, seconds, milliseconds = self.components
        payload = TimeJSON(
            hours=sign * hours,
            minutes=sign * minutes,
            seconds=sign * seconds,
            milliseconds=sign * milliseconds,
            mode=self._mode,
        )
        return payload.model_dump(mode="json")

    # Mode projection

    def as_clock(self) -> "Time":
        """Get this value as a clock time, wrapped into one day"""
        return type(self)(self, mode=TimeMode.CLOCK)

    def as_duration(self) -> "Time":
        """Get this value as a duration"""
        return type(self)(self, mode=TimeMode.DURATION)

    def is_midnight(self) -> bool:
        """Check if clock time is exactly 00:00:00.000"""
        if self._mode is TimeMode.DURATION:
            raise InvalidOperationError("is_midnight is not applicable to durations")
        return self._milliseconds == 0

    # Arithmetic

    def add(self, value: Union[int, float, "Time"], unit: UnitInput = "milliseconds") -> "Time":
        """Add an amount of a unit, or another Time of the same mode"""
        return self._shift(self._delta(value, unit))

    def subtract(
        self, value: Union[int, float, "Time"], unit: UnitInput = "milliseconds"
    ) -> "Time":
        """Subtract an amount of a unit, or another Time of the same mode"""
        return self._shift(-self._delta(value, unit))

    sub = subtract

    def _delta(self, value: Union[int, float, "Time"], unit: UnitInput) -> int:
        # Unit is validated even when a Time operand makes it irrelevant
        target_unit = TimeUnit.parse(unit)
        if isinstance(value, Time):
            self._check_mode(value)
            return value.to_milliseconds()
        if not _is_number(value):
            raise TimeTypeError(f"Amount must be a number or Time, got {type(value).__name__}")
        return _round_milliseconds(target_unit.to_milliseconds(value))

    def _shift(self, delta: int) -> "Time":
        return type(self)(self._milliseconds + delta, mode=self._mode)

    # Comparison

    def is_before(self, other: TimeInput) -> bool:
        """Check if this time is before other"""
        return self._milliseconds < self._coerce(other).to_milliseconds()

    def is_same_or_before(self, other: TimeInput) -> bool:
        """Check if this time is before or equal to other"""
        return self._milliseconds <= self._coerce(other).to_milliseconds()

    def is_after(self, other: TimeInput) -> bool:
        """Check if this time is after other"""
        return self._milliseconds > self._coerce(other).to_milliseconds()

    def is_same_or_after(self, other: TimeInput) -> bool:
        """Check if this time is after or equal to other"""
        return self._milliseconds >= self._coerce(other).to_milliseconds()

    def is_same(self, other: TimeInput) -> bool:
        """Check if this time equals other"""
        return self._milliseconds == self._coerce(other).to_milliseconds()

    def is_between(self, start: TimeInput, end: TimeInput, inclusive: bool = True) -> bool:
        """Check if this time lies within [start, end], or (start, end) if not inclusive"""
        lower = self._coerce(start).to_milliseconds()
        upper = self._coerce(end).to_milliseconds()

        if inclusive:
            return lower <= self._milliseconds <= upper
        return lower < self._milliseconds < upper

    def diff(self, other: TimeInput, unit: UnitInput = "milliseconds") -> Union[int, float]:
        """Get (self - other) in the given unit, without flooring"""
        other_time = self._coerce(other)
        target_unit = TimeUnit.parse(unit)
        return target_unit.from_milliseconds(self._milliseconds - other_time.to_milliseconds())

    def _coerce(self, value: Optional[TimeInput]) -> "Time":
        """Turn a comparison operand into a Time of this mode

        Numbers are millisecond counts and go through the constructor, so
        floats are rounded to the nearest millisecond before comparing.
        """
        if value is None:
            raise NullTimeInputError("Time input must not be None")
        if isinstance(value, Time):
            self._check_mode(value)
            return value
        if isinstance(value, str) or _is_number(value):
            return type(self)(value, mode=self._mode)
        raise TimeTypeError(f"Cannot compare Time with {type(value).__name__}")

    def _check_mode(self, other: "Time") -> None:
        if other.mode is not self._mode:
            raise ModeMismatchError(self._mode.value, other.mode.value)

    # Formatting

    def format(self, pattern: Optional[str] = None) -> str:
        """Render using H/HH, m/mm, s/ss and f/fff tokens"""
        if pattern is None:
            pattern = settings.default_format

        hours, minutes, seconds, milliseconds = self.components
        tokens = {
            "H": str(hours),
            "HH": f"{hours:02d}",
            "m": str(minutes),
            "mm": f"{minutes:02d}",
            "s": str(seconds),
            "ss": f"{seconds:02d}",
            "f": str(milliseconds),
            "fff": f"{milliseconds:03d}",
        }
        formatted = _FORMAT_TOKENS.sub(lambda match: tokens[match.group(0)], pattern)

        if self._mode is TimeMode.DURATION and self._milliseconds < 0:
            return f"-{formatted}"
        return formatted

    def to_string(self) -> str:
        """Format with the default pattern"""
        return self.format()

    # Python protocol

    def __str__(self) -> str:
        """String representation"""
        return self.format()

    def __format__(self, format_spec: str) -> str:
        """Format with the spec as a Time pattern

        Any non-empty spec is a pattern, so standard specs such as ">10" are
        rendered as literal text rather than as alignment.
        """
        return self.format(format_spec) if format_spec else self.format()

    def __repr__(self) -> str:
        return f"Time({self.format('HH:mm:ss.fff')!r}, mode={self._mode.value!r})"

    def __int__(self) -> int:
        return self._milliseconds

    def __float__(self) -> float:
        return float(self._milliseconds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return (self._milliseconds, self._mode) == (other._milliseconds, other._mode)

    def __hash__(self) -> int:
        return hash((self._milliseconds, self._mode))

    def __lt__(self, other: TimeInput) -> bool:
        return self.is_before(other)

    def __le__(self, other: TimeInput) -> bool:
        return self.is_same_or_before(other)

    def __gt__(self, other: TimeInput) -> bool:
        return self.is_after(other)

    def __ge__(self, other: TimeInput) -> bool:
        return self.is_same_or_after(other)

    def __add__(self, other: Union[int, float, "Time"]) -> "Time":
        """Add milliseconds or another Time"""
        if isinstance(other, Time) or _is_number(other):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Union[int, float, "Time"]) -> "Time":
        """Subtract milliseconds or another Time"""
        if isinstance(other, Time) or _is_number(other):
            return self.subtract(other)
        return NotImplemented
