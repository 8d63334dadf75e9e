"""Time mode value object"""

from enum import Enum
from typing import Union

from clocktime.domain.exceptions import InvalidModeError


class TimeMode(Enum):
    """How a time value is interpreted"""

    CLOCK = "clock"
    DURATION = "duration"

    @classmethod
    def parse(cls, value: Union["TimeMode", str]) -> "TimeMode":
        """Resolve a TimeMode from an enum member or its string value"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidModeError(value) from None
