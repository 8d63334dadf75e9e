"""Time unit value object"""

from enum import Enum
from typing import Dict, Union

from clocktime.domain.exceptions import InvalidUnitError

SECOND_MS = 1000
MINUTE_MS = 60 * SECOND_MS
HOUR_MS = 60 * MINUTE_MS
DAY_MS = 24 * HOUR_MS


class TimeUnit(Enum):
    """Canonical time units with their size in milliseconds"""

    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"

    @property
    def milliseconds(self) -> int:
        """Get unit size in milliseconds"""
        return UNIT_MILLISECONDS[self]

    def to_milliseconds(self, value: Union[int, float]) -> Union[int, float]:
        """Convert an amount of this unit to milliseconds"""
        return value * self.milliseconds

    def from_milliseconds(self, milliseconds: int) -> Union[int, float]:
        """Convert milliseconds to an exact amount of this unit"""
        if self is TimeUnit.MILLISECONDS:
            return milliseconds
        return milliseconds / self.milliseconds

    @classmethod
    def parse(cls, unit: Union["TimeUnit", str]) -> "TimeUnit":
        """Resolve a unit from an enum member or a singular/plural alias"""
        if isinstance(unit, cls):
            return unit
        if isinstance(unit, str) and unit in UNIT_ALIASES:
            return UNIT_ALIASES[unit]
        raise InvalidUnitError(unit)


UNIT_MILLISECONDS: Dict[TimeUnit, int] = {
    TimeUnit.HOURS: HOUR_MS,
    TimeUnit.MINUTES: MINUTE_MS,
    TimeUnit.SECONDS: SECOND_MS,
    TimeUnit.MILLISECONDS: 1,
}

UNIT_ALIASES: Dict[str, TimeUnit] = {
    "hour": TimeUnit.HOURS,
    "hours": TimeUnit.HOURS,
    "minute": TimeUnit.MINUTES,
    "minutes": TimeUnit.MINUTES,
    "second": TimeUnit.SECONDS,
    "seconds": TimeUnit.SECONDS,
    "millisecond": TimeUnit.MILLISECONDS,
    "milliseconds": TimeUnit.MILLISECONDS,
}
