"""Domain exceptions for time values"""


class TimeError(ValueError):
    """Base error for invalid time values and operations"""


class TimeTypeError(TimeError, TypeError):
    """Input is not a string, number or Time"""


class NullTimeInputError(TimeTypeError):
    """None was given where a time input is required"""


class TimeFormatError(TimeError):
    """Time string is malformed"""


class TimeRangeError(TimeError):
    """A time field is outside its legal range"""


class ModeMismatchError(TimeError):
    """Operands have different modes"""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Cannot combine {expected} time with {actual} time")


class InvalidUnitError(TimeError):
    """Unit token is not recognized"""

    def __init__(self, unit: object) -> None:
        self.unit = unit
        super().__init__(f"Invalid time unit: {unit}")


class InvalidModeError(TimeError):
    """Mode value is not recognized"""

    def __init__(self, mode: object) -> None:
        self.mode = mode
        super().__init__(f"Invalid time mode: {mode}")


class InvalidOperationError(TimeError):
    """Operation does not apply to this kind of time value"""
