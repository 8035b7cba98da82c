"""
Errors raised by the reminder range engine
"""
from typing import Any


class ReminderEngineError(ValueError):
    """Base class for reminder engine errors"""


class InvalidInstantError(ReminderEngineError):
    """A date/time input could not be parsed into a UTC instant"""

    def __init__(self, value: Any, reason: str = "") -> None:
        self.value = value
        message = f"Invalid date/time value: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidAnchorError(InvalidInstantError):
    """A stored reminder's anchor start could not be interpreted"""


class InvalidDateRangeError(ReminderEngineError):
    """Range start falls after range end"""

    def __init__(self, lo: Any, hi: Any) -> None:
        self.lo = lo
        self.hi = hi
        super().__init__(f"Invalid date range: start {lo!s} is after end {hi!s}")
