"""
Instant parsing and the closed DateRange value
"""
from dataclasses import dataclass
from datetime import date, datetime, time
import re
from typing import Union

from dateutil.parser import isoparse

from reminder_service.utils.timezone import to_utc_aware
from .exceptions import InvalidDateRangeError, InvalidInstantError

InstantInput = Union[str, date, datetime]

# Calendar date in full (YYYY-MM-DD or YYYYMMDD), optionally followed by a time
_FULL_DATE_PREFIX = re.compile(r"^\d{4}(-?)\d{2}\1\d{2}(?:$|[T ])")


def parse_instant(value: InstantInput, error_cls: type = InvalidInstantError) -> datetime:
    """Normalize a datetime, date or ISO 8601 string into a UTC-aware instant.

    Both the basic (``20250101T000000Z``) and extended
    (``2025-01-01T00:00:00+00:00``) ISO 8601 forms are accepted. Values without
    an offset are taken as UTC. A bare full date means midnight UTC; reduced
    precision (``2025``, ``2025-02``), week dates and ordinal dates are rejected.
    """
    if isinstance(value, datetime):
        return to_utc_aware(value)
    if isinstance(value, date):
        return to_utc_aware(datetime.combine(value, time.min))
    if not isinstance(value, str):
        raise error_cls(value, f"unsupported type {type(value).__name__}")

    raw = value.strip()
    if not raw:
        raise error_cls(value, "empty string")
    if not _FULL_DATE_PREFIX.match(raw):
        raise error_cls(value, "expected a full calendar date")
    try:
        parsed = isoparse(raw)
    except (ValueError, OverflowError) as e:
        raise error_cls(value, str(e)) from e
    return to_utc_aware(parsed)


@dataclass(frozen=True)
class DateRange:
    """Closed interval [lo, hi] of UTC instants; both ends inclusive."""

    lo: datetime
    hi: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "lo", to_utc_aware(self.lo))
        object.__setattr__(self, "hi", to_utc_aware(self.hi))
        if self.lo > self.hi:
            raise InvalidDateRangeError(self.lo, self.hi)

    @classmethod
    def parse(cls, start: InstantInput, end: InstantInput) -> "DateRange":
        return cls(parse_instant(start), parse_instant(end))
