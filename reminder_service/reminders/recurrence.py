"""
Recurrence kinds and the occurrence-in-range predicates

Each predicate answers one question: does a rule fire at least once inside
the closed window [lo, hi]? They are pure functions of their arguments and
expect UTC-aware datetimes.
"""
from datetime import date, datetime, time, timedelta
from enum import Enum
import logging
from typing import Any, Optional

from dateutil.relativedelta import relativedelta

from reminder_service.utils.timezone import to_utc_aware
from .calendar_math import (
    ONE_DAY,
    at_time_of_day,
    days_in_month,
    full_days_between,
    in_range,
    same_month_and_year,
    time_of_day_in_range,
)
from .date_range import parse_instant
from .exceptions import InvalidAnchorError, InvalidDateRangeError

logger = logging.getLogger(__name__)

MIDNIGHT = time(0, 0, 0)


class RecurrenceKind(str, Enum):
    """Types of recurrence rules"""
    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    EVERY_N_DAYS = "every_n_days"
    MONTHLY = "monthly"

    @classmethod
    def _missing_(cls, value: object) -> Optional["RecurrenceKind"]:
        if not isinstance(value, str):
            return None
        normalized = value.strip().lower().replace("-", "_")
        # "custom" is the legacy name for an every-N-days rule
        if normalized == "custom":
            return cls.EVERY_N_DAYS
        for member in cls:
            if member.value == normalized:
                return member
        return None


def weekday_in_range(weekday: int, lo: datetime, hi: datetime, time_of_day: time = MIDNIGHT) -> bool:
    """Whether ISO weekday ``weekday`` (1=Mon..7=Sun) at ``time_of_day`` falls in [lo, hi]."""
    if full_days_between(lo, hi) >= 7:
        return True

    # Under 7 full days the window spans at most 8 calendar dates
    day = lo.date()
    last = hi.date()
    while True:
        if day.isoweekday() == weekday and in_range(at_time_of_day(day, time_of_day), lo, hi):
            return True
        if day >= last:
            return False
        day += ONE_DAY


def nth_day_in_range(n: int, anchor_start: datetime, lo: datetime, hi: datetime) -> bool:
    """Whether a rule firing every ``n`` days from ``anchor_start`` fires in [lo, hi].

    Occurrences keep the anchor's time of day, so a window that ends before
    that time on an occurrence date does not match.
    """
    if n < 1:
        raise ValueError(f"Cycle length must be at least 1, got {n}")
    if full_days_between(lo, hi) >= n:
        return True

    cycle = timedelta(days=n)
    if anchor_start >= lo:
        next_occurrence = anchor_start
    else:
        cycles_to_lo = -((anchor_start - lo) // cycle)  # ceil((lo - anchor) / cycle)
        next_occurrence = anchor_start + cycles_to_lo * cycle
    return next_occurrence <= hi


def _monthly_occurrence(year: int, month: int, day: int, time_of_day: time) -> datetime:
    # Day 31 lands on the last day of shorter months
    clamped = min(day, days_in_month(month, year))
    return at_time_of_day(date(year, month, clamped), time_of_day)


def day_of_month_in_range(day: int, lo: datetime, hi: datetime, time_of_day: time = MIDNIGHT) -> bool:
    """Whether day-of-month ``day`` at ``time_of_day`` falls in [lo, hi].

    Only the occurrence in lo's month and the one in the following month can
    be the first occurrence at or after lo; any window reaching further also
    contains the following month's occurrence.
    """
    current = _monthly_occurrence(lo.year, lo.month, day, time_of_day)
    if same_month_and_year(lo, hi):
        return in_range(current, lo, hi)

    following = date(lo.year, lo.month, 1) + relativedelta(months=1)
    upcoming = _monthly_occurrence(following.year, following.month, day, time_of_day)
    return in_range(current, lo, hi) or in_range(upcoming, lo, hi)


def anchor_of(reminder: Any) -> datetime:
    """The reminder's anchor start as a UTC-aware instant."""
    raw = getattr(reminder, "anchor_start", None)
    if raw is None:
        raise InvalidAnchorError(raw, "missing anchor start")
    return parse_instant(raw, error_cls=InvalidAnchorError)


def _weekly_weekday(reminder: Any, anchor: datetime) -> int:
    value = getattr(reminder, "recurrence_value", None)
    if isinstance(value, int) and 1 <= value <= 7:
        return value
    if value is not None:
        logger.warning(
            "Reminder %s has weekly value %r outside 1-7; using anchor weekday",
            getattr(reminder, "id", None), value,
        )
    return anchor.isoweekday()


def occurs_in_range(reminder: Any, lo: datetime, hi: datetime) -> bool:
    """
    Whether ``reminder`` has at least one occurrence in the closed window [lo, hi].

    Reminders with an unreadable anchor, an unknown recurrence kind or a
    broken every-N-days value are reported and treated as never occurring.
    Raises InvalidDateRangeError when lo is after hi.
    """
    lo = to_utc_aware(lo)
    hi = to_utc_aware(hi)
    if lo > hi:
        raise InvalidDateRangeError(lo, hi)
    reminder_id = getattr(reminder, "id", None)

    try:
        anchor = anchor_of(reminder)
    except InvalidAnchorError as e:
        logger.warning("Skipping reminder %s: %s", reminder_id, e)
        return False

    if anchor > hi:
        return False
    if in_range(anchor, lo, hi):
        return True

    raw_kind = getattr(reminder, "recurrence_kind", None)
    try:
        kind = RecurrenceKind(raw_kind)
    except ValueError:
        logger.warning("Reminder %s has unrecognized recurrence kind %r", reminder_id, raw_kind)
        return False

    anchor_time = anchor.time()

    if kind is RecurrenceKind.NONE:
        return False
    if kind is RecurrenceKind.DAILY:
        return time_of_day_in_range(anchor_time, lo, hi)
    if kind is RecurrenceKind.WEEKLY:
        return weekday_in_range(_weekly_weekday(reminder, anchor), lo, hi, anchor_time)
    if kind is RecurrenceKind.EVERY_N_DAYS:
        n = getattr(reminder, "recurrence_value", None)
        if not isinstance(n, int) or n < 1:
            logger.warning("Reminder %s has invalid every-N-days value %r", reminder_id, n)
            return False
        return nth_day_in_range(n, anchor, lo, hi)
    if kind is RecurrenceKind.MONTHLY:
        return day_of_month_in_range(anchor.day, lo, hi, anchor_time)
    raise AssertionError(f"Unhandled recurrence kind: {kind}")
