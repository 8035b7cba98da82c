"""
Calendar primitives and the time-of-day matcher

All instants are UTC-aware datetimes; callers normalize before calling in.
"""
from datetime import date, datetime, time, timedelta, timezone as dt_timezone

ONE_DAY = timedelta(days=1)


def full_days_between(a: datetime, b: datetime) -> int:
    """Whole 24h days between two instants, regardless of argument order."""
    return abs(b - a) // ONE_DAY


def same_month_and_year(a: datetime, b: datetime) -> bool:
    return a.year == b.year and a.month == b.month


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """Number of days in a Gregorian month."""
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def at_time_of_day(day: date, time_of_day: time) -> datetime:
    """UTC instant on the given calendar date at a wall-clock time."""
    return datetime.combine(day, time_of_day.replace(tzinfo=None), tzinfo=dt_timezone.utc)


def in_range(instant: datetime, lo: datetime, hi: datetime) -> bool:
    return lo <= instant <= hi


def time_of_day_in_range(time_of_day: time, lo: datetime, hi: datetime) -> bool:
    """
    Whether a daily wall-clock time lands on an instant inside [lo, hi].

    A range covering a full day always contains every time of day. Shorter
    ranges touch at most two calendar dates, so only the candidates on lo's
    date and hi's date need checking.
    """
    if full_days_between(lo, hi) >= 1:
        return True

    if in_range(at_time_of_day(lo.date(), time_of_day), lo, hi):
        return True
    if lo.date() == hi.date():
        return False
    # Range crosses midnight
    return in_range(at_time_of_day(hi.date(), time_of_day), lo, hi)
