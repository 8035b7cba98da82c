"""Shared builders for reminder engine tests."""

from datetime import datetime, timezone
from types import SimpleNamespace


def utc(year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> datetime:
    """Create a UTC datetime for testing."""
    return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)


def make_reminder(kind, anchor, value=None, reminder_id: int = 1) -> SimpleNamespace:
    """Plain stand-in for a stored reminder row."""
    return SimpleNamespace(
        id=reminder_id,
        owner="tester",
        text="Take medication",
        recurrence_kind=kind,
        recurrence_value=value,
        anchor_start=anchor,
    )
