"""
Reminder Service Application Package

Reminders with recurrence rules plus the engine that decides whether a
reminder occurs inside a queried date/time window.
"""

__version__ = "0.1.0"
