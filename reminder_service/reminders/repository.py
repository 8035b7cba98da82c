from datetime import datetime
from typing import List, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session

from reminder_service.utils.timezone import to_utc_naive
from .models import Reminder


class ReminderStore(Protocol):
    """Read-only source of candidate reminders for range queries."""

    def reminders_with_anchor_at_or_before(self, instant: datetime) -> List[Reminder]:
        ...


class SqlReminderStore:
    """ReminderStore backed by the reminders table."""

    def __init__(self, db: Session):
        self.db = db

    def reminders_with_anchor_at_or_before(self, instant: datetime) -> List[Reminder]:
        stmt = (
            select(Reminder)
            .where(Reminder.anchor_start <= to_utc_naive(instant))
            .order_by(Reminder.anchor_start.asc(), Reminder.id.asc())
        )
        return list(self.db.execute(stmt).scalars())


def get_reminder(db: Session, reminder_id: int) -> Optional[Reminder]:
    return db.get(Reminder, reminder_id)
