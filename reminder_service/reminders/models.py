"""
Reminder model - one row per reminder, recurrence rule stored inline
"""
from sqlalchemy import Column, String, DateTime, Integer, Index

from reminder_service.db.base import Base
from reminder_service.utils.timezone import utcnow_naive
from .recurrence import RecurrenceKind


class Reminder(Base):
    """Reminder with an anchor start and an optional recurrence rule"""
    __tablename__ = "reminders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner = Column(String, nullable=False, index=True)
    text = Column(String, nullable=False)

    # Recurrence rule: kind is stored as plain text so unknown values survive a read
    recurrence_kind = Column(String, nullable=False, default=RecurrenceKind.NONE.value)
    recurrence_value = Column(Integer, nullable=True)  # ISO weekday (weekly) or N (every_n_days)

    anchor_start = Column(DateTime, nullable=False, index=True)  # First occurrence, UTC-naive

    created_at = Column(DateTime, default=utcnow_naive, nullable=False)
    updated_at = Column(DateTime, default=utcnow_naive, onupdate=utcnow_naive, nullable=False)

    __table_args__ = (
        Index("ix_reminders_owner_anchor", "owner", "anchor_start"),
    )

    def __repr__(self) -> str:
        return (
            f"<Reminder id={self.id} kind={self.recurrence_kind} "
            f"value={self.recurrence_value} anchor={self.anchor_start}>"
        )
