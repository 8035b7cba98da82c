from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from reminder_service.db.session import get_db
from reminder_service.utils.timezone import to_utc_aware
from .exceptions import ReminderEngineError
from .repository import SqlReminderStore, get_reminder
from .schemas import ReminderRead
from .service import ReminderService


router = APIRouter()


def _to_read(r) -> ReminderRead:
    item = ReminderRead.model_validate(r)
    # Stored timestamps are UTC-naive
    item.anchor_start = to_utc_aware(item.anchor_start)
    item.created_at = to_utc_aware(item.created_at)
    item.updated_at = to_utc_aware(item.updated_at)
    return item


@router.get("/health")
def health_check():
    return {"status": "healthy", "service": "reminders"}


@router.get("/", response_model=List[ReminderRead])
def list_reminders_in_range_endpoint(
    start: str = Query(..., description="Range start, ISO 8601 UTC (e.g. 20250101T000000Z)"),
    end: str = Query(..., description="Range end, ISO 8601 UTC (inclusive)"),
    db: Session = Depends(get_db),
):
    service = ReminderService(SqlReminderStore(db))
    try:
        items = service.find_occurring_in_range(start, end)
    except ReminderEngineError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return [_to_read(i) for i in items]


@router.get("/{reminder_id}", response_model=ReminderRead)
def get_reminder_endpoint(reminder_id: int, db: Session = Depends(get_db)):
    r = get_reminder(db, reminder_id)
    if not r:
        raise HTTPException(status_code=404, detail="Reminder not found")
    return _to_read(r)
