"""
Schemas for reading reminders
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ReminderRead(BaseModel):
    """Schema for reading a reminder"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    owner: str
    text: str
    recurrence_kind: str
    recurrence_value: Optional[int] = None
    anchor_start: datetime
    created_at: datetime
    updated_at: datetime
