import os
from datetime import datetime, timezone

os.environ.setdefault("REMINDER_DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from reminder_service.db.base import Base
from reminder_service.reminders.models import Reminder


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def add_reminder(db_session):
    """Insert a reminder row; anchors are stored UTC-naive."""

    def _add(kind: str, anchor: datetime, value=None, owner: str = "tester", text: str = "Reminder") -> Reminder:
        row = Reminder(
            owner=owner,
            text=text,
            recurrence_kind=kind,
            recurrence_value=value,
            anchor_start=anchor.astimezone(timezone.utc).replace(tzinfo=None),
        )
        db_session.add(row)
        db_session.commit()
        db_session.refresh(row)
        return row

    return _add
