import logging

from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

from reminder_service.core.config import settings
from reminder_service.core.logging import configure_logging
from reminder_service.db.session import init_db
from reminder_service.reminders.api import router as reminders_router

logger = logging.getLogger(__name__)


def create_app(create_tables: bool = True) -> FastAPI:
    configure_logging()
    if create_tables:
        init_db()
        logger.info("Reminder tables ready: %s", settings.DATABASE_URL)

    app = FastAPI(title=settings.PROJECT_NAME)
    app.include_router(reminders_router, prefix=f"{settings.API_V1_STR}/reminders", tags=["reminders"])
    if settings.METRICS_ENABLED:
        Instrumentator().instrument(app).expose(app, endpoint="/metrics")
    return app
