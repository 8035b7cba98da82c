from typing import Optional
from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReminderSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="REMINDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Project Information
    PROJECT_NAME: str = "Reminder Service"
    API_V1_STR: str = "/api/v1"

    # Database (defaults to a local SQLite file next to the working directory)
    DATABASE_URL: Optional[str] = None
    SQL_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    # Metrics
    METRICS_ENABLED: bool = False

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Optional[str]) -> str:
        if v is None or str(v).strip() == "":
            return "INFO"
        return str(v).strip().upper()

    @model_validator(mode="after")
    def _derive_database_url(self) -> "ReminderSettings":
        if not self.DATABASE_URL:
            db_path = Path.cwd() / "reminders.db"
            self.DATABASE_URL = f"sqlite:///{db_path}"
        return self


settings = ReminderSettings()
