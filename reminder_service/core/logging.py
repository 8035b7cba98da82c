import logging
import sys
from typing import Optional

from reminder_service.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for the service process."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
