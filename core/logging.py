"""
Structured logging configuration.

Provides JSON-formatted logs for better parsing and aggregation.
Nothing is configured on import; the embedding application calls
setup_logging() once at startup.
"""
import logging
import sys
import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from core.config import settings


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Engine events attach their counts, goals and modes through
    `extra={"extra_fields": {...}}`; those keys are merged at the top level.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.lineno}",
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra_fields = getattr(record, "extra_fields", None)
        if extra_fields:
            log_data.update(extra_fields)

        # Anything json cannot encode falls back to str()
        return json.dumps(log_data, default=str)


def setup_logging(level: Optional[str] = None, log_format: Optional[str] = None):
    """
    Configure application-wide logging.

    Uses JSON format in production, text format in development.
    Explicit arguments override the environment settings.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.INFO)
    fmt = (log_format or settings.LOG_FORMAT).lower()

    if fmt == "json" or settings.ENVIRONMENT == "production":
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    return root_logger
