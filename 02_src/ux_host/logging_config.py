"""Structured logging configuration for the UX host."""

import json
import logging
import logging.config
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .config import Settings, load_settings

# LogRecord attribute carrying channel/method/payload details
CONTEXT_ATTR = "context"


class JSONFormatter(logging.Formatter):
    """One JSON object per record; bridge context goes under "context"."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        context = getattr(record, CONTEXT_ATTR, None)
        if context is not None:
            log_data[CONTEXT_ATTR] = context

        # Decoded payloads may hold arbitrary values
        return json.dumps(log_data, default=str, ensure_ascii=False)


def build_logging_config(log_level: str, log_file: str) -> dict[str, Any]:
    """dictConfig schema: JSON to stdout and to a rotating file."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {"()": JSONFormatter},
        },
        "handlers": {
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "filename": log_file,
                "maxBytes": 10 * 1024 * 1024,  # 10 MB
                "backupCount": 5,
                "formatter": "json",
                "encoding": "utf-8",
            },
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {
            "level": log_level.upper(),
            "handlers": ["file", "console"],
        },
    }


def setup_logging(settings: Settings | None = None) -> None:
    """
    Setup structured logging for the application.

    Args:
        settings: Resolved settings; read from the environment when omitted
                  (LOG_LEVEL, LOG_FILE).
    """
    if settings is None:
        settings = load_settings()

    Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config(settings.log_level, settings.log_file))


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically for __name__)."""
    return logging.getLogger(name)
