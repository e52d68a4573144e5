"""Structured Logging: JSON formatter and setup for ticketcore consumers.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (ticket_status, error_code, field) surfaced when present
    - JSON format by default, human-readable when fmt != "json"

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - configure_logging() called by the host program; repeat calls replace the handler
"""

import logging
import json
from datetime import datetime, timezone

from ticketcore.config import Settings, get_settings

EXTRA_FIELDS = ("ticket_status", "error_code", "field")

_installed_handler: logging.Handler | None = None


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging. Replaces the handler installed by an earlier call."""
    global _installed_handler
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    if _installed_handler is not None:
        logging.root.removeHandler(_installed_handler)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _installed_handler = handler
    return handler


def configure_logging(settings: Settings | None = None) -> logging.Handler:
    """Entry point for host programs: logging from LOG_LEVEL / LOG_FORMAT."""
    settings = settings or get_settings()
    return setup_logging(settings.log_level, settings.log_format)
