"""
Structured Logging

JSON-formatted log output with the request's resolved locale attached to
every record emitted while that request is being handled.
"""

import json
import logging
from contextvars import ContextVar
from datetime import datetime, timezone

# Context variable for the resolved locale (per request, task-local)
locale_var: ContextVar[str] = ContextVar("locale", default="")


class LocaleFilter(logging.Filter):
    """Logging filter to add the resolved locale to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.locale = locale_var.get("")
        return True


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "locale": getattr(record, "locale", ""),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key in ["method", "path", "accept_language"]:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        return json.dumps(log_data, ensure_ascii=False)


def setup_structured_logging(log_level: str = "INFO", json_format: bool = True) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_format: Use JSON formatter (True for production)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - [%(locale)s] %(message)s"))

    handler.addFilter(LocaleFilter())
    root_logger.addHandler(handler)

    logging.getLogger("multilingual").setLevel(getattr(logging, log_level.upper()))


def get_locale() -> str:
    """Get the locale resolved for the current request, "" outside a request."""
    return locale_var.get("")
