"""
Structured JSON logging utilities for cloud environments.

Permission fetches happen once per session transition, so the useful signal
is a single line per fetch with the session context attached. This module
formats those lines as JSON objects that log aggregators can index.

The store and client log under the ``crm_permissions`` logger hierarchy
(``crm_permissions.store``, ``crm_permissions.client``). The library never
installs handlers itself; an application opts in by configuring the
package logger once at startup:

    >>> import logging
    >>> from crm_permissions.logging_utils import configure_structured_logging
    >>> logger = configure_structured_logging(logging.INFO, "crm_permissions")

Every store record then reaches stdout as one JSON line carrying the
``store`` name and ``session_status``, plus the error ``details`` when a
fetch falls back to read-only permissions.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

_STANDARD_ATTRS = {
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "taskName", "message",
}


class StructuredJsonFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.

    Outputs logs as single-line JSON objects with consistent fields:
    - timestamp: ISO 8601 format in UTC
    - level: Log level (INFO, WARNING, ERROR, etc.)
    - logger: Logger name
    - message: Log message
    - Additional context fields from extra dict
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_obj: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key in _STANDARD_ATTRS or key.startswith("_"):
                continue
            try:
                json.dumps(value)
                log_obj[key] = value
            except (TypeError, ValueError):
                log_obj[key] = str(value)

        return json.dumps(log_obj, default=str)


def configure_structured_logging(
    level: int = logging.INFO,
    logger_name: str | None = None,
) -> logging.Logger:
    """
    Configure structured JSON logging on stdout.

    Args:
        level: Logging level (default: INFO)
        logger_name: Specific logger to configure (default: root logger)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(logger_name)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredJsonFormatter())

    logger.addHandler(handler)
    logger.setLevel(level)

    return logger


def get_permissions_logger(name: str) -> logging.Logger:
    """
    Get a logger for permission components with consistent naming.

    Args:
        name: Component name (e.g., 'store', 'client')

    Returns:
        Logger instance with name 'crm_permissions.{name}'
    """
    return logging.getLogger(f"crm_permissions.{name}")


class PermissionsLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that adds fixed context to all log messages.

    The store uses it to tag every record with the current session status.
    """

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        """Add extra context to log record."""
        extra = dict(self.extra or {})
        extra.update(kwargs.get("extra", {}))
        kwargs["extra"] = extra
        return msg, kwargs
