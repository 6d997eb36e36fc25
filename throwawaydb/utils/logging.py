"""
Structured logging utilities for throwawaydb.

The library itself only obtains loggers; applications and test suites opt in to
`configure_logging`, which installs a human-readable formatter by default and an
optional JSON formatter for CI pipelines. Either way, the handler carries a
filter that masks passwords in connection strings before anything is emitted.

Usage:
    from throwawaydb.utils.logging import configure_logging, get_logger

    configure_logging(level="DEBUG", json_logs=False)
    log = get_logger(__name__)
    log.info("created", extra={"database": "throwawaydb0123456789"})
"""

from __future__ import annotations

import json
import logging
import logging.config
import re
from typing import Any, Dict, Optional

from throwawaydb.config import get_settings
from throwawaydb.domain.models import REDACTED_PASSWORD

_PASSWORD_PAIR = re.compile(r"(password\s*=\s*)('(?:[^'\\]|\\.)*'|\S+)", re.IGNORECASE)
_URI_CREDENTIALS = re.compile(r"(postgres(?:ql)?://[^:/@\s]+:)([^@\s]+)(@)")

# Attributes every LogRecord carries; anything else arrived through `extra=`.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "extra"}


def redact(text: str) -> str:
    """Mask passwords in conninfo strings and postgresql:// URIs within `text`."""
    text = _PASSWORD_PAIR.sub(lambda m: m.group(1) + REDACTED_PASSWORD, text)
    return _URI_CREDENTIALS.sub(lambda m: m.group(1) + REDACTED_PASSWORD + m.group(3), text)


class RedactPasswordFilter(logging.Filter):
    """Rewrite a record's message so no connection password reaches a handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        cleaned = redact(message)
        if cleaned != message:
            record.msg = cleaned
            record.args = None
        return True


def _json_formatter(record: logging.LogRecord) -> str:
    """Render a log record as JSON string."""
    payload: Dict[str, Any] = {
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
    }
    if record.exc_info:
        payload["exc_info"] = redact(logging.Formatter().formatException(record.exc_info))
    if record.stack_info:
        payload["stack_info"] = record.stack_info
    for key, value in vars(record).items():
        if key not in _RESERVED_ATTRS and not key.startswith("_"):
            payload[key] = value
    if hasattr(record, "extra") and isinstance(record.extra, dict):
        payload.update(record.extra)
    return json.dumps(payload, default=str)


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        return _json_formatter(record)


def configure_logging(
    level: Optional[str] = None,
    json_logs: Optional[bool] = None,
    force: bool = True,
) -> None:
    """
    Configure root logging.

    Parameters
    ----------
    level : str, optional
        Logging level name (e.g., "DEBUG", "INFO", "WARNING"). Defaults to
        `Settings.log_level`.
    json_logs : bool, optional
        Whether to emit logs as JSON. If False, uses a concise human formatter.
        Defaults to `Settings.json_logs`.
    force : bool
        Whether to replace handlers a host application already installed. When
        False and the root logger has handlers, only the level is applied.
    """
    settings = get_settings()
    level = (level or settings.log_level).upper()
    if json_logs is None:
        json_logs = settings.json_logs

    root = logging.getLogger()
    if not force and root.handlers:
        root.setLevel(level)
        return

    formatter_name = "json" if json_logs else "console"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "redact": {"()": RedactPasswordFilter},
            },
            "formatters": {
                "console": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
                "json": {
                    "()": JsonFormatter,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": formatter_name,
                    "filters": ["redact"],
                    "level": level,
                }
            },
            "root": {
                "handlers": ["default"],
                "level": level,
            },
        }
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the given name. If name is None, returns the root logger.
    """
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "JsonFormatter", "RedactPasswordFilter", "redact"]
