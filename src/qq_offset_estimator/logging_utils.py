"""Structured logging helpers."""

from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler
from typing import Any

from .config import LoggingConfig

# Attributes present on every LogRecord; anything else came from ``extra=``.
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}

PLAIN_FORMAT = "%(levelname)s %(name)s %(message)s"


def record_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Return the ``extra=`` fields attached to ``record``."""

    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object with its structured fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {"level": record.levelname, "name": record.name, "message": record.getMessage()}
        payload.update(record_fields(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=repr)


def _handler(config: LoggingConfig) -> logging.Handler:
    if not config.log_file:
        return logging.StreamHandler()
    return RotatingFileHandler(config.log_file, maxBytes=config.max_bytes, backupCount=config.backup_count)


def configure_logging(config: LoggingConfig) -> None:
    """Install a single handler on the root logger unless one is already present."""

    if logging.getLogger().handlers:
        return
    handler = _handler(config)
    handler.setFormatter(JsonFormatter() if config.json_format else logging.Formatter(PLAIN_FORMAT))
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, handlers=[handler])
