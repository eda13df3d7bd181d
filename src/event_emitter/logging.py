"""Structured JSON logging helpers for the event emitter."""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from logging import Logger
from typing import Dict

_LOGGER_NAME = "event_emitter"


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        payload = {
            "ts": ts,
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in ("event", "payload", "listener", "error"):
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def get_logger(name: str | None = None, level: str | None = None) -> Logger:
    """Return a package level logger configured for structured JSON output.

    ``level`` wins over the ``LOG_LEVEL`` environment variable, which in turn
    defaults to INFO.
    """

    logger_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        logger.addHandler(handler)
        if level is None:
            level = os.environ.get("LOG_LEVEL", "INFO")
    if level is not None:
        resolved = logging.getLevelName(level.strip().upper())
        logger.setLevel(resolved if isinstance(resolved, int) else logging.INFO)
    return logger


def log_event(
    logger: Logger, event: str, payload: Dict[str, object] | None = None
) -> None:
    """Log an event payload in a consistent JSON format."""

    payload = payload or {}
    extra = {"event": event, "payload": payload}
    logger.info(f"event={event}", extra=extra)
