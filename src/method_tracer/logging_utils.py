"""Logging helpers: process configuration and the default trace output sink."""

from __future__ import annotations

import json
import logging
from threading import Lock
from typing import TYPE_CHECKING

from .config import get_settings

if TYPE_CHECKING:
    from .models import CallRecord

_CONFIG_LOCK = Lock()
_CONFIGURED = False

TRACE_LOGGER_NAME = "method_tracer.trace"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if hasattr(record, "event"):
            payload["event"] = record.event
        if hasattr(record, "payload"):
            payload["payload"] = record.payload
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(level: int | str | None = None) -> None:
    """Configure the root logger once, in plain or JSON format."""

    global _CONFIGURED
    with _CONFIG_LOCK:
        if _CONFIGURED:
            return

        settings = get_settings()
        level = level if level is not None else settings.log_level
        if settings.log_format == "json":
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            logging.basicConfig(level=level, handlers=[handler])
        else:
            logging.basicConfig(level=level, format="[%(levelname)s] %(name)s - %(message)s")
        _CONFIGURED = True


def log_event(event: str, payload: dict | None = None, level: int = logging.INFO) -> None:
    logger = logging.getLogger("method_tracer.observability")
    logger.log(level, json.dumps(payload or {}, ensure_ascii=False), extra={"event": event, "payload": payload or {}})


class LoggingSink:
    """Default output sink: one log line per recorded call."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(TRACE_LOGGER_NAME)

    def __call__(self, level: int, line: str, record: "CallRecord | None" = None) -> None:
        extra = {"event": "method_traced", "payload": record.as_dict()} if record is not None else None
        self.logger.log(level, line, extra=extra)


__all__ = ["JSONFormatter", "LoggingSink", "TRACE_LOGGER_NAME", "configure_logging", "log_event"]
