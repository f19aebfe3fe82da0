"""Logging helpers for the DIS codec."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from enum import IntEnum
from logging import Handler
from logging.config import dictConfig
from logging.handlers import SysLogHandler
from pathlib import Path
from typing import Any

import msgspec

from .model import CodecConfig

SYSLOG_SOCKET = Path("/dev/log")

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRIBUTES = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


def _log_value(value: Any) -> Any:
    """Render an ``extra`` value: enums by name, octets as spaced hex."""
    if isinstance(value, IntEnum):
        return value.name
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return f"[{bytes(value).hex(' ').upper()}]"
    return str(value)


class StructuredLogFormatter(logging.Formatter):
    """One JSON object per record, logger names relative to ``discodec``."""

    PREFIX = "discodec."

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name.removeprefix(self.PREFIX),
            "message": record.getMessage(),
        }

        extras = {
            key: _log_value(value)
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRIBUTES and not key.startswith("_")
        }
        if extras:
            payload["extra"] = extras
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return msgspec.json.encode(payload).decode("utf-8")


def _build_handler(use_syslog: bool = False) -> Handler:
    if use_syslog and SYSLOG_SOCKET.exists():
        syslog_handler = SysLogHandler(address=str(SYSLOG_SOCKET), facility=SysLogHandler.LOG_USER)
        syslog_handler.ident = "discodec "
        return syslog_handler
    return logging.StreamHandler()


def configure_logging(config: CodecConfig) -> None:
    """Configure root logging based on codec settings."""

    level_name = "DEBUG" if config.debug_logging else "INFO"

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structured": {
                    "()": "discodec.config.logging.StructuredLogFormatter",
                }
            },
            "handlers": {
                "discodec": {
                    "()": _build_handler,
                    "use_syslog": config.log_to_syslog,
                    "level": level_name,
                    "formatter": "structured",
                }
            },
            "root": {
                "level": level_name,
                "handlers": ["discodec"],
            },
        }
    )

    logging.getLogger("discodec").info("Logging configured at level %s", level_name)
