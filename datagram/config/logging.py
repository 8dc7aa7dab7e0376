"""Logging helpers for applications embedding the datagram codec."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from logging import Handler
from logging.config import dictConfig
from logging.handlers import SysLogHandler
from pathlib import Path
from typing import Any

import msgspec

from .model import DatagramConfig

SYSLOG_SOCKETS: tuple[Path, ...] = (Path("/dev/log"), Path("/var/run/log"))

_RESERVED_LOG_KEYS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


def _serialise_value(value: Any) -> Any:
    """Serialise values for JSON logs; bytes become uppercase hex."""
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return f"[{' '.join(f'{b:02X}' for b in bytes(value))}]"
    return str(value)


class StructuredLogFormatter(logging.Formatter):
    """Emit one JSON object per log line."""

    PREFIX = "datagram."

    def format(self, record: logging.LogRecord) -> str:
        logger_name = record.name
        if logger_name.startswith(self.PREFIX):
            logger_name = logger_name[len(self.PREFIX) :]

        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": logger_name,
            "message": record.getMessage(),
        }

        extras = {
            key: _serialise_value(value)
            for key, value in record.__dict__.items()
            if key not in _RESERVED_LOG_KEYS and not key.startswith("_")
        }
        if extras:
            payload["extra"] = extras

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return msgspec.json.encode(payload).decode("utf-8")


def _syslog_socket() -> Path | None:
    for candidate in SYSLOG_SOCKETS:
        if candidate.exists():
            return candidate
    return None


def build_handler(target: str) -> Handler:
    """Return a syslog handler when requested and available, else stderr."""
    if target == "syslog":
        socket_path = _syslog_socket()
        if socket_path is not None:
            handler = SysLogHandler(address=str(socket_path), facility=SysLogHandler.LOG_USER)
            handler.ident = "datagram "
            return handler
    return logging.StreamHandler()


def configure_logging(config: DatagramConfig) -> None:
    """Configure the ``datagram`` logger hierarchy from *config*."""

    level_name = "DEBUG" if config.debug_logging else "INFO"

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structured": {
                    "()": "datagram.config.logging.StructuredLogFormatter",
                }
            },
            "handlers": {
                "datagram": {
                    "()": build_handler,
                    "target": config.log_target,
                    "level": level_name,
                    "formatter": "structured",
                }
            },
            "loggers": {
                "datagram": {
                    "level": level_name,
                    "handlers": ["datagram"],
                    "propagate": False,
                }
            },
        }
    )

    logging.getLogger("datagram").info("Logging configured at level %s", level_name)
