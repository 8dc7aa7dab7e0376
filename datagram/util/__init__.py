"""General-purpose utilities for the datagram package."""

from __future__ import annotations

import logging

from .pool import BufferPool
from .text import TextEncoding, new_id

__all__ = [
    "BufferPool",
    "TextEncoding",
    "new_id",
    "log_hexdump",
]


def log_hexdump(logger_instance: logging.Logger, level: int, label: str, data: bytes) -> None:
    """Log binary data as a single hex line.

    Format: [LABEL] LEN=10 HEX=00 01 02 ...
    """
    if not logger_instance.isEnabledFor(level):
        return

    hex_str = " ".join(f"{b:02X}" for b in data)
    logger_instance.log(level, "[%s] LEN=%d HEX=%s", label, len(data), hex_str)
