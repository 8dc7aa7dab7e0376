"""Default values shared across the datagram package."""

from __future__ import annotations

from typing import Final

DEFAULT_MAX_LENGTH: Final[int] = 8 * 1024 * 1024
DEFAULT_ALLOW_TRAILING_SLACK: Final[bool] = False
DEFAULT_POOL_MAX_IDLE: Final[int] = 16
DEFAULT_POOL_MAX_BUFFER_BYTES: Final[int] = 1024 * 1024
DEFAULT_DEBUG_LOGGING: Final[bool] = False
DEFAULT_LOG_TARGET: Final[str] = "stream"
LOG_TARGETS: Final[tuple[str, ...]] = ("stream", "syslog")

ENV_PREFIX: Final[str] = "DATAGRAM_"

__all__ = [
    "DEFAULT_MAX_LENGTH",
    "DEFAULT_ALLOW_TRAILING_SLACK",
    "DEFAULT_POOL_MAX_IDLE",
    "DEFAULT_POOL_MAX_BUFFER_BYTES",
    "DEFAULT_DEBUG_LOGGING",
    "DEFAULT_LOG_TARGET",
    "LOG_TARGETS",
    "ENV_PREFIX",
]
