"""Data model for datagram codec configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..const import (
    DEFAULT_ALLOW_TRAILING_SLACK,
    DEFAULT_DEBUG_LOGGING,
    DEFAULT_LOG_TARGET,
    DEFAULT_MAX_LENGTH,
    DEFAULT_POOL_MAX_BUFFER_BYTES,
    DEFAULT_POOL_MAX_IDLE,
    LOG_TARGETS,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DatagramConfig:
    """Strongly typed configuration for codecs built via ``from_config``."""

    max_length: int = DEFAULT_MAX_LENGTH
    charset: str | None = None
    allow_trailing_slack: bool = DEFAULT_ALLOW_TRAILING_SLACK
    pool_max_idle: int = DEFAULT_POOL_MAX_IDLE
    pool_max_buffer_bytes: int = DEFAULT_POOL_MAX_BUFFER_BYTES
    debug_logging: bool = DEFAULT_DEBUG_LOGGING
    log_target: str = DEFAULT_LOG_TARGET

    def __post_init__(self) -> None:
        if self.pool_max_idle < 0:
            raise ValueError("pool_max_idle must not be negative")
        if self.pool_max_buffer_bytes < 0:
            raise ValueError("pool_max_buffer_bytes must not be negative")
        if self.log_target not in LOG_TARGETS:
            raise ValueError(f"log_target must be one of {', '.join(LOG_TARGETS)}")
        if self.charset is not None:
            self.charset = self.charset.strip() or None
        if self.allow_trailing_slack:
            logger.info("Trailing slack after declared datagram length will be discarded.")
