"""Settings loader for the datagram codec.

Configuration is read from ``DATAGRAM_*`` environment variables and
validated through :class:`DatagramConfigSchema`; unset variables fall back
to the defaults in :mod:`datagram.const`.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Final

from ..const import ENV_PREFIX
from .model import DatagramConfig
from .schema import DatagramConfigSchema

logger = logging.getLogger(__name__)

# Environment variable suffix -> config field.
_ENV_FIELDS: Final[dict[str, str]] = {
    "MAX_LENGTH": "max_length",
    "CHARSET": "charset",
    "ALLOW_TRAILING_SLACK": "allow_trailing_slack",
    "POOL_MAX_IDLE": "pool_max_idle",
    "POOL_MAX_BUFFER_BYTES": "pool_max_buffer_bytes",
    "DEBUG": "debug_logging",
    "LOG_TARGET": "log_target",
}


def _load_raw_config(environ: Mapping[str, str]) -> dict[str, str]:
    raw: dict[str, str] = {}
    for suffix, field_name in _ENV_FIELDS.items():
        value = environ.get(ENV_PREFIX + suffix)
        if value is None or not value.strip():
            continue
        raw[field_name] = value.strip()
    return raw


def load_config(environ: Mapping[str, str] | None = None) -> DatagramConfig:
    """Load configuration from the environment.

    Raises:
        marshmallow.ValidationError: a variable is present but invalid.
    """
    raw = _load_raw_config(os.environ if environ is None else environ)
    config: DatagramConfig = DatagramConfigSchema().load(raw)
    logger.debug("Loaded datagram config: %s", config)
    return config


__all__ = ["DatagramConfig", "load_config"]
