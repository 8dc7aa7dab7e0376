"""Configuration helpers for the datagram codec."""

from .model import DatagramConfig
from .schema import DatagramConfigSchema
from .settings import load_config
from . import logging  # noqa: F401  # pyright: ignore[reportUnusedImport]

__all__ = ["DatagramConfig", "DatagramConfigSchema", "load_config", "logging"]
