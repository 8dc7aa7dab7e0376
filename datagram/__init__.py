"""Fixed-layout binary datagram framing."""

__version__ = "1.0.0"

import logging

from .protocol import (
    Datagram,
    DatagramCodec,
    DatagramStreamReader,
    DatagramType,
    bytes_from_uint32,
    decode,
    default_codec,
    encode,
    peek_declared_length,
    uint32_from_bytes,
)
from .errors import MalformedFrame, PayloadTooLarge
from .config import DatagramConfig, load_config

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    "Datagram",
    "DatagramCodec",
    "DatagramConfig",
    "DatagramStreamReader",
    "DatagramType",
    "MalformedFrame",
    "PayloadTooLarge",
    "bytes_from_uint32",
    "uint32_from_bytes",
    "decode",
    "default_codec",
    "encode",
    "load_config",
    "peek_declared_length",
]
