"""Datagram wire format: layout constants, frame model and codec."""

from . import protocol
from .codec import DatagramCodec, decode, default_codec, encode, peek_declared_length
from .encoding import bytes_from_uint32, uint32_from_bytes
from .frame import Datagram
from .protocol import DatagramType
from .stream import DatagramStreamReader

__all__ = [
    "protocol",
    "Datagram",
    "DatagramCodec",
    "DatagramStreamReader",
    "DatagramType",
    "bytes_from_uint32",
    "uint32_from_bytes",
    "default_codec",
    "encode",
    "decode",
    "peek_declared_length",
]
