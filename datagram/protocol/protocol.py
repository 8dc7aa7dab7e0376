"""Wire layout of a datagram.

All multi-byte integers are big-endian::

    offset  size  field
    0       1     version
    1       4     payload length (unsigned)
    5       1     type
    6       10    charset name (zero-padded)
    16      40    id (zero-padded)
    56      N     body
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final

from construct import Bytes, Int8ub, Int32ub, Struct as BinStruct  # type: ignore

from ..const import DEFAULT_MAX_LENGTH

VERSION_INDEX: Final[int] = 0
LEN_OFFSET: Final[int] = 1
LEN_LIMIT: Final[int] = 4
TYPE_INDEX: Final[int] = 5
CHARSET_OFFSET: Final[int] = 6
CHARSET_LEN: Final[int] = 10
ID_OFFSET: Final[int] = 16
ID_LEN: Final[int] = 40
HEADER_LEN: Final[int] = 56

UINT8_MASK: Final[int] = 0xFF
UINT32_MASK: Final[int] = 0xFFFFFFFF
UINT32_MAX: Final[int] = UINT32_MASK
PAD_BYTE: Final[bytes] = bytes([0])

# Global maximum size of a whole frame, header included.
MAX_LENGTH: Final[int] = DEFAULT_MAX_LENGTH
MAX_BODY_LENGTH: Final[int] = MAX_LENGTH - HEADER_LEN

# Sentinel returned when fewer than HEADER_LEN bytes are available.
INCOMPLETE_HEADER: Final[int] = -1

HEADER_STRUCT: Final = BinStruct(
    "version" / Int8ub,
    "payload_len" / Int32ub,
    "type" / Int8ub,
    "charset" / Bytes(CHARSET_LEN),
    "id" / Bytes(ID_LEN),
)
HEADER_SIZE: Final[int] = HEADER_STRUCT.sizeof()  # type: ignore


class DatagramType(IntEnum):
    """Known values of the type byte. The codec carries any byte."""

    HEARTBEAT = 0
    MVC = 1
    FILE = 2
    ACK = 3
    PUSH = 4


__all__ = [
    "VERSION_INDEX",
    "LEN_OFFSET",
    "LEN_LIMIT",
    "TYPE_INDEX",
    "CHARSET_OFFSET",
    "CHARSET_LEN",
    "ID_OFFSET",
    "ID_LEN",
    "HEADER_LEN",
    "UINT8_MASK",
    "UINT32_MASK",
    "UINT32_MAX",
    "PAD_BYTE",
    "MAX_LENGTH",
    "MAX_BODY_LENGTH",
    "INCOMPLETE_HEADER",
    "HEADER_STRUCT",
    "HEADER_SIZE",
    "DatagramType",
]
