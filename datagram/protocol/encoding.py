"""Integer and fixed-slot byte conversions for datagram headers."""

from __future__ import annotations

from construct import ConstructError, Int32ub  # type: ignore

from . import protocol

_INT32_MIN = -(1 << 31)
_INT8_MIN = -(1 << 7)


def bytes_from_uint32(value: int) -> bytes:
    """Return *value* as 4 big-endian bytes.

    Negative values in the signed 32-bit range are reinterpreted as their
    unsigned counterpart, the way a length carried in a signed int would be.
    """
    if not _INT32_MIN <= value <= protocol.UINT32_MAX:
        raise ValueError(f"Value {value} outside 32-bit range")
    return Int32ub.build(value & protocol.UINT32_MASK)


def uint32_from_bytes(data: bytes | bytearray | memoryview, offset: int = 0) -> int:
    """Read the unsigned big-endian integer stored at ``data[offset:offset + 4]``."""
    if offset < 0:
        raise ValueError(f"Negative offset {offset}")
    chunk = bytes(data[offset : offset + protocol.LEN_LIMIT])
    if len(chunk) != protocol.LEN_LIMIT:
        raise ValueError(
            f"Need {protocol.LEN_LIMIT} bytes at offset {offset}, got {len(chunk)}"
        )
    try:
        return Int32ub.parse(chunk)
    except ConstructError as exc:
        raise ValueError(f"Failed to parse uint32: {exc}") from exc


def to_unsigned_byte(value: int, field_name: str) -> int:
    """Accept a byte given as 0..255 or as a signed -128..-1 value."""
    if not _INT8_MIN <= value <= protocol.UINT8_MASK:
        raise ValueError(f"{field_name} {value} outside byte range")
    return value & protocol.UINT8_MASK


def zero_pad(raw: bytes, size: int) -> bytes:
    """Right-pad *raw* with zero bytes to exactly *size* bytes."""
    if len(raw) > size:
        raise ValueError(f"{len(raw)} bytes do not fit in a {size}-byte slot")
    return raw + protocol.PAD_BYTE * (size - len(raw))


def until_zero(raw: bytes) -> bytes:
    """Return the bytes of *raw* preceding its first zero byte."""
    return raw.split(protocol.PAD_BYTE, 1)[0]


__all__ = [
    "bytes_from_uint32",
    "uint32_from_bytes",
    "to_unsigned_byte",
    "zero_pad",
    "until_zero",
]
