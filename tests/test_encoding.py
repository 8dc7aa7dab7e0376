import pytest

from datagram.protocol import protocol
from datagram.protocol.encoding import (
    bytes_from_uint32,
    to_unsigned_byte,
    uint32_from_bytes,
    until_zero,
    zero_pad,
)


def test_bytes_from_uint32_is_big_endian() -> None:
    assert bytes_from_uint32(0) == b"\x00\x00\x00\x00"
    assert bytes_from_uint32(0x12345678) == b"\x12\x34\x56\x78"
    assert bytes_from_uint32(protocol.UINT32_MAX) == b"\xff\xff\xff\xff"


def test_bytes_from_uint32_treats_signed_input_as_unsigned() -> None:
    assert bytes_from_uint32(-1) == b"\xff\xff\xff\xff"
    assert bytes_from_uint32(-(1 << 31)) == b"\x80\x00\x00\x00"


@pytest.mark.parametrize("value", [protocol.UINT32_MAX + 1, -(1 << 31) - 1])
def test_bytes_from_uint32_rejects_out_of_range(value: int) -> None:
    with pytest.raises(ValueError):
        bytes_from_uint32(value)


@pytest.mark.parametrize(
    "value",
    [0, 1, 255, 256, 65535, (1 << 31) - 1, 1 << 31, (1 << 31) + 12345, protocol.UINT32_MAX],
)
def test_uint32_round_trip_beyond_signed_range(value: int) -> None:
    assert uint32_from_bytes(bytes_from_uint32(value)) == value


def test_uint32_from_bytes_reads_at_offset() -> None:
    data = b"\xaa" + bytes_from_uint32(0xDEADBEEF) + b"\xbb"

    assert uint32_from_bytes(data, 1) == 0xDEADBEEF
    assert uint32_from_bytes(bytearray(data), 1) == 0xDEADBEEF
    assert uint32_from_bytes(memoryview(data), 1) == 0xDEADBEEF


def test_uint32_from_bytes_rejects_short_input() -> None:
    with pytest.raises(ValueError):
        uint32_from_bytes(b"\x00\x01\x02")

    with pytest.raises(ValueError):
        uint32_from_bytes(b"\x00\x01\x02\x03", 1)

    with pytest.raises(ValueError):
        uint32_from_bytes(b"\x00\x01\x02\x03", -1)


def test_to_unsigned_byte() -> None:
    assert to_unsigned_byte(0, "type") == 0
    assert to_unsigned_byte(255, "type") == 255
    assert to_unsigned_byte(-1, "type") == 255
    assert to_unsigned_byte(-128, "type") == 128

    with pytest.raises(ValueError, match="version"):
        to_unsigned_byte(256, "version")
    with pytest.raises(ValueError):
        to_unsigned_byte(-129, "version")


def test_zero_pad_and_until_zero() -> None:
    assert zero_pad(b"abc", 5) == b"abc\x00\x00"
    assert zero_pad(b"", 3) == b"\x00\x00\x00"
    assert zero_pad(b"abc", 3) == b"abc"
    with pytest.raises(ValueError):
        zero_pad(b"abcd", 3)

    assert until_zero(b"UTF-8\x00\x00") == b"UTF-8"
    assert until_zero(b"UT\x00F-8") == b"UT"
    assert until_zero(b"\x00abc") == b""
    assert until_zero(b"abc") == b"abc"


def test_header_struct_matches_layout() -> None:
    assert protocol.HEADER_SIZE == protocol.HEADER_LEN == 56
    assert protocol.ID_OFFSET + protocol.ID_LEN == protocol.HEADER_LEN
    assert protocol.CHARSET_OFFSET + protocol.CHARSET_LEN == protocol.ID_OFFSET
    assert protocol.MAX_BODY_LENGTH == protocol.MAX_LENGTH - protocol.HEADER_LEN
