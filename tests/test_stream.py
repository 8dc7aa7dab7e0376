"""Tests for incremental datagram reassembly over a stream."""

from __future__ import annotations

import pytest

from datagram.errors import MalformedFrame
from datagram.protocol import protocol
from datagram.protocol.codec import DatagramCodec
from datagram.protocol.encoding import bytes_from_uint32
from datagram.protocol.stream import DatagramStreamReader
from tests.test_constants import TEST_TYPE, TEST_VERSION


def test_frames_split_across_chunks(codec: DatagramCodec) -> None:
    first = codec.encode(b"first", TEST_TYPE, TEST_VERSION)
    second = codec.encode(None, protocol.DatagramType.HEARTBEAT, TEST_VERSION)
    third = codec.encode(b"third!", TEST_TYPE, TEST_VERSION)
    stream = first.data + second.data + third.data
    reader = DatagramStreamReader(codec)

    received = []
    for index in range(0, len(stream), 7):
        received.extend(reader.feed(stream[index : index + 7]))

    assert [frame.body for frame in received] == [b"first", None, b"third!"]
    assert received[1].is_heartbeat
    assert reader.pending == 0


def test_several_frames_in_one_chunk(codec: DatagramCodec) -> None:
    frames = [codec.encode(bytes([n]) * n, TEST_TYPE, n) for n in range(1, 4)]
    reader = DatagramStreamReader(codec)

    received = reader.feed(b"".join(frame.data for frame in frames))

    assert [frame.version for frame in received] == [1, 2, 3]
    assert [frame.body for frame in received] == [b"\x01", b"\x02\x02", b"\x03\x03\x03"]


def test_partial_frame_is_kept(codec: DatagramCodec) -> None:
    frame = codec.encode(b"0123456789", TEST_TYPE, TEST_VERSION)
    reader = DatagramStreamReader(codec)

    assert reader.feed(frame.data[:10]) == []
    assert reader.pending == 10
    assert reader.feed(frame.data[10:-1]) == []
    assert reader.pending == len(frame.data) - 1

    (completed,) = reader.feed(frame.data[-1:])
    assert completed.body == b"0123456789"
    assert reader.pending == 0


def test_impossible_declared_length_resets(codec: DatagramCodec) -> None:
    header = bytearray(codec.encode(None, TEST_TYPE, TEST_VERSION).data)
    header[protocol.LEN_OFFSET : protocol.LEN_OFFSET + protocol.LEN_LIMIT] = bytes_from_uint32(
        codec.max_body_size + 1
    )
    reader = DatagramStreamReader(codec)

    with pytest.raises(MalformedFrame) as excinfo:
        reader.feed(bytes(header))

    assert excinfo.value.declared == codec.max_body_size + 1
    assert reader.pending == 0


def test_frames_before_impossible_length_are_kept(codec: DatagramCodec) -> None:
    good = codec.encode(b"keep me", TEST_TYPE, TEST_VERSION)
    bad = bytearray(codec.encode(None, TEST_TYPE, TEST_VERSION).data)
    bad[protocol.LEN_OFFSET : protocol.LEN_OFFSET + protocol.LEN_LIMIT] = bytes_from_uint32(
        codec.max_body_size + 1
    )
    reader = DatagramStreamReader(codec)

    (received,) = reader.feed(good.data + bytes(bad))

    assert received.body == b"keep me"
    assert reader.pending == 0
    follow_up = codec.encode(b"after", TEST_TYPE, TEST_VERSION)
    with pytest.raises(MalformedFrame) as excinfo:
        reader.feed(follow_up.data)
    assert excinfo.value.declared == codec.max_body_size + 1
    assert reader.pending == len(follow_up.data)

    assert [frame.body for frame in reader.feed(b"")] == [b"after"]


def test_reset_clears_deferred_error(codec: DatagramCodec) -> None:
    good = codec.encode(b"x", TEST_TYPE, TEST_VERSION)
    bad = bytearray(good.data)
    bad[protocol.LEN_OFFSET : protocol.LEN_OFFSET + protocol.LEN_LIMIT] = bytes_from_uint32(
        codec.max_body_size + 1
    )
    reader = DatagramStreamReader(codec)
    reader.feed(good.data + bytes(bad))

    reader.reset()

    assert [frame.body for frame in reader.feed(good.data)] == [b"x"]


def test_reset_discards_buffer(codec: DatagramCodec) -> None:
    reader = DatagramStreamReader(codec)
    reader.feed(b"\x01\x02\x03")

    reader.reset()

    assert reader.pending == 0


def test_default_codec_is_used() -> None:
    from datagram.protocol.codec import default_codec

    assert DatagramStreamReader().codec is default_codec()
