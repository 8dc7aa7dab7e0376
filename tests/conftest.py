"""Pytest configuration for datagram tests."""

from __future__ import annotations

import pytest

from datagram.protocol.codec import DatagramCodec
from datagram.util.pool import BufferPool
from datagram.util.text import TextEncoding
from tests.test_constants import TEST_CHARSET, TEST_ID, TEST_MAX_LENGTH


@pytest.fixture
def pool() -> BufferPool:
    return BufferPool(max_idle=2, max_buffer_bytes=4096)


@pytest.fixture
def codec(pool: BufferPool) -> DatagramCodec:
    """Codec with a small size limit, UTF-8 header text and a fixed id."""
    return DatagramCodec(
        max_length=TEST_MAX_LENGTH,
        text_encoding=TextEncoding(name=TEST_CHARSET),
        id_factory=lambda: TEST_ID,
        pool=pool,
    )
