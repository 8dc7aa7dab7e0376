"""Reusable growable byte buffers for frame assembly."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Annotated, Any

import msgspec

from ..const import DEFAULT_POOL_MAX_BUFFER_BYTES, DEFAULT_POOL_MAX_IDLE


def _make_deque() -> deque[bytearray]:
    """Factory for msgspec default_factory to avoid lambdas."""
    return deque()


class BufferPool(msgspec.Struct):
    """Thread-safe pool of ``bytearray`` buffers.

    Buffers are handed out empty. A released buffer is kept for reuse only
    while fewer than ``max_idle`` buffers are idle and it has not grown past
    ``max_buffer_bytes``.
    """

    max_idle: Annotated[int, msgspec.Meta(ge=0)] = DEFAULT_POOL_MAX_IDLE
    max_buffer_bytes: Annotated[int, msgspec.Meta(ge=0)] = DEFAULT_POOL_MAX_BUFFER_BYTES
    _idle: deque[bytearray] = msgspec.field(default_factory=_make_deque)
    _lock: Any = msgspec.field(default_factory=threading.Lock)
    _created: int = 0

    @property
    def idle(self) -> int:
        return len(self._idle)

    @property
    def created(self) -> int:
        return self._created

    def acquire(self) -> bytearray:
        with self._lock:
            if self._idle:
                return self._idle.pop()
            self._created += 1
        return bytearray()

    def release(self, buffer: bytearray) -> None:
        oversized = len(buffer) > self.max_buffer_bytes
        buffer.clear()
        if oversized:
            return
        with self._lock:
            if len(self._idle) < self.max_idle:
                self._idle.append(buffer)

    @contextmanager
    def lease(self) -> Iterator[bytearray]:
        """Acquire a buffer for the duration of a ``with`` block."""
        buffer = self.acquire()
        try:
            yield buffer
        finally:
            self.release(buffer)

    def clear(self) -> None:
        with self._lock:
            self._idle.clear()
