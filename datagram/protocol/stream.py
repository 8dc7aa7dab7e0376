"""Reassembly of datagrams carried back to back over a byte stream."""

from __future__ import annotations

import logging

from ..errors import MalformedFrame
from . import protocol
from .codec import BodyLike, DatagramCodec, default_codec
from .frame import Datagram

logger = logging.getLogger(__name__)


class DatagramStreamReader:
    """Accumulate stream chunks and split them into whole datagrams.

    Frames are expected to be contiguous; there is no resynchronisation
    marker, so an impossible declared length drops everything buffered.
    Frames completed before the bad header are still returned; the error
    is raised by the following call to :meth:`feed`, after its chunk is buffered.
    """

    def __init__(self, codec: DatagramCodec | None = None) -> None:
        self.codec = codec or default_codec()
        self._buffer = bytearray()
        self._error: MalformedFrame | None = None

    @property
    def pending(self) -> int:
        return len(self._buffer)

    def reset(self) -> None:
        self._buffer.clear()
        self._error = None

    def feed(self, chunk: BodyLike) -> list[Datagram]:
        """Buffer *chunk* and return every datagram it completes."""
        self._buffer += chunk
        if self._error is not None:
            error, self._error = self._error, None
            raise error

        frames: list[Datagram] = []
        while True:
            declared = self.codec.peek_declared_length(self._buffer)
            if declared == protocol.INCOMPLETE_HEADER:
                break
            if declared > self.codec.max_body_size:
                error = self._overflow(declared)
                if not frames:
                    raise error
                self._error = error
                break
            frame_len = protocol.HEADER_LEN + declared
            if len(self._buffer) < frame_len:
                break
            raw = bytes(self._buffer[:frame_len])
            del self._buffer[:frame_len]
            frames.append(self.codec.decode(raw))
        if frames:
            logger.debug("Stream reader produced %d datagram(s), %d bytes pending", len(frames), self.pending)
        return frames

    def _overflow(self, declared: int) -> MalformedFrame:
        dropped = len(self._buffer)
        self._buffer.clear()
        logger.error("Dropping %d buffered bytes: declared length %d exceeds maximum %d",
                     dropped, declared, self.codec.max_body_size)
        return MalformedFrame(
            "Declared length exceeds maximum body size",
            declared=declared,
            actual=dropped - protocol.HEADER_LEN,
        )


__all__ = ["DatagramStreamReader"]
