"""Datagram building and parsing.

Encoding assembles the 56-byte header and the body inside a pooled buffer
and returns a :class:`Datagram` owning a fresh copy of the bytes. Decoding
validates the header against the received buffer and converts every failure
into :class:`MalformedFrame`.

Packet transports may deliver a frame followed by padding. Passing
``allow_trailing_slack=True`` to :meth:`DatagramCodec.decode` cuts such a
buffer down to the length declared in the header; a buffer shorter than the
declared length is always rejected.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from ..config.model import DatagramConfig
from ..const import DEFAULT_MAX_LENGTH
from ..errors import MalformedFrame, PayloadTooLarge
from ..util import log_hexdump
from ..util.pool import BufferPool
from ..util.text import TextEncoding, new_id
from . import protocol
from .encoding import bytes_from_uint32, to_unsigned_byte, uint32_from_bytes, until_zero, zero_pad
from .frame import Datagram

logger = logging.getLogger(__name__)

BodyLike = bytes | bytearray | memoryview


class DatagramCodec:
    """Stateless encoder/decoder bound to its collaborators."""

    def __init__(
        self,
        *,
        max_length: int = DEFAULT_MAX_LENGTH,
        text_encoding: TextEncoding | None = None,
        id_factory: Callable[[], str] = new_id,
        pool: BufferPool | None = None,
        allow_trailing_slack: bool = False,
    ) -> None:
        if not protocol.HEADER_LEN <= max_length <= protocol.HEADER_LEN + protocol.UINT32_MAX:
            raise ValueError(
                f"max_length must be between {protocol.HEADER_LEN} and "
                f"{protocol.HEADER_LEN + protocol.UINT32_MAX}, got {max_length}"
            )
        self.max_length = max_length
        self.text_encoding = text_encoding or TextEncoding.system_default()
        self.id_factory = id_factory
        self.pool = pool or BufferPool()
        self.allow_trailing_slack = allow_trailing_slack

    @classmethod
    def from_config(cls, config: DatagramConfig) -> DatagramCodec:
        encoding = TextEncoding.system_default()
        if config.charset:
            encoding = TextEncoding(name=config.charset)
        return cls(
            max_length=config.max_length,
            text_encoding=encoding,
            pool=BufferPool(
                max_idle=config.pool_max_idle,
                max_buffer_bytes=config.pool_max_buffer_bytes,
            ),
            allow_trailing_slack=config.allow_trailing_slack,
        )

    @property
    def max_body_size(self) -> int:
        return self.max_length - protocol.HEADER_LEN

    def encode(self, body: BodyLike | None, type: int, version: int) -> Datagram:
        """Build a datagram around *body*.

        Raises:
            PayloadTooLarge: the body exceeds :attr:`max_body_size`, or the
                charset name or generated id does not fit its header slot.
            ValueError: *type* or *version* is not a byte value.
        """
        payload = bytes(body) if body else b""
        body_len = len(payload)
        type_byte = to_unsigned_byte(type, "type")
        version_byte = to_unsigned_byte(version, "version")

        if body_len > self.max_body_size:
            logger.error("Datagram body of %d bytes exceeds maximum %d", body_len, self.max_body_size)
            raise PayloadTooLarge("Datagram body too large", size=body_len, limit=self.max_body_size)

        with self.pool.lease() as buffer:
            buffer.append(version_byte)
            buffer += bytes_from_uint32(body_len)
            buffer.append(type_byte)

            charset = self.text_encoding.name
            buffer += self._header_text(charset, protocol.CHARSET_LEN, "Charset name")

            id_bytes = self._header_text(self.id_factory(), protocol.ID_LEN, "Datagram id")
            buffer += id_bytes

            if body_len:
                buffer += payload

            data = bytes(buffer)

        datagram = Datagram(
            data=data,
            length=body_len,
            body=payload if body_len else None,
            version=version_byte,
            type=type_byte,
            charset=charset,
            id=id_bytes,
        )
        logger.debug("Built %r", datagram)
        log_hexdump(logger, logging.DEBUG, "DGRAM TX", data)
        return datagram

    def decode(self, data: BodyLike, allow_trailing_slack: bool | None = None) -> Datagram:
        """Parse a received frame.

        *allow_trailing_slack* defaults to the codec setting, which is off
        unless the codec was built with it enabled.

        Raises:
            MalformedFrame: for a short header, a declared/actual length
                mismatch, or any fault while reading the fields.
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            logger.error("Datagram parsing failed: unsupported input %s", type(data).__name__)
            raise MalformedFrame(f"Expected a bytes-like object, got {type(data).__name__}")
        try:
            if allow_trailing_slack is None:
                allow_trailing_slack = self.allow_trailing_slack
            return self._decode(bytes(data), allow_trailing_slack)
        except MalformedFrame:
            raise
        except Exception as exc:
            logger.error("Datagram parsing failed: %s", exc)
            raise MalformedFrame("Datagram parsing failed", original=exc) from exc

    def peek_declared_length(self, data: BodyLike) -> int:
        """Return the declared body length, or -1 while the header is incomplete."""
        if len(data) < protocol.HEADER_LEN:
            logger.debug("Header incomplete: %d of %d bytes", len(data), protocol.HEADER_LEN)
            return protocol.INCOMPLETE_HEADER
        return uint32_from_bytes(data, protocol.LEN_OFFSET)

    def _header_text(self, text: str, size: int, label: str) -> bytes:
        raw = self.text_encoding.encode(text)
        if len(raw) > size:
            raise PayloadTooLarge(f"{label} does not fit its header slot", size=len(raw), limit=size)
        return zero_pad(raw, size)

    def _decode(self, data: bytes, allow_trailing_slack: bool) -> Datagram:
        log_hexdump(logger, logging.DEBUG, "DGRAM RX", data)
        if len(data) < protocol.HEADER_LEN:
            raise MalformedFrame(
                f"Incomplete header, need {protocol.HEADER_LEN} bytes", actual=len(data)
            )

        header = protocol.HEADER_STRUCT.parse(data[: protocol.HEADER_LEN])
        charset = self.text_encoding.decode(until_zero(header.charset))
        version = header.version
        type_byte = header.type
        declared = header.payload_len
        actual = len(data) - protocol.HEADER_LEN
        logger.debug("Datagram charset=%s version=%d type=%d declared=%d", charset, version, type_byte, declared)

        if actual > declared:
            logger.warning("Declared body length %d, received %d bytes", declared, actual)
            if not allow_trailing_slack:
                raise MalformedFrame("Length mismatch: declared < actual", declared=declared, actual=actual)
            data = data[: protocol.HEADER_LEN + declared]
        elif actual < declared:
            logger.error("Declared body length %d, received only %d bytes", declared, actual)
            raise MalformedFrame("Length mismatch: declared > actual", declared=declared, actual=actual)

        id_bytes = header.id
        body = data[protocol.HEADER_LEN :] if declared else None

        datagram = Datagram(
            data=data,
            length=declared,
            body=body,
            version=version,
            type=type_byte,
            charset=charset,
            id=id_bytes,
        )
        logger.debug("Parsed %r", datagram)
        return datagram


_default_codec: DatagramCodec | None = None
_default_codec_lock = threading.Lock()


def default_codec() -> DatagramCodec:
    """Return the process-wide codec using the system text encoding."""
    global _default_codec
    if _default_codec is None:
        with _default_codec_lock:
            if _default_codec is None:
                _default_codec = DatagramCodec()
    return _default_codec


def encode(body: BodyLike | None, type: int, version: int) -> Datagram:
    return default_codec().encode(body, type, version)


def decode(data: BodyLike, allow_trailing_slack: bool | None = None) -> Datagram:
    return default_codec().decode(data, allow_trailing_slack)


def peek_declared_length(data: BodyLike) -> int:
    return default_codec().peek_declared_length(data)


__all__ = [
    "DatagramCodec",
    "default_codec",
    "encode",
    "decode",
    "peek_declared_length",
]
