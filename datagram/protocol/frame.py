"""In-memory representation of one datagram."""

from __future__ import annotations

import msgspec

from .protocol import DatagramType


class Datagram(msgspec.Struct, frozen=True, kw_only=True):
    """A datagram that was just built or just parsed.

    Attributes:
        data: The whole frame exactly as sent or received (after any
            trailing slack has been cut off).
        length: Payload length carried in the header.
        body: Payload bytes, ``None`` when ``length`` is 0.
        version: Application-defined version byte.
        type: Type byte, usually a :class:`DatagramType` value.
        charset: Charset name read from or written to the header.
        id: The raw 40-byte id slot.
    """

    data: bytes
    length: int
    body: bytes | None
    version: int
    type: int
    charset: str
    id: bytes

    @property
    def datagram_type(self) -> DatagramType | None:
        try:
            return DatagramType(self.type)
        except ValueError:
            return None

    @property
    def is_heartbeat(self) -> bool:
        return self.type == DatagramType.HEARTBEAT

    @property
    def id_text(self) -> str:
        """The id slot as text, padding included.

        The slot is decoded verbatim so a parsed id keeps its trailing NUL
        characters; strip them when comparing against a generated id.
        """
        try:
            return self.id.decode(self.charset, errors="replace")
        except LookupError:
            return self.id.decode("latin-1")

    def __repr__(self) -> str:
        kind = self.datagram_type
        type_label = kind.name if kind is not None else f"0x{self.type:02X}"
        return (
            f"Datagram(version={self.version}, type={type_label}, "
            f"length={self.length}, charset={self.charset!r}, "
            f"id={self.id_text.rstrip(chr(0))!r})"
        )


__all__ = ["Datagram"]
