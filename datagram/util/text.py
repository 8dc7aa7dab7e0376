"""Text encoding and identifier collaborators for header fields."""

from __future__ import annotations

import codecs
import locale
import uuid

import msgspec


class TextEncoding(msgspec.Struct, frozen=True):
    """Encoding used for the charset and id header fields.

    ``name`` is the charset name advertised in the header; ``codec`` is the
    Python codec applied to the header text. They are normally the same.
    """

    name: str
    codec: str = ""

    def __post_init__(self) -> None:
        if not self.codec:
            msgspec.structs.force_setattr(self, "codec", self.name)
        codecs.lookup(self.codec)

    @classmethod
    def system_default(cls) -> TextEncoding:
        """The process-wide preferred encoding under its canonical name, e.g. ``utf-8``."""
        return cls(name=codecs.lookup(locale.getpreferredencoding(False)).name)

    def encode(self, text: str) -> bytes:
        return text.encode(self.codec)

    def decode(self, data: bytes) -> str:
        return data.decode(self.codec, errors="replace")


def new_id() -> str:
    """Return a fresh 32-character hexadecimal identifier."""
    return uuid.uuid4().hex


__all__ = ["TextEncoding", "new_id"]
