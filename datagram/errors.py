"""Exceptions raised by the datagram codec."""

from __future__ import annotations


class PayloadTooLarge(ValueError):
    """Raised by encode when the body or a header text field does not fit."""

    def __init__(
        self,
        reason: str,
        *,
        size: int | None = None,
        limit: int | None = None,
    ) -> None:
        message = reason if size is None else f"{reason} (size={size}, limit={limit})"
        super().__init__(message)
        self.reason = reason
        self.size = size
        self.limit = limit


class MalformedFrame(ValueError):
    """Raised by decode for every parse failure.

    ``original`` holds the underlying fault when the failure was caused by
    one (slicing, struct parsing, text decoding).
    """

    def __init__(
        self,
        reason: str,
        *,
        declared: int | None = None,
        actual: int | None = None,
        original: BaseException | None = None,
    ) -> None:
        message = reason
        if declared is not None or actual is not None:
            message = f"{message} (declared={declared}, actual={actual})"
        if original is not None:
            message = f"{message}:{original}"
        super().__init__(message)
        self.reason = reason
        self.declared = declared
        self.actual = actual
        self.original = original


__all__ = ["PayloadTooLarge", "MalformedFrame"]
