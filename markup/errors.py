"""
markup/errors.py - error codes and exceptions raised while building a site.

Every failure carries a stable ErrorCode so the batch driver can report it
uniformly. All of them are scoped to one document, except that a missing
stylesheet or input directory stops the whole build.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Stable error identifiers."""

    # loading
    SOURCE_NOT_FOUND      = "E_SOURCE_NOT_FOUND"
    READ_SHORTFALL        = "E_READ_SHORTFALL"

    # writing
    WRITE_FAILED          = "E_WRITE_FAILED"

    # parsing
    MALFORMED_HEADER      = "E_MALFORMED_HEADER"
    UNRECOGNIZED_MARKER   = "E_UNRECOGNIZED_MARKER"


class SiteError(Exception):
    code: ErrorCode

    def __init__(self, source: str, message: str) -> None:
        super().__init__(message)
        self.source = source
        self.message = message

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class SourceNotFound(SiteError):
    code = ErrorCode.SOURCE_NOT_FOUND

    def __init__(self, source: str, reason: str = "") -> None:
        msg = f"File '{source}' not found"
        if reason:
            msg += f" ({reason})"
        super().__init__(source, msg)


class ReadShortfall(SiteError):
    code = ErrorCode.READ_SHORTFALL

    def __init__(self, source: str, expected: int, got: int) -> None:
        super().__init__(
            source, f"Error reading '{source}': expected {expected} bytes, got {got}"
        )
        self.expected = expected
        self.got = got


class WriteFailed(SiteError):
    """The output page could not be created or written."""

    code = ErrorCode.WRITE_FAILED

    def __init__(self, target: str, reason: str = "") -> None:
        msg = f"Cannot write '{target}'"
        if reason:
            msg += f" ({reason})"
        super().__init__(target, msg)


class MalformedHeader(SiteError):
    """The first line has no '|' separating the date from the title."""

    code = ErrorCode.MALFORMED_HEADER

    def __init__(self, source: str) -> None:
        super().__init__(
            source, f"Missing 'date | title' header in file '{source}'"
        )


class UnrecognizedBlockMarker(SiteError):
    code = ErrorCode.UNRECOGNIZED_MARKER

    def __init__(self, source: str, byte: int, offset: int) -> None:
        self.byte = byte
        self.offset = offset
        super().__init__(
            source, f"Unexpected token {self.token!r} in file '{source}'"
        )

    @property
    def token(self) -> str:
        return chr(self.byte) if 0x20 <= self.byte < 0x7F else f"\\x{self.byte:02x}"
