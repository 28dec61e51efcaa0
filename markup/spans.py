"""
markup/spans.py - spans over a loaded document buffer and the block scanner.

A Span is a half-open byte range (start, end) into a single buffer. Spans
keep a reference to their buffer instead of copying the bytes, so a page can
be parsed and rendered without slicing the document line by line.

Public API:
  Span                      - immutable view over a buffer
  Cursor                    - mutable read position over a buffer
  trim(span) -> Span        - strip space/tab from both ends
  advance_block(cursor, term, trim_ws) -> Span
"""

from __future__ import annotations

from dataclasses import dataclass

# Only these two are horizontal whitespace for the markup dialect.
_WS = (0x20, 0x09)


@dataclass(slots=True, frozen=True)
class Span:
    buffer: bytes
    start: int
    end: int

    def __post_init__(self) -> None:
        if not 0 <= self.start <= self.end <= len(self.buffer):
            raise ValueError(
                f"invalid span ({self.start}, {self.end}) over {len(self.buffer)} bytes"
            )

    @classmethod
    def whole(cls, buffer: bytes) -> Span:
        return cls(buffer, 0, len(buffer))

    def __len__(self) -> int:
        return self.end - self.start

    def __bool__(self) -> bool:
        return self.end > self.start

    def __repr__(self) -> str:
        return f"Span({self.start}, {self.end}, {self.to_bytes()!r})"

    def view(self) -> memoryview:
        return memoryview(self.buffer)[self.start:self.end]

    def to_bytes(self) -> bytes:
        return self.buffer[self.start:self.end]

    def text(self) -> str:
        """Decoded content, for display only; rendering works on raw bytes."""
        return self.to_bytes().decode("utf-8", errors="replace")

    def line_number(self) -> int:
        """1-based source line on which the span starts."""
        return self.buffer.count(b"\n", 0, self.start) + 1


class Cursor:
    """Read position over one buffer. Only ever moves forward."""

    __slots__ = ("buffer", "pos")

    def __init__(self, buffer: bytes, pos: int = 0) -> None:
        self.buffer = buffer
        self.pos = pos

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.buffer)

    def peek(self) -> int | None:
        """Next byte without consuming it, or None at the end of the buffer."""
        if self.at_end:
            return None
        return self.buffer[self.pos]

    def take(self) -> int:
        """Consume and return the next byte."""
        if self.at_end:
            raise IndexError("cursor is at the end of the buffer")
        byte = self.buffer[self.pos]
        self.pos += 1
        return byte


# ---------------------------------------------------------------------------
# Trimming and scanning
# ---------------------------------------------------------------------------

def trim(span: Span) -> Span:
    buf = span.buffer
    start, end = span.start, span.end
    while start < end and buf[start] in _WS:
        start += 1
    while end > start and buf[end - 1] in _WS:
        end -= 1
    if (start, end) == (span.start, span.end):
        return span
    return Span(buf, start, end)


def advance_block(cursor: Cursor, term: bytes | int, trim_ws: bool = True) -> Span:
    """
    Take everything from the cursor up to the next `term` byte.

    The cursor is left just past the terminator. When the terminator does
    not occur, the span runs to the end of the buffer and the cursor stops
    there; running out of input is not an error here.
    """
    if isinstance(term, bytes):
        if len(term) != 1:
            raise ValueError(f"terminator must be a single byte, got {term!r}")
        term = term[0]

    buf = cursor.buffer
    start = cursor.pos
    idx = buf.find(term, start)
    if idx == -1:
        end = len(buf)
        cursor.pos = end
    else:
        end = idx
        cursor.pos = idx + 1

    result = Span(buf, start, end)
    return trim(result) if trim_ws else result
