"""markup/escape.py - HTML text escaping for spans written to a binary sink."""

from __future__ import annotations

from typing import BinaryIO

from markup.spans import Span


def escape_bytes(data: bytes | memoryview) -> bytes:
    # '&' first, so the entities added for '<' and '>' are not escaped again.
    # Quotes pass through unchanged, so a '"' inside a link target still
    # ends the href attribute early.
    return (
        bytes(data)
        .replace(b"&", b"&amp;")
        .replace(b"<", b"&lt;")
        .replace(b">", b"&gt;")
    )


def render_span(out: BinaryIO, span: Span) -> None:
    """Write the span's bytes to `out` with <, > and & replaced by entities."""
    out.write(escape_bytes(span.view()))
