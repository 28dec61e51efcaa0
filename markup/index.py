"""
markup/index.py - the index page listing every document, newest first.

Only the header line of each document is parsed; bodies are never touched,
so a document whose body fails to compile still gets an index entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Callable, Sequence

from markup.compiler import parse_header, write_head
from markup.errors import SiteError
from markup.escape import render_span
from markup.spans import Cursor, Span


@dataclass(slots=True, frozen=True)
class IndexItem:
    source: str   # path handed to the loader
    href: str     # derived output name, e.g. "post.html"


def compile_index(
    out: BinaryIO,
    items: Sequence[IndexItem],
    stylesheet: Span,
    title: str,
    subtitle: str,
    load: Callable[[str], bytes],
) -> list[SiteError]:
    """
    Write the index page for `items` given in enumeration order.

    Entries are emitted in reverse order. A document that cannot be loaded
    or has no valid header is left out; its error is returned to the caller
    for reporting instead of stopping the page.
    """
    skipped: list[SiteError] = []

    write_head(
        out,
        Span.whole(title.encode("utf-8")),
        Span.whole(subtitle.encode("utf-8")),
        stylesheet,
    )
    for item in reversed(items):
        try:
            buffer = load(item.source)
            header = parse_header(Cursor(buffer), item.source)
        except SiteError as e:
            skipped.append(e)
            continue

        # The href is written as-is; only the header spans are escaped.
        out.write(b'<p><a href="' + item.href.encode("utf-8", "surrogateescape") + b'">')
        render_span(out, header.date)
        out.write(b" - ")
        render_span(out, header.title)
        out.write(b"</a></p>")
    out.write(b"</body></html>")
    return skipped
