"""
markup/compiler.py - parsing a markup document and rendering it as one HTML page.

Document layout:
  date | title                 (header, first line)
  <lead byte> ...              (one block per line, classified by its lead byte)

Lead bytes:
  '\\n'  blank line, renders nothing
  ' '   paragraph
  '#'   heading
  '!'   link:  ! href | label
  '-'   list item; consecutive '-' lines form one list
  '`'   code line; consecutive '`' lines form one <pre> block

Public API:
  parse_header(cursor, source) -> Header
  iter_blocks(cursor, source)  -> Iterator[Block]
  write_head(out, title, subtitle, stylesheet)
  write_document(out, header, cursor, stylesheet, source) -> int
"""

from __future__ import annotations

from typing import BinaryIO, Iterator

from markup.blocks import Blank, Block, Code, Header, Heading, Link, ListBlock, Paragraph
from markup.errors import MalformedHeader, UnrecognizedBlockMarker
from markup.escape import render_span
from markup.spans import Cursor, Span, advance_block

_NEWLINE  = ord("\n")
_SPACE    = ord(" ")
_HASH     = ord("#")
_BANG     = ord("!")
_BAR      = ord("|")
_DASH     = ord("-")
_BACKTICK = ord("`")

BACK_LINK = b'<p class="back"><a href="index.html">&larr; Back to index</a></p>'


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_header(cursor: Cursor, source: str) -> Header:
    """
    Read the 'date | title' line and leave the cursor at the first body line.

    Raises MalformedHeader when the first line has no '|', instead of letting
    the date scan run on into the body.
    """
    buf = cursor.buffer
    bar = buf.find(_BAR, cursor.pos)
    newline = buf.find(_NEWLINE, cursor.pos)
    if bar == -1 or (newline != -1 and newline < bar):
        raise MalformedHeader(source)

    date = advance_block(cursor, _BAR)
    title = advance_block(cursor, _NEWLINE)
    return Header(date=date, title=title)


def _take_run(cursor: Cursor, marker: int, trim_ws: bool) -> tuple[Span, ...]:
    # The leading marker is already consumed. Each pass reads one line, then
    # looks at a single byte: the same marker starts another item, anything
    # else (or the end of input) closes the block.
    items: list[Span] = []
    while True:
        items.append(advance_block(cursor, _NEWLINE, trim_ws))
        if cursor.peek() != marker:
            return tuple(items)
        cursor.take()


def iter_blocks(cursor: Cursor, source: str) -> Iterator[Block]:
    """
    Yield body blocks until the buffer is exhausted.

    Blocks are produced one at a time, so a caller rendering them as they
    arrive has already written everything before a bad line when
    UnrecognizedBlockMarker is raised.
    """
    while not cursor.at_end:
        lead = cursor.take()
        if lead == _NEWLINE:
            yield Blank()
        elif lead == _SPACE:
            yield Paragraph(advance_block(cursor, _NEWLINE))
        elif lead == _HASH:
            yield Heading(advance_block(cursor, _NEWLINE))
        elif lead == _BANG:
            href = advance_block(cursor, _BAR)
            label = advance_block(cursor, _NEWLINE)
            yield Link(href=href, label=label)
        elif lead == _DASH:
            yield ListBlock(_take_run(cursor, _DASH, trim_ws=True))
        elif lead == _BACKTICK:
            yield Code(_take_run(cursor, _BACKTICK, trim_ws=False))
        else:
            raise UnrecognizedBlockMarker(source, lead, cursor.pos - 1)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def write_head(out: BinaryIO, title: Span, subtitle: Span, stylesheet: Span) -> None:
    """Page boilerplate up to and including the subtitle paragraph."""
    out.write(b"<!DOCTYPE html><head>")
    out.write(b'<meta charset="utf-8">')
    out.write(b"<title>")
    render_span(out, title)
    out.write(b"</title>")
    out.write(b"<style>")
    render_span(out, stylesheet)
    out.write(b"</style>")
    out.write(b"</head><body>")
    out.write(b"<h1>")
    render_span(out, title)
    out.write(b"</h1>")
    out.write(b'<p class="subt">')
    render_span(out, subtitle)
    out.write(b"</p>")


def render_block(out: BinaryIO, block: Block) -> None:
    match block:
        case Blank():
            pass
        case Paragraph(text):
            out.write(b"<p>")
            render_span(out, text)
            out.write(b"</p>")
        case Heading(text):
            out.write(b"<h2>")
            render_span(out, text)
            out.write(b"</h2>")
        case Link(href, label):
            out.write(b'<p><a href="')
            render_span(out, href)
            out.write(b'">')
            render_span(out, label)
            out.write(b"</a></p>")
        case ListBlock(items):
            out.write(b"<ul>")
            for item in items:
                out.write(b"<li>")
                render_span(out, item)
                out.write(b"</li>")
            out.write(b"</ul>")
        case Code(lines):
            out.write(b"<pre>")
            for line in lines:
                render_span(out, line)
                out.write(b"\n")
            out.write(b"</pre>")
        case _:
            raise TypeError(f"not a block: {block!r}")


def write_document(
    out: BinaryIO,
    header: Header,
    cursor: Cursor,
    stylesheet: Span,
    source: str,
) -> int:
    """
    Render a page whose header is already parsed; returns the block count.

    On UnrecognizedBlockMarker the page is left as written so far: no back
    link and no closing tags.
    """
    write_head(out, header.title, header.date, stylesheet)
    count = 0
    for block in iter_blocks(cursor, source):
        render_block(out, block)
        count += 1
    out.write(BACK_LINK)
    out.write(b"</body></html>")
    return count
