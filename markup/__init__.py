"""
markup - compiler for the line-oriented markup dialect.

Modules:
  spans    - Span, Cursor, trim, advance_block
  escape   - escape_bytes, render_span
  blocks   - Header and the body block types
  compiler - parse_header, iter_blocks, write_document
  index    - compile_index
  errors   - ErrorCode and the SiteError hierarchy
"""

from .spans import Cursor, Span, advance_block, trim
from .escape import escape_bytes, render_span
from .blocks import Blank, Block, Code, Header, Heading, Link, ListBlock, Paragraph
from .compiler import iter_blocks, parse_header, write_document
from .index import IndexItem, compile_index
from .errors import (
    ErrorCode,
    MalformedHeader,
    ReadShortfall,
    SiteError,
    SourceNotFound,
    UnrecognizedBlockMarker,
    WriteFailed,
)

__all__ = [
    # spans
    "Cursor",
    "Span",
    "advance_block",
    "trim",
    # escape
    "escape_bytes",
    "render_span",
    # blocks
    "Blank",
    "Block",
    "Code",
    "Header",
    "Heading",
    "Link",
    "ListBlock",
    "Paragraph",
    # compiler
    "iter_blocks",
    "parse_header",
    "write_document",
    # index
    "IndexItem",
    "compile_index",
    # errors
    "ErrorCode",
    "MalformedHeader",
    "ReadShortfall",
    "SiteError",
    "SourceNotFound",
    "UnrecognizedBlockMarker",
    "WriteFailed",
]
