"""
markup/blocks.py - header and body block types of a markup document.

Every field is a Span into the document buffer, so a parsed block is only
valid for as long as that buffer is.
"""

from __future__ import annotations

from dataclasses import dataclass

from markup.spans import Span


@dataclass(slots=True, frozen=True)
class Header:
    date: Span
    title: Span


@dataclass(slots=True, frozen=True)
class Paragraph:
    text: Span


@dataclass(slots=True, frozen=True)
class Heading:
    text: Span


@dataclass(slots=True, frozen=True)
class Link:
    href: Span
    label: Span


@dataclass(slots=True, frozen=True)
class ListBlock:
    items: tuple[Span, ...]


@dataclass(slots=True, frozen=True)
class Code:
    lines: tuple[Span, ...]   # untrimmed, without the marker


@dataclass(slots=True, frozen=True)
class Blank:
    pass


Block = Paragraph | Heading | Link | ListBlock | Code | Blank
