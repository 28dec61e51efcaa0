"""Shared fixtures: in-memory compilation and on-disk sample sites."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from markup.compiler import parse_header, write_document
from markup.spans import Cursor, Span

CSS = b"body { font-family: sans-serif; }"


def compile_into(out, text: bytes, css: bytes = CSS, source: str = "doc.txt") -> int:
    """Header first, then the page: nothing is written for a bad header."""
    cursor = Cursor(text)
    header = parse_header(cursor, source)
    return write_document(out, header, cursor, Span.whole(css), source)


def compile_bytes(text: bytes, css: bytes = CSS, source: str = "doc.txt") -> bytes:
    out = io.BytesIO()
    compile_into(out, text, css, source)
    return out.getvalue()


def head(title: bytes, subtitle: bytes, css: bytes = CSS) -> bytes:
    return (
        b'<!DOCTYPE html><head><meta charset="utf-8">'
        b"<title>" + title + b"</title>"
        b"<style>" + css + b"</style>"
        b"</head><body>"
        b"<h1>" + title + b"</h1>"
        b'<p class="subt">' + subtitle + b"</p>"
    )


@pytest.fixture
def stylesheet() -> Span:
    return Span.whole(CSS)


@pytest.fixture
def site(tmp_path: Path) -> dict[str, Path]:
    """Input dir with three good posts, a broken body, a missing header and a non-post."""
    in_dir = tmp_path / "posts"
    out_dir = tmp_path / "public"
    in_dir.mkdir()

    (in_dir / "a.txt").write_bytes(b"2024-01-01 | Alpha\n First post.\n")
    (in_dir / "b.txt").write_bytes(b"2024-02-01 | Beta\n# Part one\n- x\n- y\n")
    (in_dir / "c.txt").write_bytes(b"2024-03-01 | Gamma & Co\n! http://x.com | home\n")
    (in_dir / "bad.txt").write_bytes(b"2024-02-15 | Broken\n Before.\n@after\n Never.\n")
    (in_dir / "nohead.txt").write_bytes(b"just a line\n body\n")
    (in_dir / "notes.md").write_bytes(b"ignored")

    css = tmp_path / "style.css"
    css.write_bytes(CSS)

    return {"in": in_dir, "out": out_dir, "css": css}
