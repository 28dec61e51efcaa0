"""Command: sitegen inspect - show how a single document is split into blocks."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich import box

from markup.blocks import Blank, Block, Code, Header, Heading, Link, ListBlock, Paragraph
from markup.compiler import iter_blocks, parse_header
from markup.errors import SiteError, UnrecognizedBlockMarker
from markup.spans import Cursor, Span
from sitegen.loader import load

console = Console(width=160)

BLOCK_STYLE: dict[str, str] = {
    "paragraph": "white",
    "heading":   "bold cyan",
    "link":      "blue",
    "list":      "yellow",
    "code":      "green",
    "blank":     "dim",
}


def _describe(block: Block) -> tuple[str, int | None, str]:
    """(kind, line, preview) for one block."""
    match block:
        case Paragraph(text):
            return "paragraph", text.line_number(), text.text()
        case Heading(text):
            return "heading", text.line_number(), text.text()
        case Link(href, label):
            return "link", href.line_number(), f"{label.text()} -> {href.text()}"
        case ListBlock(items):
            return "list", items[0].line_number(), " | ".join(i.text() for i in items)
        case Code(lines):
            return "code", lines[0].line_number(), f"{len(lines)} lines"
        case Blank():
            return "blank", None, ""
    raise TypeError(f"not a block: {block!r}")


def _show_table(header: Header, rows: list[tuple[str, int | None, str]]) -> None:
    console.print(
        f"\n[bold]{escape(header.title.text())}[/bold]  [dim]{escape(header.date.text())}[/dim]"
    )
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        expand=False,
    )
    table.add_column("LINE", justify="right", no_wrap=True, style="dim")
    table.add_column("KIND", no_wrap=True)
    table.add_column("CONTENT", no_wrap=False, max_width=100)

    for kind, line, preview in rows:
        table.add_row(
            str(line) if line is not None else "-",
            f"[{BLOCK_STYLE[kind]}]{kind}[/]",
            escape(preview[:200]),
        )
    console.print(table)


def run(args: argparse.Namespace) -> None:
    path = Path(args.file)
    source = str(path)

    try:
        buffer = load(path)
        cursor = Cursor(buffer)
        header = parse_header(cursor, source)
    except SiteError as e:
        console.print(f"[red]{e.code}[/red] {escape(e.message)}")
        raise SystemExit(1)

    rows: list[tuple[str, int | None, str]] = []
    failure: UnrecognizedBlockMarker | None = None
    try:
        for block in iter_blocks(cursor, source):
            if isinstance(block, Blank) and not args.blanks:
                continue
            rows.append(_describe(block))
    except UnrecognizedBlockMarker as e:
        failure = e

    _show_table(header, rows)
    console.print(f"  [dim]{len(rows)} blocks[/dim]")

    if failure is not None:
        line = Span(buffer, failure.offset, failure.offset).line_number()
        console.print(
            f"[red]{failure.code}[/red] line {line}: {escape(failure.message)}"
        )
        raise SystemExit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "inspect",
        help="List the header and body blocks of one document.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Parses one document and prints its blocks without writing any HTML.
Stops at the first unrecognized line and reports it.

Examples:
  sitegen inspect posts/2024-01-01-hello.txt
  sitegen inspect posts/2024-01-01-hello.txt --blanks
        """,
    )
    p.add_argument("file", metavar="FILE", help="Path to the document.")
    p.add_argument(
        "--blanks",
        action="store_true",
        help="Also list blank lines.",
    )
    p.set_defaults(func=run)
