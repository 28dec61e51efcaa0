"""Command: sitegen build - compile a directory of documents into HTML pages."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.markup import escape

from markup.errors import SiteError
from sitegen.batch import build_site, console, err_console, report_error


def run(args: argparse.Namespace) -> None:
    in_dir = Path(args.input_dir)
    out_dir = Path(args.output_dir)
    stylesheet = Path(args.stylesheet)

    try:
        report = build_site(in_dir, out_dir, stylesheet)
    except SiteError as e:
        # stylesheet or input directory: nothing can be built
        report_error(e)
        raise SystemExit(1)
    except OSError as e:
        err_console.print(f"[red]Cannot write output:[/red] {escape(str(e))}")
        raise SystemExit(1)

    summary = f"[green]{len(report.compiled)} pages[/green] written to {escape(str(out_dir))}"
    if report.failed:
        summary += f", [red]{len(report.failed)} failed[/red]"
    console.print(summary)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "build",
        help="Compile every document in a directory and write index.html.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Compiles each *.txt document in INPUT_DIR to OUTPUT_DIR/<name>.html and
writes OUTPUT_DIR/index.html listing them newest first.

Documents that fail to parse are reported on stderr and skipped; the exit
code stays 0. A missing stylesheet or input directory exits with 1.

Examples:
  sitegen build posts/ public/ style.css
  SITEGEN_TITLE=example.org sitegen build posts/ public/ style.css
        """,
    )
    p.add_argument("input_dir", metavar="INPUT_DIR", help="Directory with the source documents.")
    p.add_argument("output_dir", metavar="OUTPUT_DIR", help="Directory for the generated pages.")
    p.add_argument("stylesheet", metavar="STYLESHEET", help="CSS file injected into every page.")
    p.set_defaults(func=run)
