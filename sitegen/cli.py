"""
sitegen - static site compiler for the bareware markup dialect.

Usage:
  sitegen <command> [options]

Commands:
  build     Compiles a directory of documents into HTML pages and index.html.
  inspect   Lists the header and blocks of a single document.

Environment:
  SITEGEN_TITLE      index page title      (default: bareware.dev)
  SITEGEN_SUBTITLE   index page subtitle
  SITEGEN_EXTENSION  source file extension (default: .txt)
"""

from __future__ import annotations

import argparse
import sys

# Windows consoles may default to cp1252; document titles are printed as-is.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from sitegen.commands import build as cmd_build
from sitegen.commands import inspect as cmd_inspect


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitegen",
        description="sitegen - static site compiler.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="sitegen 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="commands",
        metavar="<command>",
        dest="command",
    )
    subparsers.required = True

    cmd_build.add_parser(subparsers)
    cmd_inspect.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
