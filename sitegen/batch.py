"""
sitegen/batch.py - compiling a directory of documents into a static site.

Flow:
  stylesheet  -> load once, shared read-only by every page
  input dir   -> sorted *.txt names -> one <name>.html per document
  all names   -> index.html, newest (last in sort order) first

A failure in one document is reported and the batch moves on; only a
missing stylesheet or input directory stops the build.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from markup.compiler import parse_header, write_document
from markup.errors import SiteError, SourceNotFound, WriteFailed
from markup.index import IndexItem, compile_index
from markup.spans import Cursor, Span
from sitegen._config import SiteConfig, get_config
from sitegen.loader import load

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

INDEX_NAME = "index.html"


@dataclass(slots=True, frozen=True)
class DocumentJob:
    name: str        # file name inside the input directory
    in_path: Path
    out_name: str    # file name inside the output directory


@dataclass(slots=True)
class BuildReport:
    compiled: list[str] = field(default_factory=list)
    failed: list[SiteError] = field(default_factory=list)
    index_skipped: list[SiteError] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Enumeration
# ---------------------------------------------------------------------------

def output_name(name: str, extension: str) -> str:
    """'post.txt' -> 'post.html'."""
    if extension and name.endswith(extension):
        name = name[: -len(extension)]
    return name + ".html"


def enumerate_documents(in_dir: Path, extension: str) -> list[DocumentJob]:
    if not in_dir.is_dir():
        raise SourceNotFound(str(in_dir), "input path is not a directory")

    names = sorted(
        p.name for p in in_dir.iterdir()
        if p.is_file() and p.name.endswith(extension)
    )
    return [
        DocumentJob(name=n, in_path=in_dir / n, out_name=output_name(n, extension))
        for n in names
    ]


# ---------------------------------------------------------------------------
# Compilation
# ---------------------------------------------------------------------------

def compile_one(job: DocumentJob, out_dir: Path, stylesheet: Span) -> int:
    """
    Compile a single document; returns the number of body blocks rendered.

    The header is checked before the output file is created, so a document
    without one leaves nothing behind. A body failure leaves the partial page.
    An output file that cannot be opened or written raises WriteFailed.
    """
    source = str(job.in_path)
    target = out_dir / job.out_name
    buffer = load(job.in_path)
    cursor = Cursor(buffer)
    header = parse_header(cursor, source)
    try:
        with open(target, "wb") as out:
            return write_document(out, header, cursor, stylesheet, source)
    except OSError as e:
        raise WriteFailed(str(target), e.strerror or str(e)) from e


def report_error(e: SiteError) -> None:
    err_console.print(f"[red]{e.code}[/red] {escape(e.message)}")


def build_site(
    in_dir: Path,
    out_dir: Path,
    stylesheet_path: Path,
    config: SiteConfig | None = None,
) -> BuildReport:
    """
    Compile every document in `in_dir` into `out_dir` and write the index.

    Raises SourceNotFound / ReadShortfall only for the stylesheet and the
    input directory; per-document errors end up in the returned report.
    """
    config = config or get_config()
    report = BuildReport()

    stylesheet = Span.whole(load(stylesheet_path))
    jobs = enumerate_documents(in_dir, config.extension)
    out_dir.mkdir(parents=True, exist_ok=True)

    for job in jobs:
        console.print(f"Processing {escape(job.name)} ...")
        try:
            compile_one(job, out_dir, stylesheet)
        except SiteError as e:
            report.failed.append(e)
            report_error(e)
            continue
        report.compiled.append(job.out_name)

    console.print(f"Creating {INDEX_NAME} ...")
    items = [IndexItem(source=str(job.in_path), href=job.out_name) for job in jobs]
    with open(out_dir / INDEX_NAME, "wb") as out:
        report.index_skipped = compile_index(
            out, items, stylesheet, config.title, config.subtitle, load
        )
    for e in report.index_skipped:
        err_console.print(f"[yellow]Left out of {INDEX_NAME}:[/yellow] {escape(e.source)}")
        report_error(e)

    return report
