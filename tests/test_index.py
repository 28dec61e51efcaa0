from __future__ import annotations

import io

from conftest import CSS, head
from markup.errors import MalformedHeader, SourceNotFound
from markup.index import IndexItem, compile_index
from markup.spans import Span

TITLE = "bareware.dev"
SUBTITLE = "Engineering without abstraction layers between you and the machine!"

DOCS = {
    "in/a.txt": b"2024-01-01 | Alpha\n body\n",
    "in/b.txt": b"2024-02-01 | Beta\n@broken body is not read\n",
    "in/c.txt": b"2024-03-01 | <Gamma>\n",
}


def _load(source: str) -> bytes:
    try:
        return DOCS[source]
    except KeyError:
        raise SourceNotFound(source) from None


def _items(*names: str) -> list[IndexItem]:
    return [IndexItem(source=f"in/{n}.txt", href=f"{n}.html") for n in names]


def _index(items, load=_load, title=TITLE, subtitle=SUBTITLE):
    out = io.BytesIO()
    skipped = compile_index(out, items, Span.whole(CSS), title, subtitle, load)
    return out.getvalue(), skipped


def test_entries_in_reverse_enumeration_order():
    html, skipped = _index(_items("a", "b", "c"))
    assert skipped == []
    assert html == (
        head(TITLE.encode(), SUBTITLE.encode())
        + b'<p><a href="c.html">2024-03-01 - &lt;Gamma&gt;</a></p>'
        + b'<p><a href="b.html">2024-02-01 - Beta</a></p>'
        + b'<p><a href="a.html">2024-01-01 - Alpha</a></p>'
        + b"</body></html>"
    )


def test_empty_index():
    html, skipped = _index([])
    assert html == head(TITLE.encode(), SUBTITLE.encode()) + b"</body></html>"
    assert skipped == []


def test_site_title_is_escaped():
    html, _ = _index([], title="Tom & Jerry", subtitle="<sub>")
    assert b"<title>Tom &amp; Jerry</title>" in html
    assert b'<p class="subt">&lt;sub&gt;</p>' in html


def test_unloadable_and_headerless_documents_are_skipped():
    docs = dict(DOCS, **{"in/x.txt": b"no header here\n"})

    def load(source: str) -> bytes:
        if source not in docs:
            raise SourceNotFound(source)
        return docs[source]

    html, skipped = _index(_items("a", "gone", "x"), load=load)
    assert b"a.html" in html
    assert b"gone.html" not in html
    assert b"x.html" not in html
    assert [type(e) for e in skipped] == [MalformedHeader, SourceNotFound]
    assert [e.source for e in skipped] == ["in/x.txt", "in/gone.txt"]
