"""Tests for the HTML verse renderer.

The raw fragments returned by :func:`render_screen` are joined and parsed with
``BeautifulSoup`` so assertions can check the resulting nesting as a browser
would see it.

Usage
-----
Run ``pytest tests/test_screen_renderer.py -v``. ``beautifulsoup4`` must be
installed (it ships in the ``test`` extra).
"""

from __future__ import annotations

from bs4 import BeautifulSoup

from verse_filter.document import Emph, HorizontalRule, LineBlock, RawBlock, Space, Str
from verse_filter.verse import render_screen, resolve_options


def _soup(blocks: list[RawBlock]) -> BeautifulSoup:
    assert all(block.format == "html" for block in blocks), "expected html raw blocks"
    return BeautifulSoup("\n".join(block.text for block in blocks), "html.parser")


def _two_stanzas() -> tuple:
    return (
        LineBlock(((Str("Line"), Space(), Str("A")), (Str("Line"), Space(), Str("B")))),
        LineBlock(((Str("Line"), Space(), Str("C")),)),
    )


def test_numbered_container_classes_and_counter() -> None:
    """Numbering adds classes and resets the counter to startNumsAt - 1."""
    options = resolve_options({"linenumbers": "2", "startnumsat": "5"})
    soup = _soup(render_screen(_two_stanzas(), options))

    outer = soup.find("div", class_="verse")
    assert outer is not None, "expected an outer div.verse"
    assert outer["class"] == ["verse", "line-numbered", "linenums-right"], (
        f"unexpected classes {outer['class']!r}"
    )
    assert outer["style"] == "counter-reset: verseline 4", (
        f"unexpected counter style {outer['style']!r}"
    )


def test_unnumbered_container_has_only_verse_class() -> None:
    """Without numbering only the verse class is emitted; counter starts at 0."""
    blocks = render_screen(_two_stanzas(), resolve_options({}))
    assert blocks[0].text == '<div class="verse" style="counter-reset: verseline 0">', (
        f"unexpected opening tag {blocks[0].text!r}"
    )


def test_left_side_numbering_class() -> None:
    """``linenumside="left"`` should select the left numbering class."""
    options = resolve_options({"linenumbers": "1", "linenumside": "left"})
    outer = _soup(render_screen(_two_stanzas(), options)).find("div", class_="verse")
    assert "linenums-left" in outer["class"], "expected linenums-left class"


def test_end_to_end_structure() -> None:
    """Title, stanza, and line divs nest inside the outer container."""
    options = resolve_options({"title": "Ode", "linenumbers": "4", "firstlinenum": "1"})
    soup = _soup(render_screen(_two_stanzas(), options))

    outer = soup.find("div", class_="verse")
    assert outer["style"] == "counter-reset: verseline 0", "counter should reset to 0"
    title = outer.find("div", class_="verse-title")
    assert title is not None, "expected a verse-title div"
    assert title.get_text() == "Ode", f"unexpected title text {title.get_text()!r}"

    stanza_divs = outer.find_all("div", class_="stanza")
    assert len(stanza_divs) == 2, f"expected two stanzas, got {len(stanza_divs)}"
    lines = [
        [line.get_text() for line in stanza.find_all("div", class_="verse-line")]
        for stanza in stanza_divs
    ]
    assert lines == [["Line A", "Line B"], ["Line C"]], f"unexpected lines {lines!r}"


def test_title_is_omitted_when_absent() -> None:
    """No title attribute means no title fragment."""
    blocks = render_screen(_two_stanzas(), resolve_options({}))
    assert not any("verse-title" in block.text for block in blocks), (
        "did not expect a verse-title fragment"
    )


def test_lines_are_stringified() -> None:
    """Inline formatting is flattened to text inside each line div."""
    content = (LineBlock(((Str("a"), Space(), Emph((Str("bold"),))),)),)
    blocks = render_screen(content, resolve_options({}))
    assert '<div class="verse-line">a bold</div>' in [block.text for block in blocks], (
        "expected the stringified line text"
    )


def test_non_stanza_blocks_are_skipped() -> None:
    """Pass-through blocks are not rendered in the HTML target."""
    content = (LineBlock(((Str("One"),),)), HorizontalRule(), LineBlock(((Str("Two"),),)))
    blocks = render_screen(content, resolve_options({}))
    assert len(blocks) == 8, f"expected 8 fragments, got {len(blocks)}"
    soup = _soup(blocks)
    assert len(soup.find_all("div", class_="stanza")) == 2, "expected two stanza divs"


def test_empty_content_gives_empty_container() -> None:
    """No stanzas still yields a valid, empty outer container."""
    blocks = render_screen((), resolve_options({}))
    assert [block.text for block in blocks] == [
        '<div class="verse" style="counter-reset: verseline 0">',
        "</div>",
    ], "expected only the opening and closing container tags"
