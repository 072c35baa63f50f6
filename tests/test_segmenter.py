"""Unit tests for verse line segmentation.

These tests cover :func:`verse_filter.verse.segmenter.segment_verse`, which
turns the paragraphs of a verse div into ``LineBlock`` stanzas while leaving
other blocks in place.

Usage
-----
Run ``pytest tests/test_segmenter.py -v``. No fixtures beyond pytest's
defaults are required.
"""

from __future__ import annotations

from verse_filter.document import (
    Emph,
    HorizontalRule,
    LineBlock,
    LineBreak,
    Para,
    RawBlock,
    SoftBreak,
    Space,
    Str,
    is_break,
)
from verse_filter.verse.segmenter import segment_verse, split_lines, stanzas


def _words(text: str) -> tuple:
    """Build inline tokens for ``text`` with spaces between words."""
    tokens: list = []
    for index, word in enumerate(text.split()):
        if index:
            tokens.append(Space())
        tokens.append(Str(word))
    return tuple(tokens)


def test_paragraph_becomes_single_stanza() -> None:
    """Soft and hard breaks should split one paragraph into lines."""
    para = Para(_words("Line A") + (SoftBreak(),) + _words("Line B") + (LineBreak(),) + _words("Line C"))
    content = segment_verse([para])

    assert len(content) == 1, f"expected one stanza, got {content!r}"
    stanza = content[0]
    assert isinstance(stanza, LineBlock), "paragraphs should become LineBlocks"
    assert stanza.lines == (_words("Line A"), _words("Line B"), _words("Line C")), (
        "expected three lines split on the breaks"
    )


def test_segmentation_keeps_every_token_in_order() -> None:
    """Every non-break inline should appear exactly once, in source order."""
    inlines = (
        Str("O"),
        Space(),
        Emph((Str("wild"),)),
        SoftBreak(),
        Str("West"),
        Space(),
        Str("Wind"),
        LineBreak(),
        Str("thou"),
    )
    content = segment_verse([Para(inlines)])
    flattened = [token for line in content[0].lines for token in line]

    expected = [token for token in inlines if not is_break(token)]
    assert flattened == expected, "segmentation must be total and order preserving"


def test_non_paragraph_blocks_pass_through_in_place() -> None:
    """Other blocks should stay where they were between stanzas."""
    marker = HorizontalRule()
    raw = RawBlock("html", "<hr>")
    content = segment_verse([Para(_words("One")), marker, Para(_words("Two")), raw])

    assert [type(block).__name__ for block in content] == [
        "LineBlock",
        "HorizontalRule",
        "LineBlock",
        "RawBlock",
    ], f"unexpected block sequence {content!r}"
    assert content[1] is marker, "pass-through blocks should be the same objects"
    assert content[3] is raw, "pass-through blocks should be the same objects"


def test_empty_paragraph_is_dropped() -> None:
    """Paragraphs without inline content should not produce a stanza."""
    assert segment_verse([Para(())]) == (), "expected no output for an empty paragraph"


def test_consecutive_breaks_keep_an_empty_line() -> None:
    """A blank line between two breaks is preserved as an empty line."""
    lines = split_lines([Str("a"), LineBreak(), LineBreak(), Str("b")])
    assert lines == [(Str("a"),), (), (Str("b"),)], (
        f"expected an empty middle line, got {lines!r}"
    )


def test_trailing_break_keeps_an_empty_final_line() -> None:
    """Every break closes a line, including one at the end of a paragraph."""
    lines = split_lines([Str("a"), LineBreak()])
    assert lines == [(Str("a"),), ()], f"expected a trailing empty line, got {lines!r}"


def test_split_lines_on_empty_input() -> None:
    """No inlines means no lines at all."""
    assert split_lines([]) == [], "expected no lines for empty input"


def test_stanzas_filters_out_other_blocks() -> None:
    """Only LineBlock units should be returned as stanzas."""
    content = segment_verse([Para(_words("One")), HorizontalRule(), Para(_words("Two"))])
    found = stanzas(content)
    assert len(found) == 2, f"expected two stanzas, got {found!r}"
    assert all(isinstance(block, LineBlock) for block in found), (
        "stanzas() should only return LineBlocks"
    )
