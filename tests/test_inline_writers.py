"""Tests for plain-text and LaTeX inline serialization.

:func:`verse_filter.document.stringify` feeds titles and HTML lines, while
:func:`verse_filter.document.render_latex` typesets each verse line for the
print target. Footnotes and citations are covered as well as plain text.

Usage
-----
Run ``pytest tests/test_inline_writers.py -v``.
"""

from __future__ import annotations

import pytest

from verse_filter.document import (
    BlockQuote,
    Cite,
    Code,
    Emph,
    Image,
    LineBreak,
    Link,
    Math,
    Note,
    OpaqueInline,
    Para,
    Quoted,
    RawInline,
    SoftBreak,
    Space,
    Span,
    Str,
    Strong,
    render_latex,
    stringify,
)
from verse_filter.document.latex import escape_latex


def test_stringify_flattens_formatting() -> None:
    """Formatting wrappers disappear and breaks become spaces."""
    inlines = [
        Strong((Str("Bold"),)),
        SoftBreak(),
        Span((Str("span"),)),
        LineBreak(),
        Code("x=1"),
        Space(),
        Link((Str("link"),), "https://example.invalid"),
    ]
    assert stringify(inlines) == "Bold span x=1 link", "unexpected plain text"


def test_stringify_quotes_and_raw_content() -> None:
    """Quotes become typographic marks; raw and opaque content is dropped."""
    inlines = [
        Quoted((Str("hi"),)),
        Quoted((Str("yo"),), double=False),
        RawInline("html", "<br>"),
        OpaqueInline({"t": "Marginalia", "c": []}),
    ]
    assert stringify(inlines) == "“hi”‘yo’", "unexpected quoted text"


def test_stringify_accepts_strings_and_none() -> None:
    """Attribute strings pass through; None becomes empty text."""
    assert stringify("Ode") == "Ode", "strings should pass through"
    assert stringify(None) == "", "None should stringify to empty text"
    assert stringify(Str("one")) == "one", "single inlines should be accepted"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("50%", r"50\%"),
        ("a_b", r"a\_b"),
        ("{x}", r"\{x\}"),
        ("~", r"\textasciitilde{}"),
        ("^", r"\^{}"),
        ("\\", r"\textbackslash{}"),
        ("[1]", "{[}1{]}"),
        ("R&D #1 $5", r"R\&D \#1 \$5"),
    ],
)
def test_escape_latex(text: str, expected: str) -> None:
    """Text-mode special characters are escaped."""
    assert escape_latex(text) == expected, f"unexpected escape for {text!r}"


def test_render_latex_formatting() -> None:
    """Wrappers map to LaTeX commands and raw latex passes through."""
    inlines = [
        Emph((Str("soft"),)),
        Space(),
        Strong((Str("loud"),)),
        Space(),
        Code("x_1"),
        Space(),
        Math("a^2"),
        Space(),
        RawInline("latex", r"\hfill"),
        RawInline("html", "<br>"),
        Quoted((Str("q"),)),
    ]
    assert render_latex(inlines) == (
        r"\emph{soft} \textbf{loud} \texttt{x\_1} \(a^2\) \hfill``q''"
    ), "unexpected LaTeX rendering"


def test_render_latex_strips_trailing_newlines() -> None:
    """Trailing soft breaks never leave newlines at the end of a line."""
    assert render_latex([Str("end"), SoftBreak()]) == "end", "expected no trailing newline"


def test_stringify_citations_images_and_notes() -> None:
    """Citations give their text, images their alt text, and notes nothing."""
    inlines = [
        Str("as"),
        Space(),
        Cite((Str("(Doe"), Space(), Str("2020)")), ({"citationId": "doe2020"},)),
        Space(),
        Image((Str("rose"),), "rose.png"),
        Note((Para((Str("gloss"),)),)),
    ]
    assert stringify(inlines) == "as (Doe 2020) rose", "unexpected plain text"


def test_render_latex_citation_and_image() -> None:
    """Citations render their text; images become includegraphics."""
    inlines = [
        Cite((Str("Doe"), Space(), Str("2020")), ()),
        Space(),
        Image((Str("rose"),), "img/rose_1.png"),
    ]
    assert render_latex(inlines) == r"Doe 2020 \includegraphics{img/rose_1.png}", (
        "unexpected LaTeX rendering"
    )


def test_render_latex_footnote() -> None:
    """Notes become footnotes holding their rendered paragraphs."""
    note = Note(
        (
            Para((Emph((Str("gloss"),)),)),
            BlockQuote((Para((Str("50%"),)),)),
        )
    )
    expected = "word\\footnote{\\emph{gloss}\n\n\\begin{quote}\n50\\%\n\\end{quote}}"
    assert render_latex([Str("word"), note]) == expected, "unexpected footnote rendering"
