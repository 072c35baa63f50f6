r"""Render inline content as LaTeX source.

The writer mirrors what pandoc's LaTeX writer produces for a single ``Plain``
block: special characters are escaped, emphasis maps to ``\emph``/``\textbf``,
and raw LaTeX passes through. It is used to typeset verse lines one at a
time, so output never carries trailing newlines.

Example
-------
>>> from verse_filter.document.latex import render_inlines
>>> from verse_filter.document.nodes import Emph, Space, Str
>>> render_inlines([Str("50%"), Space(), Emph((Str("off"),))])
'50\\% \\emph{off}'
"""

from __future__ import annotations

import re
import typing as typ

from .nodes import (
    Block,
    BlockQuote,
    Cite,
    Code,
    Emph,
    Image,
    Inline,
    LineBlock,
    LineBreak,
    Link,
    Math,
    Note,
    OpaqueInline,
    Para,
    Plain,
    Quoted,
    RawInline,
    SmallCaps,
    SoftBreak,
    Space,
    Span,
    Str,
    Strikeout,
    Strong,
    Subscript,
    Superscript,
    Underline,
)

LATEX_RAW_FORMATS = frozenset({"latex", "tex"})

_SPECIAL_CHARACTERS: dict[str, str] = {
    "\\": r"\textbackslash{}",
    "{": r"\{",
    "}": r"\}",
    "$": r"\$",
    "&": r"\&",
    "#": r"\#",
    "%": r"\%",
    "_": r"\_",
    "^": r"\^{}",
    "~": r"\textasciitilde{}",
    "[": "{[}",
    "]": "{]}",
    "\u00a0": "~",
}
_SPECIAL_PATTERN = re.compile("|".join(re.escape(char) for char in _SPECIAL_CHARACTERS))
_COMMANDS: dict[type, str] = {
    Emph: "emph",
    Strong: "textbf",
    Underline: "underline",
    Strikeout: "sout",
    Superscript: "textsuperscript",
    Subscript: "textsubscript",
    SmallCaps: "textsc",
}


def escape_latex(text: str) -> str:
    """Escape characters that carry meaning in LaTeX text mode."""
    return _SPECIAL_PATTERN.sub(lambda match: _SPECIAL_CHARACTERS[match.group(0)], text)


def _render_inline(inline: Inline) -> str:  # noqa: PLR0911
    match inline:
        case Str(text=text):
            return escape_latex(text)
        case Space():
            return " "
        case SoftBreak():
            return "\n"
        case LineBreak():
            return "\\\\\n"
        case Code(text=text):
            return f"\\texttt{{{escape_latex(text)}}}"
        case Math(text=text, display=True):
            return f"\\[{text}\\]"
        case Math(text=text):
            return f"\\({text}\\)"
        case RawInline(format=fmt, text=text):
            return text if fmt in LATEX_RAW_FORMATS else ""
        case Quoted(content=content, double=True):
            return f"``{render_inlines(content)}''"
        case Quoted(content=content):
            return f"`{render_inlines(content)}'"
        case Link(content=content, url=url):
            return f"\\href{{{_escape_url(url)}}}{{{render_inlines(content)}}}"
        case Span(content=content) | Cite(content=content):
            return render_inlines(content)
        case Image(url=url):
            return f"\\includegraphics{{{_escape_url(url)}}}"
        case Note(content=content):
            return f"\\footnote{{{render_blocks(content)}}}"
        case OpaqueInline():
            return ""
        case _:
            return f"\\{_COMMANDS[type(inline)]}{{{render_inlines(inline.content)}}}"


def _escape_url(url: str) -> str:
    return url.replace("\\", "/").replace("%", r"\%").replace("#", r"\#")


def render_inlines(inlines: typ.Iterable[Inline]) -> str:
    """Render ``inlines`` as one LaTeX fragment with trailing newlines removed.

    Parameters
    ----------
    inlines : Iterable[Inline]
        Inline content of a single line or paragraph.

    Returns
    -------
    str
        LaTeX source for the content. Raw inlines in formats other than
        ``latex``/``tex`` are dropped, matching pandoc's writer.
    """
    return "".join(_render_inline(item) for item in inlines).rstrip("\n")


def _render_block(block: Block) -> str:
    match block:
        case Para(content=content) | Plain(content=content):
            return render_inlines(content)
        case LineBlock(lines=lines):
            return "\\\\\n".join(render_inlines(line) for line in lines)
        case BlockQuote(content=content):
            return f"\\begin{{quote}}\n{render_blocks(content)}\n\\end{{quote}}"
        case _:
            return ""


def render_blocks(blocks: typ.Iterable[Block]) -> str:
    """Render prose blocks as paragraphs separated by blank lines.

    Only paragraphs, line blocks, and block quotes are written. Other blocks
    are dropped, which is enough for footnote bodies.
    """
    rendered = (_render_block(block) for block in blocks)
    return "\n\n".join(text for text in rendered if text)


__all__ = ["LATEX_RAW_FORMATS", "escape_latex", "render_blocks", "render_inlines"]
