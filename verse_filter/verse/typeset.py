r"""Render segmented verse as a LaTeX ``verse`` environment.

The output targets the ``verse`` package: the first line of the first stanza
sets ``\versewidth`` so the environment centres on it, optional numbering is
switched on and off around the lines, and stanzas are separated by a
paragraph break with one line of vertical space.

Example
-------
>>> from verse_filter.document import LineBlock, Str
>>> from verse_filter.verse.models import VerseOptions
>>> from verse_filter.verse.typeset import render_print
>>> block = render_print((LineBlock(((Str("Hi"),),)),), VerseOptions())
>>> print(block.text)
\settowidth{\versewidth}{Hi}
\begin{verse}[\versewidth]
<BLANKLINE>
Hi\\
\end{verse}
<BLANKLINE>
"""

from __future__ import annotations

import logging
import typing as typ

from verse_filter._constants import (
    LATEX_FORMAT,
    LEFT_NUMBERS_COMMAND,
    LINE_END,
    POEM_LINES_COMMAND,
    POEM_TITLE_COMMAND,
    SET_LINE_NUMS_COMMAND,
    SET_WIDTH_COMMAND,
    SIDE_LEFT,
    STANZA_BREAK,
    VERSE_ENVIRONMENT,
    VERSE_WIDTH_LENGTH,
    VINDENT_LENGTH,
)
from verse_filter.document import RawBlock, render_latex, stringify

from .models import format_number
from .segmenter import stanzas

if typ.TYPE_CHECKING:
    from .models import Content, Line, VerseOptions

logger = logging.getLogger(__name__)


def _first_line(content: Content) -> Line | None:
    """Return the first line of the first non-empty stanza, if any."""
    for stanza in stanzas(content):
        if stanza.lines:
            return stanza.lines[0]
    return None


def _numbering_directives(options: VerseOptions) -> list[str]:
    if not options.line_numbers_requested:
        return []
    frequency = 1 if options.line_numbers is None else options.line_numbers
    directives = [f"{POEM_LINES_COMMAND}{{{format_number(frequency)}}}"]
    if options.line_num_side == SIDE_LEFT:
        directives.append(LEFT_NUMBERS_COMMAND)
    if options.first_line_num_requested:
        directives.append(
            f"{SET_LINE_NUMS_COMMAND}{{{format_number(options.first_line_num)}}}"
            f"{{{format_number(options.start_nums_at)}}}"
        )
    return directives


def render_print(content: Content, options: VerseOptions) -> RawBlock:
    """Render verse content into a single raw LaTeX block.

    Parameters
    ----------
    content : Content
        Output of :func:`~verse_filter.verse.segmenter.segment_verse`.
    options : VerseOptions
        Resolved verse options.

    Returns
    -------
    RawBlock
        ``latex`` block holding title, width measurement, the environment,
        numbering and indent directives, and every line terminated by
        ``\\``. Blocks that are not stanzas are omitted.
    """
    out: list[str] = []

    if options.title:
        out.append(f"{POEM_TITLE_COMMAND}{{{stringify(options.title)}}}")

    sample = _first_line(content)
    if sample is not None:
        out.append(f"{SET_WIDTH_COMMAND}{{{VERSE_WIDTH_LENGTH}}}{{{render_latex(sample)}}}")
        out.append(f"\\begin{{{VERSE_ENVIRONMENT}}}[{VERSE_WIDTH_LENGTH}]")
    else:
        logger.debug("Verse block has no lines; skipping width measurement")
        out.append(f"\\begin{{{VERSE_ENVIRONMENT}}}")
    out.append("")

    out.extend(_numbering_directives(options))

    if options.vindent:
        out.append(f"\\setlength{{{VINDENT_LENGTH}}}{{{options.vindent}}}")

    for index, stanza in enumerate(stanzas(content)):
        if index:
            out.append(STANZA_BREAK)
        out.extend(f"{render_latex(line)}{LINE_END}" for line in stanza.lines)

    if options.line_numbers_requested:
        out.append(f"{POEM_LINES_COMMAND}{{0}}")

    out.append(f"\\end{{{VERSE_ENVIRONMENT}}}")
    return RawBlock(LATEX_FORMAT, "\n".join(out) + "\n")


__all__ = ["render_print"]
