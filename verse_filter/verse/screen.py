"""Render segmented verse as nested HTML ``div`` fragments."""

from __future__ import annotations

import logging
import typing as typ

from verse_filter._constants import (
    HTML_FORMAT,
    LINE_CLASS,
    LINE_COUNTER,
    LINE_NUMBERED_CLASS,
    LINENUMS_CLASS_TEMPLATE,
    STANZA_CLASS,
    TITLE_CLASS,
    VERSE_CLASS,
)
from verse_filter.document import LineBlock, RawBlock, stringify

from .models import format_number

if typ.TYPE_CHECKING:
    from .models import Content, VerseOptions

logger = logging.getLogger(__name__)

CLOSE_DIV = "</div>"


def _html(text: str) -> RawBlock:
    return RawBlock(HTML_FORMAT, text)


def _container_classes(options: VerseOptions) -> list[str]:
    classes = [VERSE_CLASS]
    if options.numbered:
        classes.append(LINE_NUMBERED_CLASS)
        classes.append(LINENUMS_CLASS_TEMPLATE.format(side=options.line_num_side))
    return classes


def render_screen(content: Content, options: VerseOptions) -> list[RawBlock]:
    """Render verse content as a flat list of raw HTML blocks.

    The blocks open an outer ``div.verse`` whose inline style resets the
    ``verseline`` CSS counter to ``start_nums_at - 1``, add an optional
    ``div.verse-title``, then one ``div.stanza`` per stanza holding a
    ``div.verse-line`` per line. Line text is the stringified inline content;
    no further escaping is applied. Blocks that are not stanzas are omitted.

    Parameters
    ----------
    content : Content
        Output of :func:`~verse_filter.verse.segmenter.segment_verse`.
    options : VerseOptions
        Resolved verse options.

    Returns
    -------
    list[RawBlock]
        HTML fragments in document order; opening and closing tags are
        separate blocks.
    """
    counter_start = format_number(options.start_nums_at - 1)
    blocks = [
        _html(
            f'<div class="{" ".join(_container_classes(options))}" '
            f'style="counter-reset: {LINE_COUNTER} {counter_start}">'
        )
    ]

    if options.title:
        blocks.append(_html(f'<div class="{TITLE_CLASS}">{options.title}{CLOSE_DIV}'))

    for block in content:
        if not isinstance(block, LineBlock):
            logger.debug("Skipping %s inside verse for HTML output", type(block).__name__)
            continue
        blocks.append(_html(f'<div class="{STANZA_CLASS}">'))
        blocks.extend(
            _html(f'<div class="{LINE_CLASS}">{stringify(line)}{CLOSE_DIV}')
            for line in block.lines
        )
        blocks.append(_html(CLOSE_DIV))

    blocks.append(_html(CLOSE_DIV))
    return blocks


__all__ = ["render_screen"]
