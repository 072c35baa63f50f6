r"""Split verse paragraphs into stanzas of lines.

Each paragraph inside a verse div becomes one stanza (a ``LineBlock``); soft
and hard breaks separate its lines and are themselves discarded. Every break
closes a line, so consecutive breaks keep an empty line between them and a
trailing break leaves an empty final line. Any other block passes through
unchanged and in place.

Example
-------
>>> from verse_filter.document import LineBreak, Para, Str
>>> from verse_filter.verse.segmenter import segment_verse
>>> content = segment_verse([Para((Str("A"), LineBreak(), Str("B")))])
>>> [len(line) for line in content[0].lines]
[1, 1]
"""

from __future__ import annotations

import logging
import typing as typ

from verse_filter.document import Block, Inline, LineBlock, Para, is_break

if typ.TYPE_CHECKING:
    from .models import Content, Line

logger = logging.getLogger(__name__)


def split_lines(inlines: typ.Iterable[Inline]) -> list[Line]:
    """Split inline content on breaks, keeping every token in order.

    Parameters
    ----------
    inlines : Iterable[Inline]
        Paragraph content, possibly containing ``SoftBreak``/``LineBreak``.

    Returns
    -------
    list[Line]
        One more line than there are breaks; an empty input gives no lines.
    """
    lines: list[Line] = []
    current: list[Inline] = []
    seen_any = False
    for inline in inlines:
        seen_any = True
        if is_break(inline):
            lines.append(tuple(current))
            current = []
        else:
            current.append(inline)
    if seen_any:
        lines.append(tuple(current))
    return lines


def segment_verse(blocks: typ.Iterable[Block]) -> Content:
    """Turn a verse div's children into stanzas and pass-through blocks.

    Parameters
    ----------
    blocks : Iterable[Block]
        Children of the verse container.

    Returns
    -------
    Content
        ``LineBlock`` stanzas in place of paragraphs, other blocks unchanged.
        Paragraphs with no inline content are dropped.
    """
    normalized: list[Block] = []
    for block in blocks:
        match block:
            case Para(content=content):
                lines = split_lines(content)
                if lines:
                    normalized.append(LineBlock(tuple(lines)))
                else:
                    logger.debug("Dropping empty paragraph inside verse block")
            case _:
                normalized.append(block)
    return tuple(normalized)


def stanzas(content: typ.Iterable[Block]) -> list[LineBlock]:
    """Return only the stanza units of segmented content."""
    return [block for block in content if isinstance(block, LineBlock)]


__all__ = ["segment_verse", "split_lines", "stanzas"]
