"""Render verse for formats without dedicated support (docx, odt, ...)."""

from __future__ import annotations

import typing as typ

from verse_filter.document import Block, BlockQuote, Para, Str, Strong, stringify

if typ.TYPE_CHECKING:
    from .models import Content, VerseOptions


def render_fallback(content: Content, options: VerseOptions) -> list[Block]:
    """Return a bold title paragraph (if any) and the content in a block quote.

    The segmented content is wrapped as-is, so stanzas stay native
    ``LineBlock`` nodes and pass-through blocks are preserved for the host
    writer to render.
    """
    blocks: list[Block] = []
    if options.title:
        blocks.append(Para((Strong((Str(stringify(options.title)),)),)))
    blocks.append(BlockQuote(tuple(content)))
    return blocks


__all__ = ["render_fallback"]
