"""Detect verse divs and replace them with target-specific output.

:func:`transform_verse_div` handles one node: it returns ``None`` for anything
that is not a ``verse`` div, which tells the caller to keep the node as-is.
:class:`VerseFilter` walks a whole :class:`~verse_filter.document.Document`
bottom-up and splices the replacement blocks in place. The walk reaches
footnote bodies and the raw JSON of tables, figures, and definition lists.

Example
-------
>>> from verse_filter.dispatcher import VerseFilter
>>> from verse_filter.document import Attr, Div, Document, Para, Str
>>> from verse_filter.targets import OutputTarget
>>> doc = Document((Div((Para((Str("Hi"),)),), Attr(classes=("verse",))),))
>>> out = VerseFilter(OutputTarget.PRINT).apply(doc)
>>> out.blocks[0].format
'latex'
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from verse_filter._constants import VERSE_CLASS
from verse_filter.document import (
    Block,
    BlockQuote,
    BulletList,
    Cite,
    Div,
    Document,
    DocumentDecodeError,
    Emph,
    Header,
    Image,
    Inline,
    LineBlock,
    Link,
    Note,
    OpaqueBlock,
    OpaqueInline,
    OrderedList,
    Para,
    Plain,
    Quoted,
    SmallCaps,
    Span,
    Strikeout,
    Strong,
    Subscript,
    Superscript,
    Underline,
)
from verse_filter.document.codec import decode_block, encode_blocks
from verse_filter.targets import OutputTarget
from verse_filter.verse import (
    render_fallback,
    render_print,
    render_screen,
    resolve_options,
    segment_verse,
)

logger = logging.getLogger(__name__)

_INLINE_CONTAINERS = (
    Emph,
    Strong,
    Underline,
    Strikeout,
    Superscript,
    Subscript,
    SmallCaps,
    Span,
    Quoted,
    Link,
    Image,
    Cite,
)


def transform_verse_div(
    div: Div,
    target: OutputTarget,
    defaults: typ.Mapping[str, str] | None = None,
) -> list[Block] | None:
    """Render ``div`` for ``target`` when it carries the ``verse`` class.

    Parameters
    ----------
    div : Div
        Candidate node.
    target : OutputTarget
        Active rendering target; consulted exactly once.
    defaults : Mapping[str, str], optional
        Attribute values applied before the div's own attributes.

    Returns
    -------
    list[Block] or None
        Replacement blocks, or ``None`` when the div is not a verse block
        and should be left unchanged.
    """
    if not div.attr.has_class(VERSE_CLASS):
        return None

    attributes = dict(defaults or {})
    attributes.update(div.attr.as_dict())
    options = resolve_options(attributes)
    content = segment_verse(div.content)
    logger.debug(
        "Rendering verse div %r for %s with %d blocks",
        div.attr.identifier,
        target.value,
        len(content),
    )

    match target:
        case OutputTarget.SCREEN:
            return list(render_screen(content, options))
        case OutputTarget.PRINT:
            return [render_print(content, options)]
        case _:
            return render_fallback(content, options)


class VerseFilter:
    """Apply :func:`transform_verse_div` to every div in a document."""

    def __init__(
        self, target: OutputTarget, defaults: typ.Mapping[str, str] | None = None
    ) -> None:
        self.target = target
        self.defaults = dict(defaults or {})
        self.replaced = 0

    def apply(self, document: Document) -> Document:
        """Return a copy of ``document`` with every verse div rendered."""
        blocks = self.walk_blocks(document.blocks)
        logger.info("Rendered %d verse block(s) for %s", self.replaced, self.target.value)
        return dc.replace(document, blocks=blocks)

    def walk_blocks(self, blocks: typ.Iterable[Block]) -> tuple[Block, ...]:
        """Transform ``blocks`` children-first, splicing replacements in place."""
        result: list[Block] = []
        for block in blocks:
            walked = self._walk_children(block)
            replacement = None
            if isinstance(walked, Div):
                replacement = transform_verse_div(walked, self.target, self.defaults)
            if replacement is None:
                result.append(walked)
            else:
                self.replaced += 1
                result.extend(replacement)
        return tuple(result)

    def _walk_children(self, block: Block) -> Block:
        match block:
            case Div(content=content) | BlockQuote(content=content):
                return dc.replace(block, content=self.walk_blocks(content))
            case BulletList(items=items) | OrderedList(items=items):
                return dc.replace(
                    block, items=tuple(self.walk_blocks(item) for item in items)
                )
            case Para(content=content) | Plain(content=content) | Header(content=content):
                walked = self._walk_inlines(content)
                return block if walked is content else dc.replace(block, content=walked)
            case LineBlock(lines=lines):
                walked_lines = tuple(self._walk_inlines(line) for line in lines)
                if _same_nodes(walked_lines, lines):
                    return block
                return dc.replace(block, lines=walked_lines)
            case OpaqueBlock(payload=payload):
                before = self.replaced
                walked_payload = self._walk_payload(payload)
                return block if self.replaced == before else OpaqueBlock(walked_payload)
            case _:
                return block

    def _walk_inlines(self, inlines: tuple[Inline, ...]) -> tuple[Inline, ...]:
        """Return ``inlines`` with footnote bodies walked, or the same tuple."""
        walked = tuple(self._walk_inline(inline) for inline in inlines)
        return inlines if _same_nodes(walked, inlines) else walked

    def _walk_inline(self, inline: Inline) -> Inline:
        match inline:
            case Note(content=content):
                blocks = self.walk_blocks(content)
                if _same_nodes(blocks, content):
                    return inline
                return Note(blocks)
            case OpaqueInline(payload=payload):
                before = self.replaced
                walked_payload = self._walk_payload(payload)
                return inline if self.replaced == before else OpaqueInline(walked_payload)
            case _ if isinstance(inline, _INLINE_CONTAINERS):
                walked = self._walk_inlines(inline.content)
                return inline if walked is inline.content else dc.replace(inline, content=walked)
            case _:
                return inline

    def _walk_payload(self, value: typ.Any) -> typ.Any:
        """Search raw pandoc JSON for divs, rendering any that are verse blocks.

        Tables, figures, definition lists, and other elements without a node
        class keep their JSON form. Every ``Div`` found inside them is decoded,
        walked like any other block, and spliced back as JSON.
        """
        match value:
            case list():
                result: list[typ.Any] = []
                for item in value:
                    if isinstance(item, dict) and item.get("t") == "Div":
                        result.extend(encode_blocks(self.walk_blocks((_decode_nested(item),))))
                    else:
                        result.append(self._walk_payload(item))
                return result
            case dict():
                return {key: self._walk_payload(item) for key, item in value.items()}
            case _:
                return value


def _same_nodes(new: typ.Sequence[typ.Any], old: typ.Sequence[typ.Any]) -> bool:
    return len(new) == len(old) and all(a is b for a, b in zip(new, old, strict=False))


def _decode_nested(raw: dict[str, typ.Any]) -> Block:
    try:
        return decode_block(raw)
    except (TypeError, ValueError, IndexError, KeyError, AttributeError) as exc:
        msg = f"Malformed pandoc element: {exc}"
        raise DocumentDecodeError(msg) from exc


__all__ = ["VerseFilter", "transform_verse_div"]
