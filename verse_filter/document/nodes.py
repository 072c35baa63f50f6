"""Immutable block and inline node types for pandoc documents.

The node set is closed: every pandoc element the filter needs to inspect has a
dedicated dataclass, and everything else is carried through untouched as an
``OpaqueInline`` or ``OpaqueBlock`` holding the original JSON payload. Code
that walks the tree dispatches with ``match`` on these classes.

Example
-------
>>> from verse_filter.document.nodes import Para, Space, Str
>>> para = Para((Str("Hello"), Space(), Str("world")))
>>> len(para.content)
3
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ


@dc.dataclass(frozen=True, slots=True)
class Attr:
    """Identifier, classes, and key/value attributes attached to a node."""

    identifier: str = ""
    classes: tuple[str, ...] = ()
    attributes: tuple[tuple[str, str], ...] = ()

    def has_class(self, name: str) -> bool:
        """Return ``True`` when ``name`` is one of the node classes."""
        return name in self.classes

    def as_dict(self) -> dict[str, str]:
        """Return the key/value attributes as a dictionary (last key wins)."""
        return dict(self.attributes)


# Inline nodes -------------------------------------------------------------


@dc.dataclass(frozen=True, slots=True)
class Str:
    text: str


@dc.dataclass(frozen=True, slots=True)
class Space:
    pass


@dc.dataclass(frozen=True, slots=True)
class SoftBreak:
    pass


@dc.dataclass(frozen=True, slots=True)
class LineBreak:
    pass


@dc.dataclass(frozen=True, slots=True)
class Emph:
    content: tuple[Inline, ...]


@dc.dataclass(frozen=True, slots=True)
class Strong:
    content: tuple[Inline, ...]


@dc.dataclass(frozen=True, slots=True)
class Underline:
    content: tuple[Inline, ...]


@dc.dataclass(frozen=True, slots=True)
class Strikeout:
    content: tuple[Inline, ...]


@dc.dataclass(frozen=True, slots=True)
class Superscript:
    content: tuple[Inline, ...]


@dc.dataclass(frozen=True, slots=True)
class Subscript:
    content: tuple[Inline, ...]


@dc.dataclass(frozen=True, slots=True)
class SmallCaps:
    content: tuple[Inline, ...]


@dc.dataclass(frozen=True, slots=True)
class Code:
    text: str
    attr: Attr = Attr()


@dc.dataclass(frozen=True, slots=True)
class Math:
    """Inline or display math; ``display`` selects ``DisplayMath``."""

    text: str
    display: bool = False


@dc.dataclass(frozen=True, slots=True)
class RawInline:
    format: str
    text: str


@dc.dataclass(frozen=True, slots=True)
class Span:
    content: tuple[Inline, ...]
    attr: Attr = Attr()


@dc.dataclass(frozen=True, slots=True)
class Quoted:
    """Quoted inline content; ``double`` selects ``DoubleQuote``."""

    content: tuple[Inline, ...]
    double: bool = True


@dc.dataclass(frozen=True, slots=True)
class Link:
    content: tuple[Inline, ...]
    url: str
    title: str = ""
    attr: Attr = Attr()


@dc.dataclass(frozen=True, slots=True)
class Image:
    """Image whose ``content`` is the alt text."""

    content: tuple[Inline, ...]
    url: str
    title: str = ""
    attr: Attr = Attr()


@dc.dataclass(frozen=True, slots=True)
class Cite:
    """Citation; ``citations`` keeps pandoc's citation records verbatim."""

    content: tuple[Inline, ...]
    citations: tuple[typ.Any, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class Note:
    """Footnote holding block content."""

    content: tuple[Block, ...]


@dc.dataclass(frozen=True, slots=True)
class OpaqueInline:
    """Inline element the filter does not model, kept as its JSON payload."""

    payload: dict[str, typ.Any]

    @property
    def tag(self) -> str:
        """Return the pandoc element name of the wrapped payload."""
        return str(self.payload.get("t", ""))


# Block nodes --------------------------------------------------------------


@dc.dataclass(frozen=True, slots=True)
class Para:
    content: tuple[Inline, ...]


@dc.dataclass(frozen=True, slots=True)
class Plain:
    content: tuple[Inline, ...]


@dc.dataclass(frozen=True, slots=True)
class LineBlock:
    """Ordered lines of inline content; the filter's stanza representation."""

    lines: tuple[tuple[Inline, ...], ...]


@dc.dataclass(frozen=True, slots=True)
class BlockQuote:
    content: tuple[Block, ...]


@dc.dataclass(frozen=True, slots=True)
class Div:
    content: tuple[Block, ...]
    attr: Attr = Attr()


@dc.dataclass(frozen=True, slots=True)
class RawBlock:
    format: str
    text: str


@dc.dataclass(frozen=True, slots=True)
class Header:
    level: int
    content: tuple[Inline, ...]
    attr: Attr = Attr()


@dc.dataclass(frozen=True, slots=True)
class HorizontalRule:
    pass


@dc.dataclass(frozen=True, slots=True)
class CodeBlock:
    text: str
    attr: Attr = Attr()


@dc.dataclass(frozen=True, slots=True)
class BulletList:
    items: tuple[tuple[Block, ...], ...]


@dc.dataclass(frozen=True, slots=True)
class OrderedList:
    """Numbered list; ``list_attributes`` keeps pandoc's start/style/delim."""

    items: tuple[tuple[Block, ...], ...]
    list_attributes: tuple[typ.Any, ...] = (1, {"t": "DefaultStyle"}, {"t": "DefaultDelim"})


@dc.dataclass(frozen=True, slots=True)
class OpaqueBlock:
    """Block element the filter does not model, kept as its JSON payload."""

    payload: dict[str, typ.Any]

    @property
    def tag(self) -> str:
        """Return the pandoc element name of the wrapped payload."""
        return str(self.payload.get("t", ""))


Inline: typ.TypeAlias = (
    Str
    | Space
    | SoftBreak
    | LineBreak
    | Emph
    | Strong
    | Underline
    | Strikeout
    | Superscript
    | Subscript
    | SmallCaps
    | Code
    | Math
    | RawInline
    | Span
    | Quoted
    | Link
    | Image
    | Cite
    | Note
    | OpaqueInline
)

Block: typ.TypeAlias = (
    Para
    | Plain
    | LineBlock
    | BlockQuote
    | Div
    | RawBlock
    | Header
    | HorizontalRule
    | CodeBlock
    | BulletList
    | OrderedList
    | OpaqueBlock
)


@dc.dataclass(frozen=True, slots=True)
class Document:
    """Complete pandoc document: API version, raw metadata, and blocks."""

    blocks: tuple[Block, ...]
    meta: dict[str, typ.Any] = dc.field(default_factory=dict)
    api_version: tuple[int, ...] = (1, 23, 1)


def is_break(inline: Inline) -> bool:
    """Return ``True`` for soft and hard line breaks."""
    return isinstance(inline, SoftBreak | LineBreak)


__all__ = [
    "Attr",
    "Block",
    "BlockQuote",
    "BulletList",
    "Cite",
    "Code",
    "CodeBlock",
    "Div",
    "Document",
    "Emph",
    "Header",
    "HorizontalRule",
    "Image",
    "Inline",
    "LineBlock",
    "LineBreak",
    "Link",
    "Math",
    "Note",
    "OpaqueBlock",
    "OpaqueInline",
    "OrderedList",
    "Para",
    "Plain",
    "Quoted",
    "RawBlock",
    "RawInline",
    "SmallCaps",
    "SoftBreak",
    "Space",
    "Span",
    "Str",
    "Strikeout",
    "Strong",
    "Subscript",
    "Superscript",
    "Underline",
    "is_break",
]
