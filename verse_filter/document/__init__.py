"""Pandoc document model, JSON codec, and inline serializers.

This subpackage stands in for the host document engine: it decodes pandoc's
JSON AST into immutable node dataclasses, encodes them back, and provides the
two inline serializations the verse renderers need (plain text and LaTeX).

Examples
--------
>>> from verse_filter.document import Str, stringify
>>> stringify([Str("Ode")])
'Ode'
"""

from .codec import DocumentDecodeError, decode_document, encode_document
from .latex import render_inlines as render_latex
from .nodes import (
    Attr,
    Block,
    BlockQuote,
    BulletList,
    Cite,
    Code,
    CodeBlock,
    Div,
    Document,
    Emph,
    Header,
    HorizontalRule,
    Image,
    Inline,
    LineBlock,
    LineBreak,
    Link,
    Math,
    Note,
    OpaqueBlock,
    OpaqueInline,
    OrderedList,
    Para,
    Plain,
    Quoted,
    RawBlock,
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
    is_break,
)
from .stringify import stringify

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
    "DocumentDecodeError",
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
    "decode_document",
    "encode_document",
    "is_break",
    "render_latex",
    "stringify",
]
