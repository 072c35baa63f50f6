"""Convert between pandoc's JSON AST and the node model.

Pandoc serializes each element as ``{"t": <name>, "c": <contents>}`` with
positional contents. Elements without a dedicated node class are wrapped
as opaque nodes so a decode/encode cycle returns them byte-for-byte.

Example
-------
>>> from verse_filter.document.codec import decode_document, encode_document
>>> doc = decode_document(b'{"pandoc-api-version":[1,23,1],"meta":{},"blocks":[]}')
>>> encode_document(doc)
b'{"pandoc-api-version":[1,23,1],"meta":{},"blocks":[]}'
"""

from __future__ import annotations

import typing as typ

import msgspec
import msgspec.json as msgspec_json

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
)

API_VERSION_KEY = "pandoc-api-version"

_WRAPPER_INLINES: dict[str, type[Emph | Strong | Underline | Strikeout | Superscript | Subscript | SmallCaps]] = {
    "Emph": Emph,
    "Strong": Strong,
    "Underline": Underline,
    "Strikeout": Strikeout,
    "Superscript": Superscript,
    "Subscript": Subscript,
    "SmallCaps": SmallCaps,
}
_WRAPPER_NAMES = {cls: name for name, cls in _WRAPPER_INLINES.items()}


class DocumentDecodeError(ValueError):
    """Raised when input is not a well-formed pandoc JSON document."""


def _decode_attr(raw: typ.Any) -> Attr:
    identifier, classes, pairs = raw
    return Attr(
        identifier=identifier,
        classes=tuple(classes),
        attributes=tuple((key, value) for key, value in pairs),
    )


def _encode_attr(attr: Attr) -> list[typ.Any]:
    return [
        attr.identifier,
        list(attr.classes),
        [[key, value] for key, value in attr.attributes],
    ]


def decode_inlines(raw: typ.Iterable[typ.Any]) -> tuple[Inline, ...]:
    """Decode a JSON list of inline elements."""
    return tuple(decode_inline(item) for item in raw)


def decode_inline(raw: dict[str, typ.Any]) -> Inline:  # noqa: PLR0911
    """Decode one JSON inline element into its node class."""
    tag = raw.get("t")
    contents = raw.get("c")
    match tag:
        case "Str":
            return Str(contents)
        case "Space":
            return Space()
        case "SoftBreak":
            return SoftBreak()
        case "LineBreak":
            return LineBreak()
        case "Code":
            return Code(contents[1], _decode_attr(contents[0]))
        case "Math":
            return Math(contents[1], display=contents[0].get("t") == "DisplayMath")
        case "RawInline":
            return RawInline(contents[0], contents[1])
        case "Span":
            return Span(decode_inlines(contents[1]), _decode_attr(contents[0]))
        case "Quoted":
            return Quoted(
                decode_inlines(contents[1]),
                double=contents[0].get("t") == "DoubleQuote",
            )
        case "Link":
            url, title = contents[2]
            return Link(decode_inlines(contents[1]), url, title, _decode_attr(contents[0]))
        case "Image":
            url, title = contents[2]
            return Image(decode_inlines(contents[1]), url, title, _decode_attr(contents[0]))
        case "Cite":
            return Cite(decode_inlines(contents[1]), tuple(contents[0]))
        case "Note":
            return Note(decode_blocks(contents))
        case str() if tag in _WRAPPER_INLINES:
            return _WRAPPER_INLINES[tag](decode_inlines(contents))
        case _:
            return OpaqueInline(raw)


def encode_inline(inline: Inline) -> dict[str, typ.Any]:  # noqa: PLR0911
    """Encode one inline node back into pandoc JSON."""
    match inline:
        case Str(text=text):
            return {"t": "Str", "c": text}
        case Space():
            return {"t": "Space"}
        case SoftBreak():
            return {"t": "SoftBreak"}
        case LineBreak():
            return {"t": "LineBreak"}
        case Code(text=text, attr=attr):
            return {"t": "Code", "c": [_encode_attr(attr), text]}
        case Math(text=text, display=display):
            kind = "DisplayMath" if display else "InlineMath"
            return {"t": "Math", "c": [{"t": kind}, text]}
        case RawInline(format=fmt, text=text):
            return {"t": "RawInline", "c": [fmt, text]}
        case Span(content=content, attr=attr):
            return {"t": "Span", "c": [_encode_attr(attr), encode_inlines(content)]}
        case Quoted(content=content, double=double):
            kind = "DoubleQuote" if double else "SingleQuote"
            return {"t": "Quoted", "c": [{"t": kind}, encode_inlines(content)]}
        case Link(content=content, url=url, title=title, attr=attr):
            return {
                "t": "Link",
                "c": [_encode_attr(attr), encode_inlines(content), [url, title]],
            }
        case Image(content=content, url=url, title=title, attr=attr):
            return {
                "t": "Image",
                "c": [_encode_attr(attr), encode_inlines(content), [url, title]],
            }
        case Cite(content=content, citations=citations):
            return {"t": "Cite", "c": [list(citations), encode_inlines(content)]}
        case Note(content=content):
            return {"t": "Note", "c": encode_blocks(content)}
        case OpaqueInline(payload=payload):
            return payload
        case _:
            return {"t": _WRAPPER_NAMES[type(inline)], "c": encode_inlines(inline.content)}


def encode_inlines(inlines: typ.Iterable[Inline]) -> list[dict[str, typ.Any]]:
    """Encode a sequence of inline nodes."""
    return [encode_inline(item) for item in inlines]


def decode_blocks(raw: typ.Iterable[typ.Any]) -> tuple[Block, ...]:
    """Decode a JSON list of block elements."""
    return tuple(decode_block(item) for item in raw)


def decode_block(raw: dict[str, typ.Any]) -> Block:  # noqa: PLR0911
    """Decode one JSON block element into its node class."""
    tag = raw.get("t")
    contents = raw.get("c")
    match tag:
        case "Para":
            return Para(decode_inlines(contents))
        case "Plain":
            return Plain(decode_inlines(contents))
        case "LineBlock":
            return LineBlock(tuple(decode_inlines(line) for line in contents))
        case "BlockQuote":
            return BlockQuote(decode_blocks(contents))
        case "Div":
            return Div(decode_blocks(contents[1]), _decode_attr(contents[0]))
        case "RawBlock":
            return RawBlock(contents[0], contents[1])
        case "Header":
            return Header(contents[0], decode_inlines(contents[2]), _decode_attr(contents[1]))
        case "HorizontalRule":
            return HorizontalRule()
        case "CodeBlock":
            return CodeBlock(contents[1], _decode_attr(contents[0]))
        case "BulletList":
            return BulletList(tuple(decode_blocks(item) for item in contents))
        case "OrderedList":
            return OrderedList(
                tuple(decode_blocks(item) for item in contents[1]),
                tuple(contents[0]),
            )
        case _:
            return OpaqueBlock(raw)


def encode_block(block: Block) -> dict[str, typ.Any]:  # noqa: PLR0911
    """Encode one block node back into pandoc JSON."""
    match block:
        case Para(content=content):
            return {"t": "Para", "c": encode_inlines(content)}
        case Plain(content=content):
            return {"t": "Plain", "c": encode_inlines(content)}
        case LineBlock(lines=lines):
            return {"t": "LineBlock", "c": [encode_inlines(line) for line in lines]}
        case BlockQuote(content=content):
            return {"t": "BlockQuote", "c": encode_blocks(content)}
        case Div(content=content, attr=attr):
            return {"t": "Div", "c": [_encode_attr(attr), encode_blocks(content)]}
        case RawBlock(format=fmt, text=text):
            return {"t": "RawBlock", "c": [fmt, text]}
        case Header(level=level, content=content, attr=attr):
            return {"t": "Header", "c": [level, _encode_attr(attr), encode_inlines(content)]}
        case HorizontalRule():
            return {"t": "HorizontalRule"}
        case CodeBlock(text=text, attr=attr):
            return {"t": "CodeBlock", "c": [_encode_attr(attr), text]}
        case BulletList(items=items):
            return {"t": "BulletList", "c": [encode_blocks(item) for item in items]}
        case OrderedList(items=items, list_attributes=list_attributes):
            return {
                "t": "OrderedList",
                "c": [list(list_attributes), [encode_blocks(item) for item in items]],
            }
        case OpaqueBlock(payload=payload):
            return payload
    msg = f"Unsupported block node: {type(block).__name__}"
    raise TypeError(msg)


def encode_blocks(blocks: typ.Iterable[Block]) -> list[dict[str, typ.Any]]:
    """Encode a sequence of block nodes."""
    return [encode_block(item) for item in blocks]


def decode_document(data: bytes | str) -> Document:
    """Parse pandoc JSON into a :class:`Document`.

    Parameters
    ----------
    data : bytes or str
        JSON text as produced by ``pandoc --to json``.

    Returns
    -------
    Document
        Decoded document with metadata kept verbatim.

    Raises
    ------
    DocumentDecodeError
        If ``data`` is not valid JSON, is not an object, or lacks the
        ``pandoc-api-version`` and ``blocks`` keys, or an element is
        malformed.
    """
    try:
        raw = msgspec_json.decode(data)
    except msgspec.DecodeError as exc:
        msg = f"Input is not valid JSON: {exc}"
        raise DocumentDecodeError(msg) from exc
    if not isinstance(raw, dict):
        msg = "Top-level JSON value must be an object."
        raise DocumentDecodeError(msg)
    if API_VERSION_KEY not in raw or "blocks" not in raw:
        msg = f"JSON object is missing '{API_VERSION_KEY}' or 'blocks'."
        raise DocumentDecodeError(msg)
    try:
        blocks = decode_blocks(raw["blocks"])
    except (TypeError, ValueError, IndexError, KeyError, AttributeError) as exc:
        msg = f"Malformed pandoc element: {exc}"
        raise DocumentDecodeError(msg) from exc
    return Document(
        blocks=blocks,
        meta=raw.get("meta") or {},
        api_version=tuple(raw[API_VERSION_KEY]),
    )


def encode_document(document: Document) -> bytes:
    """Serialize a :class:`Document` back into pandoc JSON bytes."""
    payload = {
        API_VERSION_KEY: list(document.api_version),
        "meta": document.meta,
        "blocks": encode_blocks(document.blocks),
    }
    return msgspec_json.encode(payload)


__all__ = [
    "API_VERSION_KEY",
    "DocumentDecodeError",
    "decode_block",
    "decode_blocks",
    "decode_document",
    "decode_inline",
    "decode_inlines",
    "encode_block",
    "encode_blocks",
    "encode_document",
    "encode_inline",
    "encode_inlines",
]
