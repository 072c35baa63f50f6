"""Flatten inline content to plain text."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from .nodes import (
    Cite,
    Code,
    Image,
    Inline,
    LineBreak,
    Link,
    Math,
    Note,
    OpaqueInline,
    Quoted,
    RawInline,
    SoftBreak,
    Space,
    Str,
)

OPEN_DOUBLE_QUOTE = "“"
CLOSE_DOUBLE_QUOTE = "”"
OPEN_SINGLE_QUOTE = "‘"
CLOSE_SINGLE_QUOTE = "’"


def _stringify_inline(inline: Inline) -> str:
    match inline:
        case Str(text=text):
            return text
        case Space() | SoftBreak() | LineBreak():
            return " "
        case Code(text=text) | Math(text=text):
            return text
        case Quoted(content=content, double=True):
            return f"{OPEN_DOUBLE_QUOTE}{stringify(content)}{CLOSE_DOUBLE_QUOTE}"
        case Quoted(content=content):
            return f"{OPEN_SINGLE_QUOTE}{stringify(content)}{CLOSE_SINGLE_QUOTE}"
        case Link(content=content) | Image(content=content) | Cite(content=content):
            return stringify(content)
        case RawInline() | OpaqueInline() | Note():
            return ""
        case _:
            return stringify(inline.content)


def stringify(value: str | Inline | typ.Iterable[Inline] | None) -> str:
    """Return the plain text of inline content, dropping all formatting.

    Breaks and spaces become single spaces, quotes become typographic
    quote marks, images give their alt text, and raw, footnote, or unknown
    elements contribute nothing. Strings are returned unchanged so attribute
    values can be passed straight through.

    Examples
    --------
    >>> from verse_filter.document.nodes import Emph, Space, Str
    >>> stringify([Str("a"), Space(), Emph((Str("b"),))])
    'a b'
    >>> stringify("Ode")
    'Ode'
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if not isinstance(value, cabc.Iterable):
        return _stringify_inline(value)
    return "".join(_stringify_inline(item) for item in value)


__all__ = ["stringify"]
