"""Shared types for verse segmentation and rendering."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from verse_filter._constants import SIDE_RIGHT

if typ.TYPE_CHECKING:
    from verse_filter.document import Block, Inline, LineBlock

Line: typ.TypeAlias = "tuple[Inline, ...]"
Stanza: typ.TypeAlias = "LineBlock"
Content: typ.TypeAlias = "tuple[Block, ...]"

Number: typ.TypeAlias = int | float


@dc.dataclass(frozen=True, slots=True)
class VerseOptions:
    """Formatting options resolved from a verse div's attributes.

    Attributes
    ----------
    indent_after : str or None
        Reserved; carried through but not used by any renderer.
    vindent : str or None
        LaTeX length for ``\\vindent`` (for example ``"1.5em"``).
    title : str or None
        Poem title; ``None`` suppresses every title fragment.
    line_numbers : int or float or None
        Numbering frequency when ``linenumbers`` parsed as a number.
    line_numbers_requested : bool
        ``True`` whenever ``linenumbers`` was supplied, numeric or not.
    line_num_side : str
        ``"left"`` or ``"right"`` (default).
    first_line_num : int or float
        Number of the first line; defaults to ``1``.
    first_line_num_requested : bool
        ``True`` when ``firstlinenum`` was supplied.
    start_nums_at : int or float
        First printed number; defaults to ``first_line_num``.
    """

    indent_after: str | None = None
    vindent: str | None = None
    title: str | None = None
    line_numbers: Number | None = None
    line_numbers_requested: bool = False
    line_num_side: str = SIDE_RIGHT
    first_line_num: Number = 1
    first_line_num_requested: bool = False
    start_nums_at: Number = 1

    @property
    def numbered(self) -> bool:
        """Return ``True`` when a numeric numbering frequency was resolved."""
        return self.line_numbers is not None


def format_number(value: Number) -> str:
    """Render ``value`` without a trailing ``.0`` for integral numbers.

    Examples
    --------
    >>> format_number(4)
    '4'
    >>> format_number(2.5)
    '2.5'
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


__all__ = ["Content", "Line", "Number", "Stanza", "VerseOptions", "format_number"]
