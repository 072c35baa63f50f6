"""Resolve verse div attributes into :class:`VerseOptions`."""

from __future__ import annotations

import logging
import math
import re
import typing as typ

from verse_filter._constants import (
    ATTR_FIRST_LINE_NUM,
    ATTR_INDENT_AFTER,
    ATTR_LINE_NUM_SIDE,
    ATTR_LINE_NUMBERS,
    ATTR_START_NUMS_AT,
    ATTR_TITLE,
    ATTR_VINDENT,
    SIDE_LEFT,
    SIDE_RIGHT,
)

from .models import Number, VerseOptions

logger = logging.getLogger(__name__)

HEX_PATTERN = re.compile(r"^[+-]?0[xX][0-9a-fA-F]+$")
DECIMAL_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def coerce_number(value: str | None) -> Number | None:
    """Parse ``value`` as a number, returning ``None`` instead of raising.

    Accepts surrounding whitespace, decimal integers, decimals with optional
    exponents, and ``0x`` hexadecimal. Integral results are returned as
    ``int``.

    Examples
    --------
    >>> coerce_number(" 3 ")
    3
    >>> coerce_number("2.50")
    2.5
    >>> coerce_number("0x10")
    16
    >>> coerce_number("three") is None
    True
    """
    if value is None:
        return None
    text = value.strip()
    if HEX_PATTERN.match(text):
        return int(text, 16)
    if not DECIMAL_PATTERN.match(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    if number.is_integer():
        return int(number)
    return number


def _optional_str(value: str | None) -> str | None:
    """Return ``value`` or ``None`` when it is missing or blank."""
    if value is None or not value.strip():
        return None
    return value


def resolve_options(attributes: typ.Mapping[str, str]) -> VerseOptions:
    """Build :class:`VerseOptions` from a verse div's attribute mapping.

    Parameters
    ----------
    attributes : Mapping[str, str]
        Div attributes; unknown keys are ignored.

    Returns
    -------
    VerseOptions
        Options with defaults applied: numbering side ``"right"``, first line
        number ``1``, and ``start_nums_at`` equal to the first line number
        unless ``startnumsat`` parses as a number.
    """
    raw_line_numbers = _optional_str(attributes.get(ATTR_LINE_NUMBERS))
    raw_first = _optional_str(attributes.get(ATTR_FIRST_LINE_NUM))

    side = (_optional_str(attributes.get(ATTR_LINE_NUM_SIDE)) or SIDE_RIGHT).strip()
    if side not in (SIDE_LEFT, SIDE_RIGHT):
        logger.debug("Unknown %s %r; using %r", ATTR_LINE_NUM_SIDE, side, SIDE_RIGHT)
        side = SIDE_RIGHT

    first_line_num = coerce_number(raw_first)
    if first_line_num is None:
        first_line_num = 1
    start_nums_at = coerce_number(attributes.get(ATTR_START_NUMS_AT))
    if start_nums_at is None:
        start_nums_at = first_line_num

    return VerseOptions(
        indent_after=_optional_str(attributes.get(ATTR_INDENT_AFTER)),
        vindent=_optional_str(attributes.get(ATTR_VINDENT)),
        title=_optional_str(attributes.get(ATTR_TITLE)),
        line_numbers=coerce_number(raw_line_numbers),
        line_numbers_requested=raw_line_numbers is not None,
        line_num_side=side,
        first_line_num=first_line_num,
        first_line_num_requested=raw_first is not None,
        start_nums_at=start_nums_at,
    )


__all__ = ["coerce_number", "resolve_options"]
