"""Classify pandoc output formats into verse rendering targets.

Example
-------
>>> from verse_filter.targets import OutputTarget, target_for_format
>>> target_for_format("html5+smart") is OutputTarget.SCREEN
True
>>> target_for_format("docx") is OutputTarget.OTHER
True
"""

from __future__ import annotations

import enum
import re

SCREEN_FORMATS = frozenset(
    {
        "html",
        "html4",
        "html5",
        "chunkedhtml",
        "revealjs",
        "s5",
        "slidy",
        "slideous",
        "dzslides",
        "epub",
        "epub2",
        "epub3",
    }
)
PRINT_FORMATS = frozenset({"latex", "beamer", "pdf"})

_EXTENSION_PATTERN = re.compile(r"[+-].*$")


class OutputTarget(enum.Enum):
    """Rendering strategy selected for the active output format."""

    SCREEN = "screen"
    PRINT = "print"
    OTHER = "other"


def base_format(name: str) -> str:
    """Strip pandoc extension toggles (``+smart``, ``-raw_tex``) and case."""
    return _EXTENSION_PATTERN.sub("", name.strip()).lower()


def target_for_format(name: str | None) -> OutputTarget:
    """Return the target for a pandoc writer name; unknown names are ``OTHER``."""
    if not name:
        return OutputTarget.OTHER
    fmt = base_format(name)
    if fmt in SCREEN_FORMATS:
        return OutputTarget.SCREEN
    if fmt in PRINT_FORMATS:
        return OutputTarget.PRINT
    return OutputTarget.OTHER


__all__ = [
    "PRINT_FORMATS",
    "SCREEN_FORMATS",
    "OutputTarget",
    "base_format",
    "target_for_format",
]
