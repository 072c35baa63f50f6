"""Verse segmentation, option resolution, and the three output renderers."""

from .fallback import render_fallback
from .models import VerseOptions
from .options import coerce_number, resolve_options
from .screen import render_screen
from .segmenter import segment_verse, split_lines, stanzas
from .typeset import render_print

__all__ = [
    "VerseOptions",
    "coerce_number",
    "render_fallback",
    "render_print",
    "render_screen",
    "resolve_options",
    "segment_verse",
    "split_lines",
    "stanzas",
]
