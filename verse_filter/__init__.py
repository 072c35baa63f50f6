"""Pandoc filter that typesets ``.verse`` divs as poetry.

This package exposes the ``verse-filter`` console script used with
``pandoc --filter`` and the building blocks behind it: the document model,
the verse segmenter, and the HTML, LaTeX, and fallback renderers.

Exports
-------
- ``app``: Cyclopts application behind ``verse-filter``.
- ``main``: Convenience function that invokes the app.
- ``filter_json``: Transform a pandoc JSON AST in memory.
- ``VerseFilter``: Walk a decoded document and render verse divs.

Examples
--------
>>> from verse_filter import filter_json
>>> filter_json(b'{"pandoc-api-version":[1,23],"meta":{},"blocks":[]}', "html")
b'{"pandoc-api-version":[1,23],"meta":{},"blocks":[]}'
"""

from __future__ import annotations

from .cli import app, filter_json, main
from .dispatcher import VerseFilter, transform_verse_div
from .targets import OutputTarget

__all__ = [
    "OutputTarget",
    "VerseFilter",
    "app",
    "filter_json",
    "main",
    "transform_verse_div",
]
