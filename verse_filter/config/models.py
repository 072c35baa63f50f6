"""Typed dataclasses describing verse filter configuration."""

from __future__ import annotations

import dataclasses as dc

from verse_filter.targets import OutputTarget  # noqa: TC001 - used for runtime type metadata


class FilterConfigError(ValueError):
    """Raised when the filter configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class FilterConfig:
    """Settings applied to every verse div in a run.

    Attributes
    ----------
    target : OutputTarget or None
        Forces a rendering target regardless of the pandoc output format.
    defaults : dict[str, str]
        Verse attributes applied beneath each div's own attributes.
    log_level : str
        Logging level name for the ``verse_filter`` logger.
    """

    target: OutputTarget | None = None
    defaults: dict[str, str] = dc.field(default_factory=dict)
    log_level: str = "WARNING"


__all__ = ["FilterConfig", "FilterConfigError"]
