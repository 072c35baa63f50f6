"""Load verse filter configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from verse_filter._constants import VERSE_ATTRIBUTES
from verse_filter.targets import OutputTarget

from .models import FilterConfig, FilterConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_target(value: object | None) -> OutputTarget | None:
    """Return the configured OutputTarget, rejecting unknown names."""
    text = _optional_str(value)
    if text is None:
        return None
    try:
        return OutputTarget(text.lower())
    except ValueError as exc:
        known = ", ".join(target.value for target in OutputTarget)
        msg = f"Unknown target '{text}'. Expected one of: {known}"
        raise FilterConfigError(msg) from exc


def _parse_defaults(value: object | None) -> dict[str, str]:
    """Validate the ``defaults`` mapping and coerce its values to strings."""
    match value:
        case None:
            return {}
        case dict():
            pass
        case _:
            msg = "'defaults' must be a mapping of verse attributes."
            raise FilterConfigError(msg)
    defaults: dict[str, str] = {}
    for key, raw in value.items():
        name = str(key).strip().lower()
        if name not in VERSE_ATTRIBUTES:
            known = ", ".join(VERSE_ATTRIBUTES)
            msg = f"Unknown verse attribute '{key}'. Expected one of: {known}"
            raise FilterConfigError(msg)
        text = _optional_str(raw)
        if text is not None:
            defaults[name] = text
    return defaults


def _parse_log_level(value: object | None) -> str:
    level = (_optional_str(value) or "WARNING").upper()
    if level not in LOG_LEVELS:
        msg = f"Unknown log level '{value}'. Expected one of: {', '.join(LOG_LEVELS)}"
        raise FilterConfigError(msg)
    return level


def build_filter_config(raw: typ.Mapping[str, typ.Any]) -> FilterConfig:
    """Build a :class:`FilterConfig` from an already-parsed mapping."""
    unknown = sorted(set(raw) - {"target", "defaults", "log_level"})
    if unknown:
        msg = f"Unknown configuration keys: {', '.join(map(str, unknown))}"
        raise FilterConfigError(msg)
    return FilterConfig(
        target=_parse_target(raw.get("target")),
        defaults=_parse_defaults(raw.get("defaults")),
        log_level=_parse_log_level(raw.get("log_level")),
    )


def load_filter_config(path: Path) -> FilterConfig:
    """Load the YAML file holding verse filter settings.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration (for example,
        ``verse.yaml``).

    Returns
    -------
    FilterConfig
        Parsed configuration; an empty file yields the defaults.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    FilterConfigError
        If a key, target, log level, or default attribute is not recognised.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from verse_filter.config import load_filter_config
    >>> config = load_filter_config(Path("verse.yaml"))  # doctest: +SKIP
    >>> config.defaults  # doctest: +SKIP
    {'linenumside': 'left'}
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return build_filter_config(loaded)


__all__ = ["build_filter_config", "load_filter_config"]
