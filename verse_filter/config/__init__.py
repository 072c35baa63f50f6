"""Load and validate the optional YAML configuration for verse filtering.

The configuration can force a rendering target, supply default verse
attributes that every div inherits unless it sets its own, and choose the log
level. :func:`load_filter_config` is the entry point used by the CLI.

Examples
--------
>>> from verse_filter.config import build_filter_config
>>> config = build_filter_config({"defaults": {"linenumside": "left"}})
>>> config.defaults
{'linenumside': 'left'}
"""

from .loader import build_filter_config, load_filter_config
from .models import FilterConfig, FilterConfigError

__all__ = [
    "FilterConfig",
    "FilterConfigError",
    "build_filter_config",
    "load_filter_config",
]
