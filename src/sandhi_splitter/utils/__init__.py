# sandhi_splitter/utils/__init__.py
"""

Does: Provide data-dir/config loading and lightweight debug logging utilities.
Returns: Public API via load_config/resolve_data_file and debug/reload_topics.
Used by: Settings, the rule loader, the CLI, and tests.
"""

from __future__ import annotations

from .config_loader import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigReadError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    resolve_data_file,
)
from .log import (
    debug,
    reload_topics,
    topic_enabled,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "resolve_data_file",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigReadError",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "reload_topics",
    "topic_enabled",
]
