# src/sandhi_splitter/config.py
from __future__ import annotations

"""
config.py

Does: Load splitter settings from <data>/splitter.json, falling back to defaults.
Returns: Frozen SplitterSettings (rules file name, window mode, trailing flag).
Used by: load_rule_table() and the CLI.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sandhi_splitter.sandhi.split_core import WINDOW_MODES, WindowMode
from sandhi_splitter.utils.config_loader import ConfigFileNotFound, DataDirNotFound, load_config

__all__ = ["SplitterSettings", "DEFAULT_SETTINGS", "load_settings"]

log = logging.getLogger(__name__)

SETTINGS_FILE = "splitter"


@dataclass(frozen=True)
class SplitterSettings:
    rules_file: str = "sandhi.tsv"
    window: WindowMode = "inclusive"
    include_trailing: bool = False


DEFAULT_SETTINGS = SplitterSettings()


def _validate(raw: dict[str, Any]) -> dict[str, Any]:
    unknown = set(raw) - {"rules_file", "window", "include_trailing"}
    if unknown:
        raise ValueError(f"unknown keys: {sorted(unknown)}")

    out: dict[str, Any] = {}
    if "rules_file" in raw:
        if not isinstance(raw["rules_file"], str) or not raw["rules_file"]:
            raise ValueError("'rules_file' must be a non-empty string")
        out["rules_file"] = raw["rules_file"]
    if "window" in raw:
        if raw["window"] not in WINDOW_MODES:
            raise ValueError(f"'window' must be one of {WINDOW_MODES}, got {raw['window']!r}")
        out["window"] = raw["window"]
    if "include_trailing" in raw:
        if not isinstance(raw["include_trailing"], bool):
            raise ValueError("'include_trailing' must be a boolean")
        out["include_trailing"] = raw["include_trailing"]
    return out


def load_settings(*, base_dir: Path | None = None) -> SplitterSettings:
    """
    Does: Read splitter.json from the data dir and validate it.
    Returns: SplitterSettings; defaults when no data dir or file exists.
    Raises: ConfigParseError / ConfigTypeError on an invalid file;
            ConfigReadError when the file exists but cannot be read.
    """
    try:
        values = load_config(SETTINGS_FILE, base_dir=base_dir, validator=_validate)
    except (ConfigFileNotFound, DataDirNotFound):
        log.debug("No %s.json found; using default settings", SETTINGS_FILE)
        return DEFAULT_SETTINGS
    return SplitterSettings(**values)
