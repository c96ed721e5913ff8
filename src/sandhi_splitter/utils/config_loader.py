# src/sandhi_splitter/utils/config_loader.py

"""Locate the <data/> directory and load validated JSON configs from it with caching.

Results are cached per (path, mtime, encoding, validator), so a changed file
or a different validator always re-reads. Also resolves non-JSON data files
(the sandhi rule TSV) under the same directory.
Used by the settings loader, the rule loader, and tests.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import Any

# ── Public surface ────────────────────────────────────────────────────────────
__all__ = [
    "Validator",
    "load_config",
    "clear_config_cache",
    "resolve_data_file",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigReadError",
    "ConfigParseError",
    "ConfigTypeError",
]

ENV_VARS = ("SANDHI_DATA_DIR", "DATA_DIR")

Validator = Callable[[dict[str, Any]], dict[str, Any]]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested data file does not exist or lies outside the data dir."""


class ConfigReadError(OSError):
    """Raise when a data file exists but cannot be read (directory, permissions, I/O)."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key includes: path, mtime, encoding, validator
_CONFIG_CACHE: dict[tuple[Path, float, str, Validator | None], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    """Compute candidate 'data'/'Data' directories walking up from start."""
    start = (start or Path(__file__)).resolve()
    cands: list[Path] = []
    for p in [start, *start.parents]:
        for name in ("data", "Data"):
            cands.append((p / name).resolve())
    return cands


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the first existing candidate directory or raise."""
    for cand in _candidate_data_dirs(start):
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\n"
        "Tried:\n  " + "\n  ".join(str(p) for p in _candidate_data_dirs(start))
    )


def _env_data_dir() -> Path | None:
    """Resolve data dir from env if set."""
    for var in ENV_VARS:
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    return None


def resolve_data_file(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
) -> Path:
    """
    Does: Resolve `file` inside the data directory (explicit > env override > discovery).
    Returns: Absolute path of an existing regular file.
    Raises: ConfigFileNotFound when missing or outside the data dir;
            ConfigReadError when the path exists but is not a regular file.
    """
    if base_dir is None:
        base_dir = _env_data_dir() or _default_data_dir()

    data_dir = Path(base_dir).resolve()
    path = (data_dir / os.fspath(file)).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    if not path.exists():
        raise ConfigFileNotFound(f"Data file not found: {path}")
    if not path.is_file():
        raise ConfigReadError(f"Data path is not a regular file: {path}")
    return path


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Validator | None = None,
) -> dict[str, Any]:
    """Load <data>/<file>.json as a dict, run `validator`, and cache the result."""
    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = resolve_data_file(file_name, base_dir=base_dir)

    # mtime-based cache key for auto-invalidation when file changes
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigReadError(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, encoding, validator)
    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s", path.name)
            return _CONFIG_CACHE[cache_key]

    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigReadError(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")
    if validator is not None:
        try:
            data = validator(data)
        except Exception as e:
            raise ConfigParseError(f"{path.name}: validator failed: {e}") from e

    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = data
        log.debug("Config cache MISS → STORED: %s", path.name)
    return data
