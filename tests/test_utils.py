# tests/test_utils.py
"""Tests for utils (load_config, resolve_data_file, log) and the settings loader."""

from __future__ import annotations

import io
import json
import os

import pytest

from sandhi_splitter import config as C
from sandhi_splitter.utils import config_loader as LC
from sandhi_splitter.utils import log as LOG


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point loader via SANDHI_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("SANDHI_DATA_DIR", str(data))
    LC.clear_config_cache()
    return data


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics, data-dir env and config cache between tests."""
    monkeypatch.delenv("SANDHI_DEBUG_TOPICS", raising=False)
    monkeypatch.delenv("SANDHI_DATA_DIR", raising=False)
    monkeypatch.delenv("DATA_DIR", raising=False)
    LC.clear_config_cache()
    LOG.reload_topics()
    yield
    LOG.reload_topics()


# ---------- resolve_data_file ----------
def test_resolve_data_file_prefers_explicit_base_dir(tmp_data_dir, tmp_path):
    other = tmp_path / "other"
    other.mkdir()
    (other / "sandhi.tsv").write_text("a\ti\te\n", encoding="utf-8")
    assert LC.resolve_data_file("sandhi.tsv", base_dir=other) == (other / "sandhi.tsv").resolve()


def test_resolve_data_file_uses_env_dir(tmp_data_dir):
    (tmp_data_dir / "sandhi.tsv").write_text("", encoding="utf-8")
    assert LC.resolve_data_file("sandhi.tsv") == (tmp_data_dir / "sandhi.tsv").resolve()


def test_resolve_data_file_refuses_escape(tmp_data_dir):
    (tmp_data_dir.parent / "secret.tsv").write_text("", encoding="utf-8")
    with pytest.raises(LC.ConfigFileNotFound, match="outside data dir"):
        LC.resolve_data_file("../secret.tsv")


def test_resolve_data_file_missing(tmp_data_dir):
    with pytest.raises(LC.ConfigFileNotFound):
        LC.resolve_data_file("nope.tsv")


def test_default_data_dir_raises_when_nothing_found(tmp_path):
    start = tmp_path / "a" / "b"
    start.mkdir(parents=True)
    # Only meaningful when no ancestor of tmp_path has a data/ dir.
    if any((p / "data").is_dir() or (p / "Data").is_dir() for p in [start, *start.parents]):
        pytest.skip("an ancestor directory already contains data/")
    with pytest.raises(LC.DataDirNotFound):
        LC._default_data_dir(start)


# ---------- load_config ----------
def test_load_config_reads_object(tmp_data_dir):
    (tmp_data_dir / "splitter.json").write_text(json.dumps({"window": "legacy"}), encoding="utf-8")
    assert LC.load_config("splitter") == {"window": "legacy"}
    assert LC.load_config("splitter.json") == {"window": "legacy"}


def test_load_settings_uses_config_cache(tmp_data_dir):
    p = tmp_data_dir / "splitter.json"
    p.write_text(json.dumps({"window": "legacy"}), encoding="utf-8")

    assert C.load_settings().window == "legacy"
    assert len(LC._CONFIG_CACHE) == 1

    # Same mtime → cached result
    st = p.stat()
    p.write_text(json.dumps({"window": "inclusive"}), encoding="utf-8")
    os.utime(p, ns=(st.st_atime_ns, st.st_mtime_ns))
    assert C.load_settings().window == "legacy"

    LC.clear_config_cache()
    assert C.load_settings().window == "inclusive"


def test_load_config_cache_is_keyed_on_validator(tmp_data_dir):
    (tmp_data_dir / "splitter.json").write_text(json.dumps({"window": "legacy"}), encoding="utf-8")
    assert LC.load_config("splitter", validator=lambda d: {"seen": True}) == {"seen": True}
    assert LC.load_config("splitter") == {"window": "legacy"}


def test_load_config_invalid_json(tmp_data_dir):
    (tmp_data_dir / "bad.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(LC.ConfigParseError):
        LC.load_config("bad")


def test_load_config_requires_object(tmp_data_dir):
    (tmp_data_dir / "list.json").write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(LC.ConfigTypeError, match="expected a JSON object"):
        LC.load_config("list")


def test_load_config_directory_is_read_error(tmp_data_dir):
    (tmp_data_dir / "splitter.json").mkdir()
    with pytest.raises(LC.ConfigReadError, match="not a regular file"):
        LC.load_config("splitter")


def test_resolve_data_file_directory_is_read_error(tmp_data_dir):
    (tmp_data_dir / "rules").mkdir()
    with pytest.raises(LC.ConfigReadError):
        LC.resolve_data_file("rules")


# ---------- settings ----------
def test_load_settings_defaults_without_file(tmp_data_dir):
    assert C.load_settings() == C.DEFAULT_SETTINGS
    assert C.DEFAULT_SETTINGS.rules_file == "sandhi.tsv"
    assert C.DEFAULT_SETTINGS.window == "inclusive"
    assert C.DEFAULT_SETTINGS.include_trailing is False


def test_load_settings_reads_overrides(tmp_data_dir):
    (tmp_data_dir / "splitter.json").write_text(
        json.dumps({"window": "legacy", "include_trailing": True}), encoding="utf-8"
    )
    s = C.load_settings()
    assert s.window == "legacy"
    assert s.include_trailing is True
    assert s.rules_file == "sandhi.tsv"


@pytest.mark.parametrize(
    "payload",
    [
        {"window": "exclusive"},
        {"include_trailing": "yes"},
        {"rules_file": ""},
        {"colour": "red"},
    ],
)
def test_load_settings_rejects_invalid_values(tmp_data_dir, payload):
    (tmp_data_dir / "splitter.json").write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(LC.ConfigParseError):
        C.load_settings()


def test_load_settings_rejects_non_object(tmp_data_dir):
    (tmp_data_dir / "splitter.json").write_text("[]", encoding="utf-8")
    with pytest.raises(LC.ConfigTypeError):
        C.load_settings()


def test_load_settings_unreadable_file_is_an_error(tmp_data_dir):
    (tmp_data_dir / "splitter.json").mkdir()
    with pytest.raises(LC.ConfigReadError):
        C.load_settings()


# ---------- log ----------
def test_debug_is_silent_without_topics():
    buf = io.StringIO()
    LOG.debug("hidden", topic="rules", stream=buf)
    assert buf.getvalue() == ""


def test_debug_prints_enabled_topic(monkeypatch):
    monkeypatch.setenv("SANDHI_DEBUG_TOPICS", "rules, split")
    LOG.reload_topics()
    buf = io.StringIO()
    LOG.debug("loaded 3 rules", topic="Rules", level="info", stream=buf)
    LOG.debug("ignored", topic="cli", stream=buf)
    lines = buf.getvalue().splitlines()
    assert len(lines) == 1
    assert lines[0].endswith("[rules][INFO] loaded 3 rules")


def test_debug_all_enables_every_topic(monkeypatch):
    monkeypatch.setenv("SANDHI_DEBUG_TOPICS", "all")
    LOG.reload_topics()
    assert LOG.topic_enabled("anything")
