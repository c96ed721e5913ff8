# src/sandhi_splitter/sandhi/rules.py
from __future__ import annotations

"""
rules.py

Does: Index sandhi rules (left, right, combined) by their combined surface
      form, with a space-stripped secondary key, and load them from TSV.
Returns: Immutable RuleTable with ordered multi-valued lookup and max key length.
Used by: split_core (candidate enumeration) and the CLI.
"""

import csv
import logging
import os
from collections.abc import Iterable, Iterator, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType

from sandhi_splitter.utils.log import debug

__all__ = [
    "Pair",
    "RuleTable",
    "FormatError",
    "EmptyTableError",
    "RuleSourceError",
    "read_sandhi_rules",
    "load_rule_table",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

Pair = tuple[str, str]


# ── Exceptions ───────────────────────────────────────────────────────────────
class FormatError(ValueError):
    """Raise when a rule record (or source row) lacks its required fields."""


class EmptyTableError(LookupError):
    """Raise when a table with no entries is asked for a search bound."""


class RuleSourceError(OSError):
    """Raise when the rule source cannot be opened or decoded."""


# ─────────────────────────────────────────────────────────────────────────────
# RuleTable
# ─────────────────────────────────────────────────────────────────────────────


class RuleTable:
    """
    Does: Map combined forms to the ordered (left, right) pairs that produce them.
    Returns: Read-only view via lookup()/keys(); built once with RuleTable.build().
    """

    __slots__ = ("_entries", "_max_key_length", "_rule_count")

    def __init__(self, entries: Mapping[str, Sequence[Pair]], rule_count: int = 0):
        for key in entries:
            if not isinstance(key, str) or not key:
                raise FormatError(f"Rule key must be a non-empty string, got {key!r}")
        frozen = {key: tuple(pairs) for key, pairs in entries.items()}
        self._entries: Mapping[str, tuple[Pair, ...]] = MappingProxyType(frozen)
        self._max_key_length: int | None = max((len(k) for k in frozen), default=None)
        self._rule_count = rule_count

    @classmethod
    def build(cls, records: Iterable[Sequence[str]]) -> RuleTable:
        """
        Does: Register `combined → (left, right)` per record, plus the
              space-stripped combined form when it differs.
        Returns: RuleTable preserving registration order within each key.
        Raises: FormatError for records that are not three strings or
                have an empty combined form.
        """
        entries: dict[str, list[Pair]] = {}
        count = 0
        for idx, record in enumerate(records):
            left, right, combined = _unpack_record(record, idx)
            pair = (left, right)
            entries.setdefault(combined, []).append(pair)

            stripped = combined.replace(" ", "")
            if stripped != combined:
                if not stripped:
                    raise FormatError(f"Record {idx}: combined form is only spaces")
                entries.setdefault(stripped, []).append(pair)
            count += 1

        log.debug("Built rule table: %d records, %d keys", count, len(entries))
        return cls(entries, rule_count=count)

    def lookup(self, key: str) -> tuple[Pair, ...]:
        """Does: Return the pairs registered for `key` (empty tuple if absent)."""
        return self._entries.get(key, ())

    def max_key_length(self) -> int:
        """
        Does: Return the longest registered key, counted in characters.
        Raises: EmptyTableError when the table has no entries.
        """
        if self._max_key_length is None:
            raise EmptyTableError("Rule table is empty; no maximum key length")
        return self._max_key_length

    @property
    def rule_count(self) -> int:
        return self._rule_count

    def keys(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return f"RuleTable(keys={len(self._entries)}, rules={self._rule_count})"


def _unpack_record(record: Sequence[str], idx: int) -> tuple[str, str, str]:
    try:
        left, right, combined = record
    except (TypeError, ValueError) as e:
        raise FormatError(f"Record {idx}: expected (left, right, combined), got {record!r}") from e
    if not all(isinstance(f, str) for f in (left, right, combined)):
        raise FormatError(f"Record {idx}: all fields must be strings, got {record!r}")
    if not combined:
        raise FormatError(f"Record {idx}: combined form is empty")
    return left, right, combined


# ─────────────────────────────────────────────────────────────────────────────
# TSV source
# ─────────────────────────────────────────────────────────────────────────────


def _iter_tsv_records(handle: Iterable[str], source: str) -> Iterator[tuple[str, str, str]]:
    reader = csv.reader(handle, delimiter="\t", quoting=csv.QUOTE_NONE)
    for row in reader:
        if not row:
            continue
        if len(row) != 3:
            raise FormatError(
                f"{source}:{reader.line_num}: expected 3 tab-separated fields, got {len(row)}"
            )
        yield row[0], row[1], row[2]


def read_sandhi_rules(path: str | os.PathLike[str], *, encoding: str = "utf-8") -> RuleTable:
    """
    Does: Read a headerless TSV of (left, right, combined) rows into a RuleTable.
    Returns: RuleTable.
    Raises: RuleSourceError when unreadable; FormatError on malformed rows.
    """
    path = Path(path)
    try:
        with path.open("r", encoding=encoding, newline="") as f:
            table = RuleTable.build(_iter_tsv_records(f, str(path)))
    except UnicodeDecodeError as e:
        raise RuleSourceError(f"Cannot decode {path} as {encoding}: {e}") from e
    except OSError as e:
        raise RuleSourceError(f"Cannot read rule source {path}: {e}") from e

    debug(f"loaded {table.rule_count} rules ({len(table)} keys) from {path}", topic="rules")
    return table


def load_rule_table(
    file: str | os.PathLike[str] | None = None,
    *,
    base_dir: Path | None = None,
) -> RuleTable:
    """
    Does: Resolve the rule file inside the data dir (default from settings) and read it.
    Returns: RuleTable.
    """
    from sandhi_splitter.config import load_settings
    from sandhi_splitter.utils.config_loader import resolve_data_file

    if file is None:
        file = load_settings(base_dir=base_dir).rules_file
    return read_sandhi_rules(resolve_data_file(file, base_dir=base_dir))
