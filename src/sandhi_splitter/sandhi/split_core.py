# src/sandhi_splitter/sandhi/split_core.py

"""
split_core.py.

Does: Enumerate every two-way split of a string, both as-is and with each
      matching sandhi rule reversed inside a bounded window.
Returns: Ordered (prefix, suffix) candidates, lazily or as a list.
Used by: The CLI and any caller holding a RuleTable.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Literal

from sandhi_splitter.sandhi.rules import Pair, RuleTable

__all__ = [
    "WindowMode",
    "WINDOW_MODES",
    "window_lengths",
    "iter_splits",
    "split",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# "inclusive": windows 1..L. "legacy": windows 0..L-1, the longest key is never tried.
WindowMode = Literal["inclusive", "legacy"]
WINDOW_MODES: tuple[str, ...] = ("inclusive", "legacy")


def window_lengths(max_key_length: int, remaining: int, window: WindowMode = "inclusive") -> range:
    """
    Does: Give the fusion-window lengths to look up at one split position.
    Returns: range of lengths, never longer than `remaining` characters.
    """
    bound = min(max_key_length, remaining)
    if window == "inclusive":
        return range(1, bound + 1)
    if window == "legacy":
        return range(0, bound)
    raise ValueError(f"Unknown window mode {window!r}; expected one of {WINDOW_MODES}")


def iter_splits(
    text: str,
    table: RuleTable,
    *,
    window: WindowMode = "inclusive",
    include_trailing: bool = False,
) -> Iterator[Pair]:
    """
    Does: Walk split positions in order; at each, yield the plain split then
          every rule-reversed split by window length and registration order.
    Returns: Iterator of (prefix, suffix); duplicates are kept.
    Raises: EmptyTableError (before the first candidate) for an empty table.
    """
    longest = table.max_key_length()
    # Validate eagerly so a bad mode fails even on empty input
    window_lengths(longest, 0, window)

    n = len(text)
    last = n + 1 if include_trailing else n
    for i in range(last):
        head = text[:i]
        yield head, text[i:]

        for w in window_lengths(longest, n - i, window):
            fused = text[i : i + w]
            pairs = table.lookup(fused)
            if not pairs:
                continue
            tail = text[i + w :]
            for first, second in pairs:
                log.debug("pos=%d fused=%r → %r + %r", i, fused, first, second)
                yield head + first, second + tail


def split(
    text: str,
    table: RuleTable,
    *,
    window: WindowMode = "inclusive",
    include_trailing: bool = False,
) -> list[Pair]:
    """Does: Materialize iter_splits() into a list."""
    return list(iter_splits(text, table, window=window, include_trailing=include_trailing))
