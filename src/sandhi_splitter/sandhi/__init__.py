# sandhi_splitter/sandhi/__init__.py
"""
sandhi
======

Does: Expose the sandhi rule table and the split enumerator.
Exports: RuleTable, read_sandhi_rules, load_rule_table, split, iter_splits, errors
Used by: The CLI and library callers.
"""

from .rules import (
    EmptyTableError,
    FormatError,
    Pair,
    RuleSourceError,
    RuleTable,
    load_rule_table,
    read_sandhi_rules,
)
from .split_core import (
    WINDOW_MODES,
    WindowMode,
    iter_splits,
    split,
    window_lengths,
)

__all__ = [
    # rules
    "Pair",
    "RuleTable",
    "read_sandhi_rules",
    "load_rule_table",
    "FormatError",
    "EmptyTableError",
    "RuleSourceError",
    # split
    "WindowMode",
    "WINDOW_MODES",
    "window_lengths",
    "iter_splits",
    "split",
]
