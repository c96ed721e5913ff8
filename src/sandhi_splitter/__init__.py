"""
sandhi_splitter
===============

Does: Root package for the sandhi-aware split enumerator.
Returns: Re-exports the rule table and splitter; DCS tooling lives in `sandhi_splitter.dcs`.
Used by: The `sandhi-split` CLI and library callers.
"""

from .sandhi import (
    EmptyTableError,
    FormatError,
    RuleSourceError,
    RuleTable,
    iter_splits,
    load_rule_table,
    read_sandhi_rules,
    split,
)

__all__: list[str] = [
    "RuleTable",
    "read_sandhi_rules",
    "load_rule_table",
    "split",
    "iter_splits",
    "FormatError",
    "EmptyTableError",
    "RuleSourceError",
]
__docformat__ = "google"
