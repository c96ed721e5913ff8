# sandhi_splitter/dcs/__init__.py
"""
dcs
===

Does: Read Digital Corpus of Sanskrit token annotations and standardize them
      into the internal semantic representation.
Exports: Token, read_tokens, standardize, ConversionError, UnknownCategoryError
"""

from .conllu import Token, parse_features, parse_token_line, read_tokens
from .convert import (
    ConversionError,
    UnknownCategoryError,
    standardize,
    standardize_lemma,
    to_slp1,
)

__all__ = [
    "Token",
    "parse_features",
    "parse_token_line",
    "read_tokens",
    "ConversionError",
    "UnknownCategoryError",
    "standardize",
    "standardize_lemma",
    "to_slp1",
]
