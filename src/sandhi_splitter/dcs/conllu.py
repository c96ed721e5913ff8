# src/sandhi_splitter/dcs/conllu.py

"""
conllu.py.

Does: Read DCS token annotations (CoNLL-U lines) into Token records.
Returns: Token(lemma, upos, features) and parsing helpers.
Used by: dcs.convert and its callers.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from sandhi_splitter.sandhi.rules import FormatError

__all__ = ["Token", "parse_features", "parse_token_line", "read_tokens"]


_N_COLUMNS = 10


@dataclass(frozen=True)
class Token:
    lemma: str
    upos: str
    features: Mapping[str, str] = field(default_factory=dict, hash=False)
    form: str = ""

    def __post_init__(self) -> None:
        # Read-only view; keeps the token hashable.
        object.__setattr__(self, "features", MappingProxyType(dict(self.features)))


def parse_features(raw: str) -> dict[str, str]:
    """
    Does: Parse 'Case=Nom|Number=Sing' into a dict; '_' or '' gives {}.
    Raises: FormatError on items without '='.
    """
    raw = (raw or "").strip()
    if raw in ("", "_"):
        return {}
    out: dict[str, str] = {}
    for item in raw.split("|"):
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise FormatError(f"Malformed feature item {item!r} in {raw!r}")
        out[name] = value
    return out


def parse_token_line(line: str) -> Token:
    """Does: Parse one tab-separated CoNLL-U token line (ID FORM LEMMA UPOS ... FEATS ...)."""
    cols = line.rstrip("\r\n").split("\t")
    if len(cols) < _N_COLUMNS:
        raise FormatError(f"Expected {_N_COLUMNS} columns, got {len(cols)}: {line!r}")
    return Token(
        lemma=cols[2],
        upos=cols[3],
        features=parse_features(cols[5]),
        form=cols[1],
    )


def read_tokens(lines: Iterable[str]) -> Iterator[Token]:
    """
    Does: Yield Tokens, skipping comments, blank lines, multiword ranges (1-2)
          and empty nodes (1.1).
    """
    for lineno, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        token_id = stripped.split("\t", 1)[0]
        if "-" in token_id or "." in token_id:
            continue
        try:
            yield parse_token_line(line)
        except FormatError as e:
            raise FormatError(f"line {lineno}: {e}") from e
