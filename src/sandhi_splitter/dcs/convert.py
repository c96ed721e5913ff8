# src/sandhi_splitter/dcs/convert.py
from __future__ import annotations

"""
convert.py

Does: Convert DCS token annotations (UPOS + UD-style features) into the
      internal semantic representation, normalizing lemmas to SLP1.
Returns: ParsedWord, or raises ConversionError on an unknown feature value.
Used by: Corpus tooling that compares DCS analyses against split candidates.

An unknown UPOS category raises UnknownCategoryError, which derives from
BaseException: unseen corpus categories must stop the run, not be skipped by
a generic `except Exception` handler.
"""

import logging
from collections.abc import Mapping
from typing import TypeVar

from indic_transliteration import sanscript
from rapidfuzz import fuzz, process

from sandhi_splitter.dcs.conllu import Token
from sandhi_splitter.dcs.semantics import (
    Avyaya,
    BasicStem,
    KrdantaStem,
    Lakara,
    Linga,
    ParsedWord,
    Purusha,
    Semantics,
    StemPrayoga,
    StemTense,
    Subanta,
    Tinanta,
    Unanalyzed,
    Vacana,
    VerbPada,
    Vibhakti,
)

__all__ = [
    "ConversionError",
    "UnknownCategoryError",
    "standardize",
    "standardize_lemma",
    "to_slp1",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
SUGGEST_MIN_RATIO = 60

E = TypeVar("E")


# ── Exceptions ───────────────────────────────────────────────────────────────
class ConversionError(ValueError):
    """Raise when a feature value (or a required feature) cannot be converted."""

    def __init__(self, feature: str, value: str | None, suggestion: str | None = None):
        self.feature = feature
        self.value = value
        self.suggestion = suggestion
        if value is None:
            msg = f"`{feature}` not found"
        else:
            msg = f"Could not parse value `{value}` for `{feature}`"
            if suggestion:
                msg += f" (did you mean `{suggestion}`?)"
        super().__init__(msg)


class UnknownCategoryError(BaseException):
    """Fatal: the token's UPOS category is not one this converter knows."""

    def __init__(self, upos: str):
        self.upos = upos
        super().__init__(f"Unknown upos `{upos}`")


# ─────────────────────────────────────────────────────────────────────────────
# Feature tables
# ─────────────────────────────────────────────────────────────────────────────

_NOMINAL_UPOS = frozenset({"NOUN", "PRON", "ADJ", "PART", "NUM"})
_AVYAYA_UPOS = frozenset({"CCONJ", "SCONJ", "ADV"})

_GENDER = {"Masc": Linga.PUM, "Fem": Linga.STRI, "Neut": Linga.NAPUMSAKA}
_CASE = {
    "Nom": Vibhakti.V1,
    "Acc": Vibhakti.V2,
    "Ins": Vibhakti.V3,
    "Dat": Vibhakti.V4,
    "Abl": Vibhakti.V5,
    "Gen": Vibhakti.V6,
    "Loc": Vibhakti.V7,
    "Voc": Vibhakti.SAMBODHANA,
    "Cpd": Vibhakti.NONE,  # compound member (purvapada)
}
_NUMBER = {"Sing": Vacana.EKA, "Dual": Vacana.DVI, "Plur": Vacana.BAHU}
_PERSON = {"3": Purusha.PRATHAMA, "2": Purusha.MADHYAMA, "1": Purusha.UTTAMA}
_PARTICIPLE_TENSE = {"Pres": StemTense.PRESENT, "Past": StemTense.PAST, "Fut": StemTense.FUTURE}
_TENSE_MOOD: dict[tuple[str, str], Lakara] = {
    ("Aor", "Ind"): Lakara.LUN,
    ("Aor", "Jus"): Lakara.LUN_NO_AGAMA,
    ("Aor", "Prec"): Lakara.LIN_ASHIH,
    ("Fut", "Cond"): Lakara.LRN,
    ("Fut", "Ind"): Lakara.LRT,
    ("Impf", "Ind"): Lakara.LAN,
    ("Perf", "Ind"): Lakara.LIT,
    ("Pres", "Imp"): Lakara.LOT,
    ("Pres", "Ind"): Lakara.LAT,
    ("Pres", "Opt"): Lakara.LIN_VIDHI,
    ("Pres", "Sub"): Lakara.LOT,
}

_LEMMA_OVERRIDES = {"mad": "asmad", "tvad": "yuzmad", "ka": "kim"}


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────


def to_slp1(text: str) -> str:
    """Does: Transliterate IAST text (as used by DCS) to SLP1."""
    return sanscript.transliterate(text, sanscript.IAST, sanscript.SLP1)


def standardize_lemma(raw_lemma: str) -> str:
    """
    Does: Bring a DCS lemma in line with internal conventions
          (SLP1, -ant → -at stems, causative -ay dropped, pronoun stems).
    """
    lemma = to_slp1(raw_lemma)
    # Bagavant, hanumant, etc.
    if lemma.endswith("ant"):
        return lemma[: -len("ant")] + "at"
    # kIrtay, etc.
    if lemma.endswith("ay"):
        return lemma[: -len("ay")]
    return _LEMMA_OVERRIDES.get(lemma, lemma)


def _suggest(value: str, choices: Mapping[str, object]) -> str | None:
    match = process.extractOne(value, list(choices), scorer=fuzz.ratio, score_cutoff=SUGGEST_MIN_RATIO)
    return match[0] if match else None


def _feature(features: Mapping[str, str], name: str, table: Mapping[str, E], default: E) -> E:
    """Does: Map an optional feature through `table`; missing → default, unknown → error."""
    raw = features.get(name)
    if raw is None:
        return default
    try:
        return table[raw]
    except KeyError:
        raise ConversionError(name, raw, _suggest(raw, table)) from None


def _required(features: Mapping[str, str], name: str) -> str:
    raw = features.get(name)
    if raw is None:
        raise ConversionError(name, None)
    return raw


# ─────────────────────────────────────────────────────────────────────────────
# Category parsers
# ─────────────────────────────────────────────────────────────────────────────


def _parse_lakara(features: Mapping[str, str]) -> Lakara:
    tense = _required(features, "Tense")
    mood = _required(features, "Mood")
    return _TENSE_MOOD.get((tense, mood), Lakara.NONE)


def _is_purvapada(features: Mapping[str, str]) -> bool:
    return features.get("Case") == "Cpd"


def _parse_subanta(t: Token) -> Subanta:
    return Subanta(
        stem=BasicStem(stem=standardize_lemma(t.lemma)),
        linga=_feature(t.features, "Gender", _GENDER, Linga.NONE),
        vacana=_feature(t.features, "Number", _NUMBER, Vacana.NONE),
        vibhakti=_feature(t.features, "Case", _CASE, Vibhakti.NONE),
        is_purvapada=_is_purvapada(t.features),
    )


def _parse_participle(t: Token) -> Subanta:
    stem = KrdantaStem(
        root=standardize_lemma(t.lemma),
        tense=_feature(t.features, "Tense", _PARTICIPLE_TENSE, StemTense.NONE),
        prayoga=StemPrayoga.NONE,
    )
    return Subanta(
        stem=stem,
        linga=_feature(t.features, "Gender", _GENDER, Linga.NONE),
        vacana=_feature(t.features, "Number", _NUMBER, Vacana.NONE),
        vibhakti=_feature(t.features, "Case", _CASE, Vibhakti.NONE),
        is_purvapada=_is_purvapada(t.features),
    )


def _parse_verb(t: Token) -> Tinanta:
    return Tinanta(
        root=standardize_lemma(t.lemma),
        purusha=_feature(t.features, "Person", _PERSON, Purusha.NONE),
        vacana=_feature(t.features, "Number", _NUMBER, Vacana.NONE),
        lakara=_parse_lakara(t.features),
        # DCS does not annotate voice/pada
        pada=VerbPada.NONE,
    )


def standardize(t: Token) -> ParsedWord:
    """
    Does: Convert one DCS token into a ParsedWord.
    Returns: ParsedWord(text=standardized lemma, semantics=...).
    Raises: ConversionError (recoverable), UnknownCategoryError (fatal).
    """
    semantics: Semantics
    if t.upos in _NOMINAL_UPOS:
        semantics = _parse_subanta(t)
    elif t.upos in _AVYAYA_UPOS:
        semantics = Avyaya()
    elif t.upos == "VERB":
        semantics = _parse_participle(t) if "VerbForm" in t.features else _parse_verb(t)
    elif t.upos == "MANTRA":
        semantics = Unanalyzed()
    else:
        log.error("Unknown upos %r for lemma %r", t.upos, t.lemma)
        raise UnknownCategoryError(t.upos)

    # The surface form is not consistently present in DCS, so the lemma stands in.
    return ParsedWord(text=standardize_lemma(t.lemma), semantics=semantics)
