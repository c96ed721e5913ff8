# src/sandhi_splitter/dcs/semantics.py
from __future__ import annotations

"""
semantics.py

Does: Define the internal semantic representation of a parsed Sanskrit word
      (nominal, verb, indeclinable) and its grammatical categories.
Used by: dcs.convert.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

__all__ = [
    "Linga",
    "Vibhakti",
    "Vacana",
    "Purusha",
    "Lakara",
    "VerbPada",
    "StemTense",
    "StemPrayoga",
    "BasicStem",
    "KrdantaStem",
    "Stem",
    "Subanta",
    "Tinanta",
    "Avyaya",
    "Unanalyzed",
    "Semantics",
    "ParsedWord",
]


class Linga(Enum):
    PUM = "pum"
    STRI = "stri"
    NAPUMSAKA = "napumsaka"
    NONE = "none"


class Vibhakti(Enum):
    V1 = "1"
    V2 = "2"
    V3 = "3"
    V4 = "4"
    V5 = "5"
    V6 = "6"
    V7 = "7"
    SAMBODHANA = "sambodhana"
    NONE = "none"


class Vacana(Enum):
    EKA = "eka"
    DVI = "dvi"
    BAHU = "bahu"
    NONE = "none"


class Purusha(Enum):
    PRATHAMA = "prathama"
    MADHYAMA = "madhyama"
    UTTAMA = "uttama"
    NONE = "none"


class Lakara(Enum):
    LAT = "lat"
    LIT = "lit"
    LUT = "lut"
    LRT = "lrt"
    LET = "let"
    LOT = "lot"
    LAN = "lan"
    LIN_VIDHI = "lin-vidhi"
    LIN_ASHIH = "lin-ashih"
    LUN = "lun"
    LUN_NO_AGAMA = "lun-no-agama"
    LRN = "lrn"
    NONE = "none"


class VerbPada(Enum):
    PARASMAI = "parasmai"
    ATMANE = "atmane"
    NONE = "none"


class StemTense(Enum):
    PAST = "past"
    PRESENT = "present"
    FUTURE = "future"
    NONE = "none"


class StemPrayoga(Enum):
    KARTARI = "kartari"
    KARMANI = "karmani"
    BHAVE = "bhave"
    NONE = "none"


@dataclass(frozen=True)
class BasicStem:
    stem: str
    lingas: tuple[Linga, ...] = ()


@dataclass(frozen=True)
class KrdantaStem:
    """Participle stem derived from a verb root."""

    root: str
    tense: StemTense = StemTense.NONE
    prayoga: StemPrayoga = StemPrayoga.NONE


Stem = Union[BasicStem, KrdantaStem]


@dataclass(frozen=True)
class Subanta:
    """Nominal: a stem with gender, number and case."""

    stem: Stem
    linga: Linga
    vacana: Vacana
    vibhakti: Vibhakti
    is_purvapada: bool = False


@dataclass(frozen=True)
class Tinanta:
    """Finite verb."""

    root: str
    purusha: Purusha
    vacana: Vacana
    lakara: Lakara
    pada: VerbPada = VerbPada.NONE


@dataclass(frozen=True)
class Avyaya:
    pass


@dataclass(frozen=True)
class Unanalyzed:
    pass


Semantics = Union[Subanta, Tinanta, Avyaya, Unanalyzed]


@dataclass(frozen=True)
class ParsedWord:
    text: str
    semantics: Semantics = field(default_factory=Unanalyzed)
