"""
The morpheme store: prefixes, roots, suffixes and grammatical endings.

The store is built once from plain text dictionaries and never changes
afterwards, so a single instance can be shared by every segmentation call
(and every thread). Each line of a dictionary holds one morpheme, optionally
followed by flags and grammatical properties:

    # roots
    hund    SUBST ANIMALO
    kompren VERBO T
    ĉiu     PRONOMADJ SF KJ KN   (standalone; takes the short endings j and n)
    hodiaŭ  ADVERBO SF KF        (standalone, and also takes endings: hodiaŭa)
    kaj     KONJUNKCIO SF        (standalone, never takes an ending)

    # endings
    ojn
    n       SF                   (short ending: kio.n, vi.n)

Roots without SF always take endings. The part of speech, the meaning and
the transitivity of a verb (T or N) are optional; the grammar restricts
combinations only where it knows them.

Morphemes may be written in the x-system (cxiu); they are converted to
native letters when loaded.
"""
from __future__ import annotations

import bisect
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple, Union

from vortkontrolo.transliteration import LETTERS, to_native

logger = logging.getLogger(__name__)


class LoadError(ValueError):
    """Raised when dictionary data is malformed."""


class MorphemeClass(Enum):
    PREFIX = "prefikso"
    ROOT = "radiko"
    SUFFIX = "sufikso"
    ENDING = "finaĵo"
    COMPOUND_MARKER = "kunliga vokalo"


@dataclass(frozen=True)
class Morpheme:
    """
    One morpheme of a word.

    `standalone` on a root means the root is a complete word by itself
    (ne, dum, ĉiu). On an ending it marks a short ending (j, n, jn).
    `takes_ending` is False for standalone roots which never carry a
    regular ending. `plural` and `accusative` allow the short endings j
    and n after a root (ĉiu.j, vi.n). `elided` marks the apostrophe which
    replaces the final -o of a noun.

    `pos`, `meaning` and `transitive` describe roots for the grammar's
    combination rules; None means unknown.
    """

    text: str
    kind: MorphemeClass
    standalone: bool = False
    takes_ending: bool = True
    elided: bool = False
    plural: bool = False
    accusative: bool = False
    pos: Optional[str] = None
    meaning: Optional[str] = None
    transitive: Optional[bool] = None

    def __str__(self) -> str:
        return self.text


# Dictionary names, as used by load() and by the bundled data files.
SOURCE_NAMES = {
    "prefixes": MorphemeClass.PREFIX,
    "roots": MorphemeClass.ROOT,
    "suffixes": MorphemeClass.SUFFIX,
    "endings": MorphemeClass.ENDING,
}

DICTIONARY_CLASSES = tuple(SOURCE_NAMES.values())

# SF: valid without an ending. KF: a standalone root which also takes
# endings. KJ, KN: takes the short endings j and n.
KNOWN_FLAGS = {"SF", "KF", "KJ", "KN"}

# Parts of speech
NOUN = "SUBST"
VERB = "VERBO"
ADJECTIVE = "ADJ"
ADVERB = "ADVERBO"
NUMBER = "NUMERO"
PRONOUN = "PRONOMO"
PRONOUN_ADJECTIVE = "PRONOMADJ"
PREPOSITION = "PREPOZICIO"
CONJUNCTION = "KONJUNKCIO"
INTERJECTION = "INTERJEKCIO"
ARTICLE = "ARTIKOLO"
PARTICIPLE = "PARTICIPO"

PARTS_OF_SPEECH = {
    NOUN, VERB, ADJECTIVE, ADVERB, NUMBER, PRONOUN, PRONOUN_ADJECTIVE,
    PREPOSITION, CONJUNCTION, INTERJECTION, ARTICLE,
}

PERSONS = frozenset({"PERSONO", "PARENCO", "ETNO", "PROFESIO"})
ANIMALS = frozenset({"ANIMALO", "MAMULO", "BIRDO", "FISXO", "INSEKTO", "REPTILIO"})
MEANINGS = PERSONS | ANIMALS | {"LOKO", "ILO", "ARBO", "RIVERO", "MONTO", "TEMPO"}

TRANSITIVITY = {"T": True, "N": False}

# Linking vowels placed between the roots of a compound: lern.o.libr.o
COMPOUND_MARKERS = {
    text: Morpheme(text, MorphemeClass.COMPOUND_MARKER, takes_ending=False)
    for text in ("o", "a", "e")
}

Source = Union[str, Iterable[str]]


def _parse_line(line: str, kind: MorphemeClass, name: str, line_no: int) -> Optional[Morpheme]:
    """Parses one dictionary line. Returns None for blank and comment lines."""
    content = line.split("#", 1)[0].strip()
    if not content:
        return None

    fields = content.split()
    text = to_native(fields[0]).lower()
    tokens = fields[1:]

    bad_chars = sorted({ch for ch in text if ch not in LETTERS})
    if bad_chars:
        raise LoadError(f"{name}:{line_no}: '{fields[0]}' contains non-letter characters {bad_chars}")

    flags = {t for t in tokens if t in KNOWN_FLAGS}
    pos = [t for t in tokens if t in PARTS_OF_SPEECH]
    meaning = [t for t in tokens if t in MEANINGS]
    transitivity = [TRANSITIVITY[t] for t in tokens if t in TRANSITIVITY]

    unknown = set(tokens) - KNOWN_FLAGS - PARTS_OF_SPEECH - MEANINGS - set(TRANSITIVITY)
    if unknown:
        raise LoadError(f"{name}:{line_no}: unknown flags {sorted(unknown)} for '{fields[0]}'")
    if len(pos) > 1 or len(meaning) > 1 or len(transitivity) > 1:
        raise LoadError(f"{name}:{line_no}: conflicting properties for '{fields[0]}'")
    if kind is not MorphemeClass.ROOT and (pos or meaning or transitivity or flags - {"SF"}):
        raise LoadError(f"{name}:{line_no}: only roots take properties, not '{fields[0]}'")

    if kind is MorphemeClass.ROOT:
        standalone = "SF" in flags
        return Morpheme(
            text, kind,
            standalone=standalone,
            takes_ending=not standalone or "KF" in flags,
            plural="KJ" in flags,
            accusative="KN" in flags,
            pos=pos[0] if pos else None,
            meaning=meaning[0] if meaning else None,
            transitive=transitivity[0] if transitivity else None,
        )
    if kind is MorphemeClass.ENDING:
        return Morpheme(text, kind, standalone="SF" in flags)
    return Morpheme(text, kind)


class MorphemeStore:
    """
    Read-only dictionaries of morphemes, one per class.

    Use MorphemeStore.load() to build one. Lookups are exact and
    case-insensitive; prefix_lengths() drives the segmenter's search.
    """

    def __init__(self, entries: Mapping[MorphemeClass, Mapping[str, Morpheme]]):
        self._entries: Dict[MorphemeClass, Dict[str, Morpheme]] = {
            kind: dict(entries.get(kind, {})) for kind in DICTIONARY_CLASSES
        }
        self._sets: Dict[MorphemeClass, FrozenSet[str]] = {
            kind: frozenset(words) for kind, words in self._entries.items()
        }
        self._sorted: Dict[MorphemeClass, Tuple[str, ...]] = {
            kind: tuple(sorted(words)) for kind, words in self._sets.items()
        }
        self._max_length: Dict[MorphemeClass, int] = {
            kind: max((len(w) for w in words), default=0) for kind, words in self._sets.items()
        }

    @classmethod
    def load(cls, source: Mapping[str, Source]) -> "MorphemeStore":
        """
        Builds a store from dictionary text.

        Args:
            source: maps 'prefixes', 'roots', 'suffixes' and 'endings' to
                    either the full text of a dictionary or an iterable of lines.

        Raises:
            LoadError: if a dictionary is missing or empty, or holds an entry
                       with non-letter characters or unknown flags.
        """
        entries: Dict[MorphemeClass, Dict[str, Morpheme]] = {}
        for name, kind in SOURCE_NAMES.items():
            if name not in source:
                raise LoadError(f"Missing dictionary: {name}")
            data = source[name]
            lines = data.splitlines() if isinstance(data, str) else data

            morphemes: Dict[str, Morpheme] = {}
            for line_no, line in enumerate(lines, start=1):
                morpheme = _parse_line(line, kind, name, line_no)
                if morpheme is not None:
                    morphemes[morpheme.text] = morpheme

            if not morphemes:
                raise LoadError(f"Dictionary is empty: {name}")
            entries[kind] = morphemes

        store = cls(entries)
        logger.info(
            "Loaded morpheme store: %d prefixes, %d roots, %d suffixes, %d endings",
            store.size(MorphemeClass.PREFIX), store.size(MorphemeClass.ROOT),
            store.size(MorphemeClass.SUFFIX), store.size(MorphemeClass.ENDING),
        )
        return store

    # -------------------------------------------------------------------------
    # --- Queries
    # -------------------------------------------------------------------------

    def size(self, kind: MorphemeClass) -> int:
        return len(self._sets.get(kind, ()))

    def lookup(self, kind: MorphemeClass, text: str) -> Optional[Morpheme]:
        """Returns the morpheme of the given class equal to text, or None."""
        if kind is MorphemeClass.COMPOUND_MARKER:
            return COMPOUND_MARKERS.get(text.lower())
        return self._entries.get(kind, {}).get(text.lower())

    def __contains__(self, item: Tuple[MorphemeClass, str]) -> bool:
        kind, text = item
        return self.lookup(kind, text) is not None

    def prefix_lengths(self, kind: MorphemeClass, text: str) -> List[int]:
        """
        Lengths L such that text[:L] is a morpheme of the given class.

        Longest first: the segmenter tries the greediest match before
        backtracking to shorter ones.
        """
        text = text.lower()
        if kind is MorphemeClass.COMPOUND_MARKER:
            return [1] if text[:1] in COMPOUND_MARKERS else []
        words = self._sets.get(kind, frozenset())
        longest = min(self._max_length.get(kind, 0), len(text))
        return [size for size in range(longest, 0, -1) if text[:size] in words]

    def has_prefix(self, kind: MorphemeClass, text: str) -> bool:
        """True if any morpheme of the given class starts with text."""
        text = text.lower()
        words = self._sorted.get(kind, ())
        index = bisect.bisect_left(words, text)
        return index < len(words) and words[index].startswith(text)

    def morphemes(self, kind: MorphemeClass) -> List[Morpheme]:
        """All morphemes of a class, sorted by text."""
        entries = self._entries.get(kind, {})
        return [entries[text] for text in self._sorted.get(kind, ())]
