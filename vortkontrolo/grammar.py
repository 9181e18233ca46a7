"""
Word-formation grammar of Esperanto as a small state machine.

A word is read left to right through zones:

    START -> PREFIX* -> ROOT (ROOT | linking vowel ROOT)* -> SUFFIX* -> ENDING? -> ACCEPT

The zones and the transitions between them are listed in TRANSITIONS, and
adding or auditing a rule is an edit to that table. A word made of one
root goes through the ROOT zone; the second and later roots of a compound
move it to COMPOUND, which may only end with an ending. A suffix may also
begin a word (ul.o, ej.o).

Conditions which depend on a particular morpheme rather than its class
are checked in two places. Validator.advance() handles endings: a root
which never takes one, short endings, and the endings a standalone word
may take (vi.a but not vi.o). check_sequence() then replays the whole word
through the combination rules of PREFIX_RULES, SUFFIX_RULES and
ROOT_RULES, which look at parts of speech, meanings and transitivity:

    bo.patr.o       bo- needs a relative
    kur.ad.o        -ad follows a verb or a noun
    kompren.it.a    passive participles need a transitive verb
    ĉi.tag.e        ĉi- needs an adjective or adverb ending

A rule only rejects what it knows to be wrong. Roots without a part of
speech, and suffixes which begin a word, pass every rule.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, FrozenSet, Optional, Sequence, Tuple

from vortkontrolo.morphemes import (
    ADJECTIVE, ADVERB, ANIMALS, NOUN, NUMBER, PARTICIPLE, PERSONS, PREPOSITION,
    PRONOUN, PRONOUN_ADJECTIVE, VERB, Morpheme, MorphemeClass,
)


class Zone(Enum):
    START = "komenco"
    PREFIX = "prefiksoj"
    ROOT = "radiko"
    COMPOUND = "kunmetaĵo"
    LINK = "kunliga vokalo"
    SUFFIX = "sufiksoj"
    ENDING = "finaĵo"
    ACCEPT = "akceptita"


# The order within each entry is the order in which the segmenter tries
# the classes.
TRANSITIONS: Dict[Zone, Tuple[Tuple[MorphemeClass, Zone], ...]] = {
    Zone.START: (
        (MorphemeClass.PREFIX, Zone.PREFIX),
        (MorphemeClass.ROOT, Zone.ROOT),
        (MorphemeClass.SUFFIX, Zone.SUFFIX),
    ),
    Zone.PREFIX: (
        (MorphemeClass.PREFIX, Zone.PREFIX),
        (MorphemeClass.ROOT, Zone.ROOT),
    ),
    Zone.ROOT: (
        (MorphemeClass.SUFFIX, Zone.SUFFIX),
        (MorphemeClass.ROOT, Zone.COMPOUND),
        (MorphemeClass.COMPOUND_MARKER, Zone.LINK),
        (MorphemeClass.ENDING, Zone.ENDING),
    ),
    Zone.COMPOUND: (
        (MorphemeClass.SUFFIX, Zone.SUFFIX),
        (MorphemeClass.ROOT, Zone.COMPOUND),
        (MorphemeClass.COMPOUND_MARKER, Zone.LINK),
        (MorphemeClass.ENDING, Zone.ENDING),
    ),
    Zone.LINK: (
        (MorphemeClass.ROOT, Zone.COMPOUND),
    ),
    Zone.SUFFIX: (
        (MorphemeClass.SUFFIX, Zone.SUFFIX),
        (MorphemeClass.ENDING, Zone.ENDING),
    ),
    Zone.ENDING: (),
    Zone.ACCEPT: (),
}

MAX_COMPOUND_MARKERS = 1

# Part of speech given by each regular ending.
ENDING_POS = {
    "o": NOUN, "oj": NOUN, "on": NOUN, "ojn": NOUN,
    "a": ADJECTIVE, "aj": ADJECTIVE, "an": ADJECTIVE, "ajn": ADJECTIVE,
    "e": ADVERB, "en": ADVERB,
    "i": VERB, "u": VERB, "as": VERB, "is": VERB, "os": VERB, "us": VERB,
}

# Regular endings a standalone word may take, by its part of speech:
# mi.a, hodiaŭ.a, post.e, du.o. Other standalone words take any ending
# their dictionary entry allows.
STANDALONE_ENDINGS = {
    PRONOUN: {ADJECTIVE},
    PREPOSITION: {ADJECTIVE, ADVERB},
    ADVERB: {ADJECTIVE, ADVERB},
    NUMBER: {NOUN, ADJECTIVE, ADVERB},
}

# Standalone words which may begin a compound without taking an ending
# themselves: ĉiu.tag.e, du.jar.a. Prepositions combine as prefixes.
COMPOUND_HEADS = {NUMBER, PRONOUN_ADJECTIVE}


@dataclass(frozen=True)
class Stem:
    """Part of speech, meaning and transitivity of the word read so far."""

    pos: Optional[str] = None
    meaning: Optional[str] = None
    transitive: Optional[bool] = None

    @classmethod
    def of(cls, root: Morpheme) -> "Stem":
        return cls(root.pos, root.meaning, root.transitive)

    @property
    def known(self) -> bool:
        return self.pos is not None

    def is_person(self) -> bool:
        return self.meaning in PERSONS

    def is_animal(self) -> bool:
        return self.meaning in ANIMALS


# -----------------------------------------------------------------------------
# --- Suffixes
# -----------------------------------------------------------------------------

KEEP = object()


@dataclass(frozen=True)
class SuffixRule:
    """
    What a suffix may follow, and what the word becomes after it.

    after: parts of speech the suffix may follow (None: any).
    needs: further condition on the stem.
    pos, meaning, transitive: properties of the result; KEEP carries over
    the stem's value.
    """

    after: Optional[FrozenSet[str]] = None
    needs: Optional[Callable[[Stem], bool]] = None
    pos: object = KEEP
    meaning: object = KEEP
    transitive: object = KEEP

    def allows(self, stem: Stem) -> bool:
        if not stem.known:
            return True
        if self.after is not None and stem.pos not in self.after:
            return False
        return self.needs is None or self.needs(stem)

    def apply(self, stem: Stem) -> Stem:
        return Stem(
            stem.pos if self.pos is KEEP else self.pos,
            stem.meaning if self.meaning is KEEP else self.meaning,
            stem.transitive if self.transitive is KEEP else self.transitive,
        )


def _transitive(stem: Stem) -> bool:
    return stem.transitive is True


def _not_person(stem: Stem) -> bool:
    return not stem.is_person()


def _person_or_animal(stem: Stem) -> bool:
    return stem.is_person() or stem.is_animal()


NOMINAL = frozenset({NOUN})
NOUN_OR_VERB = frozenset({NOUN, VERB})
CONTENT = frozenset({NOUN, VERB, ADJECTIVE})

_active_participle = SuffixRule(frozenset({VERB, PREPOSITION}), pos=PARTICIPLE)
_passive_participle = SuffixRule(frozenset({VERB}), _transitive, pos=PARTICIPLE)

SUFFIX_RULES: Dict[str, SuffixRule] = {
    "aĉ": SuffixRule(CONTENT | {PARTICIPLE}),
    "ad": SuffixRule(NOUN_OR_VERB, pos=VERB),
    "aĵ": SuffixRule(CONTENT | {PREPOSITION, PARTICIPLE}, pos=NOUN, meaning=None),
    "an": SuffixRule(NOMINAL, _not_person, pos=NOUN, meaning="PERSONO"),
    "ar": SuffixRule(NOMINAL | {PARTICIPLE}, pos=NOUN),
    "ebl": SuffixRule(frozenset({VERB}), _transitive, pos=ADJECTIVE),
    "ec": SuffixRule(CONTENT | {NUMBER, PARTICIPLE}, pos=NOUN, meaning=None),
    "eg": SuffixRule(CONTENT),
    "et": SuffixRule(CONTENT),
    "ej": SuffixRule(CONTENT, lambda stem: stem.meaning != "LOKO", pos=NOUN, meaning="LOKO"),
    "em": SuffixRule(CONTENT, pos=ADJECTIVE),
    "end": SuffixRule(frozenset({VERB}), _transitive, pos=ADJECTIVE),
    "ind": SuffixRule(frozenset({VERB}), _transitive, pos=ADJECTIVE),
    "er": SuffixRule(NOMINAL, pos=NOUN),
    "estr": SuffixRule(NOMINAL, pos=NOUN, meaning="PERSONO"),
    "id": SuffixRule(needs=lambda stem: stem.is_animal() or stem.meaning == "ETNO"),
    "ig": SuffixRule(CONTENT | {NUMBER, ADVERB, PREPOSITION}, pos=VERB, transitive=True),
    "iĝ": SuffixRule(CONTENT | {NUMBER, ADVERB, PREPOSITION}, pos=VERB, transitive=False),
    "il": SuffixRule(frozenset({VERB}), lambda stem: stem.meaning != "ILO", pos=NOUN, meaning="ILO"),
    "in": SuffixRule(needs=_person_or_animal),
    "ing": SuffixRule(NOMINAL, pos=NOUN),
    "ism": SuffixRule(NOMINAL, pos=NOUN),
    "ist": SuffixRule(NOUN_OR_VERB, _not_person, pos=NOUN, meaning="PROFESIO"),
    "obl": SuffixRule(frozenset({NUMBER})),
    "on": SuffixRule(frozenset({NUMBER})),
    "op": SuffixRule(frozenset({NUMBER})),
    "uj": SuffixRule(NOMINAL, lambda stem: stem.meaning != "ARBO", pos=NOUN),
    "ul": SuffixRule(CONTENT | {PREPOSITION, PARTICIPLE},
                     lambda stem: stem.pos == PARTICIPLE or not stem.is_person(),
                     pos=NOUN, meaning="PERSONO"),
    "ant": _active_participle,
    "int": _active_participle,
    "ont": _active_participle,
    "at": _passive_participle,
    "it": _passive_participle,
    "ot": _passive_participle,
}

PARTICIPLES = {"ant", "int", "ont", "at", "it", "ot"}


# -----------------------------------------------------------------------------
# --- Prefixes and prefix-like roots
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Word:
    """A complete sequence of morphemes, as seen by a prefix rule."""

    morphemes: Tuple[Morpheme, ...]

    @property
    def ending_pos(self) -> Optional[str]:
        last = self.morphemes[-1]
        if last.elided:
            return NOUN
        if last.kind is MorphemeClass.ENDING:
            return ENDING_POS.get(last.text)
        return None

    def after(self, index: int) -> Tuple[Morpheme, ...]:
        """Prefixes, roots and suffixes after index, without the ending."""
        return tuple(m for m in self.morphemes[index + 1:]
                     if m.kind is not MorphemeClass.ENDING and not m.elided)

    def roots_after(self, index: int) -> Tuple[Morpheme, ...]:
        return tuple(m for m in self.after(index) if m.kind is MorphemeClass.ROOT)


PrefixRule = Callable[[Word, int], bool]


def _unknown(roots: Sequence[Morpheme]) -> bool:
    return any(root.pos is None for root in roots)


def _first_only(rule: PrefixRule) -> PrefixRule:
    def check(word: Word, index: int) -> bool:
        return index == 0 and rule(word, index)
    return check


def _any_root(condition: Callable[[Morpheme], bool]) -> PrefixRule:
    def check(word: Word, index: int) -> bool:
        roots = word.roots_after(index)
        return _unknown(roots) or any(condition(root) for root in roots)
    return check


def _next_root(condition: Callable[[Morpheme], bool]) -> PrefixRule:
    def check(word: Word, index: int) -> bool:
        following = word.after(index)
        if not following:
            return False
        first = following[0]
        if first.kind is MorphemeClass.PREFIX:
            return True
        return first.kind is MorphemeClass.ROOT and (first.pos is None or condition(first))
    return check


def _ending_or_root(endings: FrozenSet[str], roots: FrozenSet[str]) -> PrefixRule:
    """The word ends as one of endings, or a following root is one of roots."""
    def check(word: Word, index: int) -> bool:
        if word.ending_pos in endings:
            return True
        following = word.roots_after(index)
        return _unknown(following) or any(root.pos in roots for root in following)
    return check


def _any_of(*rules: PrefixRule) -> PrefixRule:
    def check(word: Word, index: int) -> bool:
        return any(rule(word, index) for rule in rules)
    return check


def _followed_by_suffix(*suffixes: str) -> PrefixRule:
    def check(word: Word, index: int) -> bool:
        return any(m.kind is MorphemeClass.SUFFIX and m.text in suffixes for m in word.after(index))
    return check


def _always(word: Word, index: int) -> bool:
    return True


MODIFIERS = frozenset({ADJECTIVE, ADVERB})

# al.port.i, en.ir.ej.o, apud.a
_prepositional = _ending_or_root(MODIFIERS, frozenset({VERB}))
# re.ven.i, mis.kompren.it.a
_adverbial = _ending_or_root(frozenset({VERB}), frozenset({VERB}))

PREFIX_RULES: Dict[str, PrefixRule] = {
    "bo": _first_only(_next_root(lambda root: root.meaning == "PARENCO")),
    "cis": _first_only(_next_root(lambda root: root.meaning in ("RIVERO", "MONTO"))),
    "dis": _adverbial,
    "ek": _adverbial,
    "eks": _first_only(_any_root(lambda root: root.meaning in PERSONS)),
    "ge": _first_only(_any_root(lambda root: root.meaning in PERSONS or root.meaning in ANIMALS)),
    "mal": _ending_or_root(frozenset({VERB, ADJECTIVE, ADVERB}),
                           frozenset({VERB, ADJECTIVE, ADVERB, PREPOSITION})),
    "mis": _adverbial,
    "ne": _any_of(_ending_or_root(MODIFIERS, frozenset({ADJECTIVE})),
                  _followed_by_suffix("ad", "ec", *PARTICIPLES)),
    "po": lambda word, index: word.ending_pos == ADVERB,
    "pra": _first_only(_next_root(lambda root: root.pos == NOUN)),
    "pseŭdo": _first_only(_next_root(lambda root: root.pos in (NOUN, ADJECTIVE))),
    "re": _adverbial,
    "retro": _first_only(_always),
    "vic": _first_only(_always),
    "al": _prepositional,
    "anstataŭ": _first_only(_always),
    "antaŭ": _first_only(_always),
    "apud": _prepositional,
    "ĉe": _prepositional,
    "ĉirkaŭ": _first_only(_always),
    "de": _prepositional,
    "dum": _prepositional,
    "ekster": _first_only(_always),
    "el": _prepositional,
    "en": _prepositional,
    "ĝis": _prepositional,
    "inter": _first_only(_always),
    "kontraŭ": _first_only(_always),
    "krom": _first_only(_always),
    "kun": _any_of(_prepositional, _any_root(lambda root: root.pos == NOUN)),
    "laŭ": _prepositional,
    "per": _prepositional,
    "por": _prepositional,
    "post": _prepositional,
    "preter": _prepositional,
    "pri": _prepositional,
    "pro": _prepositional,
    "sen": _any_of(_prepositional, lambda word, index: word.after(index)[-1].text in ("ul", "aĵ", "ej")),
    "sub": _any_of(_prepositional, lambda word, index: word.ending_pos == NOUN),
    "super": _any_of(_prepositional, lambda word, index: word.ending_pos == NOUN),
    "sur": _any_of(_prepositional, lambda word, index: word.ending_pos == NOUN),
    "tra": _prepositional,
    "trans": _prepositional,
}

# Standalone roots which act as prefixes when more follows them.
ROOT_RULES: Dict[str, PrefixRule] = {
    # ĉi.tag.e, ĉi.tie.a, but not ĉi.hund.o
    "ĉi": _first_only(lambda word, index: word.ending_pos in MODIFIERS),
}


class Validator:
    """
    Answers the segmenter's questions about the grammar.

    The validator holds no state of its own; the current zone and the
    previous morpheme are passed in on every call.
    """

    def __init__(self, allow_compound_marker: bool = True):
        self.allow_compound_marker = allow_compound_marker

    def next_classes(self, zone: Zone) -> Tuple[MorphemeClass, ...]:
        """Morpheme classes which may follow in the given zone, in search order."""
        return tuple(
            kind for kind, _ in TRANSITIONS[zone]
            if self.allow_compound_marker or kind is not MorphemeClass.COMPOUND_MARKER
        )

    def advance(self, zone: Zone, morpheme: Morpheme,
                previous: Optional[Morpheme] = None) -> Optional[Zone]:
        """
        Returns the zone reached by appending morpheme, or None if the
        grammar does not allow it here.
        """
        if morpheme.kind is MorphemeClass.COMPOUND_MARKER and not self.allow_compound_marker:
            return None

        target = None
        for kind, next_zone in TRANSITIONS[zone]:
            if kind is morpheme.kind:
                target = next_zone
                break
        if target is None:
            return None

        if morpheme.kind is MorphemeClass.ROOT and _root_after_root(zone, previous):
            return self._compound(zone, morpheme, previous, target)
        if morpheme.kind is MorphemeClass.ENDING and not self._ending_allowed(zone, morpheme, previous):
            return None
        return target

    @staticmethod
    def _compound(zone: Zone, morpheme: Morpheme, previous: Morpheme, target: Zone) -> Optional[Zone]:
        if zone is Zone.ROOT and previous.standalone:
            # du.dek and tri.cent are one number.
            if previous.pos == NUMBER and morpheme.pos == NUMBER and morpheme.standalone:
                return Zone.ROOT
            if previous.pos is not None and previous.text not in ROOT_RULES:
                if previous.pos not in COMPOUND_HEADS and (
                        not previous.takes_ending or previous.pos in (PREPOSITION, PRONOUN)):
                    return None
        return target

    @staticmethod
    def _ending_allowed(zone: Zone, ending: Morpheme, previous: Optional[Morpheme]) -> bool:
        root = previous if previous is not None and previous.kind is MorphemeClass.ROOT else None

        # Short endings (j, n, jn) follow only a word which is a single
        # standalone root flagged for them: ĉiu.j, kiu.jn, vi.n
        if ending.standalone:
            if root is None or zone is not Zone.ROOT or not root.standalone:
                return False
            if "j" in ending.text and not root.plural:
                return False
            return "n" not in ending.text or root.accusative

        if root is None:
            return True
        if not root.takes_ending:
            return False
        if root.standalone and root.pos in STANDALONE_ENDINGS:
            return ENDING_POS.get(ending.text) in STANDALONE_ENDINGS[root.pos]
        return True

    def accepts(self, zone: Zone, last: Optional[Morpheme]) -> bool:
        """
        True if a word may end in this zone after this morpheme.

        Without an ending, a word must be a single standalone root, perhaps
        after prefixes (ne, dum, ĉiu). A compound always needs an ending.
        """
        if zone is Zone.ENDING or zone is Zone.ACCEPT:
            return True
        if zone is Zone.ROOT:
            return last is not None and last.kind is MorphemeClass.ROOT and last.standalone
        return False

    def elision_allowed(self, zone: Zone, last: Optional[Morpheme]) -> bool:
        """
        True if an apostrophe may stand in for the ending here: hund' = hundo.
        The word must still need its ending, after a root or a suffix.
        """
        if zone not in (Zone.ROOT, Zone.COMPOUND, Zone.SUFFIX) or last is None:
            return False
        if last.kind is MorphemeClass.ROOT:
            return last.takes_ending and not last.standalone
        return last.kind is MorphemeClass.SUFFIX

    def check_sequence(self, morphemes: Sequence[Morpheme]) -> bool:
        """
        Replays a complete sequence of morphemes through the grammar.

        Also enforces the whole-word limits: at most one linking vowel,
        an elided ending only at the very end, and the combination rules
        for prefixes and suffixes.
        """
        if not morphemes:
            return False

        markers = sum(1 for m in morphemes if m.kind is MorphemeClass.COMPOUND_MARKER)
        if markers > MAX_COMPOUND_MARKERS:
            return False

        zone = Zone.START
        previous = None
        for index, morpheme in enumerate(morphemes):
            if morpheme.elided:
                if index != len(morphemes) - 1 or not self.elision_allowed(zone, previous):
                    return False
                zone = Zone.ENDING
            else:
                zone = self.advance(zone, morpheme, previous)
                if zone is None:
                    return False
            previous = morpheme
        if not self.accepts(zone, previous):
            return False
        return combinations_allowed(morphemes)


def _root_after_root(zone: Zone, previous: Optional[Morpheme]) -> bool:
    return zone is Zone.ROOT and previous is not None and previous.kind is MorphemeClass.ROOT


def combinations_allowed(morphemes: Sequence[Morpheme]) -> bool:
    """
    Checks prefixes, prefix-like roots and suffixes against the parts of
    speech, meanings and transitivity around them.
    """
    word = Word(tuple(morphemes))
    stem = Stem()
    single = len(morphemes) == 1
    for index, morpheme in enumerate(morphemes):
        if morpheme.kind is MorphemeClass.PREFIX:
            rule = PREFIX_RULES.get(morpheme.text)
            if rule is not None and not rule(word, index):
                return False
        elif morpheme.kind is MorphemeClass.ROOT:
            rule = ROOT_RULES.get(morpheme.text)
            if rule is not None and not single and word.after(index) and not rule(word, index):
                return False
            stem = Stem.of(morpheme)
        elif morpheme.kind is MorphemeClass.SUFFIX:
            suffix_rule = SUFFIX_RULES.get(morpheme.text)
            if suffix_rule is None:
                continue
            if not suffix_rule.allows(stem):
                return False
            stem = suffix_rule.apply(stem)
    return True
