"""
Divides Esperanto words into morphemes.

The segmenter is a depth-first search with backtracking. At every point it
asks the validator which morpheme classes may come next, asks the store
which morphemes of those classes start the rest of the word (longest first),
and recurses. The remaining text shrinks on every step, so the search always
terminates; the elided ending (hund') is checked once, at the end, never as
a recursive branch.

When several decompositions exist the best one is chosen by:
    1. fewest morphemes           mis.kompren.it.a, not mis.kom.pren.it.a
    2. longest root               kapt.uk.o, not kap.tuk.o
    3. order of discovery         longest match first, then backtracking

Example:
    >>> from vortkontrolo.segmenter import segment
    >>> segment("miskomprenita").render()
    'mis.kompren.it.a'
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

from vortkontrolo.grammar import MAX_COMPOUND_MARKERS, Validator, Zone
from vortkontrolo.logging_config import log_with_context
from vortkontrolo.morphemes import Morpheme, MorphemeClass, MorphemeStore
from vortkontrolo.trace import SearchTrace
from vortkontrolo.transliteration import is_esperanto_word, remove_hyphens, restore_capitals, to_native

logger = logging.getLogger(__name__)

MAX_MORPHEMES = 9  # The maximum number of morphemes in a compound word.
SEPARATOR = "."
APOSTROPHES = ("'", "’")

# The apostrophe which replaces the final -o of a noun: hund' = hundo.
ELIDED_ENDING = Morpheme("'", MorphemeClass.ENDING, elided=True)

# The article 'la' elides its vowel too, although it is not a noun.
FIXED_FORMS = {
    "l'": (Morpheme("l", MorphemeClass.ROOT), ELIDED_ENDING),
}


@dataclass(frozen=True)
class Decomposition:
    """An ordered sequence of morphemes which spells out a word."""

    morphemes: Tuple[Morpheme, ...]

    @property
    def morpheme_count(self) -> int:
        return len(self.morphemes)

    @property
    def longest_root(self) -> int:
        return max((len(m.text) for m in self.morphemes if m.kind is MorphemeClass.ROOT), default=0)

    @property
    def classes(self) -> Tuple[MorphemeClass, ...]:
        return tuple(m.kind for m in self.morphemes)

    @property
    def surface(self) -> str:
        """The morpheme texts run together: the word itself, lower case."""
        return "".join(m.text for m in self.morphemes)

    def texts(self) -> List[str]:
        return [m.text for m in self.morphemes]

    def render(self, separator: str = SEPARATOR) -> str:
        """
        Joins the morphemes with the separator: 'mis.kompren.it.a'.
        An elided ending is attached without a separator: "hund'".
        """
        parts = [m.text for m in self.morphemes if not m.elided]
        rendered = separator.join(parts)
        if self.morphemes and self.morphemes[-1].elided:
            rendered += self.morphemes[-1].text
        return rendered

    def rank_key(self) -> Tuple[int, int]:
        return (self.morpheme_count, -self.longest_root)


@dataclass(frozen=True)
class Success:
    """A correctly spelled word and its decomposition."""

    token: str
    decomposition: Decomposition

    @property
    def ok(self) -> bool:
        return True

    def render(self, separator: str = SEPARATOR) -> str:
        """The decomposition, in the letter case of the original token."""
        return restore_capitals(self.token, self.decomposition.render(separator), separator)


@dataclass(frozen=True)
class Failure:
    """A word which could not be divided into morphemes: a misspelling."""

    token: str

    @property
    def ok(self) -> bool:
        return False

    def render(self, separator: str = SEPARATOR) -> str:
        return self.token


SegmentationResult = Union[Success, Failure]


def normalize(token: str) -> str:
    """Converts x-system letters, drops hyphens and unifies the apostrophe."""
    word = remove_hyphens(to_native(token))
    for apostrophe in APOSTROPHES[1:]:
        word = word.replace(apostrophe, APOSTROPHES[0])
    return word


def _is_analyzable(word: str) -> bool:
    """Letters only, with at most one apostrophe, at the very end."""
    if word.endswith("'"):
        word = word[:-1]
    return is_esperanto_word(word)


class Segmenter:
    """
    Finds the best decomposition of a word into morphemes.

    The segmenter keeps no state between calls: the store is read-only and
    every search keeps its bookkeeping on the stack. One instance can be
    shared between threads.
    """

    def __init__(self, store: MorphemeStore, validator: Optional[Validator] = None,
                 max_morphemes: int = MAX_MORPHEMES, allow_compound_marker: bool = True):
        self.store = store
        self.validator = validator or Validator(allow_compound_marker=allow_compound_marker)
        self.max_morphemes = max_morphemes

    def segment(self, token: str, trace: Optional[SearchTrace] = None) -> SegmentationResult:
        """
        Divides a token into morphemes.

        Args:
            token: A word, in native letters or in the x-system, any case.
            trace: Optional SearchTrace which records every step of the search.

        Returns:
            Success with the best decomposition, or Failure if the word is
            not a valid Esperanto word.
        """
        original = normalize(token)
        word = original.lower()

        if not _is_analyzable(word):
            return self._finish(Failure(original), trace)

        if word in FIXED_FORMS:
            return self._finish(Success(original, Decomposition(FIXED_FORMS[word])), trace)

        # Single letters are valid words (a, b, ĉ...), used when spelling out names.
        if len(word) == 1:
            letter = Morpheme(word, MorphemeClass.ROOT, standalone=True, takes_ending=False)
            return self._finish(Success(original, Decomposition((letter,))), trace)

        best = self._search(word, trace)
        if best is None:
            log_with_context("Word not found", {"token": original}, logger=logger)
            return self._finish(Failure(original), trace)

        log_with_context("Word divided", {"token": original, "morphemes": best.render()}, logger=logger)
        return self._finish(Success(original, best), trace)

    def decompositions(self, token: str) -> List[Decomposition]:
        """
        Every valid decomposition of the token, in discovery order, without
        pruning. Useful for inspecting ambiguous words.
        """
        word = normalize(token).lower()
        if not _is_analyzable(word) or len(word) < 2:
            return []
        return [d for d in self._walk(word, None, None) if self.validator.check_sequence(d.morphemes)]

    # -------------------------------------------------------------------------
    # --- Search
    # -------------------------------------------------------------------------

    def _search(self, word: str, trace: Optional[SearchTrace]) -> Optional[Decomposition]:
        """Returns the best decomposition of a lower-case word, or None."""
        best: List[Decomposition] = []

        def best_count() -> Optional[int]:
            return best[0].morpheme_count if best else None

        for candidate in self._walk(word, trace, best_count):
            if not self.validator.check_sequence(candidate.morphemes):
                continue
            # Strictly better only: on a tie, the earlier discovery wins.
            if not best or candidate.rank_key() < best[0].rank_key():
                best[:] = [candidate]
        return best[0] if best else None

    def _walk(self, word: str, trace: Optional[SearchTrace], bound) -> Iterator[Decomposition]:
        """
        Yields complete decompositions in search order.

        bound, if given, returns the morpheme count of the best decomposition
        found so far; branches which can only produce longer ones are skipped.
        """
        validator = self.validator
        store = self.store

        def visit(position: int, chosen: Tuple[Morpheme, ...], zone: Zone, markers: int):
            remaining = word[position:]
            last = chosen[-1] if chosen else None

            if not remaining:
                if validator.accepts(zone, last):
                    if trace is not None:
                        trace.add_step(zone.value, last.kind.value, last.text, "", "complete")
                    yield Decomposition(chosen)
                return

            if remaining == "'":
                if validator.elision_allowed(zone, last):
                    if trace is not None:
                        trace.add_step(zone.value, ELIDED_ENDING.kind.value, "'", "", "elided")
                    yield Decomposition(chosen + (ELIDED_ENDING,))
                return

            if len(chosen) >= self.max_morphemes:
                return
            limit = bound() if bound is not None else None
            if limit is not None and len(chosen) + 1 > limit:
                return

            for kind in validator.next_classes(zone):
                if kind is MorphemeClass.COMPOUND_MARKER and markers >= MAX_COMPOUND_MARKERS:
                    continue
                for size in store.prefix_lengths(kind, remaining):
                    morpheme = store.lookup(kind, remaining[:size])
                    next_zone = validator.advance(zone, morpheme, last)
                    if next_zone is None:
                        if trace is not None:
                            trace.add_step(zone.value, kind.value, morpheme.text, remaining[size:], "rejected")
                        continue
                    if trace is not None:
                        trace.add_step(zone.value, kind.value, morpheme.text, remaining[size:], "tried")
                    is_marker = kind is MorphemeClass.COMPOUND_MARKER
                    yield from visit(position + size, chosen + (morpheme,), next_zone, markers + is_marker)

        yield from visit(0, (), Zone.START, 0)

    @staticmethod
    def _finish(result: SegmentationResult, trace: Optional[SearchTrace]) -> SegmentationResult:
        if trace is not None:
            trace.set_result(result.render() if result.ok else None)
        return result


def segment(token: str, store: Optional[MorphemeStore] = None) -> SegmentationResult:
    """
    Divides a single word into morphemes.

    Uses the bundled dictionaries unless a store is given.
    """
    if store is None:
        from vortkontrolo.dictionary import default_segmenter
        return default_segmenter().segment(token)
    return Segmenter(store).segment(token)
