"""
Spelling reports and suggestions.

A word is correctly spelled when the segmenter can divide it into morphemes.
For a misspelled word, the reporter looks for near misses: words within
one (or, failing that, two) edits which do divide correctly. An edit is a
deletion, a transposition of neighbouring letters, a substitution or an
insertion, using letters of the Esperanto alphabet only.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from vortkontrolo.morphemes import MorphemeStore
from vortkontrolo.segmenter import SegmentationResult, Segmenter, normalize
from vortkontrolo.transliteration import ALPHABET

logger = logging.getLogger(__name__)

DEFAULT_MAX_DISTANCE = 2
DEFAULT_LIMIT = 10
# Distance-2 candidates grow with the square of the word length;
# longer words only get distance-1 suggestions.
MAX_LENGTH_FOR_DISTANCE_2 = 12


@dataclass(frozen=True)
class SpellingReport:
    """The outcome of a spelling check for one token."""

    token: str
    ok: bool
    suggestions: Tuple[str, ...] = ()
    result: Optional[SegmentationResult] = field(default=None, compare=False)

    @property
    def decomposition(self) -> Optional[str]:
        """The word divided into morphemes, if it is correctly spelled."""
        return self.result.render() if self.ok and self.result is not None else None


def edits1(word: str, alphabet: str = ALPHABET) -> List[str]:
    """All strings one edit away from word, without duplicates, in a stable order."""
    splits = [(word[:i], word[i:]) for i in range(len(word) + 1)]
    deletes = [left + right[1:] for left, right in splits if right]
    transposes = [left + right[1] + right[0] + right[2:] for left, right in splits if len(right) > 1]
    replaces = [left + ch + right[1:] for left, right in splits if right for ch in alphabet]
    inserts = [left + ch + right for left, right in splits for ch in alphabet]
    return list(dict.fromkeys(deletes + transposes + replaces + inserts))


def _match_case(original: str, suggestion: str) -> str:
    if len(original) > 1 and original.isupper():
        return suggestion.upper()
    if original[:1].isupper():
        return suggestion[:1].upper() + suggestion[1:]
    return suggestion


class SpellingReporter:
    """
    Checks words and suggests corrections for misspellings.

    Args:
        segmenter: The segmenter which decides whether a word is valid.
        max_distance: Largest edit distance searched for suggestions (1 or 2).
        limit: Maximum number of suggestions returned.
    """

    def __init__(self, segmenter: Segmenter, max_distance: int = DEFAULT_MAX_DISTANCE,
                 limit: int = DEFAULT_LIMIT):
        if max_distance not in (1, 2):
            raise ValueError(f"max_distance must be 1 or 2, not {max_distance}")
        self.segmenter = segmenter
        self.max_distance = max_distance
        self.limit = limit

    def check(self, token: str) -> SegmentationResult:
        return self.segmenter.segment(token)

    def suggest(self, token: str, max_distance: Optional[int] = None,
                limit: Optional[int] = None) -> List[str]:
        """
        Correctly spelled words near the token.

        Ranked by edit distance, then by the number of morphemes of the
        suggestion (simpler words first), then by the order of generation.
        """
        if max_distance is None:
            max_distance = self.max_distance
        limit = limit if limit is not None else self.limit

        original = normalize(token)
        word = original.lower()
        if not word:
            return []

        # An elided word keeps its apostrophe; only the letters are edited.
        suffix = ""
        if word.endswith("'"):
            word, suffix = word[:-1], "'"

        ranked: Dict[str, Tuple[int, int, int]] = {}
        frontier = [word]
        seen = {word}
        for distance in range(1, max_distance + 1):
            if distance == 2 and (ranked or len(word) > MAX_LENGTH_FOR_DISTANCE_2):
                break
            candidates = self._expand(frontier, seen)
            logger.debug("Trying %d candidates at distance %d for '%s'", len(candidates), distance, token)
            for candidate in candidates:
                # Single letters are valid words but never useful corrections.
                if len(candidate) < 2:
                    continue
                result = self.segmenter.segment(candidate + suffix)
                if result.ok:
                    ranked[candidate + suffix] = (distance, result.decomposition.morpheme_count, len(ranked))
            frontier = candidates

        ordered = sorted(ranked, key=ranked.get)
        return [_match_case(original, s) for s in ordered[:limit]]

    @staticmethod
    def _expand(frontier: Iterable[str], seen: set) -> List[str]:
        """Words one edit away from any word of the frontier, not seen before."""
        found = []
        for word in frontier:
            for candidate in edits1(word):
                if candidate and candidate not in seen:
                    seen.add(candidate)
                    found.append(candidate)
        return found

    def check_spelling(self, token: str, suggest: bool = True) -> SpellingReport:
        """
        Checks one token.

        Returns:
            SpellingReport with ok=True and the decomposition for a valid word,
            or ok=False and (if suggest) a list of corrections.
        """
        result = self.check(token)
        if result.ok:
            return SpellingReport(token=token, ok=True, result=result)
        suggestions = self.suggest(token) if suggest and normalize(token) else []
        return SpellingReport(token=token, ok=False, suggestions=tuple(suggestions), result=result)


def check_spelling(token: str, store: Optional[MorphemeStore] = None, suggest: bool = True) -> SpellingReport:
    """
    Checks the spelling of a single word.

    Uses the bundled dictionaries unless a store is given.
    """
    if store is None:
        from vortkontrolo.dictionary import default_segmenter
        segmenter = default_segmenter()
    else:
        segmenter = Segmenter(store)
    return SpellingReporter(segmenter).check_spelling(token, suggest=suggest)
