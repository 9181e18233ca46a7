"""
Running text through the segmenter.

Splits text into words and non-word chunks, and either divides every known
word into morphemes (leaving everything else untouched) or lists the words
which could not be divided. Lines can be checked in parallel; results always
come back in input order.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, List, Sequence, Tuple

from vortkontrolo.logging_config import ProgressLogger
from vortkontrolo.segmenter import Segmenter
from vortkontrolo.transliteration import is_word_char, remove_hyphens

logger = logging.getLogger(__name__)

APOSTROPHES = ("'", "’")


def tokenize(text: str) -> Iterator[Tuple[bool, str]]:
    """
    Splits text into (is_word, chunk) pairs which concatenate back to text.

    An apostrophe directly after a word stays with it, for elision (hund', l').
    """
    chunk = []
    in_word = False
    for ch in text:
        if is_word_char(ch):
            if not in_word and chunk:
                yield False, ''.join(chunk)
                chunk = []
            in_word = True
            chunk.append(ch)
        elif in_word and ch in APOSTROPHES:
            chunk.append(ch)
            yield _is_word(chunk), ''.join(chunk)
            chunk = []
            in_word = False
        else:
            if in_word and chunk:
                yield _is_word(chunk), ''.join(chunk)
                chunk = []
            in_word = False
            chunk.append(ch)
    if chunk:
        yield in_word and _is_word(chunk), ''.join(chunk)


def _is_word(chunk: List[str]) -> bool:
    # A lone dash between spaces is punctuation, not a word.
    return bool(remove_hyphens(''.join(chunk)).strip("'’"))


def words(text: str) -> List[str]:
    return [chunk for is_word, chunk in tokenize(text) if is_word]


def divide_text(text: str, segmenter: Segmenter) -> str:
    """Returns the text with every known word divided into morphemes."""
    parts = []
    for is_word, chunk in tokenize(text):
        if is_word:
            result = segmenter.segment(chunk)
            parts.append(result.render() if result.ok else chunk)
        else:
            parts.append(chunk)
    return ''.join(parts)


def misspelled_words(text: str, segmenter: Segmenter) -> List[str]:
    """Unknown words of the text, each once, in order of first occurrence."""
    bad_words = {}
    for word in words(text):
        if word not in bad_words and not segmenter.segment(word).ok:
            bad_words[word] = True
    return list(bad_words)


def check_lines(lines: Sequence[str], segmenter: Segmenter, morpheme_mode: bool = False,
                jobs: int = 1) -> List:
    """
    Processes lines of text, optionally in parallel.

    Args:
        lines: The lines to check.
        segmenter: Shared segmenter (read-only, safe to use from several threads).
        morpheme_mode: If True, each result is the divided line (str);
                       otherwise it is the list of misspelled words of the line.
        jobs: Number of worker threads.

    Returns:
        One result per line, in input order.
    """
    def work(line):
        if morpheme_mode:
            return divide_text(line, segmenter)
        return misspelled_words(line, segmenter)

    progress = ProgressLogger(total=len(lines), desc="Checking lines", logger=logger)
    results = []
    if jobs > 1:
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            # map() yields in submission order
            for result in executor.map(work, lines):
                results.append(result)
                progress.update()
    else:
        for line in lines:
            results.append(work(line))
            progress.update()
    progress.close()
    return results
