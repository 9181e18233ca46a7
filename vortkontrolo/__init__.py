# This file makes the 'vortkontrolo' directory a Python package.

from vortkontrolo.morphemes import LoadError, Morpheme, MorphemeClass, MorphemeStore
from vortkontrolo.grammar import Validator, Zone
from vortkontrolo.segmenter import Decomposition, Failure, Segmenter, Success, segment
from vortkontrolo.speller import SpellingReport, SpellingReporter, check_spelling
from vortkontrolo.transliteration import to_ascii, to_native

__all__ = [
    'LoadError',
    'Morpheme',
    'MorphemeClass',
    'MorphemeStore',
    'Validator',
    'Zone',
    'Decomposition',
    'Failure',
    'Segmenter',
    'Success',
    'segment',
    'SpellingReport',
    'SpellingReporter',
    'check_spelling',
    'to_ascii',
    'to_native',
]
