"""
Tests for spelling reports and suggestions.
"""
import unittest

import pytest

from vortkontrolo.dictionary import default_segmenter
from vortkontrolo.morphemes import MorphemeStore
from vortkontrolo.segmenter import Segmenter
from vortkontrolo.speller import SpellingReport, SpellingReporter, check_spelling, edits1


def make_store():
    return MorphemeStore.load({
        "prefixes": "mal\n",
        "roots": "hund\nvi SF\n",
        "suffixes": "ul\n",
        "endings": "o\na\ne\nn SF\n",
    })


class TestEdits(unittest.TestCase):

    def test_edit_kinds(self):
        candidates = edits1("hundo")
        self.assertIn("hndo", candidates)      # deletion
        self.assertIn("hnudo", candidates)     # transposition
        self.assertIn("hunda", candidates)     # substitution
        self.assertIn("ĥundo", candidates)     # substitution with an accented letter
        self.assertIn("hundoj", candidates)    # insertion

    def test_no_duplicates(self):
        candidates = edits1("hundo")
        self.assertEqual(len(candidates), len(set(candidates)))

    def test_only_esperanto_letters(self):
        self.assertFalse(any("q" in c or "w" in c for c in edits1("ab")))

    def test_stable_order(self):
        self.assertEqual(edits1("vi"), edits1("vi"))


class TestSuggestions(unittest.TestCase):

    def setUp(self):
        self.reporter = SpellingReporter(Segmenter(make_store()))

    def test_distance_one(self):
        self.assertEqual(self.reporter.suggest("hundp"), ["hunda", "hunde", "hundo"])

    def test_letter_case_follows_token(self):
        self.assertEqual(self.reporter.suggest("Hundp")[0], "Hunda")
        self.assertEqual(self.reporter.suggest("HUNDP")[0], "HUNDA")

    def test_distance_two(self):
        self.assertIn("hundo", self.reporter.suggest("hunqqo"))
        self.assertEqual(self.reporter.suggest("hunqqo", max_distance=1), [])

    def test_distance_two_skipped_for_long_words(self):
        self.assertEqual(self.reporter.suggest("hundqqqqqqqqo"), [])

    def test_distance_two_only_without_closer_matches(self):
        for suggestion in self.reporter.suggest("hundp"):
            self.assertEqual(len(suggestion), 5)

    def test_fewer_morphemes_first(self):
        store = MorphemeStore.load({
            "prefixes": "mal\n",
            "roots": "ĉi SF KF\nĉiam SF\n",
            "suffixes": "ul\n",
            "endings": "a\no\nn SF\n",
        })
        # ĉi.a (a deletion) is generated before ĉiam (a transposition)
        suggestions = SpellingReporter(Segmenter(store)).suggest("ĉima")
        self.assertEqual(suggestions[0], "ĉiam")
        self.assertLess(suggestions.index("ĉiam"), suggestions.index("ĉia"))

    def test_single_letters_not_suggested(self):
        self.assertEqual(self.reporter.suggest("vk"), ["vi"])

    def test_elided_word(self):
        self.assertIn("hund'", self.reporter.suggest("hunp'"))

    def test_limit(self):
        self.assertEqual(len(self.reporter.suggest("hundp", limit=2)), 2)
        self.assertEqual(SpellingReporter(self.reporter.segmenter, limit=1).suggest("hundp"), ["hunda"])

    def test_empty_token(self):
        self.assertEqual(self.reporter.suggest(""), [])

    def test_zero_distance_searches_nothing(self):
        self.assertEqual(self.reporter.suggest("hundp", max_distance=0), [])
        self.assertEqual(self.reporter.check_spelling("hundp").suggestions, ("hunda", "hunde", "hundo"))

    def test_bad_max_distance(self):
        with self.assertRaises(ValueError):
            SpellingReporter(self.reporter.segmenter, max_distance=3)


class TestCheckSpelling(unittest.TestCase):

    def setUp(self):
        self.reporter = SpellingReporter(Segmenter(make_store()))

    def test_correct_word(self):
        report = self.reporter.check_spelling("malhundulo")
        self.assertIsInstance(report, SpellingReport)
        self.assertTrue(report.ok)
        self.assertEqual(report.decomposition, "mal.hund.ul.o")
        self.assertEqual(report.suggestions, ())

    def test_misspelled_word(self):
        report = self.reporter.check_spelling("hundp")
        self.assertFalse(report.ok)
        self.assertIsNone(report.decomposition)
        self.assertEqual(report.suggestions, ("hunda", "hunde", "hundo"))

    def test_without_suggestions(self):
        report = self.reporter.check_spelling("hundp", suggest=False)
        self.assertFalse(report.ok)
        self.assertEqual(report.suggestions, ())

    def test_empty_token(self):
        report = self.reporter.check_spelling("")
        self.assertFalse(report.ok)
        self.assertEqual(report.suggestions, ())

    def test_module_level_function(self):
        report = check_spelling("hundo", store=make_store())
        self.assertTrue(report.ok)
        self.assertEqual(report.decomposition, "hund.o")


class TestBundledSuggestions:

    @pytest.fixture
    def reporter(self):
        return SpellingReporter(default_segmenter())

    def test_endings_after_the_root(self, reporter):
        assert reporter.suggest("hundp") == ["hunda", "hunde", "hundi", "hundo", "hundu"]

    @pytest.mark.parametrize("token, rejected", [
        ("hundp", "hundpo"),
        ("hundse", "hundsen"),
        ("postaz", "postas"),
    ])
    def test_no_malformed_suggestions(self, reporter, token, rejected):
        assert rejected not in reporter.suggest(token)


if __name__ == '__main__':
    unittest.main()
