"""
Tests for checking running text.
"""
import unittest

from vortkontrolo.dictionary import default_segmenter
from vortkontrolo.text import check_lines, divide_text, misspelled_words, tokenize, words


class TestTokenize(unittest.TestCase):

    def test_chunks_rebuild_the_text(self):
        text = "La hund' kuras, ĉu ne?"
        self.assertEqual("".join(chunk for _, chunk in tokenize(text)), text)

    def test_words_and_separators(self):
        self.assertEqual(list(tokenize("La hundo.")), [
            (True, "La"), (False, " "), (True, "hundo"), (False, "."),
        ])

    def test_apostrophe_stays_with_word(self):
        self.assertEqual(words("la hund' kuras"), ["la", "hund'", "kuras"])
        self.assertEqual(words("l’ amiko"), ["l’", "amiko"])

    def test_hyphenated_word(self):
        self.assertEqual(words("ne-kompren-ebla afero"), ["ne-kompren-ebla", "afero"])

    def test_lone_dash_is_not_a_word(self):
        self.assertEqual(words("unu - du"), ["unu", "du"])

    def test_empty(self):
        self.assertEqual(list(tokenize("")), [])


class TestTextChecks(unittest.TestCase):

    def setUp(self):
        self.segmenter = default_segmenter()

    def test_divide_text(self):
        self.assertEqual(divide_text("La hundo kuras.", self.segmenter), "La hund.o kur.as.")

    def test_divide_text_leaves_unknown_words(self):
        self.assertEqual(divide_text("hundo xyzqqq!", self.segmenter), "hund.o xyzqqq!")

    def test_misspelled_words_unique_in_order(self):
        self.assertEqual(misspelled_words("xyz hundo hundp xyz", self.segmenter), ["xyz", "hundp"])

    def test_check_lines(self):
        lines = ["La hundo kuras.\n", "xyz hundp\n", "\n"]
        self.assertEqual(check_lines(lines, self.segmenter), [[], ["xyz", "hundp"], []])
        self.assertEqual(check_lines(lines, self.segmenter, morpheme_mode=True),
                         ["La hund.o kur.as.\n", "xyz hundp\n", "\n"])

    def test_check_lines_in_parallel_keeps_order(self):
        lines = [f"hundo{'p' * (i % 3)} kuras\n" for i in range(30)]
        self.assertEqual(check_lines(lines, self.segmenter, jobs=4), check_lines(lines, self.segmenter))


if __name__ == '__main__':
    unittest.main()
