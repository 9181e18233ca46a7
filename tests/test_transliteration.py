"""
Tests for x-system conversion and the small text helpers.
"""
import unittest

from vortkontrolo.transliteration import (
    ALPHABET,
    is_esperanto_word,
    is_word_char,
    remove_hyphens,
    restore_capitals,
    to_ascii,
    to_native,
)


class TestToNative(unittest.TestCase):

    def test_converts_every_pair(self):
        self.assertEqual(to_native("cxgxhxjxsxux"), "ĉĝĥĵŝŭ")

    def test_word(self):
        self.assertEqual(to_native("cxiutage"), "ĉiutage")

    def test_upper_case_marker(self):
        """Both 'x' and 'X' mark an accent, whatever the case of the letter."""
        self.assertEqual(to_native("CXIUTAGE"), "ĈIUTAGE")
        self.assertEqual(to_native("Cxiutage"), "Ĉiutage")
        self.assertEqual(to_native("cX"), "ĉ")

    def test_stray_x_is_kept(self):
        """An 'x' after a letter which cannot carry a hat is left alone."""
        self.assertEqual(to_native("taxi"), "taxi")
        self.assertEqual(to_native("x"), "x")

    def test_native_text_unchanged(self):
        self.assertEqual(to_native("ĉiutage"), "ĉiutage")


class TestToAscii(unittest.TestCase):

    def test_lower_case(self):
        self.assertEqual(to_ascii("ĉiutage"), "cxiutage")

    def test_marker_is_always_lower_case(self):
        self.assertEqual(to_ascii("Ĉiutage"), "Cxiutage")
        self.assertEqual(to_ascii("ŜIP"), "SxIP")

    def test_native_round_trip(self):
        for word in ("ĉiutage", "ŝipo", "eĥo", "ĵaŭdo", "ĝardeno", "SUPERĜIRAFO"):
            self.assertEqual(to_native(to_ascii(word)), word)

    def test_title_case_round_trip(self):
        """Capitalised x-system words come back exactly as written."""
        for word in ("Cxiutage", "Sxafo", "Gxardeno", "Euxropo"):
            self.assertEqual(to_ascii(to_native(word)), word)


class TestTextHelpers(unittest.TestCase):

    def test_remove_hyphens(self):
        self.assertEqual(remove_hyphens("ne-kompren-ebla"), "nekomprenebla")
        self.assertEqual(remove_hyphens("lern\u00adolibro"), "lernolibro")

    def test_is_word_char(self):
        for ch in ("a", "Z", "ĉ", "Ŭ", "-", "\u00ad"):
            self.assertTrue(is_word_char(ch), ch)
        for ch in " .,'1!":
            self.assertFalse(is_word_char(ch), ch)

    def test_is_esperanto_word(self):
        self.assertTrue(is_esperanto_word("ĉiutage"))
        self.assertFalse(is_esperanto_word(""))
        self.assertFalse(is_esperanto_word("xyz"))
        self.assertFalse(is_esperanto_word("hund'"))

    def test_alphabet_has_28_letters(self):
        self.assertEqual(len(ALPHABET), 28)
        self.assertNotIn("q", ALPHABET)
        self.assertNotIn("w", ALPHABET)


class TestRestoreCapitals(unittest.TestCase):

    def test_all_capitals(self):
        self.assertEqual(restore_capitals("RIĈULO", "riĉ.ul.o"), "RIĈ.UL.O")

    def test_initial_capital(self):
        self.assertEqual(restore_capitals("Hundo", "hund.o"), "Hund.o")

    def test_lower_case_unchanged(self):
        self.assertEqual(restore_capitals("hundo", "hund.o"), "hund.o")

    def test_other_separator(self):
        self.assertEqual(restore_capitals("HUNDO", "hund-o", separator="-"), "HUND-O")


if __name__ == '__main__':
    unittest.main()
