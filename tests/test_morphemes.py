"""
Tests for loading and querying the morpheme store.
"""
import unittest

from vortkontrolo.morphemes import (
    COMPOUND_MARKERS,
    LoadError,
    Morpheme,
    MorphemeClass,
    MorphemeStore,
)


def make_sources(**overrides):
    sources = {
        "prefixes": "mal\nre\n",
        "roots": "# a comment\nhund SUBST MAMULO\nkapt VERBO T\nkap\ncxiu   PRONOMADJ SF KJ KN\nkaj KONJUNKCIO SF\n\n",
        "suffixes": "ul\nej\n",
        "endings": "o\noj\nn  SF\n",
    }
    sources.update(overrides)
    return sources


class TestMorphemeStoreLoad(unittest.TestCase):

    def test_load_counts(self):
        store = MorphemeStore.load(make_sources())
        self.assertEqual(store.size(MorphemeClass.PREFIX), 2)
        self.assertEqual(store.size(MorphemeClass.ROOT), 5)
        self.assertEqual(store.size(MorphemeClass.SUFFIX), 2)
        self.assertEqual(store.size(MorphemeClass.ENDING), 3)

    def test_x_system_entries_are_converted(self):
        store = MorphemeStore.load(make_sources())
        self.assertIn((MorphemeClass.ROOT, "ĉiu"), store)
        self.assertNotIn((MorphemeClass.ROOT, "cxiu"), store)

    def test_flags(self):
        store = MorphemeStore.load(make_sources())
        self.assertEqual(store.lookup(MorphemeClass.ROOT, "ĉiu"),
                         Morpheme("ĉiu", MorphemeClass.ROOT, standalone=True, takes_ending=False,
                                  plural=True, accusative=True, pos="PRONOMADJ"))
        kaj = store.lookup(MorphemeClass.ROOT, "kaj")
        self.assertTrue(kaj.standalone)
        self.assertFalse(kaj.takes_ending)
        self.assertTrue(store.lookup(MorphemeClass.ENDING, "n").standalone)
        self.assertFalse(store.lookup(MorphemeClass.ENDING, "oj").standalone)

    def test_standalone_root_takes_endings_only_with_kf(self):
        store = MorphemeStore.load(make_sources(roots="post PREPOZICIO SF KF\nne ADVERBO SF\nhund\n"))
        self.assertTrue(store.lookup(MorphemeClass.ROOT, "post").takes_ending)
        self.assertFalse(store.lookup(MorphemeClass.ROOT, "ne").takes_ending)
        self.assertTrue(store.lookup(MorphemeClass.ROOT, "hund").takes_ending)

    def test_short_endings_need_their_own_flags(self):
        store = MorphemeStore.load(make_sources(roots="post PREPOZICIO SF KF\nvi PRONOMO SF KF KN\n"))
        post = store.lookup(MorphemeClass.ROOT, "post")
        vi = store.lookup(MorphemeClass.ROOT, "vi")
        self.assertFalse(post.plural)
        self.assertFalse(post.accusative)
        self.assertTrue(vi.accusative)
        self.assertFalse(vi.plural)

    def test_grammatical_properties(self):
        store = MorphemeStore.load(make_sources())
        hund = store.lookup(MorphemeClass.ROOT, "hund")
        self.assertEqual((hund.pos, hund.meaning, hund.transitive), ("SUBST", "MAMULO", None))
        kapt = store.lookup(MorphemeClass.ROOT, "kapt")
        self.assertEqual((kapt.pos, kapt.transitive), ("VERBO", True))
        kap = store.lookup(MorphemeClass.ROOT, "kap")
        self.assertIsNone(kap.pos)

    def test_conflicting_properties(self):
        with self.assertRaises(LoadError):
            MorphemeStore.load(make_sources(roots="hund SUBST ADJ\n"))
        with self.assertRaises(LoadError):
            MorphemeStore.load(make_sources(roots="kapt VERBO T N\n"))

    def test_properties_only_on_roots(self):
        with self.assertRaises(LoadError):
            MorphemeStore.load(make_sources(suffixes="ul SUBST\n"))
        with self.assertRaises(LoadError):
            MorphemeStore.load(make_sources(endings="o\nn SF KN\n"))

    def test_lines_as_iterable(self):
        sources = make_sources(suffixes=["ul", "  ej  # place", ""])
        store = MorphemeStore.load(sources)
        self.assertEqual(store.size(MorphemeClass.SUFFIX), 2)
        self.assertIn((MorphemeClass.SUFFIX, "ej"), store)

    def test_missing_dictionary(self):
        sources = make_sources()
        del sources["suffixes"]
        with self.assertRaises(LoadError):
            MorphemeStore.load(sources)

    def test_empty_dictionary(self):
        with self.assertRaises(LoadError):
            MorphemeStore.load(make_sources(endings="# nothing here\n\n"))

    def test_non_letter_entry(self):
        with self.assertRaises(LoadError) as cm:
            MorphemeStore.load(make_sources(roots="hund\nkat3\n"))
        self.assertIn("roots:2", str(cm.exception))

    def test_unknown_flag(self):
        with self.assertRaises(LoadError):
            MorphemeStore.load(make_sources(roots="hund XX\n"))
        with self.assertRaises(LoadError):
            MorphemeStore.load(make_sources(roots="kaj SF NF\n"))

    def test_load_error_is_value_error(self):
        self.assertTrue(issubclass(LoadError, ValueError))


class TestMorphemeStoreQueries(unittest.TestCase):

    def setUp(self):
        self.store = MorphemeStore.load(make_sources())

    def test_lookup_is_case_insensitive(self):
        self.assertEqual(self.store.lookup(MorphemeClass.ROOT, "HUND").text, "hund")
        self.assertIsNone(self.store.lookup(MorphemeClass.ROOT, "kat"))

    def test_lookup_wrong_class(self):
        self.assertIsNone(self.store.lookup(MorphemeClass.PREFIX, "hund"))

    def test_prefix_lengths_longest_first(self):
        self.assertEqual(self.store.prefix_lengths(MorphemeClass.ROOT, "kaptulo"), [4, 3])
        self.assertEqual(self.store.prefix_lengths(MorphemeClass.ROOT, "kapo"), [3])
        self.assertEqual(self.store.prefix_lengths(MorphemeClass.ROOT, "xyz"), [])

    def test_prefix_lengths_short_text(self):
        self.assertEqual(self.store.prefix_lengths(MorphemeClass.ROOT, "ka"), [])

    def test_compound_markers(self):
        self.assertEqual(self.store.prefix_lengths(MorphemeClass.COMPOUND_MARKER, "olibro"), [1])
        self.assertEqual(self.store.prefix_lengths(MorphemeClass.COMPOUND_MARKER, "ilibro"), [])
        self.assertIs(self.store.lookup(MorphemeClass.COMPOUND_MARKER, "a"), COMPOUND_MARKERS["a"])
        self.assertEqual(set(COMPOUND_MARKERS), {"o", "a", "e"})

    def test_has_prefix(self):
        self.assertTrue(self.store.has_prefix(MorphemeClass.ROOT, "hu"))
        self.assertTrue(self.store.has_prefix(MorphemeClass.ROOT, "kapt"))
        self.assertFalse(self.store.has_prefix(MorphemeClass.ROOT, "kapto"))
        self.assertFalse(self.store.has_prefix(MorphemeClass.SUFFIX, "z"))

    def test_morphemes_sorted(self):
        texts = [m.text for m in self.store.morphemes(MorphemeClass.ROOT)]
        self.assertEqual(texts, sorted(texts))
        self.assertEqual(len(texts), 5)


if __name__ == '__main__':
    unittest.main()
