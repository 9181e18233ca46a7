#!/usr/bin/env python3
"""
Morpheme Analysis Deep Dive

Shows how vortkontrolo divides Esperanto words into morphemes, and how the
search arrives at its answer.
"""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from vortkontrolo.dictionary import default_segmenter
from vortkontrolo.trace import SearchTrace


def analyze_word(word: str, explanation: str = ""):
    """Analyze a word's morphology in detail."""
    print(f"\nWord: '{word}'")
    if explanation:
        print(f"Meaning: {explanation}")

    segmenter = default_segmenter()
    result = segmenter.segment(word)
    if not result.ok:
        print("\nNot a valid Esperanto word.")
        return

    print(f"\nDivided: {result.render()}")
    print("\nMorphological Breakdown:")
    chain = [f"{m.kind.name}: {m.text}" for m in result.decomposition.morphemes]
    print("  " + " + ".join(chain))

    others = [d.render() for d in segmenter.decompositions(word)]
    if len(others) > 1:
        print("\nOther possible divisions (not chosen):")
        for other in others:
            if other != result.decomposition.render():
                print(f"  {other}")


def show_trace(word: str):
    """Print every step the search took for a word."""
    trace = SearchTrace(word)
    default_segmenter().segment(word, trace=trace)

    print(f"\nSearch for '{word}': {len(trace.steps)} steps, {trace.candidates} complete divisions")
    for step in trace.steps:
        print(f"  {step['step_id']:3d}. [{step['zone']:>16}] {step['kind']:>14} "
              f"{step['morpheme']:<8} rest='{step['remaining']}' {step['event']}")
    print(f"  => {trace.result}")


def main():
    """Run morpheme analysis examples."""
    print("\n")
    print("*" * 60)
    print("  VORTKONTROLO: Morpheme Analysis Deep Dive")
    print("*" * 60)
    print("\nEvery Esperanto word is built from prefixes, roots, suffixes")
    print("and an ending. A word is spelled correctly if it divides.\n")

    print("=" * 60)
    print("Example 1: Simple Noun")
    print("=" * 60)
    analyze_word("hundojn", "dogs (accusative)")

    print("\n" + "=" * 60)
    print("Example 2: Prefix, Root, Suffix, Ending")
    print("=" * 60)
    analyze_word("malsanulejo", "hospital (place for sick people)")

    print("\n" + "=" * 60)
    print("Example 3: Compound with a Linking Vowel")
    print("=" * 60)
    analyze_word("lernolibro", "textbook")

    print("\n" + "=" * 60)
    print("Example 4: Standalone Words and Short Endings")
    print("=" * 60)
    analyze_word("ĉiutage", "every day")
    analyze_word("vin", "you (accusative)")

    print("\n" + "=" * 60)
    print("Example 5: Elision and the x-system")
    print("=" * 60)
    analyze_word("hund'", "dog (poetic)")
    analyze_word("RICXULO", "RICH PERSON")

    print("\n" + "=" * 60)
    print("Example 6: Fewest Morphemes Wins")
    print("=" * 60)
    analyze_word("miskomprenita", "misunderstood")

    print("\n" + "=" * 60)
    print("Example 7: Which Affixes Fit Which Roots")
    print("=" * 60)
    analyze_word("bopatro", "father-in-law")
    analyze_word("bohundo", "bo- only goes with relatives")
    analyze_word("ulo", "a fellow (suffix as a root)")

    print("\n" + "=" * 60)
    print("Example 8: Inside the Search")
    print("=" * 60)
    show_trace("riĉulo")

    print("\n" + "=" * 60)
    print("Examples Complete!")
    print("=" * 60)
    print("\nNext steps:")
    print("  - Try examples/spell_checking.py for suggestions")
    print("  - Run 'vortkontrolo -m FILE' to divide a whole text")
    print("\n")


if __name__ == "__main__":
    main()
