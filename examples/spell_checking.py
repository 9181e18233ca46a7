#!/usr/bin/env python3
"""
Spell Checking Examples

Checks single words, suggests corrections, and checks a short text.
"""
import sys
from pathlib import Path

# Add parent directory to path to import vortkontrolo
sys.path.insert(0, str(Path(__file__).parent.parent))

from vortkontrolo import check_spelling, to_ascii
from vortkontrolo.dictionary import default_segmenter
from vortkontrolo.text import divide_text, misspelled_words


def example_1_single_words():
    """Check a few words, correct and not."""
    print("=" * 60)
    print("Example 1: Checking Single Words")
    print("=" * 60)

    for word in ["resanigos", "hundp", "Katoj", "xyzqqq"]:
        report = check_spelling(word, suggest=False)
        if report.ok:
            print(f"  {report.decomposition} ✓")
        else:
            print(f"  ✘{word}")


def example_2_suggestions():
    """Near misses: words one or two edits away."""
    print("\n" + "=" * 60)
    print("Example 2: Suggestions")
    print("=" * 60)

    for word in ["hundp", "Lernolibor", "ĉiutgae"]:
        report = check_spelling(word)
        print(f"\n  ✘{word}")
        print(f"    {', '.join(report.suggestions) or '(no suggestions)'}")


def example_3_text():
    """Divide a text and list its misspellings."""
    print("\n" + "=" * 60)
    print("Example 3: Checking a Text")
    print("=" * 60)

    text = "La malsanulo ĉiutage legas lernolibron, sed la hundp dormas."
    segmenter = default_segmenter()

    print(f"\nInput:   {text}")
    print(f"Divided: {divide_text(text, segmenter)}")
    print(f"x-system: {to_ascii(text)}")
    print(f"Misspelled: {misspelled_words(text, segmenter)}")


def main():
    """Run all examples."""
    print("\n")
    print("*" * 60)
    print("  VORTKONTROLO: Spell Checking Examples")
    print("*" * 60)

    example_1_single_words()
    example_2_suggestions()
    example_3_text()

    print("\n" + "=" * 60)
    print("Examples Complete!")
    print("=" * 60)
    print("\nNext steps:")
    print("  - Read examples/morpheme_analysis.py for the search in detail")
    print("  - Run 'vortkontrolo --suggest WORD' from the command line")
    print("\n")


if __name__ == "__main__":
    main()
