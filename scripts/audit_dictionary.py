#!/usr/bin/env python3
"""
Audit the morpheme dictionaries.

Checks for:
1. Entries listed twice in the same file
2. Roots spelled like a prefix or suffix
3. Roots which the segmenter can also build from other morphemes
   (malbon = mal + bon): such roots hide the real structure of words
"""

import argparse
import sys
from collections import Counter
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from vortkontrolo.dictionary import DEFAULT_DATA_DIR, read_sources
from vortkontrolo.morphemes import SOURCE_NAMES, MorphemeClass, MorphemeStore
from vortkontrolo.segmenter import Segmenter


def find_duplicates(sources):
    """Entries which appear more than once, per dictionary."""
    duplicates = {}
    for name in SOURCE_NAMES:
        entries = [line.split('#', 1)[0].split()[0]
                   for line in sources[name].splitlines()
                   if line.split('#', 1)[0].strip()]
        repeated = sorted(entry for entry, count in Counter(entries).items() if count > 1)
        if repeated:
            duplicates[name] = repeated
    return duplicates


def find_affix_roots(store):
    """Roots with the same spelling as a prefix or suffix."""
    affixes = {m.text for m in store.morphemes(MorphemeClass.PREFIX)}
    affixes |= {m.text for m in store.morphemes(MorphemeClass.SUFFIX)}
    return [m.text for m in store.morphemes(MorphemeClass.ROOT) if m.text in affixes]


def find_divisible_roots(store):
    """Roots whose noun form also divides without using the root itself."""
    segmenter = Segmenter(store)
    found = []
    for root in store.morphemes(MorphemeClass.ROOT):
        if root.standalone or not root.takes_ending:
            continue
        for decomposition in segmenter.decompositions(root.text + 'o'):
            if root.text not in decomposition.texts():
                found.append((root.text, decomposition.render()))
                break
    return found


def main():
    parser = argparse.ArgumentParser(description='Audit the morpheme dictionaries')
    parser.add_argument('--dictionary', default=str(DEFAULT_DATA_DIR),
                        help='Directory with prefixes/roots/suffixes/endings.txt')
    args = parser.parse_args()

    sources = read_sources(args.dictionary)
    store = MorphemeStore.load(sources)

    print(f"\n{'='*70}")
    print("DICTIONARY AUDIT")
    print(f"{'='*70}\n")
    for name, kind in SOURCE_NAMES.items():
        print(f"  {name:<10} {store.size(kind):5d}")
    print()

    duplicates = find_duplicates(sources)
    if duplicates:
        print("⚠️  WARNING: Entries listed more than once:")
        for name, entries in duplicates.items():
            print(f"   - {name}: {', '.join(entries)}")
        print()
    else:
        print("✅ No duplicate entries\n")

    affix_roots = find_affix_roots(store)
    if affix_roots:
        print("ℹ️  NOTE: Roots spelled like an affix (intentional?):")
        print(f"   {', '.join(affix_roots)}\n")

    divisible = find_divisible_roots(store)
    if divisible:
        print("⚠️  WARNING: Roots which also divide into other morphemes:")
        for root, division in divisible:
            print(f"   - '{root}': {division}")
        print()
    else:
        print("✅ No divisible roots\n")

    print(f"{'='*70}")
    print("SUMMARY")
    print(f"{'='*70}\n")
    total_issues = sum(len(v) for v in duplicates.values()) + len(divisible)
    if total_issues == 0:
        print("✅ Dictionaries appear clean")
    else:
        print(f"⚠️  Found {total_issues} potential issues")
    return 1 if total_issues else 0


if __name__ == '__main__':
    sys.exit(main())
