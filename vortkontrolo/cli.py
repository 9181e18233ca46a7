"""
Command-line interface for vortkontrolo.

- Check the spelling of one word
- List the misspelled words of a file
- Divide the words of a file into morphemes
"""
import sys
import argparse
from pathlib import Path

from vortkontrolo.logging_config import setup_logging


def _load_segmenter(args):
    from vortkontrolo.dictionary import default_segmenter, load_store
    from vortkontrolo.segmenter import Segmenter

    if args.dictionary:
        return Segmenter(load_store(args.dictionary))
    return default_segmenter()


def cmd_word(args, segmenter):
    """Check a single word and print its morphemes, or mark it as unknown."""
    from vortkontrolo.speller import SpellingReporter
    from vortkontrolo.trace import SearchTrace

    trace = SearchTrace(args.target) if args.trace else None
    result = segmenter.segment(args.target, trace=trace)

    if result.ok:
        print(f"{result.render()} ✓")
    else:
        print(f"✘{args.target}")
        if args.suggest:
            reporter = SpellingReporter(segmenter, max_distance=args.max_distance)
            suggestions = reporter.suggest(args.target)
            if suggestions:
                print("  " + ", ".join(suggestions))

    if trace is not None:
        print(trace.to_json())
    return 0 if result.ok else 1


def cmd_file(args, segmenter):
    """Divide a file into morphemes (-m), or list its misspelled words."""
    from vortkontrolo.speller import SpellingReporter
    from vortkontrolo.text import check_lines

    with open(args.target, 'r', encoding='utf-8') as f:
        lines = f.read().splitlines(keepends=True)

    results = check_lines(lines, segmenter, morpheme_mode=args.morphemes, jobs=args.jobs)

    if args.morphemes:
        sys.stdout.write(''.join(results))
        return 0

    bad_words = list(dict.fromkeys(word for line_words in results for word in line_words))
    reporter = SpellingReporter(segmenter, max_distance=args.max_distance) if args.suggest else None
    for word in bad_words:
        if reporter is not None:
            suggestions = reporter.suggest(word)
            print(f"{word}\t{', '.join(suggestions)}" if suggestions else word)
        else:
            print(word)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog='vortkontrolo',
        description='Spell checker and morphological analyser for Esperanto',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check the spelling of one word (accents may be written with x)
  vortkontrolo ĉiutage
  vortkontrolo cxiutage
  vortkontrolo --suggest hundp

  # List misspelled words in a file
  vortkontrolo file.txt

  # Divide the words of a file into morphemes
  vortkontrolo -m file.txt
        """
    )
    parser.add_argument('target', help='A word, or the name of a text file')
    parser.add_argument('-m', '--morphemes', action='store_true',
                        help='Divide the words of the file into morphemes')
    parser.add_argument('-s', '--suggest', action='store_true',
                        help='Suggest corrections for misspelled words')
    parser.add_argument('--max-distance', type=int, default=2, choices=[1, 2],
                        help='Largest edit distance for suggestions (default: 2)')
    parser.add_argument('--dictionary', help='Directory with prefixes/roots/suffixes/endings.txt')
    parser.add_argument('-j', '--jobs', type=int, default=1, help='Worker threads for files (default: 1)')
    parser.add_argument('--trace', action='store_true', help='Print the search trace of a word as JSON')
    parser.add_argument('--debug', action='store_true', help='Verbose logging')
    parser.add_argument('--log-file', help='Also write the log to this file')
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(log_file=args.log_file, debug=args.debug)

    try:
        segmenter = _load_segmenter(args)
    except (OSError, ValueError) as e:
        print(f"ERROR loading dictionary: {e}", file=sys.stderr)
        return 1

    # If there is no file with this name, it must be a word.
    if Path(args.target).is_file():
        try:
            return cmd_file(args, segmenter)
        except OSError as e:
            print(f"ERROR reading {args.target}: {e}", file=sys.stderr)
            return 1
    return cmd_word(args, segmenter)


if __name__ == '__main__':
    sys.exit(main())
