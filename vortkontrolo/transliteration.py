"""
Conversion between the x-system and native Esperanto letters.

Older texts (and keyboards without dead keys) write the accented letters
as a base letter followed by 'x': cx, gx, hx, jx, sx, ux. These helpers
convert in both directions and carry a few small text utilities used before
and after morpheme analysis.
"""

# Base letter -> accented letter, both cases.
ACCENTED = {
    'c': 'ĉ', 'g': 'ĝ', 'h': 'ĥ', 'j': 'ĵ', 's': 'ŝ', 'u': 'ŭ',
    'C': 'Ĉ', 'G': 'Ĝ', 'H': 'Ĥ', 'J': 'Ĵ', 'S': 'Ŝ', 'U': 'Ŭ',
}

# Accented letter -> x-system pair. The marker is always a lower-case x:
# 'Ĉiutage' -> 'Cxiutage'.
X_SYSTEM = {
    accented: base + 'x'
    for base, accented in ACCENTED.items()
}

MARKERS = {'x', 'X'}
HYPHENS = {'-', '\u00ad'}  # hyphen-minus and soft hyphen

# Lower-case Esperanto alphabet, in dictionary order.
ALPHABET = 'abcĉdefgĝhĥijĵklmnoprsŝtuŭvz'
LETTERS = frozenset(ALPHABET)


def to_native(token: str) -> str:
    """
    Converts x-system pairs to native letters: 'cxiutage' -> 'ĉiutage'.

    Characters which are not part of a pair pass through unchanged,
    including a stray 'x' after a letter which cannot carry a hat.
    """
    result = []
    skip = False
    for i, ch in enumerate(token):
        if skip:
            skip = False
            continue
        if ch in ACCENTED and i + 1 < len(token) and token[i + 1] in MARKERS:
            result.append(ACCENTED[ch])
            skip = True
        else:
            result.append(ch)
    return ''.join(result)


def to_ascii(token: str) -> str:
    """Converts native letters to x-system pairs: 'ĉiutage' -> 'cxiutage'."""
    return ''.join(X_SYSTEM.get(ch, ch) for ch in token)


def remove_hyphens(token: str) -> str:
    return ''.join(ch for ch in token if ch not in HYPHENS)


def is_word_char(ch: str) -> bool:
    """
    True for characters which belong inside a word.

    Covers ASCII letters, the Latin letters from 'À' to 'ʯ' (which include
    the accented Esperanto letters), hyphens and the soft hyphen.
    """
    return ('a' <= ch <= 'z') or ('A' <= ch <= 'Z') or ('À' <= ch <= 'ʯ') or ch in HYPHENS


def is_esperanto_word(token: str) -> bool:
    """True if every character of a lower-case token is an Esperanto letter."""
    return bool(token) and all(ch in LETTERS for ch in token)


def restore_capitals(original: str, analyzed: str, separator: str = '.') -> str:
    """
    Re-applies the letter case of the original word to an analysis.

    The dictionary only holds lower-case morphemes, so analyses come back
    in lower case. 'RIĈULO' analysed as 'riĉ.ul.o' becomes 'RIĈ.UL.O'.
    Separators in the analysis are copied as they are; every other character
    consumes one character of the original.
    """
    result = []
    index = 0
    for ch in analyzed:
        if ch == separator or index >= len(original):
            result.append(ch)
        else:
            result.append(original[index])
            index += 1
    return ''.join(result)
