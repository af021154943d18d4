"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Classification is ASCII-only: letters are a-z/A-Z and digits 0-9.
The empty string (the cursor's end-of-input sentinel) belongs to no set.

Usage:
    from lexemas.charsets import DIGITS

    if char in DIGITS:  # O(1) lookup
        ...
"""

import string

LETTERS: frozenset[str] = frozenset(string.ascii_letters)

DIGITS: frozenset[str] = frozenset(string.digits)

# Only space, CR and LF separate lexemes. Tab is not part of the alphabet.
WHITESPACE: frozenset[str] = frozenset(" \r\n")

LINE_BREAKS: frozenset[str] = frozenset("\r\n")

QUOTE = '"'

# Characters a program may use before any configured symbol is considered
BASE_ALPHABET: frozenset[str] = LETTERS | DIGITS | WHITESPACE | frozenset(QUOTE)

IDENTIFIER_CONTINUE: frozenset[str] = LETTERS | DIGITS


def is_letter(char: str) -> bool:
    """Check if char is an ASCII letter."""
    return char in LETTERS


def is_digit(char: str) -> bool:
    """Check if char is an ASCII digit."""
    return char in DIGITS


def is_whitespace(char: str) -> bool:
    """Check if char is a lexeme separator (space, CR or LF)."""
    return char in WHITESPACE
