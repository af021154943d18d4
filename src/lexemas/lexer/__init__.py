"""Configuration-driven lexer for Lexemas.

This package provides a fixed-priority, non-backtracking lexer with O(n)
guaranteed iterations. Recognizers inspect a cursor without consuming;
the engine consumes and records tokens or errors.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, RecognizerSlot
├── core.py              # Lexer class (mixin composition + dispatch)
├── cursor.py            # CharCursor, EOF sentinel
├── tables.py            # SymbolTable, ReservedWords
├── recognition.py       # Recognition result type
├── policies.py          # AlphabetPolicy, ErrorRecoveryPolicy
├── dfa.py               # Generic automaton (optional recognizer backend)
└── recognizers/         # Category recognition mixins
    ├── comment.py       # Line and block comments
    ├── strings.py       # Double-quoted strings
    ├── numeric.py       # Decimals and integers
    ├── identifier.py    # Identifiers and reserved words
    └── symbol.py        # Operators, punctuation, grouping

Usage:
    >>> from lexemas.config import LexerConfigBuilder
    >>> from lexemas.lexer import Lexer
    >>> config = (
    ...     LexerConfigBuilder()
    ...     .operators("=")
    ...     .punctuation(";")
    ...     .grouping("(", ")")
    ...     .comments("//", "/*", "*/")
    ...     .build()
    ... )
    >>> for token in Lexer(config).analyze("x = 1;"):
    ...     print(token)
    Token(IDENTIFIER, 'x', 1:1)
    Token(OPERATOR, '=', 1:3)
    Token(NUMBER, '1', 1:5)
    Token(PUNCTUATION, ';', 1:6)

"""

from lexemas.lexer.core import Lexer, RecognizerSlot
from lexemas.lexer.cursor import EOF, CharCursor
from lexemas.lexer.recognition import NO_MATCH, Recognition, Recognizer

__all__ = ["EOF", "NO_MATCH", "CharCursor", "Lexer", "RecognizerSlot", "Recognition", "Recognizer"]
