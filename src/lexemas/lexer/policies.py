"""Alphabet and error recovery policies.

AlphabetPolicy decides whether a character belongs to the configured
language at all. ErrorRecoveryPolicy turns a malformed construct into a
LexError record; it never moves the cursor.
"""

from __future__ import annotations

from lexemas.charsets import BASE_ALPHABET
from lexemas.config import LexerConfig
from lexemas.lexer.cursor import CharCursor
from lexemas.lexer.tables import SymbolTable
from lexemas.location import Position
from lexemas.tokens import LexError


class AlphabetPolicy:
    """Membership rules for the permitted alphabet.

    is_allowed_at() is the last-resort check of the lexer: it runs only
    after every recognizer declined a position. allows_in_string() is the
    per-character rule for string bodies, backed by a flat character set
    computed once.

    Thread Safety:
        Immutable after creation. Safe to share.
    """

    __slots__ = ("_tables", "_delimiters", "_characters")

    def __init__(
        self,
        config: LexerConfig,
        operators: SymbolTable,
        punctuation: SymbolTable,
        grouping: SymbolTable,
    ) -> None:
        self._tables = (operators, punctuation, grouping)
        self._delimiters = config.delimiters()
        self._characters = config.alphabet()

    @property
    def characters(self) -> frozenset[str]:
        """Every character a valid program may contain."""
        return self._characters

    def is_allowed_at(self, cursor: CharCursor) -> bool:
        """True if the character at the cursor could start a permitted lexeme.

        Letters, digits, space/CR/LF and the double quote always qualify.
        Otherwise the cursor must be at the start of a configured symbol or
        comment delimiter. EOF is never reported as a violation.
        """
        if cursor.eof():
            return True
        if cursor.peek() in BASE_ALPHABET:
            return True
        for table in self._tables:
            if table.longest_match(cursor) is not None:
                return True
        return any(cursor.startswith(d) for d in self._delimiters)

    def allows_in_string(self, char: str) -> bool:
        """True if char may appear inside a string literal."""
        return char in self._characters

    def allows_in_string_by_tables(self, char: str) -> bool:
        """Same rule as allows_in_string, evaluated against the symbol tables.

        Slower; kept as the reference form of the precomputed set.
        """
        if char in BASE_ALPHABET:
            return True
        for table in self._tables:
            if any(char in symbol for symbol in table.symbols):
                return True
        return any(char in d for d in self._delimiters)


class ErrorRecoveryPolicy:
    """Builds error records. Recovery itself is the lexer's job:
    consume the recognized length and keep scanning.
    """

    __slots__ = ()

    def build_lex_error(self, lexeme: str | None, position: Position, message: str) -> LexError:
        """Create a LexError.

        Args:
            lexeme: Offending fragment (None is recorded as "")
            position: Position of the fragment
            message: Message from the error vocabulary

        Raises:
            ValueError: If position or message is None.
        """
        if position is None:
            raise ValueError("position must not be None")
        if message is None:
            raise ValueError("message must not be None")
        return LexError(text=lexeme if lexeme is not None else "", position=position, message=message)
