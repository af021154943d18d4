"""Identifier and reserved word recognizer mixin."""

from __future__ import annotations

from lexemas.charsets import IDENTIFIER_CONTINUE, LETTERS
from lexemas.lexer.cursor import CharCursor
from lexemas.lexer.recognition import NO_MATCH, Recognition
from lexemas.lexer.tables import ReservedWords
from lexemas.tokens import TokenType


class IdentifierRecognizerMixin:
    """Mixin providing identifier recognition and classification."""

    _reserved: ReservedWords

    def _recognize_identifier(self, cursor: CharCursor) -> Recognition:
        """Try to recognize letter (letter | digit)*.

        No other character (underscore included) continues an identifier.
        """
        if cursor.peek() not in LETTERS:
            return NO_MATCH

        length = 1
        while cursor.peek(length) in IDENTIFIER_CONTINUE:
            length += 1
        return Recognition.match(length)

    def _classify_word(self, lexeme: str) -> TokenType:
        """RESERVED_WORD for an exact (case-sensitive) reserved word, else IDENTIFIER."""
        if self._reserved.is_reserved(lexeme):
            return TokenType.RESERVED_WORD
        return TokenType.IDENTIFIER
