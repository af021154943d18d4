"""String literal recognizer mixin."""

from __future__ import annotations

from lexemas.charsets import QUOTE
from lexemas.errors import LexErrorKind
from lexemas.lexer.cursor import EOF, CharCursor
from lexemas.lexer.policies import AlphabetPolicy
from lexemas.lexer.recognition import NO_MATCH, Recognition


class StringRecognizerMixin:
    """Mixin providing double-quoted string recognition."""

    _alphabet: AlphabetPolicy

    def _recognize_string(self, cursor: CharCursor) -> Recognition:
        """Try to recognize a string literal.

        Scans to the next double quote. Every character in between must
        belong to the alphabet; the check is per character, not per symbol.

        Args:
            cursor: Scan cursor (not consumed)

        Returns:
            - Match including both quotes when closed.
            - Error "Cadena no cerrada" through EOF when never closed,
              recorded as the opening quote alone.
            - Error "Símbolo fuera del alfabeto permitido en cadena" at the
              first foreign character: the foreign character is consumed,
              the recorded fragment stops just before it.
            - NO_MATCH when the cursor is not at a quote.
        """
        if cursor.peek() != QUOTE:
            return NO_MATCH

        length = 1
        while True:
            char = cursor.peek(length)
            if char == EOF:
                return Recognition.error(
                    length, LexErrorKind.UNTERMINATED_STRING.message, error_lexeme=QUOTE
                )
            if char == QUOTE:
                return Recognition.match(length + 1)
            if not self._alphabet.allows_in_string(char):
                return Recognition.error(
                    length + 1,
                    LexErrorKind.STRING_ALPHABET_VIOLATION.message,
                    error_length=length,
                )
            length += 1
