"""Decimal and integer recognizer mixin.

Decimal must be tried before integer: otherwise "12.5" would stop at "12"
and leave ".5" behind.
"""

from __future__ import annotations

from lexemas.charsets import DIGITS, LETTERS
from lexemas.errors import LexErrorKind
from lexemas.lexer.cursor import CharCursor
from lexemas.lexer.recognition import NO_MATCH, Recognition


def _digit_run(cursor: CharCursor, offset: int = 0) -> int:
    """Count consecutive digits starting offset characters ahead."""
    count = 0
    while cursor.peek(offset + count) in DIGITS:
        count += 1
    return count


class NumericRecognizerMixin:
    """Mixin providing decimal and integer recognition."""

    def _recognize_decimal(self, cursor: CharCursor) -> Recognition:
        """Try to recognize digits '.' digits.

        Args:
            cursor: Scan cursor (not consumed)

        Returns:
            - Match of before + 1 + after characters.
            - Error "Decimal mal formado: faltan dígitos" covering the
              digits and the dot when no digit follows the dot. The
              malformed form is not reread as an integer.
            - NO_MATCH when there is no digit run followed by a dot.
        """
        before = _digit_run(cursor)
        if before == 0 or cursor.peek(before) != ".":
            return NO_MATCH

        after = _digit_run(cursor, before + 1)
        if after == 0:
            return Recognition.error(before + 1, LexErrorKind.MALFORMED_DECIMAL.message)
        return Recognition.match(before + 1 + after)

    def _recognize_number(self, cursor: CharCursor) -> Recognition:
        """Try to recognize an integer.

        Args:
            cursor: Scan cursor (not consumed)

        Returns:
            - Match of the digit run.
            - Error "Número mal formado" when a letter immediately follows
              the digits. Only the first letter joins the error span.
            - NO_MATCH when the cursor is not at a digit.
        """
        digits = _digit_run(cursor)
        if digits == 0:
            return NO_MATCH
        if cursor.peek(digits) in LETTERS:
            return Recognition.error(digits + 1, LexErrorKind.MALFORMED_INTEGER.message)
        return Recognition.match(digits)
