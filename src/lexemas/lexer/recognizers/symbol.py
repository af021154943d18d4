"""Operator, punctuation and grouping recognizer mixin."""

from __future__ import annotations

from lexemas.lexer.cursor import CharCursor
from lexemas.lexer.recognition import NO_MATCH, Recognition
from lexemas.lexer.tables import SymbolTable


def _recognize_symbol(table: SymbolTable, cursor: CharCursor) -> Recognition:
    symbol = table.longest_match(cursor)
    if symbol is None:
        return NO_MATCH
    return Recognition.match(len(symbol))


class SymbolRecognizerMixin:
    """Mixin providing configured-symbol recognition.

    Each category delegates to its table's longest match. None of them has
    an error case.
    """

    _operators: SymbolTable
    _punctuation: SymbolTable
    _grouping: SymbolTable

    def _recognize_operator(self, cursor: CharCursor) -> Recognition:
        return _recognize_symbol(self._operators, cursor)

    def _recognize_punctuation(self, cursor: CharCursor) -> Recognition:
        return _recognize_symbol(self._punctuation, cursor)

    def _recognize_grouping(self, cursor: CharCursor) -> Recognition:
        return _recognize_symbol(self._grouping, cursor)
