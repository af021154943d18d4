"""Symbol tables built once per lexer from the configuration.

SymbolTable answers "which configured symbol starts here?" with greedy
longest-match semantics. ReservedWords answers exact membership.

Thread Safety:
Both tables are immutable after creation. Safe to share.
"""

from __future__ import annotations

from collections.abc import Iterable

from lexemas.charsets import IDENTIFIER_CONTINUE, LETTERS
from lexemas.lexer.cursor import CharCursor


class SymbolTable:
    """Immutable set of symbols supporting longest-match lookup.

    Symbols are sorted longest-first once, at construction, so the first
    symbol that matches at the cursor is the longest one. A longer symbol
    always wins over a shorter one, regardless of declaration order.
    Equal-length symbols cannot both match at one position.

    Example:
        >>> table = SymbolTable({"=", "=="})
        >>> table.longest_match(CharCursor("==="))
        '=='

    """

    __slots__ = ("_symbols", "_members", "_first_chars", "_max_length")

    def __init__(self, symbols: Iterable[str]) -> None:
        """Build the table.

        Args:
            symbols: Configured symbols

        Raises:
            ValueError: If a symbol is empty or not a string.
        """
        members = frozenset(symbols)
        for symbol in members:
            if not isinstance(symbol, str) or not symbol:
                raise ValueError(f"symbols must be non-empty strings, got {symbol!r}")

        # Length desc, then lexical order for a stable listing
        self._symbols: tuple[str, ...] = tuple(sorted(members, key=lambda s: (-len(s), s)))
        self._members = members
        self._first_chars = frozenset(s[0] for s in members)
        self._max_length = len(self._symbols[0]) if self._symbols else 0

    @property
    def symbols(self) -> tuple[str, ...]:
        """Symbols, longest first."""
        return self._symbols

    @property
    def max_length(self) -> int:
        """Length of the longest symbol (0 when empty)."""
        return self._max_length

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._members

    def __len__(self) -> int:
        return len(self._symbols)

    def longest_match(self, cursor: CharCursor) -> str | None:
        """Return the longest symbol that starts at the cursor, or None.

        Non-consuming.
        """
        if cursor.eof() or cursor.peek() not in self._first_chars:
            return None
        for symbol in self._symbols:
            if cursor.startswith(symbol):
                return symbol
        return None


class ReservedWords:
    """Case-sensitive reserved word lookup. No partial matching."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str]) -> None:
        self._words = frozenset(words)

    def is_reserved(self, lexeme: str) -> bool:
        """True if lexeme is exactly a reserved word."""
        return lexeme in self._words

    def __contains__(self, lexeme: object) -> bool:
        return lexeme in self._words

    def __len__(self) -> int:
        return len(self._words)

    @property
    def words(self) -> frozenset[str]:
        return self._words

    def unreachable(self) -> tuple[str, ...]:
        """Words the identifier rule can never produce, sorted.

        Reserved words are only found by classifying identifiers, so a word
        that is not letter (letter | digit)* never turns up in a token.
        """
        return tuple(
            sorted(
                word
                for word in self._words
                if not word
                or word[0] not in LETTERS
                or any(ch not in IDENTIFIER_CONTINUE for ch in word)
            )
        )
