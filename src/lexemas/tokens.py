"""Token, LexError and LexResult definitions for the Lexemas lexer.

The lexer produces an ordered sequence of Token objects and an ordered
sequence of LexError records. Both carry the exact source fragment and
the 1-based position of its first character.

Thread Safety:
Token, LexError and LexResult are frozen (immutable) and safe to share
across threads. TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from lexemas.errors import LexErrorKind
from lexemas.location import Position


class TokenType(Enum):
    """Token types produced by the lexer.

    The value of each member is its display label, as shown by the
    reporting tools built on top of the lexer.

    COMMENT and ERROR only appear when the lexer is asked to surface
    comments or mirror errors in the token stream.
    """

    IDENTIFIER = "identificador"
    NUMBER = "número"
    DECIMAL = "decimal"
    STRING = "cadena"
    RESERVED_WORD = "palabra reservada"
    PUNCTUATION = "puntuación"
    OPERATOR = "operador"
    GROUPING = "agrupación"
    COMMENT = "comentario"
    ERROR = "error"

    @property
    def label(self) -> str:
        """Human-readable label."""
        return self.value


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexeme with its source position.

    Attributes:
        type: The token type (from TokenType enum)
        lexeme: Exact source substring
        position: Position of the first character of the lexeme

    """

    type: TokenType
    lexeme: str
    position: Position

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.lexeme
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.position})"

    @property
    def line(self) -> int:
        """Line number (convenience accessor)."""
        return self.position.line

    @property
    def column(self) -> int:
        """Column number (convenience accessor)."""
        return self.position.column


@dataclass(frozen=True, slots=True)
class LexError:
    """A malformed lexical construct recorded during analysis.

    Attributes:
        text: Offending source fragment (may be empty)
        position: Position of the first character of the fragment
        message: Human-readable message from the fixed vocabulary

    """

    text: str
    position: Position
    message: str

    @property
    def kind(self) -> LexErrorKind | None:
        """Error category, resolved from the message."""
        return LexErrorKind.from_message(self.message)

    def __str__(self) -> str:
        return f"{self.position}: {self.message}: {self.text!r}"


@dataclass(frozen=True, slots=True)
class LexResult:
    """Outcome of one analysis: tokens and errors, both in source order."""

    tokens: tuple[Token, ...] = ()
    errors: tuple[LexError, ...] = ()

    @property
    def ok(self) -> bool:
        """True when no lexical error was found."""
        return not self.errors

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def tokens_of(self, token_type: TokenType) -> tuple[Token, ...]:
        """Tokens of one type, in source order."""
        return tuple(t for t in self.tokens if t.type is token_type)

    def lexeme_counts(self) -> dict[tuple[TokenType, str], int]:
        """Occurrences of each (type, lexeme) pair, in first-seen order."""
        counts: dict[tuple[TokenType, str], int] = {}
        for token in self.tokens:
            key = (token.type, token.lexeme)
            counts[key] = counts.get(key, 0) + 1
        return counts
