"""Recognition: the outcome of one recognizer attempt.

A recognizer inspects the cursor without consuming and answers with one of
three shapes:

- no match (NO_MATCH)
- a match of `length` characters
- a match with an error: `length` characters must still be consumed to
  guarantee progress, and the error record may use a different span
  (`error_length`) or a fixed fragment (`error_lexeme`)

Thread Safety:
Recognition is frozen (immutable). NO_MATCH is a shared singleton.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from lexemas.lexer.cursor import CharCursor


@dataclass(frozen=True, slots=True)
class Recognition:
    """Result of trying one lexical category at the cursor.

    Attributes:
        matched: Whether the category applies here
        length: Characters to consume if the result is accepted
        message: Error message, None for a clean match
        error_length: Span recorded in the error when it differs from length
        error_lexeme: Fixed fragment recorded in the error instead of a span

    """

    matched: bool
    length: int = 0
    message: str | None = None
    error_length: int | None = None
    error_lexeme: str | None = None

    @property
    def has_error(self) -> bool:
        return self.message is not None

    @classmethod
    def match(cls, length: int) -> Recognition:
        """A clean match of length characters."""
        if length <= 0:
            raise ValueError(f"match length must be > 0, got {length}")
        return cls(True, length)

    @classmethod
    def error(
        cls,
        length: int,
        message: str,
        *,
        error_length: int | None = None,
        error_lexeme: str | None = None,
    ) -> Recognition:
        """A malformed match that still consumes length characters."""
        if length <= 0:
            raise ValueError(f"match length must be > 0, got {length}")
        if message is None:
            raise ValueError("error message must not be None")
        return cls(True, length, message, error_length, error_lexeme)

    def __bool__(self) -> bool:
        return self.matched


NO_MATCH = Recognition(False)

# Any callable with this shape can fill a dispatch slot of the lexer
Recognizer: TypeAlias = Callable[["CharCursor"], Recognition]
