"""Source positions for tokens and lexical errors.

Provides the Position dataclass used by every Token and LexError.

Thread Safety:
Position is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """1-based line/column of the first character of a lexeme.

    CR, LF and CRLF each count as a single line break when positions are
    computed by the cursor; this class only models the value.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)

    Examples:
            >>> pos = Position(line=2, column=5)
            >>> str(pos)
            '2:5'

    """

    line: int
    column: int

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError(f"line must be >= 1, got {self.line}")
        if self.column < 1:
            raise ValueError(f"column must be >= 1, got {self.column}")

    def __str__(self) -> str:
        """Format position for messages.

        Returns:
            Formatted string like "10:5"
        """
        return f"{self.line}:{self.column}"

    @classmethod
    def start(cls) -> Position:
        """Position of the first character of any text."""
        return cls(line=1, column=1)
