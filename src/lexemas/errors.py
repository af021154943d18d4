"""Exception classes and lexical error vocabulary for Lexemas.

Two different things live here:

- Exceptions (LexemasError and subclasses) for precondition failures:
  an invalid configuration or a missing input text. These abort before
  any scanning begins.
- LexErrorKind, the closed vocabulary of *recoverable* lexical errors.
  Those are data: the lexer records them as LexError values and keeps
  scanning. Each member's value is the exact message reported to users,
  which downstream reporting tools match on.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lexemas.config import ConfigIssue


class LexErrorKind(Enum):
    """Recoverable lexical error categories and their exact messages."""

    UNTERMINATED_BLOCK_COMMENT = "Comentario de bloque no cerrado"
    UNTERMINATED_STRING = "Cadena no cerrada"
    STRING_ALPHABET_VIOLATION = "Símbolo fuera del alfabeto permitido en cadena"
    MALFORMED_DECIMAL = "Decimal mal formado: faltan dígitos"
    MALFORMED_INTEGER = "Número mal formado"
    DANGLING_BLOCK_CLOSE = "Delimitador de cierre de bloque sin apertura"
    ALPHABET_VIOLATION = "Símbolo fuera del alfabeto permitido"

    @property
    def message(self) -> str:
        """Message text reported for this kind."""
        return self.value

    @classmethod
    def from_message(cls, message: str) -> LexErrorKind | None:
        """Resolve a kind from its message, or None for foreign messages."""
        try:
            return cls(message)
        except ValueError:
            return None


class LexemasError(Exception):
    """Base exception for all Lexemas errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(LexemasError, ValueError):
    """Invalid lexer configuration.

    Raised by LexerConfigBuilder.build() (and LexerConfig.from_dict) when
    validation finds one or more issues. All issues are reported at once.
    """

    def __init__(self, issues: tuple[ConfigIssue, ...]) -> None:
        """Initialize config error from validation issues.

        Args:
            issues: Every issue found by validation (at least one)
        """
        self.issues = tuple(issues)
        lines = [f"invalid lexer configuration ({len(self.issues)} issue(s)):"]
        lines.extend(f"  - {issue}" for issue in self.issues)
        super().__init__("\n".join(lines))
