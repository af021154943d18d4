"""
Lexemas — Configuration-Driven Lexical Analyzer

A tokenizer whose whole alphabet (reserved words, operators, punctuation,
grouping symbols, comment delimiters) is supplied at runtime. Produces
typed tokens and recoverable lexical errors with exact 1-based positions.
No regular expressions, O(n) scanning, zero runtime dependencies.

Quick Start:
    >>> from lexemas import LexerConfig, analyze
    >>> config = LexerConfig.from_dict({
    ...     "palabrasReservadas": ["si", "sino"],
    ...     "operadores": ["=", "=="],
    ...     "puntuacion": [";"],
    ...     "agrupacion": ["(", ")"],
    ...     "comentarios": {"linea": "//", "bloqueInicio": "/*", "bloqueFin": "*/"},
    ... })
    >>> result = analyze("si (x == 12.5);", config)
    >>> [t.lexeme for t in result.tokens]
    ['si', '(', 'x', '==', '12.5', ')', ';']
    >>> result.ok
    True

Malformed input never raises:
    >>> result = analyze('585f "abc', config)
    >>> [(e.text, e.message) for e in result.errors]
    [('585f', 'Número mal formado'), ('"', 'Cadena no cerrada')]

For repeated analysis with one configuration, build a Lexer once:
    >>> from lexemas import Lexer
    >>> lexer = Lexer(config)
    >>> lexer.analyze("x = 1;").ok
    True
"""

from lexemas.config import CommentDelimiters, ConfigIssue, LexerConfig, LexerConfigBuilder
from lexemas.errors import ConfigError, LexemasError, LexErrorKind
from lexemas.lexer import CharCursor, Lexer, Recognition, RecognizerSlot
from lexemas.location import Position
from lexemas.profiling import AnalysisAccumulator, get_analysis_accumulator, profiled_analyze
from lexemas.serialization import from_dict, from_json, to_dict, to_json
from lexemas.tokens import LexError, LexResult, Token, TokenType

__version__ = "0.1.0"


def analyze(
    text: str,
    config: LexerConfig,
    *,
    emit_comments: bool = False,
    emit_error_tokens: bool = False,
) -> LexResult:
    """Analyze text with a configuration in one call.

    Builds a Lexer for config and runs it once. To analyze many texts with
    the same configuration, build a Lexer and reuse it: the tables are then
    built only once.

    Args:
        text: Source text
        config: Validated lexer configuration
        emit_comments: Surface comments as COMMENT tokens
        emit_error_tokens: Mirror each LexError as an ERROR token

    Returns:
        LexResult with tokens and errors in source order

    Raises:
        TypeError: If text or config is None.
        ConfigError: If config violates a configuration rule.
    """
    if text is None:
        raise TypeError("text must not be None")
    lexer = Lexer(config, emit_comments=emit_comments, emit_error_tokens=emit_error_tokens)
    return lexer.analyze(text)


__all__ = [
    # Main API
    "analyze",
    "Lexer",
    "RecognizerSlot",
    "CharCursor",
    "Recognition",
    # Configuration
    "LexerConfig",
    "LexerConfigBuilder",
    "CommentDelimiters",
    "ConfigIssue",
    # Results
    "Token",
    "TokenType",
    "LexError",
    "LexResult",
    "Position",
    # Errors
    "LexemasError",
    "ConfigError",
    "LexErrorKind",
    # Profiling
    "AnalysisAccumulator",
    "get_analysis_accumulator",
    "profiled_analyze",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
]
