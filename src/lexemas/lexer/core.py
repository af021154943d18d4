"""Configuration-driven lexer with fixed-priority, non-backtracking dispatch.

At each non-blank position the lexer asks its recognizers, in strict
priority order, whether they match. The first match wins: its length is
consumed and a Token or LexError is recorded. Every iteration consumes at
least one character, so analysis is O(n) iterations and always terminates.

No regex anywhere. Malformed input never raises; it becomes LexError
records and scanning resumes right after the malformed span.

Thread Safety:
A Lexer holds only immutable tables built from its config. Each analyze()
call keeps its scan state (cursor, token and error lists) in locals, so one
Lexer can serve many threads at once.

"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum, auto

from lexemas.charsets import WHITESPACE
from lexemas.config import LexerConfig
from lexemas.errors import ConfigError, LexErrorKind
from lexemas.lexer.cursor import CharCursor
from lexemas.lexer.policies import AlphabetPolicy, ErrorRecoveryPolicy
from lexemas.lexer.recognition import Recognizer
from lexemas.lexer.recognizers import (
    CommentRecognizerMixin,
    IdentifierRecognizerMixin,
    NumericRecognizerMixin,
    StringRecognizerMixin,
    SymbolRecognizerMixin,
)
from lexemas.lexer.tables import ReservedWords, SymbolTable
from lexemas.location import Position
from lexemas.profiling import get_analysis_accumulator
from lexemas.tokens import LexError, LexResult, Token, TokenType
from lexemas.utils.logger import get_logger

logger = get_logger(__name__)


class RecognizerSlot(Enum):
    """Dispatch slots, in priority order.

    DECIMAL precedes NUMBER so "12.5" is never split into "12" and ".5".
    """

    LINE_COMMENT = auto()
    BLOCK_COMMENT = auto()
    STRING = auto()
    DECIMAL = auto()
    NUMBER = auto()
    IDENTIFIER = auto()
    OPERATOR = auto()
    PUNCTUATION = auto()
    GROUPING = auto()


# Token type produced by a clean match in each slot. COMMENT matches are
# dropped unless comments are surfaced; IDENTIFIER is refined by the
# reserved word table.
_SLOT_TOKEN_TYPES: dict[RecognizerSlot, TokenType] = {
    RecognizerSlot.LINE_COMMENT: TokenType.COMMENT,
    RecognizerSlot.BLOCK_COMMENT: TokenType.COMMENT,
    RecognizerSlot.STRING: TokenType.STRING,
    RecognizerSlot.DECIMAL: TokenType.DECIMAL,
    RecognizerSlot.NUMBER: TokenType.NUMBER,
    RecognizerSlot.IDENTIFIER: TokenType.IDENTIFIER,
    RecognizerSlot.OPERATOR: TokenType.OPERATOR,
    RecognizerSlot.PUNCTUATION: TokenType.PUNCTUATION,
    RecognizerSlot.GROUPING: TokenType.GROUPING,
}


class Lexer(
    CommentRecognizerMixin,
    StringRecognizerMixin,
    NumericRecognizerMixin,
    IdentifierRecognizerMixin,
    SymbolRecognizerMixin,
):
    """Lexical analyzer for a runtime-configured language.

    Usage:
            >>> from lexemas.config import LexerConfigBuilder
            >>> config = (
            ...     LexerConfigBuilder()
            ...     .reserved("si")
            ...     .operators("=", "==")
            ...     .punctuation(";")
            ...     .grouping("(", ")")
            ...     .comments("//", "/*", "*/")
            ...     .build()
            ... )
            >>> result = Lexer(config).analyze("si (x == 1.5);")
            >>> [t.type.name for t in result.tokens]
            ['RESERVED_WORD', 'GROUPING', 'IDENTIFIER', 'OPERATOR', 'DECIMAL', 'GROUPING', 'PUNCTUATION']

    """

    __slots__ = (
        "_config",
        "_comments",
        "_operators",
        "_punctuation",
        "_grouping",
        "_reserved",
        "_alphabet",
        "_recovery",
        "_dispatch",
        "_emit_comments",
        "_emit_error_tokens",
    )

    def __init__(
        self,
        config: LexerConfig,
        *,
        emit_comments: bool = False,
        emit_error_tokens: bool = False,
        recognizers: Mapping[RecognizerSlot, Recognizer] | None = None,
    ) -> None:
        """Build the lexer tables from a configuration snapshot.

        Args:
            config: Validated configuration
            emit_comments: Surface comments as COMMENT tokens
            emit_error_tokens: Mirror each LexError as an ERROR token
            recognizers: Replacement recognizers for individual slots.
                Priority order is fixed; only the implementation changes.

        Raises:
            TypeError: If config is None.
            ConfigError: If config violates a configuration rule.
        """
        if config is None:
            raise TypeError("config must not be None")
        issues = config.validate()
        if issues:
            raise ConfigError(issues)

        self._config = config
        self._comments = config.comments
        self._operators = SymbolTable(config.operators)
        self._punctuation = SymbolTable(config.punctuation)
        self._grouping = SymbolTable(config.grouping)
        self._reserved = ReservedWords(config.reserved_words)
        unreachable = self._reserved.unreachable()
        if unreachable:
            logger.warning(
                "Reserved words never produced by the identifier rule: %s",
                ", ".join(repr(w) for w in unreachable),
            )
        self._alphabet = AlphabetPolicy(config, self._operators, self._punctuation, self._grouping)
        self._recovery = ErrorRecoveryPolicy()
        self._emit_comments = emit_comments
        self._emit_error_tokens = emit_error_tokens

        builtin: dict[RecognizerSlot, Recognizer] = {
            RecognizerSlot.LINE_COMMENT: self._recognize_line_comment,
            RecognizerSlot.BLOCK_COMMENT: self._recognize_block_comment,
            RecognizerSlot.STRING: self._recognize_string,
            RecognizerSlot.DECIMAL: self._recognize_decimal,
            RecognizerSlot.NUMBER: self._recognize_number,
            RecognizerSlot.IDENTIFIER: self._recognize_identifier,
            RecognizerSlot.OPERATOR: self._recognize_operator,
            RecognizerSlot.PUNCTUATION: self._recognize_punctuation,
            RecognizerSlot.GROUPING: self._recognize_grouping,
        }
        if recognizers:
            builtin.update(recognizers)
        self._dispatch: tuple[tuple[Recognizer, TokenType], ...] = tuple(
            (builtin[slot], _SLOT_TOKEN_TYPES[slot]) for slot in RecognizerSlot
        )

        logger.debug(
            "Lexer ready: %d reserved words, %d operators, %d punctuation, %d grouping, "
            "%d overridden slot(s)",
            len(self._reserved),
            len(self._operators),
            len(self._punctuation),
            len(self._grouping),
            len(recognizers or {}),
        )

    @property
    def config(self) -> LexerConfig:
        """Configuration snapshot this lexer was built from."""
        return self._config

    @property
    def alphabet(self) -> AlphabetPolicy:
        return self._alphabet

    def analyze(self, text: str) -> LexResult:
        """Analyze text into tokens and lexical errors.

        Args:
            text: Source text ("" yields an empty result)

        Returns:
            LexResult with tokens and errors in source order.

        Raises:
            TypeError: If text is None.

        Complexity: O(n) iterations, each bounded by one recognizer pass.
        """
        if text is None:
            raise TypeError("text must not be None")

        cursor = CharCursor(text)
        tokens: list[Token] = []
        errors: list[LexError] = []

        while not cursor.eof():
            if cursor.peek() in WHITESPACE:
                cursor.next()
                continue
            self._scan_lexeme(cursor, tokens, errors)

        result = LexResult(tokens=tuple(tokens), errors=tuple(errors))
        logger.debug(
            "Analyzed %d chars: %d tokens, %d errors", len(text), len(tokens), len(errors)
        )

        acc = get_analysis_accumulator()
        if acc is not None:
            acc.record_analysis(
                source_length=len(text), token_count=len(tokens), error_count=len(errors)
            )

        return result

    def _scan_lexeme(self, cursor: CharCursor, tokens: list[Token], errors: list[LexError]) -> None:
        """Recognize and consume one lexeme (or malformed span) at the cursor."""
        pos = cursor.position()
        start = cursor.index

        block_end = self._comments.block_end
        # Equal delimiters always open a comment; otherwise the close wins
        if block_end != self._comments.block_start and cursor.startswith(block_end):
            self._record_error(
                tokens, errors, block_end, pos, LexErrorKind.DANGLING_BLOCK_CLOSE.message
            )
            cursor.advance(len(block_end))
            return

        for recognize, token_type in self._dispatch:
            recognition = recognize(cursor)
            if not recognition.matched:
                continue

            # A well-behaved recognizer never reports 0; still guarantee progress
            consumed = max(1, recognition.length)
            if recognition.has_error:
                if recognition.error_lexeme is not None:
                    lexeme = recognition.error_lexeme
                else:
                    span = recognition.error_length
                    lexeme = cursor.slice(start, consumed if span is None else span)
                self._record_error(tokens, errors, lexeme, pos, recognition.message)
            else:
                lexeme = cursor.slice(start, consumed)
                if token_type is TokenType.IDENTIFIER:
                    token_type = self._classify_word(lexeme)
                if token_type is not TokenType.COMMENT or self._emit_comments:
                    tokens.append(Token(token_type, lexeme, pos))

            cursor.advance(consumed)
            return

        if not self._alphabet.is_allowed_at(cursor):
            self._record_error(
                tokens, errors, cursor.slice(start, 1), pos, LexErrorKind.ALPHABET_VIOLATION.message
            )
        else:
            logger.debug("No recognizer matched permitted char %r at %s; skipping", cursor.peek(), pos)
        cursor.advance(1)

    def _record_error(
        self,
        tokens: list[Token],
        errors: list[LexError],
        lexeme: str,
        pos: Position,
        message: str | None,
    ) -> None:
        error = self._recovery.build_lex_error(lexeme, pos, message)
        errors.append(error)
        if self._emit_error_tokens:
            tokens.append(Token(TokenType.ERROR, error.text, pos))
