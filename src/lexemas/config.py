"""Lexer configuration: the runtime-supplied alphabet.

A configuration names four symbol categories (reserved words, operators,
punctuation, grouping) and the comment delimiters. Nothing about the
language is compiled into the lexer; everything comes from here.

LexerConfig is immutable and validated. Build one with
LexerConfigBuilder (programmatic) or LexerConfig.from_dict (the JSON shape
used by configuration files). Invalid input never produces a config:
validation collects every issue and reports them together.

Thread Safety:
    LexerConfig and CommentDelimiters are frozen. LexerConfigBuilder is
    mutable and meant for single-threaded construction.

Usage:
    >>> config = (
    ...     LexerConfigBuilder()
    ...     .reserved("si", "sino")
    ...     .operators("+", "=", "==")
    ...     .punctuation(";")
    ...     .grouping("(", ")")
    ...     .comments("//", "/*", "*/")
    ...     .build()
    ... )
    >>> "==" in config.operators
    True

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from lexemas.charsets import BASE_ALPHABET, WHITESPACE
from lexemas.errors import ConfigError

# Section names as they appear in configuration files
RESERVED_SECTION = "palabrasReservadas"
OPERATORS_SECTION = "operadores"
PUNCTUATION_SECTION = "puntuacion"
GROUPING_SECTION = "agrupacion"
COMMENTS_SECTION = "comentarios"

_SECTION_FIELDS: dict[str, str] = {
    RESERVED_SECTION: "reserved_words",
    OPERATORS_SECTION: "operators",
    PUNCTUATION_SECTION: "punctuation",
    GROUPING_SECTION: "grouping",
}

_BUILDER_METHODS: dict[str, str] = {
    "reserved_words": "reserved",
    "operators": "operators",
    "punctuation": "punctuation",
    "grouping": "grouping",
}

_COMMENT_KEYS: dict[str, tuple[str, str]] = {
    "line": ("linea", "line"),
    "block_start": ("bloqueInicio", "block_start"),
    "block_end": ("bloqueFin", "block_end"),
}


@dataclass(frozen=True, slots=True)
class ConfigIssue:
    """One validation problem found in a configuration.

    Attributes:
        section: Section the problem belongs to (file-level name)
        message: Description of the problem
        symbol: Offending symbol, when there is one

    """

    section: str
    message: str
    symbol: str | None = None

    def __str__(self) -> str:
        if self.symbol is not None:
            return f"{self.section}: {self.message}: {self.symbol!r}"
        return f"{self.section}: {self.message}"


@dataclass(frozen=True, slots=True)
class CommentDelimiters:
    """Comment syntax.

    Attributes:
        line: Line comment prefix (e.g. "//")
        block_start: Block comment opening delimiter (e.g. "/*")
        block_end: Block comment closing delimiter (e.g. "*/")

    Surrounding whitespace is stripped from each delimiter.

    """

    line: str
    block_start: str
    block_end: str

    def __post_init__(self) -> None:
        for name in ("line", "block_start", "block_end"):
            value = getattr(self, name)
            if isinstance(value, str):
                object.__setattr__(self, name, value.strip())

    def as_tuple(self) -> tuple[str, str, str]:
        return (self.line, self.block_start, self.block_end)


def _frozen(values: Iterable[str]) -> frozenset[str]:
    if isinstance(values, str):
        # A bare string would otherwise be split into characters
        values = (values,)
    return frozenset(v.strip() if isinstance(v, str) else v for v in values)


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Immutable lexer configuration.

    Sets passed in are copied into frozensets, so later changes to the
    caller's collections never reach a config (or a lexer built from it).
    Each entry is stripped of surrounding whitespace, since the lexer skips
    blanks before it looks a symbol up.

    Attributes:
        comments: Comment delimiters
        reserved_words: Case-sensitive reserved words
        operators: Operator symbols (may be multi-character)
        punctuation: Punctuation symbols
        grouping: Grouping symbols

    """

    comments: CommentDelimiters
    reserved_words: frozenset[str] = field(default_factory=frozenset)
    operators: frozenset[str] = field(default_factory=frozenset)
    punctuation: frozenset[str] = field(default_factory=frozenset)
    grouping: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        for name in ("reserved_words", "operators", "punctuation", "grouping"):
            object.__setattr__(self, name, _frozen(getattr(self, name)))

    def validate(self) -> tuple[ConfigIssue, ...]:
        """Check every configuration rule.

        Returns:
            All issues found, in a stable order. Empty when valid.
        """
        issues: list[ConfigIssue] = []

        if not isinstance(self.comments, CommentDelimiters):
            issues.append(ConfigIssue(COMMENTS_SECTION, "comment delimiters are required"))
        else:
            for key, (section_key, _) in _COMMENT_KEYS.items():
                value = getattr(self.comments, key)
                if not isinstance(value, str) or not value.strip():
                    issues.append(
                        ConfigIssue(f"{COMMENTS_SECTION}.{section_key}", "delimiter must not be empty")
                    )

        for section, attr in _SECTION_FIELDS.items():
            for symbol in sorted(getattr(self, attr), key=repr):
                if not isinstance(symbol, str) or not symbol.strip():
                    issues.append(ConfigIssue(section, "symbol must not be empty", symbol))
                elif attr == "reserved_words" and any(ch in WHITESPACE for ch in symbol):
                    issues.append(ConfigIssue(section, "reserved word contains whitespace", symbol))

        pairs = (
            (OPERATORS_SECTION, self.operators, PUNCTUATION_SECTION, self.punctuation),
            (OPERATORS_SECTION, self.operators, GROUPING_SECTION, self.grouping),
            (PUNCTUATION_SECTION, self.punctuation, GROUPING_SECTION, self.grouping),
        )
        for first_name, first, second_name, second in pairs:
            for symbol in sorted(first & second, key=repr):
                issues.append(
                    ConfigIssue(
                        f"{first_name}/{second_name}",
                        "symbol declared in more than one section",
                        symbol,
                    )
                )

        return tuple(issues)

    def symbols(self) -> frozenset[str]:
        """Every operator, punctuation and grouping symbol."""
        return self.operators | self.punctuation | self.grouping

    def delimiters(self) -> tuple[str, ...]:
        """Comment delimiters that are set (non-empty)."""
        return tuple(d for d in self.comments.as_tuple() if d)

    def alphabet(self) -> frozenset[str]:
        """Flat set of every character a valid program may contain.

        Base classes (ASCII letters, digits, space/CR/LF, double quote) plus
        every character of every configured symbol and comment delimiter.
        Reserved words add nothing: they are letters and digits already,
        or unreachable by the identifier rule.
        """
        chars = set(BASE_ALPHABET)
        for symbol in self.symbols():
            chars.update(symbol)
        for delimiter in self.delimiters():
            chars.update(delimiter)
        return frozenset(chars)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> LexerConfig:
        """Create a validated LexerConfig from a dictionary.

        Accepts the configuration file shape (palabrasReservadas, operadores,
        puntuacion, agrupacion, comentarios{linea, bloqueInicio, bloqueFin})
        and the snake_case field names. Unknown keys are silently ignored.
        All five sections are required.

        Args:
            config_dict: Parsed configuration mapping.

        Returns:
            New LexerConfig.

        Raises:
            ConfigError: If any section is missing or malformed, or the
                result violates a configuration rule.

        Example:
            >>> config = LexerConfig.from_dict({
            ...     "palabrasReservadas": ["si"],
            ...     "operadores": ["+"],
            ...     "puntuacion": [";"],
            ...     "agrupacion": ["(", ")"],
            ...     "comentarios": {"linea": "//", "bloqueInicio": "/*", "bloqueFin": "*/"},
            ... })
            >>> sorted(config.grouping)
            ['(', ')']

        """
        builder = LexerConfigBuilder()
        for section, attr in _SECTION_FIELDS.items():
            value = _lookup(config_dict, section, attr)
            if value is None:
                builder.add_issue(ConfigIssue(section, "section is required"))
            elif isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
                builder.add_issue(ConfigIssue(section, "section must be a list of strings"))
            else:
                items = list(value)
                if all(isinstance(item, str) for item in items):
                    getattr(builder, _BUILDER_METHODS[attr])(*items)
                else:
                    builder.add_issue(ConfigIssue(section, "section must be a list of strings"))

        comments = _lookup(config_dict, COMMENTS_SECTION, "comments")
        if comments is None:
            builder.add_issue(ConfigIssue(COMMENTS_SECTION, "section is required"))
        elif not isinstance(comments, Mapping):
            builder.add_issue(ConfigIssue(COMMENTS_SECTION, "section must be an object"))
        else:
            # A missing delimiter is reported as empty by validation
            values = {
                key: _lookup(comments, *keys) or "" for key, keys in _COMMENT_KEYS.items()
            }
            builder.comments(values["line"], values["block_start"], values["block_end"])

        return builder.build()

    def to_dict(self) -> dict[str, Any]:
        """Convert to the configuration file shape.

        Lists are sorted so the output is deterministic.
        """
        return {
            RESERVED_SECTION: sorted(self.reserved_words),
            OPERATORS_SECTION: sorted(self.operators),
            PUNCTUATION_SECTION: sorted(self.punctuation),
            GROUPING_SECTION: sorted(self.grouping),
            COMMENTS_SECTION: {
                "linea": self.comments.line,
                "bloqueInicio": self.comments.block_start,
                "bloqueFin": self.comments.block_end,
            },
        }


def _lookup(mapping: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in mapping:
            return mapping[key]
    return None


class LexerConfigBuilder:
    """Mutable builder for LexerConfig.

    Collect symbols, then call build(). Validation happens once, at the
    end, and reports every issue.

    Thread Safety:
        Not thread-safe. Build on one thread, share the resulting config.

    Example:
        >>> builder = LexerConfigBuilder().operators("+").punctuation("+")
        >>> builder.comments("//", "/*", "*/")  # doctest: +ELLIPSIS
        <...LexerConfigBuilder object at ...>
        >>> config, issues = builder.try_build()
        >>> config is None, len(issues)
        (True, 1)

    """

    __slots__ = ("_sections", "_comments", "_issues")

    def __init__(self) -> None:
        self._sections: dict[str, set[str]] = {attr: set() for attr in _SECTION_FIELDS.values()}
        self._comments: CommentDelimiters | None = None
        self._issues: list[ConfigIssue] = []

    def reserved(self, *words: str) -> LexerConfigBuilder:
        """Add reserved words."""
        self._sections["reserved_words"].update(words)
        return self

    def operators(self, *symbols: str) -> LexerConfigBuilder:
        """Add operator symbols."""
        self._sections["operators"].update(symbols)
        return self

    def punctuation(self, *symbols: str) -> LexerConfigBuilder:
        """Add punctuation symbols."""
        self._sections["punctuation"].update(symbols)
        return self

    def grouping(self, *symbols: str) -> LexerConfigBuilder:
        """Add grouping symbols."""
        self._sections["grouping"].update(symbols)
        return self

    def comments(self, line: str, block_start: str, block_end: str) -> LexerConfigBuilder:
        """Set comment delimiters (replaces any previous value)."""
        self._comments = CommentDelimiters(line, block_start, block_end)
        return self

    def add_issue(self, issue: ConfigIssue) -> LexerConfigBuilder:
        """Record a problem detected outside the builder (e.g. while reading input)."""
        self._issues.append(issue)
        return self

    def _candidate(self) -> LexerConfig | None:
        if self._comments is None:
            return None
        return LexerConfig(
            comments=self._comments,
            reserved_words=frozenset(self._sections["reserved_words"]),
            operators=frozenset(self._sections["operators"]),
            punctuation=frozenset(self._sections["punctuation"]),
            grouping=frozenset(self._sections["grouping"]),
        )

    def validate(self) -> tuple[ConfigIssue, ...]:
        """Return every issue the current state would be rejected for."""
        issues = list(self._issues)
        candidate = self._candidate()
        if candidate is None:
            if not any(issue.section.startswith(COMMENTS_SECTION) for issue in issues):
                issues.append(ConfigIssue(COMMENTS_SECTION, "comment delimiters are required"))
            # Symbol rules do not depend on comments; check them anyway
            candidate = LexerConfig(
                comments=CommentDelimiters("-", "-", "-"),
                **{attr: frozenset(values) for attr, values in self._sections.items()},
            )
        issues.extend(candidate.validate())
        return tuple(issues)

    def try_build(self) -> tuple[LexerConfig | None, tuple[ConfigIssue, ...]]:
        """Build without raising.

        Returns:
            (config, ()) when valid, (None, issues) otherwise.
        """
        issues = self.validate()
        if issues:
            return None, issues
        return self._candidate(), ()

    def build(self) -> LexerConfig:
        """Build the immutable config.

        Raises:
            ConfigError: With every issue, if validation fails.
        """
        config, issues = self.try_build()
        if config is None:
            raise ConfigError(issues)
        return config
