"""Table-driven deterministic automata with maximal-munch evaluation.

An alternative way to write recognizers: describe a category as a DFA
whose accepting states carry a tag, then adapt it with DfaRecognizer. The
lexer does not depend on this module; any DfaRecognizer can be plugged
into one of its dispatch slots.

Usage:
    >>> builder = DfaBuilder[str]()
    >>> s0, s1 = builder.add_state(), builder.add_state()
    >>> builder.on_range(s0, "0", "9", s1).on_range(s1, "0", "9", s1)  # doctest: +ELLIPSIS
    <...DfaBuilder object at ...>
    >>> builder.set_accepting(s1, "int")  # doctest: +ELLIPSIS
    <...DfaBuilder object at ...>
    >>> dfa = builder.build(s0)
    >>> dfa.evaluate(CharCursor("123+")).length
    3

Thread Safety:
Dfa, State and Transition are immutable. DfaBuilder is not thread-safe.

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, TypeVar

from lexemas.errors import LexErrorKind
from lexemas.lexer.cursor import EOF, CharCursor
from lexemas.lexer.recognition import NO_MATCH, Recognition
from lexemas.tokens import TokenType

T = TypeVar("T")


class TransitionKind(Enum):
    SINGLE = auto()
    RANGE = auto()
    SET = auto()


@dataclass(frozen=True, slots=True)
class Transition:
    """Edge to another state, taken on one char, an inclusive range, or a set.

    Attributes:
        kind: How chars are matched
        to_state: Target state id
        low: The char (SINGLE) or range start (RANGE)
        high: Range end (RANGE)
        chars: Accepted chars (SET)

    """

    kind: TransitionKind
    to_state: int
    low: str = ""
    high: str = ""
    chars: frozenset[str] = frozenset()

    @classmethod
    def on_char(cls, char: str, to_state: int) -> Transition:
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return cls(TransitionKind.SINGLE, to_state, low=char)

    @classmethod
    def on_range(cls, low: str, high: str, to_state: int) -> Transition:
        if len(low) != 1 or len(high) != 1:
            raise ValueError(f"range bounds must be single characters, got {low!r}..{high!r}")
        if high < low:
            raise ValueError(f"invalid range {low!r}..{high!r}")
        return cls(TransitionKind.RANGE, to_state, low=low, high=high)

    @classmethod
    def on_set(cls, chars: Iterable[str], to_state: int) -> Transition:
        members = frozenset(chars)
        if not members:
            raise ValueError("character set must not be empty")
        return cls(TransitionKind.SET, to_state, chars=members)

    def matches(self, char: str) -> bool:
        """True if char takes this edge. EOF never does."""
        if char == EOF:
            return False
        if self.kind is TransitionKind.SINGLE:
            return char == self.low
        if self.kind is TransitionKind.RANGE:
            return self.low <= char <= self.high
        return char in self.chars


@dataclass(frozen=True, slots=True)
class State(Generic[T]):
    """Automaton state. Transitions are tried in insertion order."""

    id: int
    accepting: bool = False
    accept_tag: T | None = None
    transitions: tuple[Transition, ...] = ()


@dataclass(frozen=True, slots=True)
class DfaMatch(Generic[T]):
    """Longest accepted prefix: length 0 and tag None when nothing accepted."""

    accepted: bool
    length: int = 0
    tag: T | None = None


class Dfa(Generic[T]):
    """Immutable automaton. Build with DfaBuilder."""

    __slots__ = ("_states", "_start")

    def __init__(self, states: tuple[State[T], ...], start: int) -> None:
        self._states = states
        self._start = start

    @property
    def states(self) -> tuple[State[T], ...]:
        return self._states

    @property
    def start(self) -> int:
        return self._start

    def evaluate(self, cursor: CharCursor) -> DfaMatch[T]:
        """Run from the cursor (non-consuming) and return the longest accepted prefix.

        Stops at EOF or when no transition applies; the result is the last
        accepting state seen on the way.
        """
        current = self._states[self._start]
        offset = 0
        last: DfaMatch[T] = DfaMatch(False)

        while True:
            if current.accepting:
                last = DfaMatch(True, offset, current.accept_tag)

            char = cursor.peek(offset)
            if char == EOF:
                break

            target = next((t.to_state for t in current.transitions if t.matches(char)), None)
            if target is None:
                break
            current = self._states[target]
            offset += 1

        # An accepting start state would accept the empty prefix; no match then
        if last.length == 0:
            return DfaMatch(False)
        return last


class DfaBuilder(Generic[T]):
    """Mutable DFA construction.

    Determinism is the caller's responsibility: when two edges of a state
    accept the same char, the first one added wins.
    """

    __slots__ = ("_accepting", "_transitions")

    def __init__(self) -> None:
        self._accepting: list[tuple[bool, T | None]] = []
        self._transitions: list[list[Transition]] = []

    def add_state(self) -> int:
        """Create a state and return its id."""
        self._accepting.append((False, None))
        self._transitions.append([])
        return len(self._transitions) - 1

    def set_accepting(self, state: int, tag: T) -> DfaBuilder[T]:
        self._check(state)
        self._accepting[state] = (True, tag)
        return self

    def on_char(self, from_state: int, char: str, to_state: int) -> DfaBuilder[T]:
        return self._add(from_state, Transition.on_char(char, to_state))

    def on_range(self, from_state: int, low: str, high: str, to_state: int) -> DfaBuilder[T]:
        return self._add(from_state, Transition.on_range(low, high, to_state))

    def on_set(self, from_state: int, chars: Iterable[str], to_state: int) -> DfaBuilder[T]:
        return self._add(from_state, Transition.on_set(chars, to_state))

    def build(self, start: int) -> Dfa[T]:
        """Freeze the states into a Dfa starting at start."""
        self._check(start)
        states = tuple(
            State(id=i, accepting=accepting, accept_tag=tag, transitions=tuple(edges))
            for i, ((accepting, tag), edges) in enumerate(
                zip(self._accepting, self._transitions, strict=True)
            )
        )
        return Dfa(states, start)

    def _add(self, from_state: int, transition: Transition) -> DfaBuilder[T]:
        self._check(from_state)
        self._check(transition.to_state)
        self._transitions[from_state].append(transition)
        return self

    def _check(self, state: int) -> None:
        if not 0 <= state < len(self._transitions):
            raise ValueError(f"unknown state: {state}")


class DfaRecognizer(Generic[T]):
    """Adapts a Dfa to the recognizer contract of the lexer.

    Accepting tags listed in errors produce an error Recognition with the
    mapped message; LexErrorKind tags map to their own message by default.
    Every other tag produces a clean match.
    """

    __slots__ = ("_dfa", "_errors")

    def __init__(self, dfa: Dfa[T], errors: Mapping[T, str] | None = None) -> None:
        self._dfa = dfa
        self._errors = dict(errors or {})

    def __call__(self, cursor: CharCursor) -> Recognition:
        result = self._dfa.evaluate(cursor)
        if not result.accepted:
            return NO_MATCH
        tag = result.tag
        if tag in self._errors:
            return Recognition.error(result.length, self._errors[tag])
        if isinstance(tag, LexErrorKind):
            return Recognition.error(result.length, tag.message)
        return Recognition.match(result.length)


# =========================================================================
# Automata equivalent to the hand-written recognizers
# =========================================================================

Tag = TokenType | LexErrorKind


def _letters(builder: DfaBuilder[Tag], from_state: int, to_state: int) -> None:
    builder.on_range(from_state, "a", "z", to_state)
    builder.on_range(from_state, "A", "Z", to_state)


def identifier_dfa() -> Dfa[Tag]:
    """letter (letter | digit)*"""
    b: DfaBuilder[Tag] = DfaBuilder()
    start, word = b.add_state(), b.add_state()
    _letters(b, start, word)
    _letters(b, word, word)
    b.on_range(word, "0", "9", word)
    b.set_accepting(word, TokenType.IDENTIFIER)
    return b.build(start)


def integer_dfa() -> Dfa[Tag]:
    """digit+, or digit+ letter as a malformed integer."""
    b: DfaBuilder[Tag] = DfaBuilder()
    start, digits, malformed = b.add_state(), b.add_state(), b.add_state()
    b.on_range(start, "0", "9", digits)
    b.on_range(digits, "0", "9", digits)
    _letters(b, digits, malformed)
    b.set_accepting(digits, TokenType.NUMBER)
    b.set_accepting(malformed, LexErrorKind.MALFORMED_INTEGER)
    return b.build(start)


def decimal_dfa() -> Dfa[Tag]:
    """digit+ '.' digit+, or digit+ '.' as a malformed decimal."""
    b: DfaBuilder[Tag] = DfaBuilder()
    start, whole, dot, fraction = (b.add_state() for _ in range(4))
    b.on_range(start, "0", "9", whole)
    b.on_range(whole, "0", "9", whole)
    b.on_char(whole, ".", dot)
    b.on_range(dot, "0", "9", fraction)
    b.on_range(fraction, "0", "9", fraction)
    b.set_accepting(dot, LexErrorKind.MALFORMED_DECIMAL)
    b.set_accepting(fraction, TokenType.DECIMAL)
    return b.build(start)
