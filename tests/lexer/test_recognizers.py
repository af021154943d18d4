"""Tests for the category recognizers, the Recognition type and policies.

Recognizers are exercised directly through a Lexer instance (which
composes every recognizer mixin) on a fresh cursor. They must never
consume: only the lexer moves the cursor.
"""

import pytest

from lexemas.errors import LexErrorKind
from lexemas.lexer import Lexer
from lexemas.lexer.cursor import CharCursor
from lexemas.lexer.policies import ErrorRecoveryPolicy
from lexemas.lexer.recognition import NO_MATCH, Recognition
from lexemas.location import Position
from lexemas.tokens import TokenType

# =========================================================================
# Recognition
# =========================================================================


class TestRecognition:
    def test_no_match_is_falsy(self) -> None:
        assert not NO_MATCH
        assert not NO_MATCH.has_error

    def test_match(self) -> None:
        r = Recognition.match(3)
        assert r
        assert r.length == 3
        assert not r.has_error

    def test_error_is_still_a_match(self) -> None:
        r = Recognition.error(2, "boom", error_length=1)
        assert r.matched
        assert r.has_error
        assert r.error_length == 1

    @pytest.mark.parametrize("length", [0, -1])
    def test_non_positive_length_rejected(self, length: int) -> None:
        with pytest.raises(ValueError):
            Recognition.match(length)
        with pytest.raises(ValueError):
            Recognition.error(length, "boom")


# =========================================================================
# Comments
# =========================================================================


class TestLineComment:
    @pytest.mark.parametrize(
        ("text", "length"),
        [("// hola\nx", 7), ("//", 2), ("//a\r\nb", 3), ("// a // b", 9)],
    )
    def test_spans_to_line_break(self, lexer: Lexer, text: str, length: int) -> None:
        assert lexer._recognize_line_comment(CharCursor(text)) == Recognition.match(length)

    def test_no_match(self, lexer: Lexer) -> None:
        assert lexer._recognize_line_comment(CharCursor("/x")) is NO_MATCH


class TestBlockComment:
    def test_closed(self, lexer: Lexer) -> None:
        assert lexer._recognize_block_comment(CharCursor("/* a */x")) == Recognition.match(7)

    def test_empty_comment(self, lexer: Lexer) -> None:
        assert lexer._recognize_block_comment(CharCursor("/**/")) == Recognition.match(4)

    def test_spans_lines(self, lexer: Lexer) -> None:
        assert lexer._recognize_block_comment(CharCursor("/*\n\n*/")) == Recognition.match(6)

    def test_unterminated_consumes_to_eof(self, lexer: Lexer) -> None:
        r = lexer._recognize_block_comment(CharCursor("/* abc"))
        assert r.length == 6
        assert r.message == LexErrorKind.UNTERMINATED_BLOCK_COMMENT.message
        assert r.error_lexeme == "/*"

    def test_close_does_not_overlap_open(self, lexer: Lexer) -> None:
        """'/*/' has no closing delimiter after the opening one."""
        r = lexer._recognize_block_comment(CharCursor("/*/"))
        assert r.has_error
        assert r.length == 3

    def test_no_match(self, lexer: Lexer) -> None:
        assert lexer._recognize_block_comment(CharCursor("x")) is NO_MATCH


# =========================================================================
# Strings
# =========================================================================


class TestString:
    @pytest.mark.parametrize(
        ("text", "length"),
        [('"abc" x', 5), ('""', 2), ('"a+;(b"', 7), ('"a\nb"', 5), ('"si 12"', 7)],
    )
    def test_closed(self, lexer: Lexer, text: str, length: int) -> None:
        assert lexer._recognize_string(CharCursor(text)) == Recognition.match(length)

    def test_unterminated(self, lexer: Lexer) -> None:
        r = lexer._recognize_string(CharCursor('"abc'))
        assert r == Recognition.error(
            4, LexErrorKind.UNTERMINATED_STRING.message, error_lexeme='"'
        )

    def test_lone_quote(self, lexer: Lexer) -> None:
        r = lexer._recognize_string(CharCursor('"'))
        assert r.length == 1
        assert r.error_lexeme == '"'

    @pytest.mark.parametrize("foreign", ["@", "\t", "_", "ñ", "#"])
    def test_alphabet_violation(self, lexer: Lexer, foreign: str) -> None:
        """The foreign char is consumed but excluded from the recorded span."""
        r = lexer._recognize_string(CharCursor(f'"a{foreign}b"'))
        assert r == Recognition.error(
            3, LexErrorKind.STRING_ALPHABET_VIOLATION.message, error_length=2
        )

    def test_symbol_chars_checked_individually(self, lexer: Lexer) -> None:
        """'!' only occurs inside '!=' but is still permitted on its own."""
        assert lexer._recognize_string(CharCursor('"!"')) == Recognition.match(3)

    def test_no_match(self, lexer: Lexer) -> None:
        assert lexer._recognize_string(CharCursor("abc")) is NO_MATCH


# =========================================================================
# Numbers
# =========================================================================


class TestDecimal:
    @pytest.mark.parametrize(("text", "length"), [("12.5", 4), ("0.001;", 5), ("1.2.3", 3)])
    def test_valid(self, lexer: Lexer, text: str, length: int) -> None:
        assert lexer._recognize_decimal(CharCursor(text)) == Recognition.match(length)

    @pytest.mark.parametrize("text", ["12.", "12.x", "12. 5"])
    def test_missing_fraction(self, lexer: Lexer, text: str) -> None:
        r = lexer._recognize_decimal(CharCursor(text))
        assert r == Recognition.error(3, LexErrorKind.MALFORMED_DECIMAL.message)

    @pytest.mark.parametrize("text", ["12", ".5", "x.5", ""])
    def test_no_match(self, lexer: Lexer, text: str) -> None:
        assert lexer._recognize_decimal(CharCursor(text)) is NO_MATCH


class TestNumber:
    @pytest.mark.parametrize(("text", "length"), [("123", 3), ("7;", 1), ("12.", 2), ("0", 1)])
    def test_valid(self, lexer: Lexer, text: str, length: int) -> None:
        assert lexer._recognize_number(CharCursor(text)) == Recognition.match(length)

    @pytest.mark.parametrize("text", ["585f", "585fx", "585f1"])
    def test_trailing_letter(self, lexer: Lexer, text: str) -> None:
        """Only the first letter joins the error span."""
        r = lexer._recognize_number(CharCursor(text))
        assert r == Recognition.error(4, LexErrorKind.MALFORMED_INTEGER.message)

    def test_no_match(self, lexer: Lexer) -> None:
        assert lexer._recognize_number(CharCursor("x1")) is NO_MATCH


# =========================================================================
# Identifiers and symbols
# =========================================================================


class TestIdentifier:
    @pytest.mark.parametrize(("text", "length"), [("abc1 x", 4), ("a_b", 1), ("Z", 1), ("x9y", 3)])
    def test_letters_then_letters_or_digits(self, lexer: Lexer, text: str, length: int) -> None:
        assert lexer._recognize_identifier(CharCursor(text)) == Recognition.match(length)

    @pytest.mark.parametrize("text", ["1a", "_a", ""])
    def test_no_match(self, lexer: Lexer, text: str) -> None:
        assert lexer._recognize_identifier(CharCursor(text)) is NO_MATCH

    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("si", TokenType.RESERVED_WORD),
            ("sino", TokenType.RESERVED_WORD),
            ("Si", TokenType.IDENTIFIER),
            ("sinos", TokenType.IDENTIFIER),
        ],
    )
    def test_classification(self, lexer: Lexer, word: str, expected: TokenType) -> None:
        assert lexer._classify_word(word) is expected


class TestSymbols:
    def test_operator_longest_match(self, lexer: Lexer) -> None:
        assert lexer._recognize_operator(CharCursor("<=x")) == Recognition.match(2)

    def test_punctuation(self, lexer: Lexer) -> None:
        assert lexer._recognize_punctuation(CharCursor(";")) == Recognition.match(1)

    def test_grouping(self, lexer: Lexer) -> None:
        assert lexer._recognize_grouping(CharCursor("((")) == Recognition.match(1)

    def test_categories_are_separate(self, lexer: Lexer) -> None:
        assert lexer._recognize_operator(CharCursor(";")) is NO_MATCH
        assert lexer._recognize_punctuation(CharCursor("(")) is NO_MATCH
        assert lexer._recognize_grouping(CharCursor("+")) is NO_MATCH


# =========================================================================
# Policies
# =========================================================================


class TestAlphabetPolicy:
    @pytest.mark.parametrize("text", ["a", "7", " ", "\n", '"', "=", "!=", "//", "*/", ""])
    def test_allowed(self, lexer: Lexer, text: str) -> None:
        assert lexer.alphabet.is_allowed_at(CharCursor(text))

    @pytest.mark.parametrize("text", ["@", "\t", "_", "!", "ñ"])
    def test_not_allowed(self, lexer: Lexer, text: str) -> None:
        """'!' is part of '!=' but cannot start a lexeme on its own."""
        assert not lexer.alphabet.is_allowed_at(CharCursor(text))

    def test_string_alphabet(self, lexer: Lexer) -> None:
        policy = lexer.alphabet
        assert policy.allows_in_string("!")
        assert policy.allows_in_string("\r")
        assert not policy.allows_in_string("@")
        assert "!" in policy.characters


class TestErrorRecoveryPolicy:
    def test_builds_error(self) -> None:
        err = ErrorRecoveryPolicy().build_lex_error("@", Position(1, 2), "msg")
        assert (err.text, err.position, err.message) == ("@", Position(1, 2), "msg")

    def test_none_lexeme_becomes_empty(self) -> None:
        err = ErrorRecoveryPolicy().build_lex_error(None, Position(1, 1), "msg")
        assert err.text == ""

    def test_rejects_none_position(self) -> None:
        with pytest.raises(ValueError):
            ErrorRecoveryPolicy().build_lex_error("x", None, "msg")  # type: ignore[arg-type]

    def test_rejects_none_message(self) -> None:
        with pytest.raises(ValueError):
            ErrorRecoveryPolicy().build_lex_error("x", Position(1, 1), None)  # type: ignore[arg-type]
