"""Tests for accurate source position tracking in the lexer.

Positions are what reporting tools show next to every token and error,
so line and column must be exact across every line break convention.
"""

import pytest

from lexemas.lexer import Lexer
from lexemas.location import Position
from lexemas.tokens import TokenType


class TestSingleLinePositions:
    """Columns on the first line."""

    def test_first_token(self, lexer: Lexer) -> None:
        token = lexer.analyze("x").tokens[0]
        assert token.position == Position(1, 1)

    def test_columns_skip_spaces(self, lexer: Lexer) -> None:
        tokens = lexer.analyze("si  (x)").tokens
        assert [t.column for t in tokens] == [1, 5, 6, 7]

    def test_multi_char_symbols_advance_column(self, lexer: Lexer) -> None:
        tokens = lexer.analyze("a<=b!=c").tokens
        assert [(t.lexeme, t.column) for t in tokens] == [
            ("a", 1),
            ("<=", 2),
            ("b", 4),
            ("!=", 5),
            ("c", 7),
        ]


class TestMultilinePositions:
    """Line numbers across line break conventions."""

    @pytest.mark.parametrize("newline", ["\n", "\r", "\r\n"])
    def test_each_convention_is_one_break(self, lexer: Lexer, newline: str) -> None:
        tokens = lexer.analyze(newline.join(["a", "b", "c"])).tokens
        assert [t.position for t in tokens] == [Position(1, 1), Position(2, 1), Position(3, 1)]

    def test_mixed_conventions(self, lexer: Lexer) -> None:
        tokens = lexer.analyze("a\r\nb\rc\nd").tokens
        assert [t.line for t in tokens] == [1, 2, 3, 4]

    def test_blank_lines_count(self, lexer: Lexer) -> None:
        token = lexer.analyze("\n\n\n  x").tokens[0]
        assert token.position == Position(4, 3)

    def test_lf_cr_is_two_breaks(self, lexer: Lexer) -> None:
        """Only CR followed by LF is merged; LF followed by CR is not."""
        token = lexer.analyze("a\n\rb").tokens[1]
        assert token.position == Position(3, 1)

    def test_column_resets(self, lexer: Lexer) -> None:
        tokens = lexer.analyze("abc = 1;\n  y").tokens
        assert tokens[-1].position == Position(2, 3)


class TestPositionsAfterMultilineLexemes:
    """Lexemes spanning lines move the following positions."""

    def test_after_block_comment(self, lexer: Lexer) -> None:
        token = lexer.analyze("/* uno\ndos\r\ntres */ x").tokens[0]
        assert token.position == Position(3, 9)

    def test_after_multiline_string(self, lexer: Lexer) -> None:
        tokens = lexer.analyze('"a\nb" c').tokens
        assert tokens[0].type is TokenType.STRING
        assert tokens[0].position == Position(1, 1)
        assert tokens[1].position == Position(2, 4)

    def test_after_line_comment(self, lexer: Lexer) -> None:
        """Scenario: '// x' then '1' yields NUMBER at 2:1."""
        result = lexer.analyze("// x\n1")
        assert [(t.type, t.lexeme, t.position) for t in result.tokens] == [
            (TokenType.NUMBER, "1", Position(2, 1))
        ]


class TestErrorPositions:
    """Errors carry the position of their first character."""

    def test_alphabet_violation_position(self, lexer: Lexer) -> None:
        error = lexer.analyze("x\n  @").errors[0]
        assert error.position == Position(2, 3)

    def test_malformed_integer_position(self, lexer: Lexer) -> None:
        result = lexer.analyze("x = 585f;")
        assert result.errors[0].position == Position(1, 5)
        assert result.tokens[-1].position == Position(1, 9)

    def test_unterminated_string_position(self, lexer: Lexer) -> None:
        error = lexer.analyze('x;\r\n"abc').errors[0]
        assert error.position == Position(2, 1)
