"""Tests for lexemas.serialization — LexResult JSON round-trip."""

import json

import pytest

from lexemas.lexer import Lexer
from lexemas.serialization import from_dict, from_json, to_dict, to_json
from lexemas.tokens import LexResult


class TestToDict:
    def test_shape(self, lexer: Lexer) -> None:
        data = to_dict(lexer.analyze("x @"))
        assert data == {
            "tokens": [{"type": "IDENTIFIER", "lexeme": "x", "position": [1, 1]}],
            "errors": [
                {
                    "text": "@",
                    "message": "Símbolo fuera del alfabeto permitido",
                    "position": [1, 3],
                }
            ],
        }

    def test_empty_result(self) -> None:
        assert to_dict(LexResult()) == {"tokens": [], "errors": []}


class TestRoundTrip:
    def test_mixed_result(self, lexer: Lexer) -> None:
        result = lexer.analyze('si (x == 12.5) {\r\n  "hola" 585f @ }\n/* abc')
        assert from_json(to_json(result)) == result
        assert from_dict(to_dict(result)) == result

    def test_deterministic(self, lexer: Lexer) -> None:
        result = lexer.analyze("a = 1; b = 2;")
        assert to_json(result) == to_json(lexer.analyze("a = 1; b = 2;"))

    def test_non_ascii_kept(self, lexer: Lexer) -> None:
        assert "Número mal formado" in to_json(lexer.analyze("1a"))

    def test_indent(self, lexer: Lexer) -> None:
        assert "\n" in to_json(lexer.analyze("x"), indent=2)


class TestFromDictErrors:
    def test_unknown_token_type(self) -> None:
        data = {"tokens": [{"type": "KEYWORD", "lexeme": "x", "position": [1, 1]}]}
        with pytest.raises(ValueError, match="Unknown token type"):
            from_dict(data)

    @pytest.mark.parametrize(
        "position", [None, [1], "1:1", [0, 1], ["1", 2], [1, 2.0], [True, 1]]
    )
    def test_bad_position(self, position: object) -> None:
        data = {"tokens": [{"type": "NUMBER", "lexeme": "1", "position": position}]}
        with pytest.raises(ValueError):
            from_dict(data)

    def test_missing_lists_are_empty(self) -> None:
        assert from_dict({}) == LexResult()

    def test_json_must_be_object(self) -> None:
        with pytest.raises(ValueError):
            from_json(json.dumps([1, 2]))
