"""Result serialization — JSON round-trip for Lexemas analysis results.

Converts a LexResult to/from JSON-compatible dicts. Useful for:
- Handing results to reporting tools in another process
- Snapshot tests of lexer output
- Debugging and inspection

Token types are stored by enum name; positions as [line, column] pairs.
All output is deterministic (sorted keys) so equal results serialize to
equal strings.

Example:
    from lexemas import analyze
    from lexemas.serialization import to_json, from_json

    result = analyze("x = 1;", config)
    restored = from_json(to_json(result))
    assert result == restored

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from typing import Any

from lexemas.location import Position
from lexemas.tokens import LexError, LexResult, Token, TokenType


def to_dict(result: LexResult) -> dict[str, Any]:
    """Convert a LexResult to a JSON-compatible dict.

    Args:
        result: Analysis result.

    Returns:
        Dict with "tokens" and "errors" lists.

    """
    return {
        "tokens": [
            {
                "type": token.type.name,
                "lexeme": token.lexeme,
                "position": [token.position.line, token.position.column],
            }
            for token in result.tokens
        ],
        "errors": [
            {
                "text": error.text,
                "message": error.message,
                "position": [error.position.line, error.position.column],
            }
            for error in result.errors
        ],
    }


def _position(raw: Any) -> Position:
    if (
        not isinstance(raw, list | tuple)
        or len(raw) != 2
        or not all(isinstance(n, int) and not isinstance(n, bool) for n in raw)
    ):
        msg = f"Expected [line, column] position, got {raw!r}"
        raise ValueError(msg)
    return Position(line=raw[0], column=raw[1])


def from_dict(data: dict[str, Any]) -> LexResult:
    """Reconstruct a LexResult from a dict.

    Args:
        data: Dict as produced by to_dict. Missing lists are empty.

    Returns:
        LexResult equal to the serialized one.

    Raises:
        ValueError: If a token type is unknown or a position is malformed.

    """
    tokens = []
    for raw in data.get("tokens", ()):
        type_name = raw.get("type")
        try:
            token_type = TokenType[type_name]
        except KeyError:
            msg = f"Unknown token type: {type_name!r}"
            raise ValueError(msg) from None
        tokens.append(Token(token_type, raw["lexeme"], _position(raw.get("position"))))

    errors = [
        LexError(text=raw["text"], position=_position(raw.get("position")), message=raw["message"])
        for raw in data.get("errors", ())
    ]
    return LexResult(tokens=tuple(tokens), errors=tuple(errors))


def to_json(result: LexResult, *, indent: int | None = None) -> str:
    """Serialize a LexResult to a JSON string.

    Non-ASCII text (the error messages) is kept as-is.

    Args:
        result: Result to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(result), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> LexResult:
    """Deserialize a LexResult from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a LexResult.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    return from_dict(raw)
