"""Shared fixtures for the Lexemas test-suite."""

import pytest

from lexemas.config import LexerConfig, LexerConfigBuilder
from lexemas.lexer import Lexer


def build_config() -> LexerConfig:
    """A small C-like language used throughout the tests."""
    return (
        LexerConfigBuilder()
        .reserved("si", "sino", "mientras", "retornar")
        .operators("+", "-", "*", "/", "=", "==", "!=", "<", "<=", ">", ">=")
        .punctuation(";", ",", ":")
        .grouping("(", ")", "{", "}", "[", "]")
        .comments("//", "/*", "*/")
        .build()
    )


@pytest.fixture
def config() -> LexerConfig:
    return build_config()


@pytest.fixture
def lexer(config: LexerConfig) -> Lexer:
    return Lexer(config)
