"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from toylex.lexer import Lexer, tokenize
from toylex.tokens import LexedToken, Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[LexedToken]:
        tokens = tokenize(source, "test.toy")
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.token != TokenKind.EOF]

    return _lex


@pytest.fixture
def lexer():
    """Return a helper that builds an unprimed Lexer over source."""

    def _lexer(source: str) -> Lexer:
        return Lexer.from_string(source, "test.toy")

    return _lexer


def assert_tokens(tokens: list[LexedToken], expected: list[Token]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.token for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(tokens: list[LexedToken], expected: list[str]) -> None:
    """Assert that the token lexemes match the expected list."""
    actual = [t.text for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def positions(tokens: list[LexedToken]) -> list[tuple[int, int]]:
    """Return (line, column) of each token."""
    return [(t.location.line, t.location.column) for t in tokens]
