"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from flatlex.lexer import tokenize
from flatlex.log import get_logger
from flatlex.tokens import Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding END)."""

    def _lex(source: str, use_hex: bool = False) -> list[Token]:
        tokens = tokenize(source, use_hex=use_hex)
        # Strip trailing END for convenience
        return [t for t in tokens if t.kind != TokenKind.END]

    return _lex


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers the CLI installs so later tests never log to a stale stream."""
    yield
    root = get_logger("flatlex")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(0)


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token texts match the expected list."""
    actual = [t.text for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
