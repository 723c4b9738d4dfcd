"""flatlex: single-pass character-level tokenizer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flatlex.tokens import Token

__version__ = "0.1.0"


def tokenize(source: str, use_hex: bool = False) -> list[Token]:
    """Tokenize source text; the list ends with a single END token."""
    from flatlex.lexer import tokenize as _tokenize

    return _tokenize(source, use_hex=use_hex)
