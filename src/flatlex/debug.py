"""Token dumps for the command line."""

from __future__ import annotations

import json
import sys
from typing import TextIO

from flatlex.lexer import Lexer
from flatlex.tokens import Token, TokenKind


def dump_tokens(lexer: Lexer, tokens: list[Token], *, file: TextIO = sys.stdout) -> None:
    """Print one line per token: line:col, kind, and the quoted text."""
    for tok in tokens:
        pos = lexer.position(tok.offset)
        loc = f"{pos.line}:{pos.column}"
        if tok.kind is TokenKind.END:
            file.write(f"{loc:<9} {tok.kind.name}\n")
        else:
            file.write(f"{loc:<9} {tok.kind.name:<16} {tok.text!r}\n")


def dump_tokens_json(lexer: Lexer, tokens: list[Token], *, file: TextIO = sys.stdout) -> None:
    """Write the tokens as a JSON array of objects."""
    records = []
    for tok in tokens:
        pos = lexer.position(tok.offset)
        records.append(
            {
                "kind": tok.kind.name,
                "text": tok.text,
                "offset": tok.offset,
                "line": pos.line,
                "column": pos.column,
            }
        )
    json.dump(records, file, indent=2)
    file.write("\n")
