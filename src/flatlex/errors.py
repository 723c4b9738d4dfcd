"""Error types with formatted source context."""

from __future__ import annotations

from flatlex.tokens import Position, Token


class LexError(Exception):
    """Raised on a required token mismatch, with position and source context."""

    def __init__(self, message: str, position: Position, source: str, length: int = 1) -> None:
        self.message = message
        self.position = position
        self.source = source
        self.length = length
        super().__init__(self.format())

    def format(self, filename: str = "<input>") -> str:
        lines = self.source.splitlines(keepends=True)
        line_idx = self.position.line - 1
        col = self.position.column

        # Build the source line (strip trailing newline for display)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        # Underline the offending text, at least 1 char, but stay within line
        underline_len = max(1, min(self.length, len(source_line) - col + 1))

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class DecodeError(ValueError):
    """Raised by strict numeric decoding when a token's text is not a number."""

    def __init__(self, message: str, token: Token) -> None:
        self.message = message
        self.token = token
        super().__init__(f"{message}: {token.text!r} (offset {token.offset})")
