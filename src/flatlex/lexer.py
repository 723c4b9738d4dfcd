"""flatlex lexer: single-cursor tokenizer with backtracking and raw reads."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from flatlex.cursor import Cursor
from flatlex.errors import LexError
from flatlex.log import get_logger
from flatlex.tokens import (
    PUNCTUATION,
    Position,
    Token,
    TokenKind,
    is_decimal_digit,
    is_digit,
    is_hex_letter,
    is_identifier_char,
    is_letter,
)


class Lexer:
    """Tokenize a resident character buffer one token at a time.

    ``use_hex`` makes a-f/A-F at the start of a token scan as hex digits for
    the whole stream; ``next_token(expect_hex=True)`` does the same for a
    single call.
    """

    def __init__(
        self,
        source: str,
        use_hex: bool = False,
        size: int | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._cursor = Cursor(source, size)
        self._use_hex = use_hex
        self._log = logger if logger is not None else get_logger("lexer")

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        use_hex: bool = False,
        logger: logging.Logger | None = None,
    ) -> Lexer:
        """Build a lexer over 7-bit bytes; other bytes lex as UNKNOWN."""
        return cls(data.decode("ascii", errors="replace"), use_hex=use_hex, logger=logger)

    @property
    def source(self) -> str:
        """The text being tokenized."""
        return self._cursor.buffer

    @property
    def use_hex(self) -> bool:
        """True when a-f/A-F start hex numbers for the whole stream."""
        return self._use_hex

    @property
    def offset(self) -> int:
        """Index of the next unread character."""
        return self._cursor.pos

    @property
    def completed(self) -> bool:
        """True once every character of the stream has been consumed."""
        return self._cursor.completed

    @property
    def progress(self) -> float:
        """Fraction of the stream consumed, from 0.0 (start) to 1.0 (completed)."""
        return self._cursor.progress

    def position(self, offset: int | None = None) -> Position:
        """Return the line/column for an offset (default: the cursor)."""
        return self._cursor.position(offset)

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            if tok.kind is TokenKind.END:
                return
            yield tok

    # ------------------------------------------------------------------
    # Token retrieval
    # ------------------------------------------------------------------

    def next_token(self, expect_hex: bool = False, fixed_length: int | None = None) -> Token:
        """Skip whitespace and return the next token.

        With ``fixed_length`` set, exactly that many characters are taken as a
        STRING regardless of their class (fewer at end of stream).
        """
        cur = self._cursor
        if fixed_length is not None:
            if fixed_length < 0:
                raise ValueError(f"fixed_length must be >= 0, got {fixed_length}")
            if fixed_length == 0:
                return Token(TokenKind.STRING, "", cur.pos)

        cur.skip_whitespace()
        if cur.completed:
            return Token(TokenKind.END, "", cur.pos)

        if fixed_length is not None:
            return self._scan_bounded(fixed_length)

        hex_mode = self._use_hex or expect_hex
        ch = cur.current()

        if ch == "-" or is_decimal_digit(ch):
            return self._scan_number(hex_mode)

        if is_hex_letter(ch):
            if hex_mode:
                return self._scan_number(True)
            return self._scan_identifier()

        if is_letter(ch) or ch == "_":
            return self._scan_identifier()

        kind = PUNCTUATION.get(ch)
        if kind is not None:
            return self._single_char(kind)

        self._log.debug("unknown character %r at offset %d", ch, cur.pos)
        return self._single_char(TokenKind.UNKNOWN)

    def _single_char(self, kind: TokenKind) -> Token:
        start = self._cursor.pos
        self._cursor.advance()
        return Token(kind, self._cursor.text(start), start)

    def _scan_identifier(self) -> Token:
        cur = self._cursor
        start = cur.pos
        cur.advance()
        while not cur.completed and is_identifier_char(cur.current()):
            cur.advance()
        return Token(TokenKind.STRING, cur.text(start), start)

    def _scan_bounded(self, count: int) -> Token:
        cur = self._cursor
        start = cur.pos
        cur.advance(count)
        return Token(TokenKind.STRING, cur.text(start), start)

    def _scan_number(self, force_hex: bool) -> Token:
        cur = self._cursor
        start = cur.pos
        base = 16 if force_hex else 10

        if cur.current() == "-":
            cur.advance()
            if not is_digit(cur.current(), base):
                cur.reset(start)
                return self._single_char(TokenKind.HYPHEN)

        kind = TokenKind.HEX if force_hex else TokenKind.DECIMAL
        if cur.current() == "0" and cur.current(1) == "x":
            kind = TokenKind.HEX
            base = 16
            cur.advance(2)

        # base 16 has no "." so a hex token ends at a decimal point
        while not cur.completed and is_digit(cur.current(), base):
            cur.advance()

        return Token(kind, cur.text(start), start)

    # ------------------------------------------------------------------
    # Backtracking reads
    # ------------------------------------------------------------------

    def expect_string(self, expected: str) -> Token | None:
        """Consume len(expected) characters if they equal expected.

        On mismatch the cursor is restored and None is returned.
        """
        mark = self._cursor.mark()
        tok = self.read(len(expected))
        if tok.text == expected:
            return tok
        self._cursor.reset(mark)
        self._log.debug("expected %r at offset %d, found %r", expected, tok.offset, tok.text)
        return None

    def expect_type(self, expected: TokenKind) -> Token | None:
        """Consume the next token if it is of the expected kind.

        On mismatch the cursor is restored and None is returned.
        """
        mark = self._cursor.mark()
        tok = self.next_token(expect_hex=expected is TokenKind.HEX)
        if tok.kind is expected:
            return tok
        self._cursor.reset(mark)
        self._log.debug(
            "expected %s at offset %d, found %s %r",
            expected.name,
            tok.offset,
            tok.kind.name,
            tok.text,
        )
        return None

    def peek(self, expect_hex: bool = False) -> Token:
        """Return the next token without consuming it."""
        mark = self._cursor.mark()
        try:
            return self.next_token(expect_hex=expect_hex)
        finally:
            self._cursor.reset(mark)

    def require_string(self, expected: str) -> Token:
        """Like expect_string, but raise LexError on mismatch."""
        tok = self.expect_string(expected)
        if tok is None:
            found = self.peek()
            raise self._error(f"expected {expected!r}, found {self._describe(found)}", found)
        return tok

    def require_type(self, expected: TokenKind) -> Token:
        """Like expect_type, but raise LexError on mismatch."""
        tok = self.expect_type(expected)
        if tok is None:
            found = self.peek(expect_hex=expected is TokenKind.HEX)
            raise self._error(f"expected {expected.name}, found {self._describe(found)}", found)
        return tok

    def _describe(self, tok: Token) -> str:
        if tok.kind is TokenKind.END:
            return "end of input"
        return f"{tok.kind.name} {tok.text!r}"

    def _error(self, message: str, tok: Token) -> LexError:
        return LexError(message, self.position(tok.offset), self.source, max(1, len(tok.text)))

    # ------------------------------------------------------------------
    # Raw reads
    # ------------------------------------------------------------------

    def read(self, count: int) -> Token:
        """Take up to count characters verbatim, after skipping whitespace."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        cur = self._cursor
        if count == 0:
            return Token(TokenKind.STRING, "", cur.pos)
        cur.skip_whitespace()
        return self._scan_bounded(count)

    def read_to(self, delimiter: str) -> Token:
        """Take characters up to, not including, the next delimiter.

        The delimiter is left in the stream. Without a delimiter the read runs
        to end of stream.
        """
        if len(delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
        cur = self._cursor
        cur.skip_whitespace()
        start = cur.pos
        cur.advance(cur.find(delimiter) - start)
        return Token(TokenKind.STRING, cur.text(start), start)


def tokenize(source: str, use_hex: bool = False) -> list[Token]:
    """Convenience function: tokenize source text, ending with one END token."""
    lexer = Lexer(source, use_hex=use_hex)
    tokens = list(lexer)
    tokens.append(lexer.next_token())
    return tokens
