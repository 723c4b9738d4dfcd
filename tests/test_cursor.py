"""Test the cursor, sized buffers, progress, positions, and byte input."""

import pytest

from flatlex.cursor import Cursor
from flatlex.lexer import Lexer
from flatlex.tokens import Position, TokenKind

from tests.conftest import assert_kinds


class TestCursor:
    def test_initial_state(self):
        cur = Cursor("abc")
        assert cur.pos == 0
        assert cur.end == 2
        assert not cur.completed

    def test_advance_is_bounded(self):
        cur = Cursor("abc")
        assert cur.advance(5) == 3
        assert cur.completed
        assert cur.advance() == 0
        assert cur.pos == 3

    def test_current_past_end(self):
        cur = Cursor("a")
        assert cur.current() == "a"
        assert cur.current(1) == ""

    def test_empty_buffer_is_completed(self):
        assert Cursor("").completed

    def test_mark_and_reset(self):
        cur = Cursor("abcdef")
        mark = cur.mark()
        cur.advance(4)
        cur.reset(mark)
        assert cur.pos == 0

    def test_reset_out_of_bounds(self):
        with pytest.raises(ValueError, match="mark"):
            Cursor("abc").reset(5)

    def test_size_out_of_bounds(self):
        with pytest.raises(ValueError, match="size"):
            Cursor("abc", size=4)

    def test_buffer_is_not_copied(self):
        source = "some text"
        assert Cursor(source).buffer is source


class TestSizedBuffer:
    def test_tokens_stop_at_size(self):
        lexer = Lexer("abc;rest", size=3)
        assert lexer.next_token().text == "abc"
        assert lexer.next_token().kind == TokenKind.END

    def test_zero_size(self):
        assert Lexer("abc", size=0).next_token().kind == TokenKind.END


class TestProgress:
    def test_half_way(self):
        lexer = Lexer("abcd")
        lexer.read(2)
        assert lexer.progress == 0.5

    def test_start_and_finish(self):
        lexer = Lexer("ab cd")
        assert lexer.progress == 0.0
        list(lexer)
        assert lexer.progress == 1.0

    def test_empty_buffer(self):
        assert Lexer("").progress == 1.0


class TestPosition:
    def test_first_line(self):
        assert Lexer("abc").position(2) == Position(1, 3, 2)

    def test_after_newline(self):
        assert Lexer("ab\ncd").position(4) == Position(2, 2, 4)

    def test_defaults_to_cursor(self):
        lexer = Lexer("a\nb")
        lexer.next_token()
        lexer.next_token()
        assert lexer.position() == Position(2, 2, 3)


class TestFromBytes:
    def test_ascii_bytes(self):
        lexer = Lexer.from_bytes(b"key=0x10", use_hex=False)
        assert_kinds(list(lexer), [TokenKind.STRING, TokenKind.EQUAL, TokenKind.HEX])

    def test_non_ascii_bytes_are_unknown(self):
        lexer = Lexer.from_bytes(b"ab\xffc")
        assert_kinds(list(lexer), [TokenKind.STRING, TokenKind.UNKNOWN, TokenKind.STRING])
