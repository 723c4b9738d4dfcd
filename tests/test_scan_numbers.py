"""Test number scanning: decimal, hex prefix, hex mode, and the hyphen rollback."""

from flatlex.lexer import Lexer
from flatlex.tokens import TokenKind

from tests.conftest import assert_kinds, assert_texts


class TestDecimal:
    def test_negative_integer(self, lex):
        tokens = lex("-123")
        assert_kinds(tokens, [TokenKind.DECIMAL])
        assert tokens[0].text == "-123"

    def test_fraction_stays_decimal(self, lex):
        tokens = lex("3.25")
        assert_kinds(tokens, [TokenKind.DECIMAL])
        assert tokens[0].text == "3.25"

    def test_repeated_points_are_one_token(self, lex):
        tokens = lex("1.2.3")
        assert_kinds(tokens, [TokenKind.DECIMAL])

    def test_scanner_never_emits_float(self, lex):
        tokens = lex("1.5 -0.25 6.02")
        assert TokenKind.FLOAT not in [t.kind for t in tokens]

    def test_digits_then_letters_split(self, lex):
        tokens = lex("12abc")
        assert_kinds(tokens, [TokenKind.DECIMAL, TokenKind.STRING])
        assert_texts(tokens, ["12", "abc"])

    def test_sequence_with_separators(self, lex):
        tokens = lex("1, -2,3")
        assert_kinds(
            tokens,
            [
                TokenKind.DECIMAL,
                TokenKind.COMMA,
                TokenKind.DECIMAL,
                TokenKind.COMMA,
                TokenKind.DECIMAL,
            ],
        )
        assert_texts(tokens, ["1", ",", "-2", ",", "3"])


class TestHexPrefix:
    def test_prefix_detected(self, lex):
        tokens = lex("0x1A")
        assert_kinds(tokens, [TokenKind.HEX])
        assert tokens[0].text == "0x1A"

    def test_negative_prefix(self, lex):
        tokens = lex("-0x1f")
        assert_kinds(tokens, [TokenKind.HEX])
        assert tokens[0].text == "-0x1f"

    def test_bare_prefix(self, lex):
        tokens = lex("0x")
        assert_kinds(tokens, [TokenKind.HEX])
        assert tokens[0].text == "0x"

    def test_hex_stops_at_point(self, lex):
        tokens = lex("0x1F.5")
        assert_kinds(tokens, [TokenKind.HEX, TokenKind.PERIOD, TokenKind.DECIMAL])
        assert_texts(tokens, ["0x1F", ".", "5"])

    def test_hex_stops_at_non_hex_letter(self, lex):
        tokens = lex("0xfg")
        assert_texts(tokens, ["0xf", "g"])

    def test_uppercase_x_is_not_a_prefix(self, lex):
        tokens = lex("0X1")
        assert_kinds(tokens, [TokenKind.DECIMAL, TokenKind.STRING])
        assert_texts(tokens, ["0", "X1"])


class TestHexMode:
    def test_hex_letters_are_identifiers_by_default(self, lex):
        tokens = lex("beef")
        assert_kinds(tokens, [TokenKind.STRING])

    def test_stream_wide_hex_mode(self, lex):
        tokens = lex("beef 10", use_hex=True)
        assert_kinds(tokens, [TokenKind.HEX, TokenKind.HEX])
        assert_texts(tokens, ["beef", "10"])

    def test_per_call_hex_mode(self):
        lexer = Lexer("beef beef")
        tok = lexer.next_token(expect_hex=True)
        assert tok.kind == TokenKind.HEX
        assert tok.text == "beef"
        assert lexer.next_token().kind == TokenKind.STRING

    def test_hex_mode_stops_at_non_hex_letter(self, lex):
        tokens = lex("fz", use_hex=True)
        assert_kinds(tokens, [TokenKind.HEX, TokenKind.STRING])
        assert_texts(tokens, ["f", "z"])

    def test_non_hex_letter_still_identifier(self, lex):
        tokens = lex("zebra", use_hex=True)
        assert_kinds(tokens, [TokenKind.STRING])

    def test_prefix_kept_in_hex_mode(self, lex):
        tokens = lex("0x1A", use_hex=True)
        assert_kinds(tokens, [TokenKind.HEX])
        assert tokens[0].text == "0x1A"

    def test_signed_hex_letters(self, lex):
        tokens = lex("-ab", use_hex=True)
        assert_kinds(tokens, [TokenKind.HEX])
        assert tokens[0].text == "-ab"


class TestHyphen:
    def test_hyphen_then_space(self):
        lexer = Lexer("- ")
        tok = lexer.next_token()
        assert tok.kind == TokenKind.HYPHEN
        assert tok.text == "-"
        assert lexer.offset == 1

    def test_next_token_starts_after_hyphen(self):
        lexer = Lexer("-x")
        assert lexer.next_token().kind == TokenKind.HYPHEN
        tok = lexer.next_token()
        assert tok.kind == TokenKind.STRING
        assert tok.offset == 1

    def test_trailing_hyphen(self, lex):
        tokens = lex("-")
        assert_kinds(tokens, [TokenKind.HYPHEN])

    def test_hyphen_before_hex_letters_without_hex_mode(self, lex):
        tokens = lex("-ab")
        assert_kinds(tokens, [TokenKind.HYPHEN, TokenKind.STRING])

    def test_double_hyphen(self, lex):
        tokens = lex("--5")
        assert_kinds(tokens, [TokenKind.HYPHEN, TokenKind.DECIMAL])
        assert_texts(tokens, ["-", "-5"])

    def test_hyphen_inside_identifier(self, lex):
        tokens = lex("abc-def")
        assert_kinds(tokens, [TokenKind.STRING])
        assert tokens[0].text == "abc-def"
