"""Token kinds, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    END = auto()  # end of stream
    UNKNOWN = auto()  # any unclassified character

    # Content
    STRING = auto()  # identifier run, or a bounded/raw read
    FLOAT = auto()  # reserved for decoders, never produced by the scanner
    DECIMAL = auto()  # base-10 digits, may carry a sign and fraction
    HEX = auto()  # base-16 digits, with or without the 0x prefix

    # Punctuation (single-character)
    HYPHEN = auto()  # -
    COMMA = auto()  # ,
    LEFT_BRACKET = auto()  # [
    RIGHT_BRACKET = auto()  # ]
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    FWD_SLASH = auto()  # /
    LESS_THAN = auto()  # <
    GREATER_THAN = auto()  # >
    EQUAL = auto()  # =
    PLUS = auto()  # +
    STAR = auto()  # *
    BACK_SLASH = auto()  # \
    POUND = auto()  # #
    PERIOD = auto()  # .
    SEMICOLON = auto()  # ;
    COLON = auto()  # :
    APOSTROPHE = auto()  # '
    QUOTE = auto()  # "
    PIPE = auto()  # |

    NULL_TERMINATOR = auto()  # \0


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Token:
    """A classified span of input: its kind, exact text, and start offset."""

    kind: TokenKind
    text: str
    offset: int = 0


PUNCTUATION: dict[str, TokenKind] = {
    ",": TokenKind.COMMA,
    "[": TokenKind.LEFT_BRACKET,
    "]": TokenKind.RIGHT_BRACKET,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "/": TokenKind.FWD_SLASH,
    "<": TokenKind.LESS_THAN,
    ">": TokenKind.GREATER_THAN,
    "=": TokenKind.EQUAL,
    "+": TokenKind.PLUS,
    "*": TokenKind.STAR,
    "\\": TokenKind.BACK_SLASH,
    "#": TokenKind.POUND,
    ".": TokenKind.PERIOD,
    ";": TokenKind.SEMICOLON,
    ":": TokenKind.COLON,
    "'": TokenKind.APOSTROPHE,
    '"': TokenKind.QUOTE,
    "|": TokenKind.PIPE,
    "\0": TokenKind.NULL_TERMINATOR,
}

# 7-bit alphabet only; str.isalpha() would admit Unicode letters
_WHITESPACE = frozenset(" \t\r\n")
_DIGITS = "0123456789"
_DECIMAL_DIGITS = frozenset(_DIGITS)
_HEX_LETTERS = frozenset("abcdefABCDEF")
_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGIT_SETS = {
    2: frozenset("01"),
    10: frozenset(_DIGITS + "."),
    16: frozenset(_DIGITS) | _HEX_LETTERS,
}
_IDENT_CHARS = frozenset(_DIGITS) | _LETTERS | frozenset("_-")


def is_whitespace(ch: str) -> bool:
    """Return True if ch is a space, tab, carriage return, or newline."""
    return ch in _WHITESPACE


def is_digit(ch: str, base: int = 10) -> bool:
    """Return True if ch can appear in a number of the given base.

    Base 10 includes the decimal point so fractional text scans as one token.
    """
    try:
        digits = _DIGIT_SETS[base]
    except KeyError:
        raise ValueError(f"unsupported base: {base}") from None
    return ch in digits


def is_decimal_digit(ch: str) -> bool:
    """Return True if ch is 0-9 (no decimal point)."""
    return ch in _DECIMAL_DIGITS


def is_hex_letter(ch: str) -> bool:
    """Return True if ch is one of a-f or A-F."""
    return ch in _HEX_LETTERS


def is_letter(ch: str) -> bool:
    """Return True if ch is an ASCII letter."""
    return ch in _LETTERS


def is_identifier_char(ch: str) -> bool:
    """Return True if ch is a valid identifier character."""
    return ch in _IDENT_CHARS
