"""Numeric interpretation of finished tokens.

Decoding follows the C library conversions the token format was designed
around: the longest numeric prefix of the text is used, anything after it is
ignored, and text with no numeric prefix decodes to 0. Widths follow LP64:
64-bit results saturate at their limits, 32-bit results are the 64-bit result
truncated to 32 bits.

Every decoder accepts ``strict=True`` to raise ``DecodeError`` instead when
the text is not entirely numeric.
"""

from __future__ import annotations

import math
import re
import struct
from collections.abc import Sequence

from flatlex.errors import DecodeError
from flatlex.log import get_logger
from flatlex.tokens import Token

logger = get_logger(__name__)

_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MAX = (1 << 64) - 1
_MASK32 = (1 << 32) - 1

_C_SPACE = " \t\n\v\f\r"
_BASE_DIGITS = {
    2: frozenset("01"),
    10: frozenset("0123456789"),
    16: frozenset("0123456789abcdefABCDEF"),
}

_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE | re.ASCII,
)


def _scan_integer(text: str, base: int) -> tuple[int, int]:
    """Parse the integer prefix of text like strtol; return (value, chars used).

    chars used is 0 when no digits were found.
    """
    digits = _BASE_DIGITS[base]
    n = len(text)
    i = 0
    while i < n and text[i] in _C_SPACE:
        i += 1
    negative = False
    if i < n and text[i] in "+-":
        negative = text[i] == "-"
        i += 1
    if base == 16 and text[i : i + 2] in ("0x", "0X") and i + 2 < n and text[i + 2] in digits:
        i += 2
    start = i
    while i < n and text[i] in digits:
        i += 1
    if i == start:
        return 0, 0
    value = int(text[start:i], base)
    return (-value if negative else value), i


def _as_int64(value: int) -> int:
    return max(_INT64_MIN, min(value, _INT64_MAX))


def _as_uint64(value: int) -> int:
    if abs(value) > _UINT64_MAX:
        return _UINT64_MAX
    return value & _UINT64_MAX


def _as_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & (1 << 31) else value


def _strip_sign(text: str) -> str:
    return text[1:] if text.startswith("-") else text


def _strip_hex_prefix(text: str) -> str:
    # "0x" alone is left for the parser, which reads it as 0
    if len(text) > 2 and text.startswith("0x"):
        return text[2:]
    return text


def _decode(token: Token, text: str, base: int, what: str, strict: bool) -> int:
    value, used = _scan_integer(text, base)
    if used != len(text) or not text:
        if strict:
            raise DecodeError(f"not a {what}", token)
        logger.debug(
            "best-effort %s decode of %r used %d of %d chars", what, token.text, used, len(text)
        )
    return value


# Decimal =====


def to_uint32(token: Token, *, strict: bool = False) -> int:
    """Decode base-10 text as an unsigned 32-bit value; a leading "-" is ignored."""
    value = _decode(token, _strip_sign(token.text), 10, "decimal integer", strict)
    return _as_uint64(value) & _MASK32


def to_int32(token: Token, *, strict: bool = False) -> int:
    value = _decode(token, token.text, 10, "decimal integer", strict)
    return _as_int32(_as_int64(value))


def to_uint64(token: Token, *, strict: bool = False) -> int:
    """Decode base-10 text as an unsigned 64-bit value; a leading "-" is ignored."""
    return _as_uint64(_decode(token, _strip_sign(token.text), 10, "decimal integer", strict))


def to_int64(token: Token, *, strict: bool = False) -> int:
    return _as_int64(_decode(token, token.text, 10, "decimal integer", strict))


# Hex =====
# All hex variants drop the sign, then an optional "0x".


def _hex_digits(token: Token) -> str:
    return _strip_hex_prefix(_strip_sign(token.text))


def hex_to_uint32(token: Token, *, strict: bool = False) -> int:
    value = _decode(token, _hex_digits(token), 16, "hex integer", strict)
    return _as_uint64(value) & _MASK32


def hex_to_int32(token: Token, *, strict: bool = False) -> int:
    value = _decode(token, _hex_digits(token), 16, "hex integer", strict)
    return _as_int32(_as_int64(value))


def hex_to_uint64(token: Token, *, strict: bool = False) -> int:
    return _as_uint64(_decode(token, _hex_digits(token), 16, "hex integer", strict))


def hex_to_int64(token: Token, *, strict: bool = False) -> int:
    return _as_int64(_decode(token, _hex_digits(token), 16, "hex integer", strict))


# Binary =====
# No "0b" prefix convention; unsigned variants drop the sign.


def binary_to_uint32(token: Token, *, strict: bool = False) -> int:
    value = _decode(token, _strip_sign(token.text), 2, "binary integer", strict)
    return _as_uint64(value) & _MASK32


def binary_to_int32(token: Token, *, strict: bool = False) -> int:
    value = _decode(token, token.text, 2, "binary integer", strict)
    return _as_int32(_as_int64(value))


def binary_to_uint64(token: Token, *, strict: bool = False) -> int:
    return _as_uint64(_decode(token, _strip_sign(token.text), 2, "binary integer", strict))


def binary_to_int64(token: Token, *, strict: bool = False) -> int:
    return _as_int64(_decode(token, token.text, 2, "binary integer", strict))


# Float =====


def to_float64(token: Token, *, strict: bool = False) -> float:
    """Decode the float prefix of the token text at double precision."""
    text = token.text
    m = _FLOAT_PREFIX.match(text)
    if m is None or m.end() != len(text):
        if strict:
            raise DecodeError("not a floating-point number", token)
        logger.debug("best-effort float decode of %r", text)
        if m is None:
            return 0.0
    return float(m.group().lstrip(_C_SPACE))


def to_float32(token: Token, *, strict: bool = False) -> float:
    """Decode at double precision, then round to single precision.

    Values beyond the single-precision range become infinities.
    """
    value = to_float64(token, strict=strict)
    if math.isinf(value) or math.isnan(value):
        return value
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


# Additional tools =====


def token_set_index(token: Token, candidates: Sequence[str]) -> int:
    """Return the index of the first candidate equal to the token text.

    Returns len(candidates) when nothing matches.
    """
    for index, candidate in enumerate(candidates):
        if token.text == candidate:
            return index
    return len(candidates)
