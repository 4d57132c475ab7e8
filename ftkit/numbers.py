"""Lenient number parsing and formatting.

The parsers skip leading whitespace, accept one optional sign, read as
many digits as they find and ignore whatever follows, never raising on
malformed input.
"""

from __future__ import annotations

import math
import struct

from ftkit.chars import is_digit, is_space

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_LONG_MAX = 2**63 - 1


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def _f32(value: float) -> float:
    """Round a value to single precision."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _skip_prefix(text: str) -> tuple[int, int]:
    """Return the position after whitespace and sign, and the sign."""
    pos = 0
    while pos < len(text) and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    return pos, sign


def atoi(text: str) -> int:
    """Parse a leading decimal integer with 32-bit wrap-around.

    A magnitude beyond the 64-bit range gives -1 for positive input
    and 0 for negative input.
    """
    pos, sign = _skip_prefix(text)
    value = 0
    while pos < len(text) and is_digit(text[pos]):
        value = value * 10 + ord(text[pos]) - ord("0")
        if value > _LONG_MAX:
            return -1 if sign == 1 else 0
        pos += 1
    return _wrap_int32(_wrap_int32(value) * sign)


def _parse_real(text: str, rnd) -> float:
    pos, sign = _skip_prefix(text)
    value = 0.0
    while pos < len(text) and is_digit(text[pos]):
        value = rnd(rnd(rnd(value * 10) + ord(text[pos])) - ord("0"))
        pos += 1
    if pos < len(text) and text[pos] in ".,":
        pos += 1
        fraction = 0.0
        divisor = 10.0
        while pos < len(text) and is_digit(text[pos]):
            fraction = rnd(fraction + rnd((ord(text[pos]) - ord("0")) / divisor))
            divisor = rnd(divisor * 10)
            pos += 1
        value = rnd(value + fraction)
    return rnd(value * sign)


def atof(text: str) -> float:
    """Parse a leading decimal number in single precision.

    Either '.' or ',' separates the fractional part.
    """
    return _parse_real(text, _f32)


def atod(text: str) -> float:
    """Parse a leading decimal number in double precision.

    Either '.' or ',' separates the fractional part.
    """
    return _parse_real(text, float)


def itoa(n: int) -> str:
    """Format a 32-bit signed integer in decimal."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def power(base: int, exponent: int) -> int:
    """Raise base to a non-negative integer exponent; negative exponents give 0."""
    if exponent < 0:
        return 0
    return base**exponent