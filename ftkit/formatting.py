"""printf-style formatting with the conversions c, s, p, d, i, u, x, X and %.

Directives accept the flags '-', '0', '#', '+' and ' ', a field width
and a precision, either of which may be '*' to take the value from the
argument list. An unknown conversion character is written out as it
is, and its flags are dropped. A '%' at the very end of the format
writes nothing.
"""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from ftkit.chars import is_digit
from ftkit.numbers import atoi, itoa

_UINT32_MASK = 2**32 - 1
_UINT64_MASK = 2**64 - 1


@dataclass
class FormatFlags:
    """The flags, width and precision of one conversion directive."""

    left_justify: bool = False
    width: int = 0
    precision: int = -1
    hex_prefix: bool = False
    sign: bool = False
    space: bool = False
    zero: bool = False


def itoa_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of n taken as a 64-bit unsigned value."""
    return format(operator.index(n) & _UINT64_MASK, "X" if upper else "x")


def itoa_unsigned(n: int) -> str:
    """Decimal digits of n taken as a 64-bit unsigned value."""
    return str(operator.index(n) & _UINT64_MASK)


def _int32(value: Any) -> int:
    value = operator.index(value) & _UINT32_MASK
    return value - 2**32 if value >= 2**31 else value


def _next(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _pad(text: str, flags: FormatFlags) -> str:
    """Truncate to the precision, then pad out to the field width."""
    if flags.precision >= 0:
        text = text[:flags.precision]
    fill = "0" if flags.zero and not flags.left_justify else " "
    padding = fill * (flags.width - len(text))
    return text + padding if flags.left_justify else padding + text


def _apply_precision(digits: str, flags: FormatFlags) -> str:
    if digits.startswith("0") and flags.precision == 0:
        return ""
    if flags.precision < 0 or flags.precision < len(digits):
        return digits
    sign = "-" if digits.startswith("-") else ""
    body = digits[len(sign):]
    return sign + "0" * (flags.precision - len(body)) + body


def _apply_sign(text: str, flags: FormatFlags) -> str:
    if text.startswith("-"):
        return text
    if flags.sign:
        return "+" + text
    if flags.space:
        return " " + text
    return text


def _zero_fill(text: str, flags: FormatFlags) -> str:
    prefix = 2 if flags.hex_prefix else 0
    if not flags.zero or flags.left_justify or flags.width - prefix <= len(text):
        return text
    sign = text[:1] if text[:1] in ("-", "+", " ") else ""
    count = flags.width - len(text) - prefix
    return sign + "0" * count + text[len(sign):]


def _char(value: Any, flags: FormatFlags) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c needs a single character, got {value!r}")
        ch = value
    else:
        ch = chr(operator.index(value) & 0xFF)
    padding_flags = FormatFlags(left_justify=flags.left_justify, width=flags.width,
                                zero=flags.zero)
    return _pad(ch, padding_flags)


def _string(value: Any, flags: FormatFlags) -> str:
    text = "(null)" if value is None else str(value)
    nul = text.find("\0")
    if nul >= 0:
        text = text[:nul]
    return _pad(text, flags)


def _decimal(value: Any, flags: FormatFlags) -> str:
    text = itoa(_int32(value))
    if flags.precision >= 0:
        flags.zero = False
    flags.hex_prefix = False
    text = _zero_fill(_apply_sign(_apply_precision(text, flags), flags), flags)
    flags.precision = -1
    return _pad(text, flags)


def _unsigned(value: Any, flags: FormatFlags) -> str:
    text = itoa_unsigned(operator.index(value) & _UINT32_MASK)
    if flags.precision >= 0:
        flags.zero = False
    text = _apply_precision(text, flags)
    flags.precision = -1
    return _pad(text, flags)


def _hex(value: int, upper: bool, pointer: bool, flags: FormatFlags) -> str:
    text = itoa_hex(value, upper)
    if flags.precision >= 0:
        flags.zero = False
    if value == 0 and not pointer:
        flags.hex_prefix = False
    text = _zero_fill(_apply_precision(text, flags), flags)
    if flags.hex_prefix and upper:
        text = "0X" + text
    elif flags.hex_prefix or pointer:
        text = "0x" + text
    flags.precision = -1
    return _pad(text, flags)


def _pointer(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return value & _UINT64_MASK
    return id(value) & _UINT64_MASK


def _convert(conversion: str, values: Iterator[Any], flags: FormatFlags) -> str:
    if conversion == "%":
        return _char("%", flags)
    if conversion == "c":
        return _char(_next(values), flags)
    if conversion == "s":
        return _string(_next(values), flags)
    if conversion == "p":
        flags.hex_prefix = True
        return _hex(_pointer(_next(values)), False, True, flags)
    if conversion in ("d", "i"):
        return _decimal(_next(values), flags)
    if conversion == "u":
        return _unsigned(_next(values), flags)
    if conversion in ("x", "X"):
        value = operator.index(_next(values)) & _UINT32_MASK
        return _hex(value, conversion == "X", False, flags)
    raise KeyError(conversion)


_CONVERSIONS = frozenset("%cspdiuxX")


def _directive(fmt: str, pos: int, values: Iterator[Any]) -> tuple[int, str]:
    """Render the directive whose '%' is at pos; return the resume position and text."""
    flags = FormatFlags()
    end = len(fmt)
    pos += 1
    while pos < end:
        c = fmt[pos]
        if c == "0":
            flags.zero = True
        elif c == "-":
            flags.left_justify = True
        elif is_digit(c):
            flags.width = atoi(fmt[pos:])
            while pos + 1 < end and is_digit(fmt[pos + 1]):
                pos += 1
        elif c == ".":
            pos += 1
            if pos < end and fmt[pos] == "*":
                flags.precision = _int32(_next(values))
            else:
                flags.precision = atoi(fmt[pos:])
                if pos < end and is_digit(fmt[pos]):
                    while pos + 1 < end and is_digit(fmt[pos + 1]):
                        pos += 1
                else:
                    pos -= 1
        elif c == "#":
            flags.hex_prefix = True
        elif c == "+":
            flags.sign = True
        elif c == " ":
            flags.space = True
        elif c == "*":
            flags.width = _int32(_next(values))
        else:
            break
        pos += 1
    if pos < end and fmt[pos] in _CONVERSIONS:
        return pos + 1, _convert(fmt[pos], values, flags)
    return pos, ""


def sprintf(fmt: str, *args: Any) -> str:
    """Format the arguments according to fmt and return the text."""
    values = iter(args)
    pieces: list[str] = []
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:percent])
        pos, text = _directive(fmt, percent, values)
        pieces.append(text)
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)