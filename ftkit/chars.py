"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code. The case converters return the same kind of value
they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]

_SPACE_CODES = frozenset(map(ord, "\t\n\v\f\r "))


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int) and not isinstance(c, bool):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def is_alpha(c: Char) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def is_space(c: Char) -> bool:
    """True for tab, newline, vertical tab, form feed, carriage return and space."""
    return _code(c) in _SPACE_CODES


def _convert(c: Char, low: str, high: str, delta: int) -> Char:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_upper(c: Char) -> Char:
    """Map an ASCII lower-case letter to upper case; anything else is unchanged."""
    return _convert(c, "a", "z", -32)


def to_lower(c: Char) -> Char:
    """Map an ASCII upper-case letter to lower case; anything else is unchanged."""
    return _convert(c, "A", "Z", 32)