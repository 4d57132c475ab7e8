"""String searching, comparison, slicing and transformation helpers.

Searches return an index into the string, or ``None`` when nothing is
found. Character arguments may be a one-character string or an integer
code; integer codes are narrowed to a byte, as a ``char`` would be.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Any, Optional, Union

Char = Union[str, int]

_NUL = "\0"


def _char(c: Char) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first occurrence of c in s.

    Searching for the NUL character gives the length of s, the position
    of the terminator.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    if ch == _NUL:
        return len(s)
    return None


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last occurrence of c in s.

    Searching for the NUL character gives the length of s.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters of two strings.

    Returns 0 when they agree, otherwise the difference between the
    codes of the first pair of characters that differ; the end of a
    string counts as code 0.
    """
    _non_negative(n, "n")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first occurrence of needle that lies wholly within
    the first length characters of haystack.

    An empty needle is found at index 0.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at start.

    A start at or past the end of s gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one is treated as absent.

    Returns None only when both are missing.
    """
    if s1 is None and s2 is None:
        return None
    return (s1 or "") + (s2 or "")


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    return s.strip(charset)


def split(s: str, sep: Char) -> list[str]:
    """Split s on the separator character, dropping empty pieces."""
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, character) for each character."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[Any], f: Callable[[int, Any], Any]) -> None:
    """Call f(index, item) for each item of a mutable sequence.

    When f returns something other than None, that value replaces the
    item in place.
    """
    if isinstance(s, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence, such as a list or bytearray")
    for index, item in enumerate(s):
        result = f(index, item)
        if result is not None:
            s[index] = result