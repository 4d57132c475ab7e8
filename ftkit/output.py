"""Writing characters, strings and integers to a text stream.

Every function writes to the given stream, or to standard output when
none is given.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from ftkit.numbers import itoa


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character; an integer code is narrowed to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, int) and not isinstance(c, bool):
        ch = chr(c & 0xFF)
    else:
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    _stream(stream).write(ch)


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string; a missing string writes nothing."""
    if s is None:
        return
    _stream(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline; a missing string writes nothing."""
    if s is None:
        return
    _stream(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    _stream(stream).write(itoa(n))