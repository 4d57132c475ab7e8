"""Reading a stream one line at a time in fixed-size chunks.

Lines keep their trailing newline; the final line may lack one. Works
with streams whose ``read`` returns either ``str`` or ``bytes``.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional, Tuple, Union

BUFFER_SIZE = 10

Line = Union[str, bytes]


def _find_newline(data: Line) -> int:
    """Index of the first newline in data, or -1 if there is none."""
    if isinstance(data, str):
        return data.find("\n")
    return data.find(b"\n")


class LineReader:
    """Reads lines from a stream, buffer_size characters per read call."""

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._cache: Optional[Line] = None

    def _has_line(self) -> bool:
        return self._cache is not None and _find_newline(self._cache) >= 0

    @staticmethod
    def _split_first_line(cache: Line) -> Tuple[Line, Line]:
        index = _find_newline(cache)
        end = len(cache) if index < 0 else index + 1
        return cache[:end], cache[end:]

    def next_line(self) -> Optional[Line]:
        """The next line, or None once the stream is exhausted.

        A read error discards any buffered data and is raised again.
        """
        try:
            while not self._has_line():
                chunk = self._stream.read(self._buffer_size)
                if not chunk:
                    break
                self._cache = chunk if self._cache is None else self._cache + chunk
        except OSError:
            self._cache = None
            raise
        if not self._cache:
            self._cache = None
            return None
        line, rest = self._split_first_line(self._cache)
        self._cache = rest or None
        return line

    def __iter__(self) -> Iterator[Line]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: Any, buffer_size: int = BUFFER_SIZE) -> Iterator[Line]:
    """Yield the lines of a stream, reading buffer_size characters at a time."""
    yield from LineReader(stream, buffer_size)