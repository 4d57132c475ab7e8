"""Byte-buffer filling, copying, searching and bounded string copies.

Buffers that are written to must be mutable (``bytearray`` or a writable
``memoryview``). Byte values given as integers are narrowed to a byte,
as an ``unsigned char`` would be. C-style strings in buffers end at the
first NUL byte, or at the end of the buffer if there is none.
"""

from __future__ import annotations

from typing import Optional, Union

SIZE_MAX = 2**64 - 1

Buffer = Union[bytes, bytearray, memoryview]
Byte = Union[int, bytes, str]


def _byte(value: Byte) -> int:
    if isinstance(value, (bytes, str)):
        if len(value) != 1:
            raise ValueError(f"expected a single byte, got {value!r}")
        return ord(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return value & 0xFF
    raise TypeError(f"expected a byte value, got {type(value).__name__}")


def _check_length(length: int, *buffers: Buffer) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(f"length {length} exceeds buffer size {len(buf)}")


def _cstrlen(buf: Buffer) -> int:
    index = bytes(buf).find(0)
    return len(buf) if index < 0 else index


def memset(buf: bytearray, value: Byte, length: int) -> bytearray:
    """Fill the first length bytes of buf with value and return buf."""
    _check_length(length, buf)
    buf[:length] = bytes([_byte(value)]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Set the first length bytes of buf to zero."""
    memset(buf, 0, length)


def memcpy(dst: Optional[bytearray], src: Optional[Buffer], length: int) -> Optional[bytearray]:
    """Copy length bytes from src to the start of dst and return dst.

    When both buffers are missing, nothing happens and None is returned.
    """
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("memcpy needs both a destination and a source buffer")
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def memmove(dst: Optional[bytearray], src: Optional[Buffer], length: int) -> Optional[bytearray]:
    """Copy length bytes from src to dst, safe when the two overlap.

    When both buffers are missing, nothing happens and None is returned.
    """
    # memcpy snapshots the source before writing, so overlap is already safe.
    return memcpy(dst, src, length)


def memchr(buf: Buffer, value: Byte, length: int) -> Optional[int]:
    """Index of the first byte equal to value within the first length bytes."""
    _check_length(length, buf)
    index = bytes(buf[:length]).find(_byte(value))
    return index if index >= 0 else None


def memcmp(s1: Buffer, s2: Buffer, length: int) -> int:
    """Compare the first length bytes of two buffers.

    Returns 0 when they agree, otherwise the difference between the
    first pair of bytes that differ.
    """
    _check_length(length, s1, s2)
    for a, b in zip(bytes(s1[:length]), bytes(s2[:length])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of count elements of size bytes each.

    Raises OverflowError when the total would not fit in a 64-bit size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count and size > SIZE_MAX // count:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(count * size)


def strlcpy(dst: bytearray, src: Buffer, size: int) -> int:
    """Copy the string in src into dst, writing at most size bytes.

    The copy is NUL-terminated whenever size is not zero. Returns the
    length of src, so a result of size or more means it was truncated.
    """
    srclen = _cstrlen(src)
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return srclen
    _check_length(size, dst)
    count = min(srclen, size - 1)
    dst[:count] = bytes(src[:count])
    dst[count] = 0
    return srclen


def strlcat(dst: Optional[bytearray], src: Buffer, size: int) -> int:
    """Append the string in src to the string in dst, which holds size bytes.

    Returns the length the combined string would have had; when size is
    smaller than the string already in dst, returns size plus the length
    of src and leaves dst alone.
    """
    srclen = _cstrlen(src)
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if dst is None:
        if size == 0:
            return srclen
        raise TypeError("strlcat needs a destination buffer")
    dstlen = _cstrlen(dst)
    if size < dstlen:
        return srclen + size
    count = max(0, min(srclen, size - 1 - dstlen))
    if count:
        _check_length(dstlen + count + 1, dst)
        dst[dstlen:dstlen + count] = bytes(src[:count])
        dst[dstlen + count] = 0
    return dstlen + srclen