import pytest

from ftkit.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
    strlcat,
    strlcpy,
)


def test_memset_fills_prefix_only():
    original = b"hello"
    buf = bytearray(original)
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf[:3] == b"x" * 3
    assert buf[3:] == original[3:]


def test_memset_narrows_value_to_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytes([0x41]) * 4


def test_memset_rejects_length_beyond_buffer():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    original = b"abcdef"
    buf = bytearray(original)
    assert bzero(buf, 4) is None
    assert buf[:4] == bytes(4)
    assert buf[4:] == original[4:]


def test_memcpy_copies_and_returns_destination():
    src = b"source data"
    dst = bytearray(len(src))
    assert memcpy(dst, src, len(src)) is dst
    assert dst == src


def test_memcpy_both_missing_returns_none():
    assert memcpy(None, None, 0) is None


def test_memcpy_one_missing_raises():
    with pytest.raises(TypeError):
        memcpy(bytearray(3), None, 1)


def test_memmove_overlapping_forward():
    original = b"abcdefgh"
    buf = bytearray(original)
    view = memoryview(buf)
    result = memmove(view[2:], view[:6], 6)
    assert bytes(result) == original[:6]
    assert bytes(buf) == original[:2] + original[:6]


def test_memmove_overlapping_backward():
    original = b"abcdefgh"
    buf = bytearray(original)
    view = memoryview(buf)
    result = memmove(view[:6], view[2:], 6)
    assert bytes(result) == original[2:]
    assert bytes(buf) == original[2:] + original[6:]


def test_memchr_finds_first_occurrence():
    data = b"banana"
    assert memchr(data, ord("n"), len(data)) == data.index(b"n")


def test_memchr_respects_length():
    data = b"banana"
    assert memchr(data, "n", 2) is None


def test_memchr_finds_nul_byte():
    data = b"ab\0cd"
    assert memchr(data, 0, len(data)) == data.index(b"\0")


def test_memcmp_equal_and_zero_length():
    assert memcmp(b"same", b"same", 4) == 0
    assert memcmp(b"abc", b"xyz", 0) == 0


def test_memcmp_reports_first_difference():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_memcmp_ignores_bytes_past_length():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_calloc_zero_filled():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert not any(buf)


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2**63, 4)


def test_strlcpy_truncates_and_terminates():
    src = b"hello world"
    dst = bytearray(b"\xaa" * 10)
    assert strlcpy(dst, src, 6) == len(src)
    assert dst[:6] == src[:5] + b"\0"
    assert dst[6:] == b"\xaa" * 4


def test_strlcpy_size_zero_leaves_destination():
    dst = bytearray(b"keep")
    assert strlcpy(dst, b"abc", 0) == 3
    assert dst == b"keep"


def test_strlcpy_full_copy():
    src = b"abc"
    dst = bytearray(8)
    strlcpy(dst, src, len(dst))
    assert dst[:len(src) + 1] == src + b"\0"


def test_strlcat_appends():
    dst = bytearray(b"ab\0" + bytes(7))
    assert strlcat(dst, b"cd", len(dst)) == 4
    assert dst[:5] == b"abcd\0"


def test_strlcat_truncates():
    dst = bytearray(b"ab\0\0\0")
    result = strlcat(dst, b"cdef", 4)
    assert result == 2 + 4
    assert dst[:4] == b"abc\0"


def test_strlcat_size_smaller_than_destination_string():
    dst = bytearray(b"abcdef\0")
    before = bytes(dst)
    assert strlcat(dst, b"xyz", 2) == 3 + 2
    assert dst == before


def test_strlcat_missing_destination_with_zero_size():
    assert strlcat(None, b"abc", 0) == 3