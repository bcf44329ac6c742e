import pytest

from raycaster.ftlib.memory import (
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxdef")


def test_memset_uses_low_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytearray(b"AAAA")


def test_memset_rejects_overlong_span():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"\xff\xff\xff\xff")
    bzero(buf, 2)
    assert buf == bytearray(b"\x00\x00\xff\xff")


def test_calloc_zeroed_and_sized():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert not any(buf)
    assert calloc(0, 8) == bytearray()


def test_calloc_overflow():
    with pytest.raises(MemoryError):
        calloc(2**63, 4)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first_within_limit():
    data = b"hello"
    assert memchr(data, ord("l"), 5) == 2
    assert memchr(data, ord("o"), 4) is None
    assert memchr(data, ord("h") + 256, 5) == 0


def test_memcmp_sign_and_equality():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_is_antisymmetric():
    a, b = b"\x00\xff", b"\x00\x01"
    assert memcmp(a, b, 2) == -memcmp(b, a, 2)


def test_memcpy_copies_prefix():
    dest = bytearray(b"------")
    result = memcpy(dest, b"abcdef", 4)
    assert result is dest
    assert dest == bytearray(b"abcd--")


def test_memcpy_rejects_short_source():
    with pytest.raises(IndexError):
        memcpy(bytearray(8), b"abc", 5)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_negative_length():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 0, 1, -1)