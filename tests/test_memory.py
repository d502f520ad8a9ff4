import pytest

from dinephilo.memory import (
    UINT_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"def"


def test_bzero_rejects_overlong_length():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 3)


def test_calloc_returns_zeroed_buffer():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert all(byte == 0 for byte in buf)


def test_calloc_zero_sizes():
    assert len(calloc(0, 10)) == 0
    assert len(calloc(10, 0)) == 0


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(UINT_MAX // 2 + 1, 2)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first_occurrence():
    data = b"hello world"
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")


def test_memchr_respects_length():
    data = b"hello world"
    assert memchr(data, ord("w"), 5) is None


def test_memchr_uses_low_byte():
    data = bytes([1, 2, 3])
    assert memchr(data, 0x100 + 2, 3) == 1


def test_memcmp_equal_prefix():
    assert memcmp(b"abcX", b"abcY", 3) == 0
    assert memcmp(b"abc", b"xyz", 0) == 0


def test_memcmp_returns_byte_difference():
    a, b = b"abcX", b"abcY"
    assert memcmp(a, b, 4) == a[3] - b[3]
    assert memcmp(b, a, 4) == b[3] - a[3]


def test_memcmp_treats_bytes_as_unsigned():
    assert memcmp(bytes([200]), bytes([1]), 1) > 0


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"abc", 3)
    assert result is dest
    assert dest == bytearray(b"abc...")


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdefgh")
    original = bytes(buf)
    memmove(buf, 2, 0, 5)
    assert buf[2:7] == original[0:5]
    assert buf[:2] == original[:2]


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdefgh")
    original = bytes(buf)
    memmove(buf, 0, 3, 5)
    assert buf[0:5] == original[3:8]
    assert buf[5:] == original[5:]


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memset_fills_with_low_byte():
    buf = bytearray(5)
    memset(buf, 0x141, 3)
    assert buf[:3] == bytes([0x41]) * 3
    assert buf[3:] == bytes(2)