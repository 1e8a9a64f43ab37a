import pytest

from wirefdf.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buffer = bytearray(b"abcdef")
    result = memset(buffer, ord("x"), 3)
    assert result is buffer
    assert buffer[:3] == b"x" * 3
    assert buffer[3:] == b"def"


def test_memset_truncates_value_to_byte():
    buffer = bytearray(4)
    memset(buffer, 0x141, 4)
    assert buffer == bytes([0x41]) * 4


def test_memset_rejects_overlong_length():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears():
    buffer = bytearray(b"hello")
    bzero(buffer, 5)
    assert buffer == bytes(5)


def test_calloc_is_zeroed_and_sized():
    block = calloc(3, 4)
    assert len(block) == 12
    assert not any(block)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memcpy_copies_prefix():
    dest = bytearray(b"........")
    memcpy(dest, b"copy", 4)
    assert dest == b"copy...."


def test_memcpy_zero_length_leaves_dest():
    dest = bytearray(b"keep")
    memcpy(dest, b"xxxx", 0)
    assert dest == b"keep"


def test_memcpy_source_too_short():
    with pytest.raises(ValueError):
        memcpy(bytearray(10), b"ab", 5)


def test_memmove_forward_overlap():
    buffer = bytearray(b"123456789")
    memmove(buffer, 2, 0, 5)
    assert buffer[2:7] == b"12345"
    assert buffer[:2] == b"12"


def test_memmove_backward_overlap():
    buffer = bytearray(b"123456789")
    memmove(buffer, 0, 2, 5)
    assert buffer[:5] == b"34567"
    assert buffer[5:] == b"6789"


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_within_limit():
    data = b"abcabc"
    assert memchr(data, ord("c"), 6) == data.index(b"c")
    assert memchr(data, ord("c"), 2) is None
    assert memchr(data, ord("z"), 6) is None


def test_memchr_truncates_value():
    assert memchr(b"\x00\x41", 0x141, 2) == 1


def test_memcmp_equal_and_differing():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_is_antisymmetric():
    assert memcmp(b"hello", b"help!", 5) == -memcmp(b"help!", b"hello", 5)