import pytest

from pipework.memory import (
    allocate_zeroed,
    compare,
    copy_into,
    fill,
    find_byte,
    move,
    zero,
)


def test_fill_sets_prefix_only():
    buf = bytearray(b"abcdef")
    result = fill(buf, ord("x"), 3)
    assert result is buf
    assert buf[:3] == b"xxx"
    assert buf[3:] == b"def"


def test_fill_uses_low_byte():
    buf = bytearray(4)
    fill(buf, 0x1FF, 4)
    assert all(b == 0xFF for b in buf)


def test_fill_too_long_rejected():
    with pytest.raises(ValueError):
        fill(bytearray(2), 0, 3)


def test_zero_clears_prefix():
    buf = bytearray(b"hello")
    zero(buf, 2)
    assert buf[:2] == bytes(2)
    assert buf[2:] == b"llo"


def test_allocate_zeroed_size_and_content():
    buf = allocate_zeroed(3, 4)
    assert len(buf) == 3 * 4
    assert not any(buf)


def test_allocate_zeroed_zero_count():
    assert len(allocate_zeroed(0, 100)) == 0


def test_allocate_zeroed_overflow():
    with pytest.raises(OverflowError):
        allocate_zeroed(2**33, 2**33)


def test_find_byte_returns_first_index():
    data = b"hello world"
    assert find_byte(data, ord("o"), len(data)) == data.index(b"o")


def test_find_byte_respects_limit():
    data = b"hello"
    assert find_byte(data, ord("o"), 4) is None


def test_find_byte_masks_value():
    data = b"\x00\x05"
    assert find_byte(data, 0x105, 2) == data.index(b"\x05")


def test_compare_equal_prefix():
    assert compare(b"abcX", b"abcY", 3) == 0


def test_compare_sign():
    assert compare(b"abd", b"abc", 3) > 0
    assert compare(b"abc", b"abd", 3) < 0


def test_compare_is_unsigned():
    assert compare(b"\xff", b"\x01", 1) > 0


def test_compare_zero_length():
    assert compare(b"a", b"b", 0) == 0


def test_copy_into_prefix():
    dest = bytearray(b"______")
    result = copy_into(dest, b"xyzw", 3)
    assert result is dest
    assert dest == b"xyz___"


def test_copy_into_too_long_rejected():
    with pytest.raises(ValueError):
        copy_into(bytearray(2), b"abc", 3)


def test_move_overlap_forward():
    buf = bytearray(b"abcdef")
    move(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_move_overlap_backward():
    buf = bytearray(b"abcdef")
    move(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_move_matches_non_overlapping_copy():
    buf = bytearray(b"0123456789")
    original = bytes(buf)
    move(buf, 6, 0, 3)
    assert buf[6:9] == original[0:3]
    assert buf[:6] == original[:6]


def test_move_out_of_range():
    with pytest.raises(ValueError):
        move(bytearray(4), 2, 0, 3)