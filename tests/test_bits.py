import pytest

from oikit.bits import (
    BitCursor,
    bin_to_string,
    bit_length,
    bits_belong,
    count_ones,
    format_bytes_binary,
    max_multi2_signed,
)


def test_bin_to_string_zero():
    assert bin_to_string(0) == "0"


@pytest.mark.parametrize("x", [1, 2, 5, 255, 1024, 2**63 + 3, 2**64 - 1])
def test_bin_to_string_round_trip(x):
    s = bin_to_string(x)
    assert int(s, 2) == x
    assert s[0] == "1"


def test_bin_to_string_truncates_to_width():
    assert bin_to_string(0b100, 2) == "00"


def test_bin_to_string_width_bounds_length():
    for width in (1, 3, 8, 16):
        s = bin_to_string(2**20 + 7, width)
        assert len(s) == width
        assert int(s, 2) == (2**20 + 7) % (1 << width)


def test_bin_to_string_rejects_bad_input():
    with pytest.raises(ValueError):
        bin_to_string(5, 0)
    with pytest.raises(ValueError):
        bin_to_string(-1)


def test_bits_belong():
    for a, b in [(0b1011, 0b0110), (255, 17), (12345, 678)]:
        assert bits_belong(a, a & b)
        assert bits_belong(a | b, b)
    assert not bits_belong(0b100, 0b101)


def test_bit_length_zero():
    assert bit_length(0) == 0


@pytest.mark.parametrize("k", range(1, 65))
def test_bit_length_bounds(k):
    assert bit_length(1 << (k - 1)) == k
    assert bit_length((1 << k) - 1) == k


def test_bit_length_range_checked():
    with pytest.raises(ValueError):
        bit_length(-1)
    with pytest.raises(ValueError):
        bit_length(1 << 64)


@pytest.mark.parametrize("k", range(0, 32))
def test_count_ones_all_ones(k):
    assert count_ones((1 << k) - 1) == k


def test_count_ones_negative_is_32_bit():
    assert count_ones(-1) == 32


def test_count_ones_disjoint_sum():
    a, b = 0b1010_0000, 0b0000_0111
    assert count_ones(a | b) == count_ones(a) + count_ones(b)


@pytest.mark.parametrize("x", [1, 3, 7, 1000, 2**29 + 1])
def test_max_multi2_signed_range(x):
    r = max_multi2_signed(x)
    assert 2**30 <= r < 2**31
    shift = r.bit_length() - x.bit_length()
    assert r == x << shift


def test_max_multi2_signed_fixed_points():
    assert max_multi2_signed(2**30) == 2**30
    assert max_multi2_signed(-5) == -5
    with pytest.raises(ValueError):
        max_multi2_signed(0)


def test_format_bytes_binary_order():
    assert format_bytes_binary(b"\x01\x80") == "1000000000000001"


def test_format_bytes_binary_little_endian_round_trip():
    data = (123456789).to_bytes(4, "little")
    assert int(format_bytes_binary(data), 2) == 123456789


def test_format_bytes_binary_separator():
    data = bytes([3, 200, 17])
    groups = format_bytes_binary(data, " ").split(" ")
    assert groups[-1] == ""
    assert [int(g, 2) for g in groups[:-1]] == list(reversed(data))


def test_bit_cursor_flip_twice_restores():
    buf = bytearray(b"\x5a\xa5")
    cursor = BitCursor(buf, 1, 3)
    before = cursor.bit
    cursor.flip()
    assert cursor.bit == 1 - before
    cursor.flip()
    assert buf == bytearray(b"\x5a\xa5")


def test_bit_cursor_advance_keeps_absolute_position():
    cursor = BitCursor(bytearray(4), 0, 5)
    for n in (0, 1, 3, 7, 9):
        start = cursor.index * 8 + cursor.offset
        cursor.advance(n)
        assert cursor.index * 8 + cursor.offset == start + n
        assert 0 <= cursor.offset < 8


def test_bit_cursor_iadd_and_normalise():
    cursor = BitCursor(bytearray(4), 0, 11)
    assert (cursor.index, cursor.offset) == (1, 3)
    cursor += 5
    cursor.flip()
    assert cursor.buffer[cursor.index] == 1 << cursor.offset


def test_bit_cursor_out_of_range():
    cursor = BitCursor(bytearray(1))
    cursor.advance(8)
    with pytest.raises(IndexError):
        cursor.flip()