from __future__ import annotations

import pytest

from boundedset.bitset import BoundedBitSet
from boundedset.exceptions import InvalidRangeError, OutOfRangeError

from .conftest import Hex, Offset, Wide


def test_fill_within_one_byte():
    bs = BoundedBitSet(Hex)
    bs.fill(2, 5)
    assert bs.count() == 4
    assert [value for value in range(16) if value in bs] == [2, 3, 4, 5]
    assert bs.buffer == bytearray([0b00111100, 0])


def test_fill_across_byte_boundary():
    bs = BoundedBitSet(Hex, [0, 5, 10, 15])
    bs.fill(6, 9)
    assert list(bs) == [0, 5, 6, 7, 8, 9, 10, 15]
    assert bs.buffer == bytearray([0b11100001, 0b10000111])


def test_clear_across_byte_boundary():
    bs = BoundedBitSet.full(Hex)
    bs.clear(6, 9)
    assert list(bs) == [0, 1, 2, 3, 4, 5, 10, 11, 12, 13, 14, 15]
    assert bs.buffer == bytearray([0b00111111, 0b11111100])


def test_fill_spanning_whole_bytes():
    bs = BoundedBitSet(Wide)
    bs.fill(3, 90)
    assert bs.count() == 88
    assert min(bs) == 3
    assert max(bs) == 90
    assert bs.buffer[1:11] == b"\xff" * 10
    assert bs.buffer[11] == 0b00000111


def test_clear_spanning_whole_bytes():
    bs = BoundedBitSet.full(Wide)
    bs.clear(3, 90)
    assert list(bs) == [0, 1, 2, 91, 92, 93, 94, 95, 96, 97, 98, 99]


def test_fill_single_value():
    bs = BoundedBitSet(Hex)
    bs.fill(7, 7)
    assert list(bs) == [7]
    bs.clear(7, 7)
    assert not bs


def test_fill_aligned_bytes():
    bs = BoundedBitSet(Hex)
    bs.fill(0, 7)
    assert bs.buffer == bytearray([0xFF, 0])
    bs.fill(8, 15)
    assert bs.buffer == bytearray([0xFF, 0xFF])
    bs.clear(0, 7)
    assert bs.buffer == bytearray([0, 0xFF])


def test_fill_negative_domain():
    bs = BoundedBitSet(Offset)
    bs.fill(-2, 1)
    assert list(bs) == [-2, -1, 0, 1]


def test_fill_defaults_to_the_domain_bounds():
    bs = BoundedBitSet(Wide)
    bs.fill(95)
    assert list(bs) == [95, 96, 97, 98, 99]
    bs.fill(stop=2)
    assert list(bs) == [0, 1, 2, 95, 96, 97, 98, 99]
    bs.clear(start=97)
    assert list(bs) == [0, 1, 2, 95, 96]
    bs.clear()
    assert not bs


def test_fill_full_domain_keeps_trailing_bits_clear():
    bs = BoundedBitSet(Wide)
    bs.fill(0, 99)
    assert bs.count() == 100
    assert bs.buffer[-1] == 0b1111


@pytest.mark.parametrize(("start", "stop"), [(0, 15), (0, 0), (3, 12), (8, 8)])
def test_clear_after_full_fill(start: int, stop: int):
    bs = BoundedBitSet.full(Hex)
    bs.clear(start, stop)
    assert bs.count() == 16 - (stop - start + 1)
    for value in range(16):
        assert (value in bs) == (not start <= value <= stop)


def test_fill_every_range_matches_membership():
    for start in range(16):
        for stop in range(start, 16):
            bs = BoundedBitSet(Hex)
            bs.fill(start, stop)
            assert bs.count() == stop - start + 1
            assert list(bs) == list(range(start, stop + 1))


def test_invalid_range_leaves_set_unchanged():
    bs = BoundedBitSet(Hex, [1, 9])
    with pytest.raises(InvalidRangeError):
        bs.fill(9, 2)
    with pytest.raises(InvalidRangeError):
        bs.clear(9, 2)
    assert list(bs) == [1, 9]


def test_out_of_range_leaves_set_unchanged():
    bs = BoundedBitSet(Hex, [1, 9])
    with pytest.raises(OutOfRangeError):
        bs.fill(3, 16)
    with pytest.raises(OutOfRangeError):
        bs.clear(-1, 9)
    assert list(bs) == [1, 9]
