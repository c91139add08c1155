from __future__ import annotations

import copy

import pytest

from boundedset.bitset import BoundedBitSet
from boundedset.exceptions import DomainMismatchError, OutOfRangeError

from .conftest import Color, Octet


def test_construction(octet: type):
    bs = BoundedBitSet(octet)
    assert not bs
    assert len(bs) == 0
    assert bs.buffer == bytearray(1)
    assert bs.element_type is octet

    bs = BoundedBitSet(octet, [3, 1, 3, 5])
    assert len(bs) == 3
    assert list(bs) == [1, 3, 5]

    with pytest.raises(OutOfRangeError):
        BoundedBitSet(octet, [2, 8])


def test_buffer_layout(hexadecimal: type):
    bs = BoundedBitSet(hexadecimal, [0, 3, 8, 15])
    assert bs.buffer == bytearray([0b00001001, 0b10000001])


def test_buffer_layout_with_negative_minimum(offset: type):
    bs = BoundedBitSet(offset, [-5, 2])
    assert bs.buffer == bytearray([0b10000001, 0b00])


def test_repr():
    assert repr(BoundedBitSet(Octet)) == "BoundedBitSet(Octet)"
    assert repr(BoundedBitSet(Octet, [2, 1])) == "BoundedBitSet(Octet, [1, 2])"


def test_add():
    bs = BoundedBitSet(Octet)
    assert 0 not in bs

    bs.add(1)
    assert 1 in bs
    assert 2 not in bs

    bs.include(2)
    assert 1 in bs
    assert 2 in bs
    assert 0 not in bs

    bs.add(2)
    assert len(bs) == 2

    with pytest.raises(OutOfRangeError):
        bs.add(8)

    with pytest.raises(OutOfRangeError):
        bs.add(-1)

    with pytest.raises(DomainMismatchError):
        bs.add("1")


def test_remove():
    bs = BoundedBitSet(Octet, [1, 2])

    bs.remove(2)
    assert 1 in bs
    assert 2 not in bs

    with pytest.raises(KeyError):
        bs.remove(4)

    with pytest.raises(KeyError):
        bs.remove(40)


def test_discard():
    bs = BoundedBitSet(Octet, [1, 2])

    bs.discard(2)
    assert 1 in bs
    assert 2 not in bs

    bs.exclude(2)
    assert 2 not in bs
    assert len(bs) == 1

    with pytest.raises(OutOfRangeError):
        bs.discard(40)

    with pytest.raises(OutOfRangeError):
        bs.exclude(-1)


def test_contains_outside_domain():
    bs = BoundedBitSet.full(Octet)
    assert bs.contains(7)
    assert not bs.contains(8)
    assert -1 not in bs
    assert "a" not in bs
    assert None not in bs


def test_enum_members():
    bs = BoundedBitSet(Color, [Color.BLUE, Color.CRIMSON])
    assert Color.RED in bs
    assert Color.GREEN not in bs
    assert list(bs) == [Color.RED, Color.BLUE]

    with pytest.raises(DomainMismatchError):
        bs.add("red")


def test_bool_members():
    bs = BoundedBitSet(bool, [True])
    assert list(bs) == [True]
    assert False not in bs
    bs.add(False)
    assert list(bs) == [False, True]


def test_char_members(lower: type):
    bs = BoundedBitSet(lower, "banana")
    assert list(bs) == ["a", "b", "n"]
    assert "z" not in bs
    assert "A" not in bs


def test_len():
    bs = BoundedBitSet(Octet)
    assert len(bs) == 0

    bs.add(1)
    assert len(bs) == 1

    bs.add(2)
    bs.add(3)
    assert len(bs) == bs.count() == 3

    bs.remove(3)
    assert len(bs) == 2


def test_pop():
    bs = BoundedBitSet(Octet, [6, 4])
    assert bs.pop() == 4
    assert bs.pop() == 6
    with pytest.raises(KeyError):
        bs.pop()


def test_copy_does_not_alias(element_type: type):
    original = BoundedBitSet.full(element_type)
    for clone in (original.copy(), copy.copy(original), copy.deepcopy(original)):
        assert clone == original
        assert clone.buffer is not original.buffer
        clone.clear()
        assert not clone
        assert len(original) == original.domain.size


def test_sets_are_unhashable():
    with pytest.raises(TypeError):
        hash(BoundedBitSet(Octet))


def test_full(element_type: type):
    bs = BoundedBitSet.full(element_type)
    assert len(bs) == bs.domain.size
    assert bs.buffer[-1] == bs.domain.tail_mask
