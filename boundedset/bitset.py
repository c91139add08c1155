"""An efficiently stored set of values from a finite ordinal domain."""

from __future__ import annotations

import collections.abc
import operator
from typing import Any, Callable, Iterable, Iterator, MutableSet, Optional, Tuple, Type

from .domain import Domain, domain_of
from .exceptions import BoundedSetError, DomainMismatchError, InvalidRangeError
from .iterator import ForwardIterator
from .typehints import Position, T

#: The number of '1' bits in each byte value
POPCOUNT = bytes(bin(byte).count("1") for byte in range(256))

#: The bitwise complement of each byte value
INVERT = bytes(0xFF ^ byte for byte in range(256))


def _and_not(left: int, right: int) -> int:
    return left & ~right


class BoundedBitSet(MutableSet[T]):
    """A set whose members are drawn from the domain of `element_type`.

    Membership of the value with ordinal ``n`` is bit ``n - min`` of
    :attr:`buffer`, least significant bit first within each byte.

    Parameters
    ----------
    element_type
        An ordinal type: :class:`bool`, an :class:`enum.Enum` or a class
        implementing :class:`~boundedset.protocols.OrdinalConvertible`.
    elements
        Values to include in the new set, in any order.

    Examples
    --------
    >>> from boundedset.ordinals import subrange
    >>> Octet = subrange(0, 7, name="Octet")
    >>> s = BoundedBitSet(Octet, [3, 1, 3, 5])
    >>> list(s)
    [1, 3, 5]
    >>> s
    BoundedBitSet(Octet, [1, 3, 5])

    """

    __slots__ = "domain", "buffer"

    def __init__(self, element_type: Type[T], elements: Iterable[T] = ()) -> None:
        self.domain: Domain = domain_of(element_type)
        self.buffer = bytearray(self.domain.nbytes)

        for element in elements:
            self.include(element)

    @classmethod
    def full(cls, element_type: Type[T]) -> BoundedBitSet[T]:
        """Construct a set containing every value of `element_type`."""
        result = cls(element_type)
        result.fill()
        return result

    @property
    def element_type(self) -> Type[T]:
        return self.domain.element_type

    def _empty(self) -> BoundedBitSet[T]:
        return type(self)(self.domain.element_type)

    def _from_iterable(self, elements: Iterable[T]) -> BoundedBitSet[T]:
        return type(self)(self.domain.element_type, elements)

    def _coerce(self, other: Iterable[T]) -> BoundedBitSet[T]:
        if not isinstance(other, BoundedBitSet):
            return self._from_iterable(other)
        if other.domain is not self.domain:
            raise DomainMismatchError(
                f"cannot combine a set of {self.domain.name} "
                f"with a set of {other.domain.name}"
            )
        return other

    def _locate(self, element: T) -> Position:
        """Return the byte index and bit mask of `element`."""
        domain = self.domain
        index, bit = divmod(domain.ordinal(element) - domain.min, 8)
        return index, 1 << bit

    def __contains__(self, element: Any) -> bool:
        """Check whether `element` is in the set."""
        try:
            index, mask = self._locate(element)
        except BoundedSetError:
            return False
        return (self.buffer[index] & mask) != 0

    def __iter__(self) -> Iterator[T]:
        """Iterate over the elements of the set in ascending order."""
        return ForwardIterator(self)

    def __len__(self) -> int:
        """Return the number of set bits."""
        return self.count()

    def __bool__(self) -> bool:
        return any(self.buffer)

    def __repr__(self) -> str:
        """Return the string representation of a bitset."""
        name = self.domain.name
        if not self:
            return f"{self.__class__.__name__}({name})"
        return f"{self.__class__.__name__}({name}, {list(self)!r})"

    def copy(self) -> BoundedBitSet[T]:
        """Return an independent copy of the set."""
        result = self._empty()
        result.buffer[:] = self.buffer
        return result

    __copy__ = copy

    def __deepcopy__(self, memo: Any) -> BoundedBitSet[T]:
        return self.copy()

    def include(self, element: T) -> None:
        """Add `element` to the set.

        Raises
        ------
        OutOfRangeError
            If `element` is outside of the set's domain
        DomainMismatchError
            If `element` is not a value of the set's element type

        """
        index, mask = self._locate(element)
        self.buffer[index] |= mask

    def exclude(self, element: T) -> None:
        """Remove `element` from the set if present.

        Raises
        ------
        OutOfRangeError
            If `element` is outside of the set's domain
        DomainMismatchError
            If `element` is not a value of the set's element type

        """
        index, mask = self._locate(element)
        self.buffer[index] &= ~mask

    add = include
    discard = exclude

    def contains(self, element: T) -> bool:
        """Check whether `element` is in the set."""
        return element in self

    def count(self) -> int:
        """Return the number of members."""
        return sum(self.buffer.translate(POPCOUNT))

    def _span(self, start: Optional[T], stop: Optional[T]) -> Tuple[int, int]:
        domain = self.domain
        low = 0 if start is None else domain.ordinal(start) - domain.min
        high = domain.size - 1 if stop is None else domain.ordinal(stop) - domain.min
        if low > high:
            raise InvalidRangeError(
                f"range start is greater than its stop, {start!r} > {stop!r}"
            )
        return low, high

    def _define_range(self, low: int, high: int, value: bool) -> None:
        """Set or clear every bit from position `low` to `high` inclusive."""
        first, low_bit = divmod(low, 8)
        last, high_bit = divmod(high, 8)

        # bits at or above `low_bit`, and bits at or below `high_bit`
        head = (0xFF << low_bit) & 0xFF
        tail = 0xFF >> (7 - high_bit)

        buffer = self.buffer
        if first == last:
            mask = head & tail
            if value:
                buffer[first] |= mask
            else:
                buffer[first] &= ~mask
            return

        buffer[first + 1 : last] = (b"\xff" if value else b"\x00") * (last - first - 1)
        if value:
            buffer[first] |= head
            buffer[last] |= tail
        else:
            buffer[first] &= ~head
            buffer[last] &= ~tail

    def fill(self, start: Optional[T] = None, stop: Optional[T] = None) -> None:
        """Add every value from `start` to `stop` inclusive.

        Parameters
        ----------
        start
            The first value to add. Defaults to the domain's minimum.
        stop
            The last value to add. Defaults to the domain's maximum.

        Raises
        ------
        OutOfRangeError
            If either endpoint is outside of the set's domain
        InvalidRangeError
            If `start` comes after `stop`

        """
        self._define_range(*self._span(start, stop), True)

    def clear(self, start: Optional[T] = None, stop: Optional[T] = None) -> None:
        """Remove every value from `start` to `stop` inclusive.

        With no arguments this empties the set.

        """
        self._define_range(*self._span(start, stop), False)

    def _combine(
        self, other: Iterable[T], op: Callable[[int, int], int]
    ) -> BoundedBitSet[T]:
        other = self._coerce(other)
        result = self._empty()
        result.buffer[:] = bytes(map(op, self.buffer, other.buffer))
        return result

    def _update(self, other: Iterable[T], op: Callable[[int, int], int]) -> None:
        other = self._coerce(other)
        self.buffer[:] = bytes(map(op, self.buffer, other.buffer))

    def union(self, other: Iterable[T]) -> BoundedBitSet[T]:
        """Return the values in either set."""
        return self._combine(other, operator.or_)

    def difference(self, other: Iterable[T]) -> BoundedBitSet[T]:
        """Return the values in `self` that are not in `other`."""
        return self._combine(other, _and_not)

    def intersection(self, other: Iterable[T]) -> BoundedBitSet[T]:
        """Return the values in both sets."""
        return self._combine(other, operator.and_)

    def symmetric_difference(self, other: Iterable[T]) -> BoundedBitSet[T]:
        """Return the values in exactly one of the sets."""
        return self._combine(other, operator.xor)

    def complement(self) -> BoundedBitSet[T]:
        """Return the values of the domain that are not in the set."""
        result = self._empty()
        result.buffer[:] = self.buffer.translate(INVERT)

        # bits past the domain's maximum must stay clear
        result.buffer[-1] &= self.domain.tail_mask
        return result

    def _members(self, other: Iterable[T]) -> Tuple[BoundedBitSet[T], bool]:
        """Return the values of `other` in the domain and whether none were dropped."""
        if isinstance(other, BoundedBitSet):
            return self._coerce(other), True
        result = self._empty()
        complete = True
        for element in other:
            try:
                result.include(element)
            except BoundedSetError:
                complete = False
        return result, complete

    def distinct(self, other: Iterable[T]) -> bool:
        """Return whether the sets have no members in common.

        Values of a plain iterable that lie outside the domain are ignored.

        """
        other, _ = self._members(other)
        return not any(map(operator.and_, self.buffer, other.buffer))

    isdisjoint = distinct

    def issuperset(self, other: Iterable[T]) -> bool:
        """Return whether every member of `other` is in `self`.

        A plain iterable holding values outside the domain is never contained.

        """
        other, complete = self._members(other)
        return complete and all(
            left & right == right for left, right in zip(self.buffer, other.buffer)
        )

    def issubset(self, other: Iterable[T]) -> bool:
        """Return whether every member of `self` is in `other`.

        Values of a plain iterable that lie outside the domain are ignored.

        """
        other, _ = self._members(other)
        return other.issuperset(self)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BoundedBitSet):
            return NotImplemented
        return self.domain is other.domain and self.buffer == other.buffer

    def __ne__(self, other: Any) -> bool:
        if not isinstance(other, BoundedBitSet):
            return NotImplemented
        return not (self == other)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, BoundedBitSet):
            return NotImplemented
        return self.issubset(other)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, BoundedBitSet):
            return NotImplemented
        return self.issuperset(other)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, BoundedBitSet):
            return NotImplemented
        return self.issubset(other) and self != other

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, BoundedBitSet):
            return NotImplemented
        return self.issuperset(other) and self != other

    def __or__(self, other: Any) -> BoundedBitSet[T]:
        if not isinstance(other, collections.abc.Iterable):
            return NotImplemented
        return self.union(other)

    __add__ = __ror__ = __radd__ = __or__

    def __and__(self, other: Any) -> BoundedBitSet[T]:
        if not isinstance(other, collections.abc.Iterable):
            return NotImplemented
        return self.intersection(other)

    __rand__ = __and__

    def __xor__(self, other: Any) -> BoundedBitSet[T]:
        if not isinstance(other, collections.abc.Iterable):
            return NotImplemented
        return self.symmetric_difference(other)

    __rxor__ = __xor__

    def __sub__(self, other: Any) -> BoundedBitSet[T]:
        if not isinstance(other, collections.abc.Iterable):
            return NotImplemented
        return self.difference(other)

    def __rsub__(self, other: Any) -> BoundedBitSet[T]:
        if not isinstance(other, collections.abc.Iterable):
            return NotImplemented
        return self._coerce(other).difference(self)

    def __invert__(self) -> BoundedBitSet[T]:
        return self.complement()

    def __ior__(self, other: Iterable[T]) -> BoundedBitSet[T]:  # type: ignore[override]
        self._update(other, operator.or_)
        return self

    __iadd__ = __ior__

    def __iand__(self, other: Iterable[T]) -> BoundedBitSet[T]:
        self._update(other, operator.and_)
        return self

    def __ixor__(self, other: Iterable[T]) -> BoundedBitSet[T]:  # type: ignore[override]
        self._update(other, operator.xor)
        return self

    def __isub__(self, other: Iterable[T]) -> BoundedBitSet[T]:
        self._update(other, _and_not)
        return self
