"""boundedset user-facing API.

The constructors here are curried, so a set can be built at the end of a
chain with the right shift operator (``>>``)::

    >>> from boundedset import Byte, into
    >>> [5, 1, 3] >> into(Byte)
    BoundedBitSet(Byte, [1, 3, 5])

"""

from __future__ import annotations

import functools
import inspect
import operator
from typing import Any, Iterable, Type

import toolz
from public import private, public

from .bitset import BoundedBitSet
from .domain import Bounds, resolve_bounds
from .typehints import T


@private  # type: ignore[misc]
class shiftable(toolz.curry):
    """Shiftable curry."""

    @property
    def __signature__(self) -> inspect.Signature:
        return inspect.signature(self.func)  # pragma: no cover

    def __rrshift__(self, other: Any) -> Any:
        return self(other)


@public  # type: ignore[misc]
@shiftable
def into(element_type: Type[T], elements: Iterable[T]) -> BoundedBitSet[T]:
    """Construct a set of `element_type` from `elements`.

    Parameters
    ----------
    element_type
        The ordinal type of the members.
    elements
        Values to include. Order and duplicates are irrelevant.

    Examples
    --------
    >>> from boundedset import subrange
    >>> Octet = subrange(0, 7, name="Octet")
    >>> s = into(Octet, [3, 1, 3, 5])
    >>> list(s)
    [1, 3, 5]

    """
    return BoundedBitSet(element_type, elements)


@public  # type: ignore[misc]
def empty(element_type: Type[T]) -> BoundedBitSet[T]:
    """Return a set of `element_type` with no members."""
    return BoundedBitSet(element_type)


@public  # type: ignore[misc]
def full(element_type: Type[T]) -> BoundedBitSet[T]:
    """Return a set containing every value of `element_type`."""
    return BoundedBitSet.full(element_type)


@public  # type: ignore[misc]
def span(element_type: Type[T], start: T, stop: T) -> BoundedBitSet[T]:
    """Return a set containing every value from `start` to `stop` inclusive."""
    result = BoundedBitSet(element_type)
    result.fill(start, stop)
    return result


@public  # type: ignore[misc]
def bounds(element_type: Type[T]) -> Bounds:
    """Return the minimum and maximum ordinal of `element_type`."""
    return resolve_bounds(element_type)


@public  # type: ignore[misc]
def union(first: BoundedBitSet[T], *rest: BoundedBitSet[T]) -> BoundedBitSet[T]:
    """Return the values in any of the given sets."""
    return functools.reduce(operator.or_, rest, first.copy())


@public  # type: ignore[misc]
def intersection(
    first: BoundedBitSet[T], *rest: BoundedBitSet[T]
) -> BoundedBitSet[T]:
    """Return the values in every one of the given sets."""
    return functools.reduce(operator.and_, rest, first.copy())
