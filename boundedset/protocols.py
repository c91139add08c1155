"""Protocol classes describing what boundedset needs from element types."""

import abc
from typing import Tuple, Type, TypeVar

from typing_extensions import Protocol, runtime_checkable

O = TypeVar("O", bound="OrdinalConvertible")


@runtime_checkable
class OrdinalConvertible(Protocol):
    """A protocol for types with a finite, contiguous range of ordinals.

    Implementing classes can be used as the element type of a
    :class:`~boundedset.bitset.BoundedBitSet`.

    """

    @classmethod
    @abc.abstractmethod
    def ordinal_bounds(cls) -> Tuple[int, int]:
        """Return the minimum and maximum ordinal of the type."""

    @abc.abstractmethod
    def to_ordinal(self) -> int:
        """Return the ordinal of `self`."""

    @classmethod
    @abc.abstractmethod
    def from_ordinal(cls: Type[O], ordinal: int) -> O:
        """Construct the value whose ordinal is `ordinal`."""
