"""Resolution of element types to the ordinal domains backing a bitmap.

Every element type is resolved at most once per process. The resulting
:class:`Domain` is shared by every set over that type.

"""

from __future__ import annotations

import enum
import logging
import sys
import threading
from typing import Any, Callable, MutableMapping, NamedTuple

import toolz

from .exceptions import (
    BoundedSetError,
    DomainMismatchError,
    NotOrdinalError,
    OutOfRangeError,
    RangeTooLargeError,
)
from .ordinals import CharRange, Subrange
from .protocols import OrdinalConvertible

logger = logging.getLogger(__name__)

#: The largest buffer a single domain may require, in bytes.
MAX_BUFFER_BYTES = sys.maxsize


class Bounds(NamedTuple):
    """The inclusive minimum and maximum ordinal of a domain."""

    min: int
    max: int


class Domain:
    """A finite, contiguous range of ordinals and the type that inhabits it."""

    __slots__ = (
        "element_type",
        "bounds",
        "nbytes",
        "tail_mask",
        "_to_ordinal",
        "_from_ordinal",
    )

    def __init__(
        self,
        element_type: type,
        bounds: Bounds,
        *,
        to_ordinal: Callable[[Any], int],
        from_ordinal: Callable[[int], Any],
    ) -> None:
        self.element_type = element_type
        self.bounds = bounds
        size = bounds.max - bounds.min + 1
        self.nbytes = (size + 7) >> 3

        # the bits of the last byte that correspond to a member of the domain
        self.tail_mask = 0xFF >> (-size & 7)
        self._to_ordinal = to_ordinal
        self._from_ordinal = from_ordinal

    def __repr__(self) -> str:
        low, high = self.bounds
        return f"{self.__class__.__name__}({self.name}, {low}..{high})"

    @property
    def name(self) -> str:
        return self.element_type.__name__

    @property
    def min(self) -> int:
        return self.bounds.min

    @property
    def max(self) -> int:
        return self.bounds.max

    @property
    def size(self) -> int:
        """Return the number of values in the domain."""
        return self.bounds.max - self.bounds.min + 1

    def check(self, ordinal: int) -> int:
        """Return `ordinal` if it lies within the domain.

        Raises
        ------
        OutOfRangeError
            If `ordinal` is outside of ``[min, max]``

        """
        low, high = self.bounds
        if not low <= ordinal <= high:
            raise OutOfRangeError(
                f"{self.name} ordinal not in [{low}, {high}], ordinal == {ordinal}"
            )
        return ordinal

    def ordinal(self, value: Any) -> int:
        """Return the ordinal of `value`.

        Raises
        ------
        DomainMismatchError
            If `value` cannot be converted to the domain's type
        OutOfRangeError
            If the ordinal of `value` is outside of the domain

        """
        try:
            ordinal = self._to_ordinal(value)
        except BoundedSetError:
            raise
        except (KeyError, TypeError, ValueError) as e:
            raise DomainMismatchError(f"{value!r} is not a value of {self.name}") from e
        return self.check(ordinal)

    def value(self, ordinal: int) -> Any:
        """Return the value whose ordinal is `ordinal`."""
        return self._from_ordinal(self.check(ordinal))


def _instance_of(
    element_type: type, to_ordinal: Callable[[Any], int]
) -> Callable[[Any], int]:
    def convert(value: Any) -> int:
        if not isinstance(value, element_type):
            raise TypeError(f"expected {element_type.__name__}, got {value!r}")
        return to_ordinal(value)

    return convert


def _bool_domain(element_type: type) -> Domain:
    return Domain(
        element_type,
        Bounds(0, 1),
        to_ordinal=_instance_of(bool, int),
        from_ordinal=bool,
    )


def _enum_domain(element_type: Any) -> Domain:
    # iterating an enum skips aliases, so positions follow the canonical members
    members = list(element_type)
    if not members:
        raise NotOrdinalError(f"{element_type.__name__} has no members")
    positions = {member: position for position, member in enumerate(members)}
    return Domain(
        element_type,
        Bounds(0, len(members) - 1),
        to_ordinal=_instance_of(element_type, positions.__getitem__),
        from_ordinal=members.__getitem__,
    )


def _coercing(element_type: Any) -> Callable[[Any], int]:
    # bounded ints and chars also accept the plain int or str they wrap
    def convert(value: Any) -> int:
        if not isinstance(value, element_type):
            value = element_type(value)
        return value.to_ordinal()

    return convert


def _convertible_domain(element_type: Any) -> Domain:
    if issubclass(element_type, (Subrange, CharRange)):
        to_ordinal = _coercing(element_type)
    else:
        to_ordinal = _instance_of(element_type, element_type.to_ordinal)

    return Domain(
        element_type,
        Bounds(*element_type.ordinal_bounds()),
        to_ordinal=to_ordinal,
        from_ordinal=element_type.from_ordinal,
    )


def _resolve(element_type: type) -> Domain:
    if element_type is bool:
        domain = _bool_domain(element_type)
    elif issubclass(element_type, enum.Flag):
        logger.debug("rejecting flag type %r", element_type)
        raise NotOrdinalError(
            f"{element_type.__name__} is a flag; its combinations are not ordered"
        )
    elif issubclass(element_type, enum.Enum):
        domain = _enum_domain(element_type)
    elif issubclass(element_type, OrdinalConvertible):
        domain = _convertible_domain(element_type)
    else:
        logger.debug("rejecting non-ordinal type %r", element_type)
        raise NotOrdinalError(f"{element_type.__name__} is not an ordinal type")

    low, high = domain.bounds
    if high < low:
        raise NotOrdinalError(
            f"{domain.name} maximum {high} is less than its minimum {low}"
        )
    if domain.nbytes > MAX_BUFFER_BYTES:
        raise RangeTooLargeError(
            f"{domain.name} spans {domain.size} values, which needs "
            f"{domain.nbytes} bytes; the limit is {MAX_BUFFER_BYTES}"
        )
    logger.debug("resolved %r to %d byte(s)", domain, domain.nbytes)
    return domain


_registry: MutableMapping[type, Domain] = {}
_lock = threading.RLock()
_memoized_resolve = toolz.memoize(
    _resolve, cache=_registry, key=lambda args, kwargs: args[0]
)


def domain_of(element_type: Any) -> Domain:
    """Return the :class:`Domain` of `element_type`, resolving it on first use.

    Raises
    ------
    NotOrdinalError
        If `element_type` is not a finite, discrete type
    RangeTooLargeError
        If the domain of `element_type` is too large to allocate

    """
    if not isinstance(element_type, type):
        raise NotOrdinalError(f"{element_type!r} is not a type")
    domain = _registry.get(element_type)
    if domain is None:
        with _lock:
            domain = _memoized_resolve(element_type)
    return domain


def resolve_bounds(element_type: Any) -> Bounds:
    """Return the minimum and maximum ordinal of `element_type`."""
    return domain_of(element_type).bounds


def ordinal_of(value: Any, element_type: Any) -> int:
    """Return the ordinal of `value` within the domain of `element_type`."""
    return domain_of(element_type).ordinal(value)


def value_from_ordinal(element_type: Any, ordinal: int) -> Any:
    """Return the value of `element_type` whose ordinal is `ordinal`."""
    return domain_of(element_type).value(ordinal)
