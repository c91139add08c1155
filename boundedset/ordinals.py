"""Bounded integer and character types usable as set elements.

Python's own :class:`int` and :class:`str` have no upper bound, so they cannot
back a bitmap. The classes here pin them to an inclusive range of ordinals::

    >>> class Digit(Subrange, min=0, max=9):
    ...     pass
    >>> Digit(7)
    7
    >>> Lower = subrange("a", "z")
    >>> Lower("q").to_ordinal()
    113

"""

from __future__ import annotations

import operator
import types
from typing import Any, ClassVar, Optional, Tuple, Type, TypeVar, Union

from .exceptions import InvalidRangeError, NotOrdinalError, OutOfRangeError

S = TypeVar("S", bound="Subrange")
C = TypeVar("C", bound="CharRange")


def _set_bounds(cls: type, low: int, high: int) -> None:
    if low > high:
        raise InvalidRangeError(
            f"{cls.__name__} lower bound {low} is greater than upper bound {high}"
        )
    cls._bounds = low, high  # type: ignore[attr-defined]


def _get_bounds(cls: type) -> Tuple[int, int]:
    bounds = cls._bounds  # type: ignore[attr-defined]
    if bounds is None:
        raise NotOrdinalError(f"{cls.__name__} does not declare its bounds")
    return bounds


def _check(cls: type, ordinal: int) -> int:
    low, high = _get_bounds(cls)
    if not low <= ordinal <= high:
        raise OutOfRangeError(
            f"{cls.__name__} ordinal not in [{low}, {high}], ordinal == {ordinal}"
        )
    return ordinal


class Subrange(int):
    """An integer restricted to an inclusive range.

    Declare a range by subclassing with the `min` and `max` keywords, or with
    :func:`subrange`.

    """

    __slots__ = ()

    _bounds: ClassVar[Optional[Tuple[int, int]]] = None

    def __init_subclass__(
        cls, *, min: Optional[int] = None, max: Optional[int] = None, **kwargs: Any
    ) -> None:
        super().__init_subclass__(**kwargs)  # type: ignore[call-arg]
        if min is not None or max is not None:
            if min is None or max is None:
                raise TypeError(f"{cls.__name__} needs both min and max")
            _set_bounds(cls, operator.index(min), operator.index(max))

    def __new__(cls: Type[S], value: Any) -> S:
        return super().__new__(cls, _check(cls, operator.index(value)))

    @classmethod
    def ordinal_bounds(cls) -> Tuple[int, int]:
        return _get_bounds(cls)

    def to_ordinal(self) -> int:
        return int(self)

    @classmethod
    def from_ordinal(cls: Type[S], ordinal: int) -> S:
        return cls(ordinal)


class CharRange(str):
    """A single character whose code point lies in an inclusive range."""

    __slots__ = ()

    _bounds: ClassVar[Optional[Tuple[int, int]]] = None

    def __init_subclass__(
        cls,
        *,
        min: Optional[Union[str, int]] = None,
        max: Optional[Union[str, int]] = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)  # type: ignore[call-arg]
        if min is not None or max is not None:
            if min is None or max is None:
                raise TypeError(f"{cls.__name__} needs both min and max")
            _set_bounds(cls, _code_point(min), _code_point(max))

    def __new__(cls: Type[C], value: Any) -> C:
        if not isinstance(value, str) or len(value) != 1:
            raise TypeError(f"{cls.__name__} expects a single character, got {value!r}")
        _check(cls, ord(value))
        return super().__new__(cls, value)

    @classmethod
    def ordinal_bounds(cls) -> Tuple[int, int]:
        return _get_bounds(cls)

    def to_ordinal(self) -> int:
        return ord(self)

    @classmethod
    def from_ordinal(cls: Type[C], ordinal: int) -> C:
        return cls(chr(_check(cls, ordinal)))


def _code_point(value: Union[str, int]) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"expected a single character, got {value!r}")
        return ord(value)
    return operator.index(value)


def subrange(
    low: Union[int, str], high: Union[int, str], *, name: Optional[str] = None
) -> type:
    """Create a new bounded type covering `low` through `high` inclusive.

    Parameters
    ----------
    low
        The smallest member, either an :class:`int` or a single character.
    high
        The largest member, of the same kind as `low`.
    name
        The name of the new class. Generated from the bounds if omitted.

    """
    if isinstance(low, str) != isinstance(high, str):
        raise TypeError(
            f"bounds must both be integers or both be characters, "
            f"got {low!r} and {high!r}"
        )
    base: type = CharRange if isinstance(low, str) else Subrange
    if name is None:
        name = f"{base.__name__}_{_code_point(low)}_{_code_point(high)}".replace(
            "-", "neg"
        )
    return types.new_class(name, (base,), dict(min=low, max=high))


class Byte(Subrange, min=0, max=0xFF):
    """An unsigned 8-bit integer."""


class ShortInt(Subrange, min=-0x80, max=0x7F):
    """A signed 8-bit integer."""


class Word(Subrange, min=0, max=0xFFFF):
    """An unsigned 16-bit integer."""


class SmallInt(Subrange, min=-0x8000, max=0x7FFF):
    """A signed 16-bit integer."""


class AnsiChar(CharRange, min=0, max=0xFF):
    """A single-byte character."""


class WideChar(CharRange, min=0, max=0xFFFF):
    """A character from the basic multilingual plane."""
