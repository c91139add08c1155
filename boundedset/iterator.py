"""Lazy, ascending iteration over the members of a bitmap set."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional

from .typehints import T

if TYPE_CHECKING:  # pragma: no cover
    from .bitset import BoundedBitSet


class ForwardIterator(Iterator[T]):
    """Scan a set one ordinal at a time, from its domain's minimum upward.

    The iterator works on a snapshot of the set taken at construction, so
    mutating the set afterwards does not affect an iteration in progress.
    Each instance is single-pass; create a new one to scan again.

    """

    __slots__ = "domain", "buffer", "cursor", "_current"

    def __init__(self, bitset: BoundedBitSet[T]) -> None:
        self.domain = bitset.domain
        self.buffer = bytes(bitset.buffer)

        # one below the smallest ordinal means we haven't started yet
        self.cursor = self.domain.min - 1
        self._current: Optional[int] = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.domain.name}, cursor={self.cursor})"

    @property
    def exhausted(self) -> bool:
        return self.cursor >= self.domain.max and self._current is None

    @property
    def current(self) -> T:
        """Return the member produced by the last successful :meth:`move_next`.

        Raises
        ------
        LookupError
            If iteration hasn't started or has finished

        """
        current = self._current
        if current is None:
            raise LookupError(f"{self!r} is not positioned on a member")
        return self.domain.value(current)

    def move_next(self) -> bool:
        """Advance to the next member, returning whether there was one."""
        low, high = self.domain.bounds
        buffer = self.buffer
        cursor = self.cursor
        while cursor < high:
            cursor += 1
            position = cursor - low
            if buffer[position >> 3] & (1 << (position & 7)):
                self.cursor = self._current = cursor
                return True
        self.cursor = cursor
        self._current = None
        return False

    def __next__(self) -> T:
        if not self.move_next():
            raise StopIteration
        return self.current
