"""Various type definitions used throughout boundedset."""

from typing import Tuple, TypeVar

T = TypeVar("T")

#: A byte index paired with a bit offset or mask inside that byte
Position = Tuple[int, int]
