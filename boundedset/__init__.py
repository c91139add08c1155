"""Top-level package for boundedset."""

import importlib.metadata

from boundedset.api import *  # noqa: F401,F403
from boundedset.bitset import BoundedBitSet  # noqa: F401
from boundedset.domain import (  # noqa: F401
    Bounds,
    Domain,
    domain_of,
    ordinal_of,
    resolve_bounds,
    value_from_ordinal,
)
from boundedset.exceptions import (  # noqa: F401
    BoundedSetError,
    DomainMismatchError,
    InvalidRangeError,
    NotOrdinalError,
    OutOfRangeError,
    RangeTooLargeError,
)
from boundedset.iterator import ForwardIterator  # noqa: F401
from boundedset.ordinals import (  # noqa: F401
    AnsiChar,
    Byte,
    CharRange,
    ShortInt,
    SmallInt,
    Subrange,
    WideChar,
    Word,
    subrange,
)
from boundedset.protocols import OrdinalConvertible  # noqa: F401

__version__ = importlib.metadata.version(__name__)
