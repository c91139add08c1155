"""Exceptions raised by boundedset."""


class BoundedSetError(Exception):
    """Base class for all boundedset errors."""


class NotOrdinalError(BoundedSetError, TypeError):
    """Raised when a type is not a finite, discrete domain."""


class DomainMismatchError(BoundedSetError, TypeError):
    """Raised when a value or set does not belong to the expected domain."""


class RangeTooLargeError(BoundedSetError, OverflowError):
    """Raised when a domain is too large to back with a single buffer."""


class OutOfRangeError(BoundedSetError, ValueError):
    """Raised when an ordinal falls outside of its domain's bounds."""


class InvalidRangeError(BoundedSetError, ValueError):
    """Raised when the start of a range is greater than its stop."""
