from typing import Any


#
# Exceptions
#
class RangeSetError(Exception):
    """Base exception for range and range set errors."""
    pass


class InvalidArgumentError(RangeSetError, ValueError):
    """Raised for a missing value, an inverted range or unparsable notation."""
    pass


class EmptyRangeSetError(RangeSetError, LookupError):
    """Raised when an operation needs at least one member range."""
    pass


class UnsupportedOperationError(RangeSetError, TypeError):
    """Raised when mutating a read-only range set (or its complement)."""
    pass


class ConcurrentModificationError(RangeSetError, RuntimeError):
    """Raised when a range set changes while one of its views is iterated."""
    pass


def check_not_none(value: Any, name: str) -> Any:
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    return value
