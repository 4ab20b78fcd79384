"""Exception hierarchy for timestamped key-value stores.

Defines all custom exceptions raised by stores, iterators and serializers.
The facade itself raises none of these; it only lets them through.
"""

from __future__ import annotations


class StoreError(Exception):
    """Base exception for all store errors."""
    pass


class InvalidStateStoreError(StoreError):
    """Raised when a closed store or iterator is used."""
    pass


class NoSuchElementError(StoreError, LookupError):
    """Raised when peeking past the end of an exhausted iterator."""
    pass


class SerializationError(StoreError):
    """Raised when a serializer cannot encode its input."""
    pass


class InvalidRangeError(StoreError, ValueError):
    """Raised for a range whose lower bound exceeds its upper bound."""
    pass
