"""Protocol definition for Serializer."""

from __future__ import annotations

from typing import Protocol, TypeVar

T = TypeVar("T", contravariant=True)


class Serializer(Protocol[T]):
    """Converts objects into the bytes of a store's key space."""

    def serialize(self, data: T | None) -> bytes | None:
        """Return the encoded form of data, or None if data is None."""
        ...
