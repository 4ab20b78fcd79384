"""Protocol definitions for read-only key-value stores."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from ..core.types import ValueAndTimestamp
    from .iterator import KeyValueIterator
    from .serializer import Serializer

K = TypeVar("K")
V = TypeVar("V")
P = TypeVar("P")


class ReadOnlyKeyValueStore(Protocol[K, V]):
    """Plain key-value read contract."""

    name: str

    def get(self, key: K) -> V | None:
        """Return the value for key or None if not present."""
        ...

    def range(self, from_key: K | None, to_key: K | None) -> KeyValueIterator[K, V]:
        """Ordered iterator over keys between from_key and to_key (inclusive)."""
        ...

    def reverse_range(self, from_key: K | None, to_key: K | None) -> KeyValueIterator[K, V]:
        """Like range, in descending key order."""
        ...

    def prefix_scan(self, prefix: P, serializer: Serializer[P]) -> KeyValueIterator[K, V]:
        """Ordered iterator over keys whose encoded form starts with the encoded prefix."""
        ...

    def all(self) -> KeyValueIterator[K, V]:
        """Ordered iterator over every entry."""
        ...

    def reverse_all(self) -> KeyValueIterator[K, V]:
        """Iterator over every entry in descending key order."""
        ...

    def approximate_num_entries(self) -> int:
        """Return an estimate of the number of entries; may be stale."""
        ...


class TimestampedKeyValueStore(Protocol[K, V]):
    """Read contract of a store whose values carry a timestamp.

    Identical to ReadOnlyKeyValueStore with ValueAndTimestamp[V] values.
    """

    name: str

    def get(self, key: K) -> ValueAndTimestamp[V] | None:
        ...

    def range(
        self, from_key: K | None, to_key: K | None
    ) -> KeyValueIterator[K, ValueAndTimestamp[V]]:
        ...

    def reverse_range(
        self, from_key: K | None, to_key: K | None
    ) -> KeyValueIterator[K, ValueAndTimestamp[V]]:
        ...

    def prefix_scan(
        self, prefix: P, serializer: Serializer[P]
    ) -> KeyValueIterator[K, ValueAndTimestamp[V]]:
        ...

    def all(self) -> KeyValueIterator[K, ValueAndTimestamp[V]]:
        ...

    def reverse_all(self) -> KeyValueIterator[K, ValueAndTimestamp[V]]:
        ...

    def approximate_num_entries(self) -> int:
        ...
