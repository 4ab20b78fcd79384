"""Read-only facade over a timestamped key-value store.

Exposes the plain key-value read contract by dropping timestamps from
everything the underlying store returns.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from .iterator import KeyValueIteratorFacade
from .types import K, V, get_value_or_none

if TYPE_CHECKING:
    from ..interfaces.serializer import Serializer
    from ..interfaces.store import TimestampedKeyValueStore

P = TypeVar("P")

logger = logging.getLogger(__name__)


class ReadOnlyKeyValueStoreFacade(Generic[K, V]):
    """Plain key-value reads over a TimestampedKeyValueStore.

    Args:
        inner: Store to read from. Not owned: the facade never closes or
            writes to it, and must not outlive it.

    Public API:
        - get(key): Latest value, or None
        - range(from_key, to_key) / reverse_range(from_key, to_key)
        - prefix_scan(prefix, serializer)
        - all() / reverse_all()
        - approximate_num_entries(): Store's estimate, unchanged

    Every iterator returned must be closed by the caller; use it as a
    context manager. Store exceptions propagate unmodified.
    """

    def __init__(self, inner: TimestampedKeyValueStore[K, V]):
        self.inner = inner
        logger.debug(f"Created read-only facade over store {getattr(inner, 'name', inner)!r}")

    @property
    def name(self) -> str:
        return self.inner.name

    def get(self, key: K) -> V | None:
        return get_value_or_none(self.inner.get(key))

    def range(self, from_key: K | None, to_key: K | None) -> KeyValueIteratorFacade[K, V]:
        return KeyValueIteratorFacade(self.inner.range(from_key, to_key))

    def reverse_range(self, from_key: K | None, to_key: K | None) -> KeyValueIteratorFacade[K, V]:
        return KeyValueIteratorFacade(self.inner.reverse_range(from_key, to_key))

    def prefix_scan(self, prefix: P, serializer: Serializer[P]) -> KeyValueIteratorFacade[K, V]:
        return KeyValueIteratorFacade(self.inner.prefix_scan(prefix, serializer))

    def all(self) -> KeyValueIteratorFacade[K, V]:
        return KeyValueIteratorFacade(self.inner.all())

    def reverse_all(self) -> KeyValueIteratorFacade[K, V]:
        return KeyValueIteratorFacade(self.inner.reverse_all())

    def approximate_num_entries(self) -> int:
        return self.inner.approximate_num_entries()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(inner={self.inner!r})"
