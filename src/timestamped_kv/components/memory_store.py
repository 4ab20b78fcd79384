"""In-memory timestamped key-value store.

Uses sortedcontainers.SortedDict to keep entries in key order.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Generic, TypeVar

from sortedcontainers import SortedDict

from ..core.errors import InvalidRangeError, InvalidStateStoreError, NoSuchElementError
from ..core.types import K, KeyValue, Timestamp, V, ValueAndTimestamp

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from types import TracebackType

    from ..core.config import StoreConfig
    from ..interfaces.serializer import Serializer

P = TypeVar("P")

logger = logging.getLogger(__name__)

# Snapshot entry: (key, value, timestamp)
_Entry = tuple[K, V, Timestamp]


class InMemoryKeyValueIterator(Generic[K, V]):
    """Iterator over a snapshot of store entries.

    Args:
        entries: Live (non-tombstone) entries in iteration order
        on_close: Called once, with this iterator, when it is closed

    Invariants:
        - Contents are fixed at creation; later writes are not visible
        - Any use after close raises InvalidStateStoreError
        - close() is idempotent
    """

    def __init__(
        self,
        entries: list[_Entry],
        on_close: Callable[[InMemoryKeyValueIterator[K, V]], None] | None = None,
    ):
        self._entries = entries
        self._pos = 0
        self._on_close = on_close
        self._open = True

    def _check_open(self) -> None:
        if not self._open:
            raise InvalidStateStoreError("Iterator has already been closed")

    def has_next(self) -> bool:
        self._check_open()
        return self._pos < len(self._entries)

    def __next__(self) -> KeyValue[K, ValueAndTimestamp[V]]:
        self._check_open()
        if self._pos >= len(self._entries):
            raise StopIteration
        key, value, ts = self._entries[self._pos]
        self._pos += 1
        return KeyValue(key, ValueAndTimestamp(value, ts))

    def __iter__(self) -> InMemoryKeyValueIterator[K, V]:
        return self

    def peek_next_key(self) -> K:
        self._check_open()
        if self._pos >= len(self._entries):
            raise NoSuchElementError("Iterator is exhausted")
        return self._entries[self._pos][0]

    def close(self) -> None:
        if not self._open:
            return
        self._open = False
        self._entries = []
        if self._on_close is not None:
            self._on_close(self)

    @property
    def is_open(self) -> bool:
        return self._open

    def __enter__(self) -> InMemoryKeyValueIterator[K, V]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


class InMemoryTimestampedKeyValueStore(Generic[K, V]):
    """Sorted in-memory store of (value, timestamp) entries.

    Args:
        config: Store configuration
        key_serializer: Encodes keys for prefix_scan. When None, keys must
            already be bytes.

    Public API:
        - put(key, value, ts) / delete(key, ts): Write path
        - get, range, reverse_range, prefix_scan, all, reverse_all,
          approximate_num_entries: TimestampedKeyValueStore read contract
        - close(): Close the store and every iterator still open on it

    Invariants:
        - Keys are always maintained in sorted order
        - Range bounds are inclusive; None means unbounded
        - Tombstones are invisible to reads but counted by
          approximate_num_entries
        - Iterators read a snapshot taken when they are created
    """

    def __init__(self, config: StoreConfig, key_serializer: Serializer[K] | None = None):
        self.config = config
        self.name = config.name
        self._key_serializer = key_serializer
        self._lock = threading.Lock()
        self._data: SortedDict = SortedDict()
        self._open_iterators: set[InMemoryKeyValueIterator[K, V]] = set()
        self._open = True

        logger.info(f"Initialized in-memory store {self.name!r}")

    def _check_open(self) -> None:
        if not self._open:
            raise InvalidStateStoreError(f"Store {self.name!r} is closed")

    @property
    def is_open(self) -> bool:
        return self._open

    def put(self, key: K, value: V | None, ts: Timestamp) -> None:
        """Insert or update key with value and timestamp; None value deletes."""
        if value is None:
            self.delete(key, ts)
            return
        with self._lock:
            self._check_open()
            self._data[key] = (value, ts)

    def delete(self, key: K, ts: Timestamp) -> ValueAndTimestamp[V] | None:
        """Delete key, returning its previous value if it had one."""
        with self._lock:
            self._check_open()
            if self.config.retain_tombstones:
                old = self._data.get(key)
                self._data[key] = (None, ts)
            else:
                old = self._data.pop(key, None)
        if old is None:
            return None
        return ValueAndTimestamp.make(*old)

    def get(self, key: K) -> ValueAndTimestamp[V] | None:
        with self._lock:
            self._check_open()
            entry = self._data.get(key)
        if entry is None:
            return None
        value, ts = entry
        return ValueAndTimestamp.make(value, ts)

    def range(
        self, from_key: K | None, to_key: K | None
    ) -> InMemoryKeyValueIterator[K, V]:
        return self._range(from_key, to_key, reverse=False)

    def reverse_range(
        self, from_key: K | None, to_key: K | None
    ) -> InMemoryKeyValueIterator[K, V]:
        return self._range(from_key, to_key, reverse=True)

    def all(self) -> InMemoryKeyValueIterator[K, V]:
        return self._range(None, None, reverse=False)

    def reverse_all(self) -> InMemoryKeyValueIterator[K, V]:
        return self._range(None, None, reverse=True)

    def prefix_scan(self, prefix: P, serializer: Serializer[P]) -> InMemoryKeyValueIterator[K, V]:
        """Iterate entries whose encoded key starts with the encoded prefix."""
        prefix_bytes = serializer.serialize(prefix)
        if prefix_bytes is None:
            prefix_bytes = b""
        with self._lock:
            self._check_open()
            entries = [
                (key, value, ts)
                for key, (value, ts) in self._data.items()
                if value is not None and self._encode_key(key).startswith(prefix_bytes)
            ]
            return self._open_iterator(entries)

    def approximate_num_entries(self) -> int:
        """Return number of entries held, tombstones included."""
        with self._lock:
            self._check_open()
            return len(self._data)

    def close(self) -> None:
        """Close store and every iterator still open on it."""
        with self._lock:
            if not self._open:
                return
            self._open = False
            open_iterators = list(self._open_iterators)
            self._open_iterators.clear()

        if open_iterators:
            logger.debug(f"Closing {len(open_iterators)} open iterators of store {self.name!r}")
        for it in open_iterators:
            it.close()
        logger.info(f"Closed in-memory store {self.name!r}")

    def _range(
        self, from_key: K | None, to_key: K | None, reverse: bool
    ) -> InMemoryKeyValueIterator[K, V]:
        if from_key is not None and to_key is not None and from_key > to_key:
            if self.config.strict_range:
                raise InvalidRangeError(
                    f"Range from {from_key!r} to {to_key!r} is inverted"
                )
            logger.warning(
                f"Returning empty iterator for range from {from_key!r} to {to_key!r}: "
                "from key is larger than to key"
            )
            with self._lock:
                self._check_open()
                return self._open_iterator([])

        with self._lock:
            self._check_open()
            keys = self._data.irange(from_key, to_key, inclusive=(True, True), reverse=reverse)
            return self._open_iterator(self._live_entries(keys))

    def _live_entries(self, keys: Iterable[K]) -> list[_Entry]:
        # Must hold lock
        entries = []
        for key in keys:
            value, ts = self._data[key]
            if value is not None:
                entries.append((key, value, ts))
        return entries

    def _open_iterator(self, entries: list[_Entry]) -> InMemoryKeyValueIterator[K, V]:
        # Must hold lock
        it: InMemoryKeyValueIterator[K, V] = InMemoryKeyValueIterator(entries, self._release)
        self._open_iterators.add(it)
        logger.debug(f"Opened iterator over {len(entries)} entries of store {self.name!r}")
        return it

    def _release(self, it: InMemoryKeyValueIterator[K, V]) -> None:
        with self._lock:
            self._open_iterators.discard(it)

    def _encode_key(self, key: K) -> bytes:
        if self._key_serializer is None:
            return key
        return self._key_serializer.serialize(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
