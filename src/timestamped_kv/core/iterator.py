"""Iterator adapter stripping timestamps from streamed entries."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic

from .types import K, KeyValue, V

if TYPE_CHECKING:
    from types import TracebackType

    from ..interfaces.iterator import KeyValueIterator
    from .types import ValueAndTimestamp

logger = logging.getLogger(__name__)


class KeyValueIteratorFacade(Generic[K, V]):
    """Plain key-value view over an iterator of timestamped entries.

    Args:
        inner: Iterator yielding KeyValue[K, ValueAndTimestamp[V]]; owned by
            this adapter from construction on

    Invariants:
        - Elements are converted one at a time, on demand
        - Keys pass through untouched; timestamps are never inspected
        - Every failure comes from the inner iterator, unchanged
    """

    def __init__(self, inner: KeyValueIterator[K, ValueAndTimestamp[V]]):
        self._inner = inner

    def has_next(self) -> bool:
        return self._inner.has_next()

    def __next__(self) -> KeyValue[K, V]:
        inner_next = next(self._inner)
        return KeyValue(inner_next.key, inner_next.value.value)

    def __iter__(self) -> KeyValueIteratorFacade[K, V]:
        return self

    def peek_next_key(self) -> K:
        return self._inner.peek_next_key()

    def close(self) -> None:
        logger.debug("Closing iterator facade")
        self._inner.close()

    def __enter__(self) -> KeyValueIteratorFacade[K, V]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False
