"""Protocol definition for key-value iterators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar

if TYPE_CHECKING:
    from types import TracebackType

    from ..core.types import KeyValue

K = TypeVar("K")
V = TypeVar("V")


class KeyValueIterator(Protocol[K, V]):
    """Closeable, peekable iterator over key-value pairs in store order.

    Must be closed after use, either explicitly or by using it as a
    context manager, to release the resources it holds.
    """

    def has_next(self) -> bool:
        """Return True if another pair is available."""
        ...

    def __next__(self) -> KeyValue[K, V]:
        """Return the next pair; raise StopIteration when exhausted."""
        ...

    def __iter__(self) -> KeyValueIterator[K, V]:
        ...

    def peek_next_key(self) -> K:
        """Return the key of the next pair without consuming it."""
        ...

    def close(self) -> None:
        """Release any resources held by the iterator."""
        ...

    def __enter__(self) -> KeyValueIterator[K, V]:
        ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> bool:
        ...
