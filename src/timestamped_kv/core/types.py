"""Common type definitions for the timestamped key-value adapter.

Defines the value types shared by stores, iterators and the facade.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

# Core primitive types
Key = bytes
Value = bytes
Timestamp = int

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True)
class ValueAndTimestamp(Generic[V]):
    """A value paired with its last-modification timestamp.

    Attributes:
        value: The stored value; never None
        timestamp: Last-modification time (milliseconds)

    Use ``make`` rather than the constructor when the value may be missing.
    """

    value: V
    timestamp: Timestamp

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError("value cannot be None; use ValueAndTimestamp.make()")

    @classmethod
    def make(cls, value: V | None, timestamp: Timestamp) -> ValueAndTimestamp[V] | None:
        """Return a new instance, or None if value is None."""
        if value is None:
            return None
        return cls(value, timestamp)


def get_value_or_none(value_and_timestamp: ValueAndTimestamp[V] | None) -> V | None:
    """Return the plain value of value_and_timestamp, or None if it is None."""
    if value_and_timestamp is None:
        return None
    return value_and_timestamp.value


@dataclass(frozen=True)
class KeyValue(Generic[K, V]):
    """An immutable key-value pair."""

    key: K
    value: V

    @classmethod
    def pair(cls, key: K, value: V) -> KeyValue[K, V]:
        return cls(key, value)

    def __iter__(self) -> Iterator[Any]:
        # allows ``key, value = kv``
        yield self.key
        yield self.value
