"""Timestamped KV - plain key-value reads over timestamped stores."""

from .components.memory_store import InMemoryKeyValueIterator, InMemoryTimestampedKeyValueStore
from .components.serializer import BytesSerializer, StringSerializer
from .core.config import StoreConfig
from .core.errors import (
    StoreError,
    InvalidStateStoreError,
    NoSuchElementError,
    SerializationError,
    InvalidRangeError,
)
from .core.facade import ReadOnlyKeyValueStoreFacade
from .core.iterator import KeyValueIteratorFacade
from .core.types import Key, Value, Timestamp, KeyValue, ValueAndTimestamp, get_value_or_none
from .interfaces.iterator import KeyValueIterator
from .interfaces.serializer import Serializer
from .interfaces.store import ReadOnlyKeyValueStore, TimestampedKeyValueStore

__all__ = [
    "StoreConfig",
    "StoreError",
    "InvalidStateStoreError",
    "NoSuchElementError",
    "SerializationError",
    "InvalidRangeError",
    "ReadOnlyKeyValueStoreFacade",
    "KeyValueIteratorFacade",
    "InMemoryTimestampedKeyValueStore",
    "InMemoryKeyValueIterator",
    "StringSerializer",
    "BytesSerializer",
    "Key",
    "Value",
    "Timestamp",
    "KeyValue",
    "ValueAndTimestamp",
    "get_value_or_none",
    "KeyValueIterator",
    "Serializer",
    "ReadOnlyKeyValueStore",
    "TimestampedKeyValueStore",
]
