"""Unit tests for InMemoryTimestampedKeyValueStore."""

from __future__ import annotations

import logging

import pytest

from timestamped_kv.components.memory_store import InMemoryTimestampedKeyValueStore
from timestamped_kv.components.serializer import BytesSerializer, StringSerializer
from timestamped_kv.core.config import StoreConfig
from timestamped_kv.core.errors import InvalidRangeError, InvalidStateStoreError
from timestamped_kv.core.types import KeyValue, ValueAndTimestamp


@pytest.fixture
def store():
    """Create empty bytes-keyed store for tests."""
    store = InMemoryTimestampedKeyValueStore(StoreConfig(name="test-store"))
    yield store
    store.close()


@pytest.fixture
def loaded_store(store):
    """Create store holding key0..key4."""
    for i in range(5):
        store.put(f"key{i}".encode(), f"value{i}".encode(), 1000 + i)
    return store


def keys_of(it):
    with it:
        return [kv.key for kv in it]


def test_put_get(store):
    """Test basic put and get operations."""
    store.put(b"key1", b"value1", 1000)

    assert store.get(b"key1") == ValueAndTimestamp(b"value1", 1000)
    assert store.get(b"nonexistent") is None


def test_put_overwrites(store):
    """Test that put replaces the value and timestamp."""
    store.put(b"key1", b"value1", 1000)
    store.put(b"key1", b"value2", 1001)

    assert store.get(b"key1") == ValueAndTimestamp(b"value2", 1001)


def test_put_none_deletes(store):
    """Test that putting None behaves like delete."""
    store.put(b"key1", b"value1", 1000)
    store.put(b"key1", None, 1001)

    assert store.get(b"key1") is None


def test_delete_returns_previous_value(store):
    """Test that delete returns the replaced value."""
    store.put(b"key1", b"value1", 1000)

    assert store.delete(b"key1", 1001) == ValueAndTimestamp(b"value1", 1000)
    assert store.delete(b"key1", 1002) is None
    assert store.delete(b"nonexistent", 1003) is None


def test_tombstones_hidden_but_counted(loaded_store):
    """Test deleted keys vanish from reads but stay in the estimate."""
    loaded_store.delete(b"key2", 2000)

    assert loaded_store.get(b"key2") is None
    assert keys_of(loaded_store.all()) == [b"key0", b"key1", b"key3", b"key4"]
    assert loaded_store.approximate_num_entries() == 5


def test_tombstones_dropped_when_not_retained():
    """Test delete removes the entry when tombstones are disabled."""
    store = InMemoryTimestampedKeyValueStore(StoreConfig(name="s", retain_tombstones=False))
    store.put(b"key1", b"value1", 1000)
    store.put(b"key2", b"value2", 1001)

    store.delete(b"key1", 1002)

    assert store.approximate_num_entries() == 1
    assert keys_of(store.all()) == [b"key2"]


def test_all_sorted_order(store):
    """Test all() returns entries in sorted key order."""
    for key in [b"key3", b"key1", b"key2"]:
        store.put(key, b"v", 1000)

    assert keys_of(store.all()) == [b"key1", b"key2", b"key3"]
    assert keys_of(store.reverse_all()) == [b"key3", b"key2", b"key1"]


def test_range_bounds_inclusive(loaded_store):
    """Test both range bounds are inclusive."""
    assert keys_of(loaded_store.range(b"key1", b"key3")) == [b"key1", b"key2", b"key3"]
    assert keys_of(loaded_store.reverse_range(b"key1", b"key3")) == [b"key3", b"key2", b"key1"]


def test_range_open_bounds(loaded_store):
    """Test None bounds are unbounded."""
    assert keys_of(loaded_store.range(None, b"key1")) == [b"key0", b"key1"]
    assert keys_of(loaded_store.range(b"key3", None)) == [b"key3", b"key4"]
    assert len(keys_of(loaded_store.range(None, None))) == 5


def test_range_empty(loaded_store):
    """Test range with no matching keys is empty."""
    assert keys_of(loaded_store.range(b"key5", b"key9")) == []


def test_inverted_range_warns_and_is_empty(loaded_store, caplog):
    """Test inverted ranges log a warning and return nothing."""
    with caplog.at_level(logging.WARNING):
        result = keys_of(loaded_store.range(b"key3", b"key1"))

    assert result == []
    assert "from key is larger than to key" in caplog.text


def test_inverted_range_strict():
    """Test inverted ranges raise when strict_range is set."""
    store = InMemoryTimestampedKeyValueStore(StoreConfig(name="s", strict_range=True))

    with pytest.raises(InvalidRangeError):
        store.range(b"b", b"a")
    with pytest.raises(ValueError):
        store.reverse_range(b"b", b"a")


def test_prefix_scan_bytes_keys(store):
    """Test prefix scan over bytes keys."""
    for key in [b"a", b"ab", b"abc", b"b", b"abd"]:
        store.put(key, key.upper(), 1000)

    with store.prefix_scan(b"ab", BytesSerializer()) as it:
        results = list(it)

    assert results == [
        KeyValue(b"ab", ValueAndTimestamp(b"AB", 1000)),
        KeyValue(b"abc", ValueAndTimestamp(b"ABC", 1000)),
        KeyValue(b"abd", ValueAndTimestamp(b"ABD", 1000)),
    ]


def test_prefix_scan_with_key_serializer():
    """Test prefix scan over str keys encoded by a key serializer."""
    store = InMemoryTimestampedKeyValueStore(
        StoreConfig(name="strings"), key_serializer=StringSerializer()
    )
    for key in ["key1", "key2", "other"]:
        store.put(key, key.upper(), 1)

    assert keys_of(store.prefix_scan("key", StringSerializer())) == ["key1", "key2"]
    assert keys_of(store.prefix_scan("", StringSerializer())) == ["key1", "key2", "other"]
    assert keys_of(store.prefix_scan("zzz", StringSerializer())) == []


def test_iterator_snapshot_isolation(loaded_store):
    """Test writes after iterator creation are not visible to it."""
    with loaded_store.all() as it:
        loaded_store.put(b"key9", b"late", 3000)
        loaded_store.delete(b"key0", 3001)
        keys = [kv.key for kv in it]

    assert keys == [b"key0", b"key1", b"key2", b"key3", b"key4"]


def test_close_invalidates_store_and_iterators(loaded_store):
    """Test closing the store closes open iterators and rejects further use."""
    it = loaded_store.all()
    next(it)

    loaded_store.close()

    assert not loaded_store.is_open
    assert not it.is_open
    with pytest.raises(InvalidStateStoreError):
        next(it)
    with pytest.raises(InvalidStateStoreError):
        loaded_store.get(b"key1")
    with pytest.raises(InvalidStateStoreError):
        loaded_store.approximate_num_entries()
    loaded_store.close()  # idempotent


def test_closed_iterators_are_released(store):
    """Test closed iterators are no longer tracked by the store."""
    it = store.all()
    assert it in store._open_iterators

    it.close()

    assert it not in store._open_iterators


def test_context_manager_closes_store():
    """Test store supports the with statement."""
    with InMemoryTimestampedKeyValueStore(StoreConfig(name="ctx")) as store:
        store.put(b"k", b"v", 1)

    assert not store.is_open
