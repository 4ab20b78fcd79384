"""Timestamped KV core package."""

from .facade import ReadOnlyKeyValueStoreFacade
from .iterator import KeyValueIteratorFacade

__all__ = ["ReadOnlyKeyValueStoreFacade", "KeyValueIteratorFacade"]
