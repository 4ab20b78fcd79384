"""Configuration for timestamped key-value stores.

Defines the tunable parameters of the in-memory store.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class StoreConfig:
    """Configuration parameters for an in-memory timestamped store.

    Attributes:
        name: Store name, used in logs and error messages
        retain_tombstones: Keep deleted keys as tombstones instead of removing them
        strict_range: Raise InvalidRangeError on inverted ranges instead of
            logging a warning and returning an empty iterator
    """

    name: str
    retain_tombstones: bool = True
    strict_range: bool = False
