"""Serializers used to encode prefixes into a store's key space."""

from __future__ import annotations

from ..core.errors import SerializationError


class StringSerializer:
    """Encode str values as bytes.

    Args:
        encoding: Text encoding (default utf-8)
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def serialize(self, data: str | None) -> bytes | None:
        if data is None:
            return None
        if not isinstance(data, str):
            raise SerializationError(f"Expected str, got {type(data).__name__}")
        try:
            return data.encode(self.encoding)
        except (UnicodeEncodeError, LookupError) as e:
            raise SerializationError(f"Failed to encode {data!r} as {self.encoding}: {e}") from e

    def __eq__(self, other: object) -> bool:
        return isinstance(other, StringSerializer) and other.encoding == self.encoding

    def __hash__(self) -> int:
        return hash((StringSerializer, self.encoding))


class BytesSerializer:
    """Pass bytes-like values through unchanged."""

    def serialize(self, data: bytes | bytearray | memoryview | None) -> bytes | None:
        if data is None:
            return None
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise SerializationError(f"Expected bytes, got {type(data).__name__}")
        return bytes(data)
