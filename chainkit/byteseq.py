"""Hex-encoded byte strings and fixed-size byte values such as addresses and hashes."""

from __future__ import annotations

import json
from typing import ClassVar, Iterable, TypeVar

from chainkit.hexcodec import (
    bytes_to_hex,
    fixed_bytes_from_hex,
    hex_to_bytes,
    naive_quote,
    naive_unquote,
)

ADDRESS_LENGTH = 20
HASH_LENGTH = 32
BLOOM_LENGTH = 256
NONCE_LENGTH = 8

_F = TypeVar("_F", bound="FixedBytes")


def _as_text(data: str | bytes) -> str:
    return data.decode() if isinstance(data, (bytes, bytearray)) else data


class HexBytes(bytes):
    """A variable-length byte string that serializes as ``0x``-prefixed hex."""

    @classmethod
    def from_hex(cls, text: str) -> HexBytes:
        """Parse a hex string; invalid input yields an empty value."""
        try:
            return cls(hex_to_bytes(text))
        except ValueError:
            return cls()

    @classmethod
    def from_json(cls, data: str | bytes) -> HexBytes:
        """Parse a JSON hex string; ``null`` yields an empty value.

        Raises ValueError on invalid input.
        """
        text = _as_text(data)
        if text == "null":
            return cls()
        return cls(hex_to_bytes(naive_unquote(text)))

    def to_json(self) -> str:
        return naive_quote(self.to_text())

    def to_text(self) -> str:
        return bytes_to_hex(self)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_text()!r})"


class FixedBytes(bytes):
    """A byte value of a fixed length, set by ``LENGTH`` in each subclass."""

    LENGTH: ClassVar[int] = 0

    def __new__(cls: type[_F], data: bytes = b"") -> _F:
        if not data:
            data = bytes(cls.LENGTH)
        if len(data) != cls.LENGTH:
            raise ValueError(f"{cls.__name__} requires {cls.LENGTH} bytes, got {len(data)}")
        return super().__new__(cls, data)

    @classmethod
    def from_hex(cls: type[_F], text: str) -> _F:
        """Parse a hex string, left-padding with zeros; invalid input yields zero."""
        try:
            return cls(fixed_bytes_from_hex(text, cls.LENGTH))
        except ValueError:
            return cls()

    @classmethod
    def from_bytes(cls: type[_F], data: bytes) -> _F:
        """Left-pad ``data`` with zeros; data that is too long yields zero."""
        if len(data) > cls.LENGTH:
            return cls()
        return cls(bytes(data).rjust(cls.LENGTH, b"\x00"))

    @classmethod
    def from_json(cls: type[_F], data: str | bytes) -> _F:
        """Parse a JSON hex string; ``null`` yields zero.

        Raises ValueError on invalid or too long input.
        """
        text = _as_text(data)
        if text == "null":
            return cls()
        return cls(fixed_bytes_from_hex(naive_unquote(text), cls.LENGTH))

    def to_json(self) -> str:
        return naive_quote(self.to_text())

    def to_text(self) -> str:
        return bytes_to_hex(self)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_text()!r})"


class Address(FixedBytes):
    """The 20 byte address of an account."""

    LENGTH = ADDRESS_LENGTH


class Hash(FixedBytes):
    """A 32 byte hash."""

    LENGTH = HASH_LENGTH


class Bloom(FixedBytes):
    """A 2048 bit bloom filter."""

    LENGTH = BLOOM_LENGTH


class Nonce(FixedBytes):
    """A 64 bit nonce."""

    LENGTH = NONCE_LENGTH


def _items_from_json(item_type: type[FixedBytes], data: str | bytes) -> list[FixedBytes]:
    """Decode a JSON array of hex strings, or a single hex string."""
    text = _as_text(data)
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return [item_type.from_json(text)]
    try:
        decoded = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc
    if decoded is None:
        return []
    if not isinstance(decoded, list):
        raise ValueError(f"expected a JSON array or string, got {type(decoded).__name__}")
    return [item_type.from_json(json.dumps(element)) for element in decoded]


def _items_to_json(item_type: type[FixedBytes], items: Iterable[bytes]) -> str:
    return "[" + ",".join(item_type(item).to_json() for item in items) + "]"


class Addresses(list):
    """A list of addresses; a single JSON string reads as a one-item list."""

    def __init__(self, items: Iterable[bytes] = ()) -> None:
        super().__init__(Address(item) for item in items)

    @classmethod
    def from_json(cls, data: str | bytes) -> Addresses:
        """Parse a JSON array of addresses or a single address.

        Raises ValueError on invalid input.
        """
        return cls(_items_from_json(Address, data))

    def to_json(self) -> str:
        return _items_to_json(Address, self)


class Hashes(list):
    """A list of hashes; a single JSON string reads as a one-item list."""

    def __init__(self, items: Iterable[bytes] = ()) -> None:
        super().__init__(Hash(item) for item in items)

    @classmethod
    def from_json(cls, data: str | bytes) -> Hashes:
        """Parse a JSON array of hashes or a single hash.

        Raises ValueError on invalid input.
        """
        return cls(_items_from_json(Hash, data))

    def to_json(self) -> str:
        return _items_to_json(Hash, self)


def hex_to_addresses(*args: str) -> Addresses:
    """Parse hex strings into Addresses."""
    return Addresses(Address.from_hex(text) for text in args)


def hex_to_hashes(*args: str) -> Hashes:
    """Parse hex strings into Hashes."""
    return Hashes(Hash.from_hex(text) for text in args)