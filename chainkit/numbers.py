"""Hex-encoded integers and block numbers as used by Ethereum JSON-RPC."""

from __future__ import annotations

from dataclasses import dataclass

from chainkit.hexcodec import big_int_to_hex, hex_to_big_int, naive_quote, naive_unquote

_EARLIEST = -1
_LATEST = -2
_PENDING = -3

_TAG_VALUES = {"earliest": _EARLIEST, "latest": _LATEST, "pending": _PENDING}
_VALUE_TAGS = {value: name for name, value in _TAG_VALUES.items()}

_INT64_MAX = 2**63 - 1


def _as_text(data: str | bytes) -> str:
    return data.decode() if isinstance(data, (bytes, bytearray)) else data


@dataclass(frozen=True, order=True)
class Number:
    """An arbitrary-size integer encoded as a hex quantity."""

    value: int = 0

    @classmethod
    def from_hex(cls, text: str) -> Number:
        """Parse a hex string; invalid input yields zero."""
        try:
            return cls(hex_to_big_int(text))
        except ValueError:
            return cls()

    @classmethod
    def from_json(cls, data: str | bytes) -> Number:
        """Parse a JSON hex string. Raises ValueError on invalid input."""
        return cls(hex_to_big_int(naive_unquote(_as_text(data))))

    def to_json(self) -> str:
        return naive_quote(self.to_text())

    def to_text(self) -> str:
        return big_int_to_hex(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return "0x" + format(self.value, "x")


@dataclass(frozen=True)
class BlockNumber:
    """A block number or one of the tags ``earliest``, ``latest``, ``pending``.

    Tags are stored as the negative values -1, -2 and -3.
    """

    value: int = 0

    @classmethod
    def _parse(cls, text: str) -> BlockNumber:
        tag = _TAG_VALUES.get(text.strip())
        if tag is not None:
            return cls(tag)
        value = hex_to_big_int(text)
        if value > _INT64_MAX:
            raise ValueError("block number larger than int64")
        return cls(value)

    @classmethod
    def from_string(cls, text: str) -> BlockNumber:
        """Parse a hex number or tag; invalid input yields block zero."""
        try:
            return cls._parse(text)
        except ValueError:
            return cls()

    @classmethod
    def from_json(cls, data: str | bytes) -> BlockNumber:
        """Parse a JSON hex number or tag. Raises ValueError on invalid input."""
        return cls._parse(naive_unquote(_as_text(data)))

    def to_json(self) -> str:
        return naive_quote(self.to_text())

    def to_text(self) -> str:
        tag = _VALUE_TAGS.get(self.value)
        if tag is not None:
            return tag
        return big_int_to_hex(self.value)

    def is_earliest(self) -> bool:
        return self.value == _EARLIEST

    def is_latest(self) -> bool:
        return self.value == _LATEST

    def is_pending(self) -> bool:
        return self.value == _PENDING

    def is_tag(self) -> bool:
        return self.value < 0

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.to_text()


EARLIEST_BLOCK_NUMBER = BlockNumber(_EARLIEST)
LATEST_BLOCK_NUMBER = BlockNumber(_LATEST)
PENDING_BLOCK_NUMBER = BlockNumber(_PENDING)