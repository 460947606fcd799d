"""Hex encoding helpers shared by the JSON-RPC value types."""

from __future__ import annotations

import re

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")


def has_0x_prefix(text: str) -> bool:
    """Return True if ``text`` starts with ``0x`` or ``0X``."""
    return len(text) >= 2 and text[0] == "0" and text[1] in "xX"


def bytes_to_hex(data: bytes) -> str:
    """Encode bytes as an even-length, ``0x``-prefixed hex string."""
    return "0x" + bytes(data).hex()


def hex_to_bytes(text: str) -> bytes:
    """Decode a hex string into bytes.

    The ``0x`` prefix is optional and an odd number of digits is padded
    with a leading zero. Raises ValueError on invalid digits.
    """
    if text == "0x0":
        return b"\x00"
    if has_0x_prefix(text):
        text = text[2:]
    if not _HEX_DIGITS.fullmatch(text):
        raise ValueError(f"invalid hex string: {text!r}")
    if len(text) % 2:
        text = "0" + text
    return bytes.fromhex(text)


def fixed_bytes_from_hex(text: str, length: int) -> bytes:
    """Decode a hex string into exactly ``length`` bytes, left-padded with zeros.

    Raises ValueError if the decoded data is longer than ``length``.
    """
    data = hex_to_bytes(text)
    if len(data) > length:
        raise ValueError(f"hex string has length {len(data)}, want {length}")
    return data.rjust(length, b"\x00")


def big_int_to_hex(value: int) -> str:
    """Encode an integer as ``0x``-prefixed hex; negatives get ``-0x``."""
    if value == 0:
        return "0x0"
    if value > 0:
        return f"0x{value:x}"
    return f"-0x{-value:x}"


def hex_to_big_int(text: str) -> int:
    """Decode a hex string, optionally ``0x``-prefixed and signed with ``-``.

    Raises ValueError if the string is empty or holds invalid digits.
    """
    if text == "0x0":
        return 0
    negative = len(text) > 1 and text[0] == "-"
    if negative:
        text = text[1:]
    if has_0x_prefix(text):
        text = text[2:]
    if not text:
        raise ValueError("empty hex string")
    if not _HEX_DIGITS.fullmatch(text):
        raise ValueError(f"invalid hex string: {text!r}")
    value = int(text, 16)
    return -value if negative else value


def naive_quote(text: str) -> str:
    """Wrap ``text`` in double quotes without escaping anything."""
    return '"' + text + '"'


def naive_unquote(text: str) -> str:
    """Strip one pair of surrounding double quotes, if present, without unescaping."""
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    return text