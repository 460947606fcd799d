import pytest

from chainkit.hexcodec import (
    big_int_to_hex,
    bytes_to_hex,
    fixed_bytes_from_hex,
    has_0x_prefix,
    hex_to_big_int,
    hex_to_bytes,
    naive_quote,
    naive_unquote,
)


def test_bytes_to_hex_lowercase_prefixed():
    assert bytes_to_hex(bytes([0xDE, 0xAD, 0xBE, 0xEF])) == "0xdeadbeef"


def test_bytes_to_hex_empty():
    assert bytes_to_hex(b"") == "0x"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0xDEADBEEF", bytes([0xDE, 0xAD, 0xBE, 0xEF])),
        ("DEADBEEF", bytes([0xDE, 0xAD, 0xBE, 0xEF])),
        ("0x", b""),
        ("", b""),
        ("0x0", b"\x00"),
    ],
)
def test_hex_to_bytes(text, expected):
    assert hex_to_bytes(text) == expected


def test_hex_to_bytes_pads_odd_length():
    assert hex_to_bytes("0xabc") == b"\x0a\xbc"


@pytest.mark.parametrize("text", ["foo", "0xZZ", "0x 1"])
def test_hex_to_bytes_invalid(text):
    with pytest.raises(ValueError):
        hex_to_bytes(text)


@pytest.mark.parametrize("data", [b"", b"\x00", b"\x01\x02\xff", bytes(range(32))])
def test_bytes_hex_round_trip(data):
    assert hex_to_bytes(bytes_to_hex(data)) == data


def test_fixed_bytes_left_pads():
    assert fixed_bytes_from_hex("0x0102", 4) == b"\x00\x00\x01\x02"


def test_fixed_bytes_exact_length():
    data = bytes(range(20))
    assert fixed_bytes_from_hex(bytes_to_hex(data), 20) == data


def test_fixed_bytes_too_long():
    with pytest.raises(ValueError, match="want 2"):
        fixed_bytes_from_hex("0x010203", 2)


def test_big_int_to_hex_zero():
    assert big_int_to_hex(0) == "0x0"


def test_big_int_to_hex_positive():
    assert big_int_to_hex(15) == "0xf"


def test_big_int_to_hex_negative_prefix():
    assert big_int_to_hex(-15) == "-0xf"


@pytest.mark.parametrize("value", [0, 1, 15, -1, -255, 2**256 - 1, -(2**200)])
def test_big_int_round_trip(value):
    assert hex_to_big_int(big_int_to_hex(value)) == value


def test_hex_to_big_int_without_prefix():
    assert hex_to_big_int("F") == 15
    assert hex_to_big_int("0") == 0


@pytest.mark.parametrize("text", ["", "0x", "-", "-0x", "foo", "0xZ", "0x_1"])
def test_hex_to_big_int_invalid(text):
    with pytest.raises(ValueError):
        hex_to_big_int(text)


@pytest.mark.parametrize("text, expected", [("0x1", True), ("0X1", True), ("1", False), ("0", False), ("", False)])
def test_has_0x_prefix(text, expected):
    assert has_0x_prefix(text) is expected


@pytest.mark.parametrize("text", ["", "abc", "0x10", 'a"b'])
def test_quote_round_trip(text):
    quoted = naive_quote(text)
    assert quoted.startswith('"') and quoted.endswith('"')
    assert naive_unquote(quoted) == text


def test_naive_unquote_leaves_unquoted_text():
    assert naive_unquote("null") == "null"
    assert naive_unquote('"') == '"'