import pytest

from chainkit.numbers import (
    EARLIEST_BLOCK_NUMBER,
    LATEST_BLOCK_NUMBER,
    PENDING_BLOCK_NUMBER,
    BlockNumber,
    Number,
)


@pytest.mark.parametrize(
    "arg, want",
    [('"0x0"', Number(0)), ('"0xF"', Number(15)), ('"0"', Number(0)), ('"F"', Number(15))],
)
def test_number_unmarshal(arg, want):
    assert Number.from_json(arg) == want


@pytest.mark.parametrize("arg", ['"foo"', '"0xZ"'])
def test_number_unmarshal_error(arg):
    with pytest.raises(ValueError):
        Number.from_json(arg)


@pytest.mark.parametrize("arg, want", [(Number(0), '"0x0"'), (Number(15), '"0xf"')])
def test_number_marshal(arg, want):
    assert arg.to_json() == want


def test_number_from_json_accepts_bytes():
    assert Number.from_json(b'"0xF"') == Number(15)


def test_number_from_hex_round_trip():
    assert Number.from_hex("0x1e8480").to_text() == "0x1e8480"


def test_number_from_hex_invalid_yields_zero():
    assert Number.from_hex("foo") == Number(0)


@pytest.mark.parametrize("value", [0, 1, 255, 2**256 - 1, -7])
def test_number_json_round_trip(value):
    number = Number(value)
    assert Number.from_json(number.to_json()) == number


def test_number_ordering():
    assert sorted([Number(5), Number(1), Number(3)]) == [Number(1), Number(3), Number(5)]


@pytest.mark.parametrize(
    "arg, want, is_tag, is_earliest, is_latest, is_pending",
    [
        ('"0x0"', BlockNumber(0), False, False, False, False),
        ('"0xF"', BlockNumber(15), False, False, False, False),
        ('"0"', BlockNumber(0), False, False, False, False),
        ('"F"', BlockNumber(15), False, False, False, False),
        ('"earliest"', EARLIEST_BLOCK_NUMBER, True, True, False, False),
        ('"latest"', LATEST_BLOCK_NUMBER, True, False, True, False),
        ('"pending"', PENDING_BLOCK_NUMBER, True, False, False, True),
    ],
)
def test_block_number_unmarshal(arg, want, is_tag, is_earliest, is_latest, is_pending):
    value = BlockNumber.from_json(arg)
    assert value == want
    assert value.is_tag() is is_tag
    assert value.is_earliest() is is_earliest
    assert value.is_latest() is is_latest
    assert value.is_pending() is is_pending


@pytest.mark.parametrize("arg", ['"foo"', '"0xZ"'])
def test_block_number_unmarshal_error(arg):
    with pytest.raises(ValueError):
        BlockNumber.from_json(arg)


def test_block_number_larger_than_int64():
    with pytest.raises(ValueError, match="int64"):
        BlockNumber.from_json('"0x8000000000000000"')


@pytest.mark.parametrize(
    "arg, want",
    [
        (BlockNumber(0), '"0x0"'),
        (BlockNumber(15), '"0xf"'),
        (EARLIEST_BLOCK_NUMBER, '"earliest"'),
        (LATEST_BLOCK_NUMBER, '"latest"'),
        (PENDING_BLOCK_NUMBER, '"pending"'),
    ],
)
def test_block_number_marshal(arg, want):
    assert arg.to_json() == want


def test_block_number_tag_with_whitespace():
    assert BlockNumber.from_json('" latest "') == LATEST_BLOCK_NUMBER


def test_block_number_from_string():
    assert BlockNumber.from_string("latest") == LATEST_BLOCK_NUMBER
    assert BlockNumber.from_string("0x10").to_text() == "0x10"


def test_block_number_from_string_invalid_yields_zero():
    assert BlockNumber.from_string("foo") == BlockNumber(0)


@pytest.mark.parametrize("value", [0, 1, 16, 2**63 - 1, -1, -2, -3])
def test_block_number_json_round_trip(value):
    block = BlockNumber(value)
    assert BlockNumber.from_json(block.to_json()) == block


def test_block_number_str_matches_text():
    assert str(PENDING_BLOCK_NUMBER) == "pending"
    assert str(BlockNumber(15)) == BlockNumber(15).to_text()