# chainkit

Small building blocks for code that handles Ethereum JSON-RPC data. The
package has no dependencies outside the standard library.

- `chainkit.hexcodec` – hex helpers in the JSON-RPC style: `0x`-prefixed
  output, optional prefix and odd-length digits accepted on input, negative
  integers written as `-0x…`.
- `chainkit.numbers` – `Number` (an arbitrary-size integer) and `BlockNumber`
  (a block number or one of the tags `earliest`, `latest`, `pending`), with
  the constants `EARLIEST_BLOCK_NUMBER`, `LATEST_BLOCK_NUMBER` and
  `PENDING_BLOCK_NUMBER`.
- `chainkit.byteseq` – `HexBytes` and the fixed-size byte values `Address`
  (20 bytes), `Hash` (32), `Bloom` (256) and `Nonce` (8), the list types
  `Addresses` and `Hashes`, and `hex_to_addresses` / `hex_to_hashes`.
- `chainkit.records` – `Block`, `BlockTxHashes`, `BlockTxObjects`,
  `Transaction`, `TransactionReceipt`, `Log`, `FilterLogsQuery` and
  `FeeHistory`, each with `from_dict` and `to_dict`.
- `chainkit.sliceutil` – list helpers: `copy_items`, `contains`,
  `contains_all`, `map_items`, `filter_items`, `is_unique`, `intersect`,
  `unique`, `index_of` and `append_unique`.
- `chainkit.scoring` – `Scoring`, a thread-safe table of scores with a decay
  function applied on every tick.

## Installation

```
pip install chainkit
```

## Examples

Hex values:

```python
from chainkit.hexcodec import bytes_to_hex, hex_to_bytes, hex_to_big_int

bytes_to_hex(b"\xde\xad\xbe\xef")   # "0xdeadbeef"
hex_to_bytes("0x0")                 # b"\x00"
hex_to_big_int("-0x10")             # -16
```

Invalid digits raise `ValueError`.

Numbers and block numbers:

```python
from chainkit.numbers import Number, BlockNumber

Number.from_hex("0xF").to_json()           # '"0xf"'
latest = BlockNumber.from_string("latest")
latest.is_tag(), latest.is_latest()        # (True, True)
BlockNumber.from_json('"0x10"').to_text()  # "0x10"
```

`from_hex` and `from_string` return zero for input they cannot parse;
`from_json` raises `ValueError` instead. Block numbers above the largest
signed 64-bit value are rejected.

Addresses and hashes:

```python
from chainkit.byteseq import Address, Addresses

addr = Address.from_hex("0x00112233445566778899aabbccddeeff00112233")
addr.to_json()  # '"0x00112233445566778899aabbccddeeff00112233"'

# A single string is accepted where a list is expected.
Addresses.from_json('"0x00112233445566778899aabbccddeeff00112233"')
```

Shorter input is left-padded with zeros; input longer than the fixed size
raises `ValueError` from `from_json`.

Records:

```python
from chainkit.records import FeeHistory

history = FeeHistory.from_dict({
    "oldestBlock": "0xc72641",
    "baseFeePerGas": ["0x12", "0x10"],
    "gasUsedRatio": [0.5],
})
history.oldest_block.value   # 13051457
history.to_dict()["reward"]  # []
```

Missing keys keep their zero values, and keys match case-insensitively when
there is no exact match. A bad value raises `ValueError` naming its key.

List helpers:

```python
from chainkit.sliceutil import intersect, unique, append_unique

intersect(["a", "b", "c"], ["a", "b"])   # ["a", "b"]
unique(["a", "b", "a", "c", "b"])        # ["a", "b", "c"]
append_unique(["a", "b"], "b")           # ["a", "b"]
```

Scores:

```python
from chainkit.scoring import Scoring

scores = Scoring(lambda s: s * 0.9)
scores.add(10, "node-a", "node-b")
scores.increase("node-a", 5)
scores.sorted()        # ["node-a", "node-b"]
scores.get("node-c")   # None
scores.decay()         # applies the decay function to every score
```

`start(ticks)` consumes any iterable in a background thread and calls
`decay()` once per item until the iterable ends or `stop()` is called; a
second `start` raises `RuntimeError`. Items with equal scores come out of
`sorted()` in random order, so callers that pick the first item spread their
load across ties.

## What it does not do

chainkit only models and converts JSON-RPC values. It sends no requests,
runs no server and does not combine answers from several endpoints.

## Running the tests

```
pip install -e ".[test]"
pytest
```