"""JSON-RPC records: blocks, transactions, receipts, logs and fee history."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from typing import Any

from chainkit.byteseq import Address, Addresses, Bloom, Hash, Hashes, HexBytes, Nonce
from chainkit.numbers import BlockNumber, Number


class _Text:
    """A value type that reads and writes its own JSON text."""

    def __init__(self, kind: type) -> None:
        self.kind = kind

    def default(self) -> Any:
        return self.kind()

    def decode(self, raw: Any) -> Any:
        return self.kind.from_json(json.dumps(raw))

    def encode(self, value: Any) -> Any:
        return json.loads(value.to_json())


class _Optional:
    """A value that may be JSON ``null``; its default is ``None``."""

    def __init__(self, inner: Any) -> None:
        self.inner = inner

    def decode(self, raw: Any) -> Any:
        return None if raw is None else self.inner.decode(raw)

    def encode(self, value: Any) -> Any:
        return None if value is None else self.inner.encode(value)


class _List:
    """A JSON array of values; ``null`` reads as an empty list."""

    def __init__(self, inner: Any) -> None:
        self.inner = inner

    def default(self) -> list:
        return []

    def decode(self, raw: Any) -> list:
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise ValueError(f"expected a JSON array, got {type(raw).__name__}")
        return [self.inner.decode(item) for item in raw]

    def encode(self, value: list) -> list:
        return [self.inner.encode(item) for item in value]


class _Nested:
    """A JSON object decoded into another record."""

    def __init__(self, kind: type) -> None:
        self.kind = kind

    def default(self) -> Any:
        return self.kind()

    def decode(self, raw: Any) -> Any:
        return self.kind.from_dict(raw)

    def encode(self, value: Any) -> Any:
        return value.to_dict()


class _Bool:
    def default(self) -> bool:
        return False

    def decode(self, raw: Any) -> bool:
        if raw is None:
            return False
        if not isinstance(raw, bool):
            raise ValueError(f"expected a boolean, got {type(raw).__name__}")
        return raw

    def encode(self, value: Any) -> bool:
        return bool(value)


class _Float:
    def default(self) -> float:
        return 0.0

    def decode(self, raw: Any) -> float:
        if raw is None:
            return 0.0
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise ValueError(f"expected a number, got {type(raw).__name__}")
        return float(raw)

    def encode(self, value: Any) -> float:
        return float(value)


_NUMBER = _Text(Number)
_BLOCK_NUMBER = _Text(BlockNumber)
_BYTES = _Text(HexBytes)
_ADDRESS = _Text(Address)
_ADDRESSES = _Text(Addresses)
_HASH = _Text(Hash)
_HASHES = _Text(Hashes)
_BLOOM = _Text(Bloom)
_NONCE = _Text(Nonce)


def _field(key: str, codec: Any, omitempty: bool = False) -> Any:
    metadata = {"key": key, "codec": codec, "omitempty": omitempty}
    if isinstance(codec, _Optional):
        return field(default=None, metadata=metadata)
    return field(default_factory=codec.default, metadata=metadata)


def _lookup(data: dict, key: str) -> tuple[bool, Any]:
    if key in data:
        return True, data[key]
    folded = key.lower()
    for name, value in data.items():
        if isinstance(name, str) and name.lower() == folded:
            return True, value
    return False, None


def _record_from_dict(cls: type, data: Any) -> Any:
    """Build a record of type ``cls`` from a decoded JSON object.

    Missing keys keep their zero values; keys match case-insensitively
    when no exact match exists. Raises ValueError on invalid values.
    """
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    values = {}
    for spec in fields(cls):
        key = spec.metadata["key"]
        found, raw = _lookup(data, key)
        if not found:
            continue
        try:
            values[spec.name] = spec.metadata["codec"].decode(raw)
        except ValueError as exc:
            raise ValueError(f"{key}: {exc}") from exc
    return cls(**values)


def _record_to_dict(record: Any) -> dict:
    """Return a record as a JSON-ready dictionary."""
    out = {}
    for spec in fields(record):
        value = getattr(record, spec.name)
        if spec.metadata["omitempty"] and value is None:
            continue
        out[spec.metadata["key"]] = spec.metadata["codec"].encode(value)
    return out


@dataclass
class Transaction:
    """A transaction."""

    hash: Hash = _field("hash", _HASH)
    block_hash: Hash = _field("blockHash", _HASH)
    block_number: Number = _field("blockNumber", _NUMBER)
    transaction_index: Number = _field("transactionIndex", _NUMBER)
    from_: Address = _field("from", _ADDRESS)
    to: Address = _field("to", _ADDRESS)
    gas: Number = _field("gas", _NUMBER)
    gas_price: Number = _field("gasPrice", _NUMBER)
    input: HexBytes = _field("input", _BYTES)
    nonce: Number = _field("nonce", _NUMBER)
    value: Number = _field("value", _NUMBER)
    v: Number = _field("v", _NUMBER)
    r: Number = _field("r", _NUMBER)
    s: Number = _field("s", _NUMBER)

    @classmethod
    def from_dict(cls, data: Any) -> Transaction:
        """Build from a decoded JSON object; raises ValueError on bad values."""
        return _record_from_dict(cls, data)

    def to_dict(self) -> dict:
        return _record_to_dict(self)


@dataclass
class Block:
    """A block header with its uncles."""

    number: Number = _field("number", _NUMBER)
    hash: Hash = _field("hash", _HASH)
    parent_hash: Hash = _field("parentHash", _HASH)
    nonce: Nonce = _field("nonce", _NONCE)
    sha3_uncles: Hash = _field("sha3Uncles", _HASH)
    logs_bloom: Bloom = _field("logsBloom", _BLOOM)
    transactions_root: Hash = _field("transactionsRoot", _HASH)
    state_root: Hash = _field("stateRoot", _HASH)
    receipts_root: Hash = _field("receiptsRoot", _HASH)
    miner: Address = _field("miner", _ADDRESS)
    mix_hash: Hash = _field("mixHash", _HASH)
    difficulty: Number = _field("difficulty", _NUMBER)
    total_difficulty: Number = _field("totalDifficulty", _NUMBER)
    extra_data: HexBytes = _field("extraData", _BYTES)
    size: Number = _field("size", _NUMBER)
    gas_limit: Number = _field("gasLimit", _NUMBER)
    gas_used: Number = _field("gasUsed", _NUMBER)
    timestamp: Number = _field("timestamp", _NUMBER)
    uncles: list[Hash] = _field("uncles", _List(_HASH))

    @classmethod
    def from_dict(cls, data: Any) -> Block:
        """Build from a decoded JSON object; raises ValueError on bad values."""
        return _record_from_dict(cls, data)

    def to_dict(self) -> dict:
        return _record_to_dict(self)


@dataclass
class BlockTxHashes(Block):
    """A block listing its transactions by hash."""

    transactions: list[Hash] = _field("transactions", _List(_HASH))

    @classmethod
    def from_dict(cls, data: Any) -> BlockTxHashes:
        """Build from a decoded JSON object; raises ValueError on bad values."""
        return _record_from_dict(cls, data)

    def to_dict(self) -> dict:
        return _record_to_dict(self)


@dataclass
class BlockTxObjects(Block):
    """A block listing its full transactions."""

    transactions: list[Transaction] = _field("transactions", _List(_Nested(Transaction)))

    @classmethod
    def from_dict(cls, data: Any) -> BlockTxObjects:
        """Build from a decoded JSON object; raises ValueError on bad values."""
        return _record_from_dict(cls, data)

    def to_dict(self) -> dict:
        return _record_to_dict(self)


@dataclass
class FeeHistory:
    """The result of a fee history call."""

    oldest_block: Number = _field("oldestBlock", _NUMBER)
    reward: list[list[Number]] = _field("reward", _List(_List(_NUMBER)))
    base_fee_per_gas: list[Number] = _field("baseFeePerGas", _List(_NUMBER))
    gas_used_ratio: list[float] = _field("gasUsedRatio", _List(_Float()))

    @classmethod
    def from_dict(cls, data: Any) -> FeeHistory:
        """Build from a decoded JSON object; raises ValueError on bad values."""
        return _record_from_dict(cls, data)

    def to_dict(self) -> dict:
        return _record_to_dict(self)


@dataclass
class Log:
    """A contract log event."""

    address: Address = _field("address", _ADDRESS)
    topics: list[Hash] = _field("topics", _List(_HASH))
    data: HexBytes = _field("data", _BYTES)
    block_hash: Hash = _field("blockHash", _HASH)
    block_number: Number = _field("blockNumber", _NUMBER)
    tx_hash: Hash = _field("transactionHash", _HASH)
    tx_index: Number = _field("transactionIndex", _NUMBER)
    log_index: Number = _field("logIndex", _NUMBER)
    removed: bool = _field("removed", _Bool())

    @classmethod
    def from_dict(cls, data: Any) -> Log:
        """Build from a decoded JSON object; raises ValueError on bad values."""
        return _record_from_dict(cls, data)

    def to_dict(self) -> dict:
        return _record_to_dict(self)


@dataclass
class FilterLogsQuery:
    """A query that selects logs."""

    address: Addresses = _field("address", _ADDRESSES)
    from_block: BlockNumber | None = _field("fromBlock", _Optional(_BLOCK_NUMBER), omitempty=True)
    to_block: BlockNumber | None = _field("toBlock", _Optional(_BLOCK_NUMBER), omitempty=True)
    topics: list[Hashes] = _field("topics", _List(_HASHES))
    block_hash: Hash | None = _field("blockhash", _Optional(_HASH), omitempty=True)

    @classmethod
    def from_dict(cls, data: Any) -> FilterLogsQuery:
        """Build from a decoded JSON object; raises ValueError on bad values."""
        return _record_from_dict(cls, data)

    def to_dict(self) -> dict:
        return _record_to_dict(self)


@dataclass
class TransactionReceipt:
    """The receipt of a mined transaction."""

    transaction_hash: Hash = _field("transactionHash", _HASH)
    transaction_index: Number = _field("transactionIndex", _NUMBER)
    block_hash: Hash = _field("blockHash", _HASH)
    block_number: Number = _field("blockNumber", _NUMBER)
    from_: Address = _field("from", _ADDRESS)
    to: Address = _field("to", _ADDRESS)
    cumulative_gas_used: Number = _field("cumulativeGasUsed", _NUMBER)
    gas_used: Number = _field("gasUsed", _NUMBER)
    contract_address: Address | None = _field("contractAddress", _Optional(_ADDRESS))
    logs: list[Log] = _field("logs", _List(_Nested(Log)))
    logs_bloom: HexBytes = _field("logsBloom", _BYTES)
    root: Hash | None = _field("root", _Optional(_HASH))
    status: Number | None = _field("status", _Optional(_NUMBER))

    @classmethod
    def from_dict(cls, data: Any) -> TransactionReceipt:
        """Build from a decoded JSON object; raises ValueError on bad values."""
        return _record_from_dict(cls, data)

    def to_dict(self) -> dict:
        return _record_to_dict(self)