"""Ethereum JSON-RPC value types and records, hex codecs, list helpers and score tracking."""

__version__ = "0.1.0"

__all__ = ["byteseq", "hexcodec", "numbers", "records", "scoring", "sliceutil"]