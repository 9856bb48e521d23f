"""Opaque identifiers: entity ids and 0x-prefixed transaction hashes."""

from __future__ import annotations

import uuid

TX_HASH_HEX_LENGTH = 64


def new_id(prefix: str) -> str:
    """Short prefixed id, e.g. market_1a2b3c4d."""
    return f"{prefix}_{uuid.uuid4().hex[:8]}"


def new_tx_hash() -> str:
    """0x followed by 64 lowercase hex characters, unique per call."""
    return "0x" + (uuid.uuid4().hex + uuid.uuid4().hex)[:TX_HASH_HEX_LENGTH]
