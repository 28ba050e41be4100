"""Leaf and pair hashing — pure functions, no I/O.

Fingerprints are lowercase hex SHA-256 digests (64 chars). Pair hashing
concatenates the two hex strings as text, left then right, with no
separator and no leaf/node prefix.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

FINGERPRINT_LENGTH = hashlib.sha256().digest_size * 2


@runtime_checkable
class Hashable(Protocol):
    """Anything that can produce its own leaf fingerprint.

    to_hash() must be deterministic across calls and processes, and must
    not fail for any value of the implementing type.

    Unrelated to collections.abc.Hashable (which is about __hash__).
    """

    def to_hash(self) -> str: ...


def hash_bytes(data: bytes) -> str:
    """SHA-256 of raw bytes as lowercase hex."""
    return hashlib.sha256(data).hexdigest()


def hash_pair(left: str, right: str) -> str:
    """Hash two fingerprints together (left first)."""
    return hash_bytes((left + right).encode("utf-8"))


# ── Reference leaf types ─────────────────────────────────────────────


class TextLeaf(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str

    def to_hash(self) -> str:
        return hash_bytes(self.value.encode("utf-8"))


class BytesLeaf(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: bytes

    def to_hash(self) -> str:
        return hash_bytes(self.value)


class RecordLeaf(BaseModel):
    """Structured record hashed via canonical JSON.

    Canonical JSON: sorted keys, no spaces, ensure_ascii. Key order in the
    source dict does not affect the fingerprint.
    """

    model_config = ConfigDict(frozen=True)

    record: dict[str, Any]

    def canonical(self) -> str:
        return json.dumps(self.record, sort_keys=True, separators=(",", ":"), ensure_ascii=True)

    def to_hash(self) -> str:
        return hash_bytes(self.canonical().encode("utf-8"))


def leaf_hash(item: Any) -> str:
    """Fingerprint a single leaf item.

    Hashable objects supply their own fingerprint. Plain str and bytes are
    hashed the same way TextLeaf and BytesLeaf would hash them.
    """
    if isinstance(item, Hashable):
        return item.to_hash()
    if isinstance(item, str):
        return hash_bytes(item.encode("utf-8"))
    if isinstance(item, (bytes, bytearray)):
        return hash_bytes(bytes(item))
    raise TypeError(
        f"{type(item).__name__} cannot be a Merkle leaf: "
        f"implement to_hash() or pass str/bytes"
    )


def is_fingerprint(value: str) -> bool:
    """True if value looks like a SHA-256 hex fingerprint."""
    if len(value) != FINGERPRINT_LENGTH:
        return False
    return all(c in "0123456789abcdef" for c in value)
