"""Merkle tree core — leaf hashing, pair hashing, layered tree builder.

Hashing: merkle_funnel/merkle/hashing.py (Hashable contract, SHA-256 helpers)
Tree:    merkle_funnel/merkle/tree.py    (layer reduction, MerkleTree)
"""

from merkle_funnel.merkle.hashing import (
    FINGERPRINT_LENGTH,
    BytesLeaf,
    Hashable,
    RecordLeaf,
    TextLeaf,
    hash_bytes,
    hash_pair,
    is_fingerprint,
    leaf_hash,
)
from merkle_funnel.merkle.tree import (
    EMPTY_INPUT_MESSAGE,
    EmptyInputError,
    MerkleTree,
    build,
    build_layers,
    compute_merkle_root,
    reduce_layer,
)

__all__ = [
    # Hashing
    "FINGERPRINT_LENGTH",
    "Hashable",
    "TextLeaf",
    "BytesLeaf",
    "RecordLeaf",
    "hash_bytes",
    "hash_pair",
    "is_fingerprint",
    "leaf_hash",
    # Tree
    "EMPTY_INPUT_MESSAGE",
    "EmptyInputError",
    "MerkleTree",
    "build",
    "build_layers",
    "compute_merkle_root",
    "reduce_layer",
]
