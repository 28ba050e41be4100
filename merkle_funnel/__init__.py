"""Merkle Funnel — binary SHA-256 Merkle trees over ordered leaf items."""

from merkle_funnel.merkle import (
    EmptyInputError,
    Hashable,
    MerkleTree,
    build,
    compute_merkle_root,
)

__all__ = [
    "EmptyInputError",
    "Hashable",
    "MerkleTree",
    "build",
    "compute_merkle_root",
]
