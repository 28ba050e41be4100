"""Merkle tree construction — pure functions, no I/O.

Standard binary SHA-256 Merkle tree over an ordered sequence of leaves.
Layers run from the leaves (index 0) to the root (last index). If a layer
has an odd number of entries, the last one is hashed with itself before
promotion, so every entry above the leaves is a pair hash.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, model_validator

from merkle_funnel.merkle.hashing import hash_pair, is_fingerprint, leaf_hash

log = logging.getLogger("merkle.tree")

EMPTY_INPUT_MESSAGE = "cannot build a tree with no data"


class EmptyInputError(ValueError):
    """Raised when a tree is requested for zero items."""

    def __init__(self, message: str = EMPTY_INPUT_MESSAGE) -> None:
        super().__init__(message)


def reduce_layer(layer: list[str]) -> list[str]:
    """Hash one layer into the next, pairing left to right."""
    next_layer: list[str] = []
    for i in range(0, len(layer), 2):
        if i + 1 < len(layer):
            next_layer.append(hash_pair(layer[i], layer[i + 1]))
        else:
            # Odd leaf: duplicate
            next_layer.append(hash_pair(layer[i], layer[i]))
    return next_layer


def build_layers(items: Iterable[Any]) -> list[list[str]]:
    """Build full Merkle tree layers.

    Returns list of layers from leaves (index 0) to root (last index).
    Each layer is a list of hex hash strings.

    Raises EmptyInputError for empty input, before hashing anything.
    """
    items = list(items)
    if not items:
        raise EmptyInputError()

    layers: list[list[str]] = [[leaf_hash(item) for item in items]]

    while len(layers[-1]) > 1:
        layers.append(reduce_layer(layers[-1]))

    return layers


def compute_merkle_root(items: Iterable[Any]) -> str:
    """Compute the Merkle root of a sequence of leaf items."""
    return build_layers(items)[-1][0]


class MerkleTree(BaseModel):
    """Fully built tree. Holds fingerprints only, never the leaf items."""

    model_config = ConfigDict(frozen=True)

    layers: tuple[tuple[str, ...], ...]

    @model_validator(mode="after")
    def _validate_shape(self) -> "MerkleTree":
        """Enforce the layer-halving law and a single-entry root layer."""
        if not self.layers:
            raise ValueError("tree must have at least one layer")

        for depth, layer in enumerate(self.layers):
            if not layer:
                raise ValueError(f"layer {depth} is empty")
            bad = [h for h in layer if not is_fingerprint(h)]
            if bad:
                raise ValueError(f"layer {depth} has malformed fingerprint {bad[0]!r}")

        for depth in range(len(self.layers) - 1):
            expected = (len(self.layers[depth]) + 1) // 2
            actual = len(self.layers[depth + 1])
            if actual != expected:
                raise ValueError(
                    f"layer {depth + 1} has {actual} entries, "
                    f"expected {expected} (half of layer {depth}, rounded up)"
                )

        if len(self.layers[-1]) != 1:
            raise ValueError(
                f"final layer must hold exactly one root, got {len(self.layers[-1])}"
            )
        if any(len(layer) == 1 for layer in self.layers[:-1]):
            raise ValueError("tree continues past a single-entry layer")

        return self

    @classmethod
    def build(cls, items: Iterable[Any]) -> "MerkleTree":
        """Hash items into a complete tree.

        Items must implement Hashable (or be str/bytes). Raises
        EmptyInputError when there are no items.
        """
        layers = build_layers(items)
        # Shape holds by construction; leaf fingerprints may come from any
        # fixed-output hash a Hashable chooses.
        tree = cls.model_construct(layers=tuple(tuple(layer) for layer in layers))
        log.debug(
            "Built Merkle tree: %d leaves, %d layers, root=%s...",
            len(layers[0]), len(layers), layers[-1][0][:16],
        )
        return tree

    def root(self) -> str:
        return self.layers[-1][0]

    def depth(self) -> int:
        """Number of layers, leaves included."""
        return len(self.layers)

    def leaves(self) -> tuple[str, ...]:
        return self.layers[0]

    def summary(self, include_layers: bool = False) -> dict[str, Any]:
        """JSON-ready summary of the tree."""
        result: dict[str, Any] = {
            "root": self.root(),
            "depth": self.depth(),
            "leaf_count": len(self.leaves()),
        }
        if include_layers:
            result["layers"] = [list(layer) for layer in self.layers]
        return result


def build(items: Iterable[Any]) -> MerkleTree:
    """Build a MerkleTree from an ordered sequence of leaf items."""
    return MerkleTree.build(items)
