from __future__ import annotations

from typing import Iterator, Sequence, Tuple

import numpy as np

from ...core.config import MAX_DEPTH
from ...core.errors import ConfigError, InvariantViolation

# Leaf values are drawn uniformly from the half-open range [LEAF_LOW, LEAF_HIGH).
LEAF_LOW = 100
LEAF_HIGH = 1000


def is_max_layer(layer: int, root_maximizes: bool) -> bool:
    """True iff the player choosing at ``layer`` is the maximizer."""
    return (layer % 2 == 0) == root_maximizes


def combine(is_max: bool, x: int, y: int) -> int:
    """Value of a node whose children are worth ``x`` and ``y``."""
    return max(x, y) if is_max else min(x, y)


class GameTree:
    """
    Perfect binary tree with a minimax value on every node.

    ``layers[0]`` holds the root, ``layers[-1]`` the leaves; layer L has 2**L
    nodes and node (L, b) has children (L+1, 2b) and (L+1, 2b+1).
    Layers are read-only arrays.
    """

    def __init__(self, layers: Sequence[np.ndarray], root_maximizes: bool):
        frozen = []
        for arr in layers:
            arr = np.array(arr, dtype=np.int64)
            arr.flags.writeable = False
            frozen.append(arr)
        self.layers: Tuple[np.ndarray, ...] = tuple(frozen)
        self.root_maximizes = bool(root_maximizes)

    # ---------------------------------------------------------------------
    # Factory helpers
    # ---------------------------------------------------------------------
    @classmethod
    def from_leaves(cls, leaves: Sequence[int], root_maximizes: bool) -> "GameTree":
        """Build the valued tree above a fixed leaf layer by backward induction."""
        leaf_arr = np.asarray(leaves, dtype=np.int64)
        n = leaf_arr.size
        if leaf_arr.ndim != 1 or n == 0 or n & (n - 1):
            raise ConfigError(f"leaf count must be a power of two, got {n}")
        depth = n.bit_length()

        # Fold from the leaves upward, one layer per iteration.
        layers = [leaf_arr]
        for layer in range(depth - 2, -1, -1):
            pairs = layers[-1].reshape(-1, 2)
            if is_max_layer(layer, root_maximizes):
                layers.append(pairs.max(axis=1))
            else:
                layers.append(pairs.min(axis=1))
        layers.reverse()
        return cls(layers, root_maximizes)

    # ---------------------------------------------------------------------
    # Queries
    # ---------------------------------------------------------------------
    @property
    def depth(self) -> int:
        return len(self.layers)

    @property
    def leaves(self) -> np.ndarray:
        return self.layers[-1]

    @property
    def root_value(self) -> int:
        return int(self.layers[0][0])

    def value(self, layer: int, branch: int) -> int:
        if not 0 <= layer < self.depth:
            raise InvariantViolation(f"layer {layer} outside tree of depth {self.depth}")
        if not 0 <= branch < (1 << layer):
            raise InvariantViolation(f"branch {branch} outside layer {layer}")
        return int(self.layers[layer][branch])

    def children(self, layer: int, branch: int) -> Tuple[int, int]:
        """Values of the left and right child of node (layer, branch)."""
        if layer >= self.depth - 1:
            raise InvariantViolation(f"node ({layer}, {branch}) is a leaf")
        return self.value(layer + 1, 2 * branch), self.value(layer + 1, 2 * branch + 1)

    def is_max_layer(self, layer: int) -> bool:
        return is_max_layer(layer, self.root_maximizes)

    def __len__(self) -> int:
        return self.depth

    def __getitem__(self, layer: int) -> np.ndarray:
        return self.layers[layer]

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.layers)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameTree):
            return NotImplemented
        return self.root_maximizes == other.root_maximizes and len(self) == len(other) and all(
            np.array_equal(a, b) for a, b in zip(self.layers, other.layers)
        )

    def __repr__(self) -> str:
        return f"GameTree(depth={self.depth}, root_maximizes={self.root_maximizes}, root_value={self.root_value})"


def generate(
    depth: int,
    root_maximizes: bool,
    rng: np.random.Generator | int | None = None,
) -> GameTree:
    """
    Sample 2**(depth-1) leaves uniformly in [LEAF_LOW, LEAF_HIGH) and value
    every internal node by backward induction.

    ``rng`` may be a Generator, an integer seed, or None for fresh entropy.
    """
    if isinstance(depth, bool) or not isinstance(depth, (int, np.integer)) or depth < 1:
        raise ConfigError(f"depth must be a positive integer, got {depth!r}")
    if depth > MAX_DEPTH:
        raise ConfigError(f"depth must be at most {MAX_DEPTH}, got {depth}")
    if not isinstance(rng, np.random.Generator):
        rng = np.random.default_rng(rng)
    leaves = rng.integers(LEAF_LOW, LEAF_HIGH, size=1 << (int(depth) - 1), dtype=np.int64)
    return GameTree.from_leaves(leaves, root_maximizes)
