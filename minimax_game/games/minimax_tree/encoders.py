from __future__ import annotations

from typing import Callable

import numpy as np

from ...core.encoder import Encoder
from .game import MTGameState
from .tree import GameTree, LEAF_HIGH, LEAF_LOW


def _normalize(values) -> np.ndarray:
    return (np.asarray(values, dtype=np.float32) - LEAF_LOW) / float(LEAF_HIGH - 1 - LEAF_LOW)


class LocalViewEncoder(Encoder):
    """
    Encode only what the mover needs for a one-ply decision.

    Vector (float32, length 5):
    0 : 1.0 if the mover maximizes else 0.0
    1 : layer / (depth - 1)
    2 : branch / 2**layer
    3 : normalized minimax value of the left child (0 at a leaf)
    4 : normalized minimax value of the right child (0 at a leaf)
    """

    def __init__(self, tree_fn: Callable[[], GameTree]):
        # tree_fn returns the tree of the game currently being played
        self.tree_fn = tree_fn

    def encode(self, state: MTGameState) -> np.ndarray:
        tree = self.tree_fn()
        obs = np.zeros(5, dtype=np.float32)
        obs[0] = 1.0 if tree.is_max_layer(state.active_layer) else 0.0
        obs[1] = state.active_layer / max(len(tree) - 1, 1)
        obs[2] = state.active_branch / float(1 << state.active_layer)
        if not state.is_terminal:
            obs[3:5] = _normalize(tree.children(state.active_layer, state.active_branch))
        return obs


class LeafArrayEncoder(Encoder):
    """
    Encode the whole leaf layer plus which leaves are still reachable.

    Vector (float32, length 2 * 2**(depth-1)): normalized leaf values
    followed by a 0/1 mask over the leaves below the current node.
    """

    def __init__(self, tree_fn: Callable[[], GameTree]):
        self.tree_fn = tree_fn

    def encode(self, state: MTGameState) -> np.ndarray:
        tree = self.tree_fn()
        leaves = _normalize(tree.leaves)
        mask = np.zeros_like(leaves)
        below = len(tree) - 1 - state.active_layer
        start = state.active_branch << below
        mask[start : start + (1 << below)] = 1.0
        return np.concatenate([leaves, mask])
