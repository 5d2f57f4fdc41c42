from __future__ import annotations

from ...core.errors import InvariantViolation
from .game import Direction, MTGameState
from .tree import GameTree, is_max_layer


def decide(state: MTGameState, tree: GameTree, root_maximizes: bool) -> Direction:
    """
    Optimal direction for the player to move, read off the precomputed values.

    The tree already holds minimax values, so a one-ply comparison of the two
    children is enough. Ties go left.
    """
    if state.active_layer >= len(tree) - 1:
        raise InvariantViolation(
            f"no move to decide at leaf ({state.active_layer}, {state.active_branch})"
        )
    goal_is_max = is_max_layer(state.active_layer, root_maximizes)
    left, right = tree.children(state.active_layer, state.active_branch)
    if (goal_is_max and left >= right) or (not goal_is_max and left <= right):
        return Direction.LEFT
    return Direction.RIGHT
