from __future__ import annotations

from typing import List

from ...core.solver import HeuristicSolver
from .game import Direction, MTGameState, MinimaxTreeGame, apply
from .oracle import decide


class BackwardInductionSolver(HeuristicSolver):
    """Principal variation: the line both players follow under optimal play."""

    def __init__(self, game: MinimaxTreeGame):
        self.game = game

    def solve(self, state: MTGameState) -> List[Direction]:
        tree = self.game.tree
        if tree is None:
            raise RuntimeError("Game not reset")
        line: List[Direction] = []
        current = state
        while not current.is_terminal:
            direction = decide(current, tree, tree.root_maximizes)
            line.append(direction)
            current = apply(current, direction)
        return line
