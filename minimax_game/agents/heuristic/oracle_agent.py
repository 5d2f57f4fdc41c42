from __future__ import annotations

from ...core.agent import Agent
from ...games.minimax_tree.game import Direction, MTGameState, MinimaxTreeGame
from ...games.minimax_tree.oracle import decide


class OracleAgent(Agent):
    """Computer seat that always plays the minimax-optimal direction."""

    def __init__(self, game: MinimaxTreeGame):
        self.game = game

    def act(self, state: MTGameState) -> Direction:
        tree = self.game.tree
        if tree is None:
            raise RuntimeError("Game not reset")
        return decide(state, tree, tree.root_maximizes)
