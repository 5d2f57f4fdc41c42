from __future__ import annotations

import numpy as np

from ...core.agent import Agent
from ...core.game import Game, GameState
from ...games.minimax_tree.game import Direction


class RandomAgent(Agent):
    """Picks uniformly among the legal directions; a baseline opponent."""

    def __init__(self, game: Game, rng: np.random.Generator | int | None = None):
        self.game = game
        self.rng = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)

    def act(self, state: GameState) -> Direction:
        choices = self.game.legal_actions(state)
        if not choices:
            raise ValueError("No legal actions available")
        return choices[int(self.rng.integers(len(choices)))]
