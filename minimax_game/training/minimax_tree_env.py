from __future__ import annotations

from typing import Any, Dict, Tuple

from gymnasium import spaces

from ..agents.heuristic import OracleAgent
from ..core.agent import Agent
from ..core.encoder import Encoder
from ..core.errors import ConfigError
from ..games.minimax_tree import Direction, MTGameState, MinimaxTreeGame, LEAF_HIGH, LEAF_LOW
from .gym_env import GameEnv


class MinimaxTreeEnv(GameEnv):
    """
    The learning agent plays Player One; ``opponent`` (optimal by default)
    answers as Player Two inside each step.

    Reward is 0 until the leaf, then the leaf value scaled to [0, 1] so that
    1 is best for Player One whichever goal it has.
    """

    def __init__(self, game: MinimaxTreeGame, encoder: Encoder, opponent: Agent | None = None):
        if game.depth < 2:
            raise ConfigError("a training environment needs a tree with at least two layers")
        self.tree_game = game  # Store typed reference
        self.opponent = opponent or OracleAgent(game)
        super().__init__(game, encoder, max_episode_steps=game.depth - 1)

    def _setup_action_space(self):
        """0 = left, 1 = right."""
        self.action_space = spaces.Discrete(len(Direction))

    def _decode_action(self, action: int) -> Direction:
        return Direction(int(action))

    def _play(self, game_action: Direction) -> Tuple[MTGameState, float, bool, Dict[str, Any]]:
        state, leaf, done, info = self.tree_game.step(game_action)
        if not done:
            reply = self.opponent.act(state)
            state, leaf, done, info = self.tree_game.step(reply)
            info["opponent_direction"] = reply
        reward = self._score(leaf) if done else 0.0
        if done:
            info["outcome"] = int(leaf)
        return state, reward, done, info

    def _score(self, leaf: float) -> float:
        scaled = (leaf - LEAF_LOW) / float(LEAF_HIGH - 1 - LEAF_LOW)
        return scaled if self.tree_game.root_maximizes else 1.0 - scaled
