from __future__ import annotations

from typing import Any, Dict, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from ..core.game import Game, GameState
from ..core.encoder import Encoder


class GameEnv(gym.Env):
    """
    Gymnasium environment wrapper around our Game abstraction.
    """

    def __init__(self, game: Game, encoder: Encoder, max_episode_steps: int = 1000):
        super().__init__()
        self.game = game
        self.encoder = encoder
        self.max_episode_steps = max_episode_steps
        self._current_state: GameState | None = None
        self._step_count = 0

        self._setup_action_space()
        self._setup_observation_space()

    def _setup_action_space(self):
        """Setup action space - this is game-specific."""
        raise NotImplementedError

    def _setup_observation_space(self):
        """Setup observation space based on encoder."""
        # Encode a fresh state to learn the observation shape
        dummy_state = self.game.reset()
        dummy_obs = self.encoder.encode(dummy_state)

        if isinstance(dummy_obs, np.ndarray):
            if dummy_obs.ndim == 1:
                # Encoders emit values normalized to [0, 1]
                self.observation_space = spaces.Box(
                    low=0.0, high=1.0, shape=dummy_obs.shape, dtype=dummy_obs.dtype
                )
            else:
                raise ValueError(f"Unsupported observation shape: {dummy_obs.shape}")
        else:
            raise ValueError(f"Unsupported observation type: {type(dummy_obs)}")

    def reset(self, seed: int | None = None, **kwargs) -> Tuple[np.ndarray, Dict[str, Any]]:
        """Reset the environment."""
        super().reset(seed=seed)
        self._current_state = self.game.reset(seed=seed)
        self._step_count = 0
        obs = self.encoder.encode(self._current_state)
        return obs, {}

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """Take a step in the environment."""
        if self._current_state is None:
            raise RuntimeError("Environment not reset")

        game_action = self._decode_action(action)
        self._current_state, reward, done, info = self._play(game_action)
        self._step_count += 1

        truncated = not done and self._step_count >= self.max_episode_steps

        obs = self.encoder.encode(self._current_state)
        return obs, float(reward), bool(done), truncated, info

    def _play(self, game_action: Any) -> Tuple[GameState, float, bool, Dict[str, Any]]:
        """Advance the game by one agent action; subclasses may add opponent replies."""
        return self.game.step(game_action)

    def _decode_action(self, action: int) -> Any:
        """Convert flat action index to game-specific action format."""
        raise NotImplementedError

    def render(self, mode: str = "ansi"):
        """Render the environment."""
        if self._current_state is None:
            return None
        return self.game.render(self._current_state, mode=mode)
