"""Gymnasium environments for training agents on a seat."""
from .gym_env import GameEnv
from .minimax_tree_env import MinimaxTreeEnv

__all__ = [
    "GameEnv",
    "MinimaxTreeEnv",
]
