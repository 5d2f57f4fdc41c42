"""
Core abstractions shared across games and agents.
"""
from .game import Game, GameState
from .agent import Agent
from .encoder import Encoder
from .solver import HeuristicSolver
from .errors import ConfigError, InvariantViolation
from .config import GameConfig, load_config

__all__ = [
    "Game",
    "GameState",
    "Agent",
    "Encoder",
    "HeuristicSolver",
    "ConfigError",
    "InvariantViolation",
    "GameConfig",
    "load_config",
]
