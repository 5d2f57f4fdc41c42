"""Heuristic (non-learning) agents."""
from .oracle_agent import OracleAgent
from .random_agent import RandomAgent

__all__ = [
    "OracleAgent",
    "RandomAgent",
]
