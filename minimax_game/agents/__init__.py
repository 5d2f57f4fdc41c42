"""Agents that can occupy a seat."""
from .heuristic import OracleAgent, RandomAgent
from .human import ConsoleInputAgent

__all__ = [
    "OracleAgent",
    "RandomAgent",
    "ConsoleInputAgent",
]
