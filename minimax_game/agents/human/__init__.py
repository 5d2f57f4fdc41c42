"""Agents driven by a person."""
from .console_agent import ConsoleInputAgent

__all__ = [
    "ConsoleInputAgent",
]
