"""Minimax tree game implementation."""
from .tree import GameTree, generate, combine, is_max_layer, LEAF_LOW, LEAF_HIGH
from .game import (
    Direction,
    Player,
    MTGameState,
    MinimaxTreeGame,
    initial_state,
    apply,
    is_terminal,
    outcome,
)
from .oracle import decide
from .solver import BackwardInductionSolver
from .rendering import render_text
from .encoders import LocalViewEncoder, LeafArrayEncoder

__all__ = [
    "GameTree",
    "generate",
    "combine",
    "is_max_layer",
    "LEAF_LOW",
    "LEAF_HIGH",
    "Direction",
    "Player",
    "MTGameState",
    "MinimaxTreeGame",
    "initial_state",
    "apply",
    "is_terminal",
    "outcome",
    "decide",
    "BackwardInductionSolver",
    "render_text",
    "LocalViewEncoder",
    "LeafArrayEncoder",
]
