"""
One play-through of the minimax tree game.

A session owns the tree and the current state. Each step asks the agent
in the active seat for a direction and applies it, until a leaf is reached.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from ..core.agent import Agent
from ..core.errors import InvariantViolation
from ..games.minimax_tree.game import (
    Direction,
    MTGameState,
    MinimaxTreeGame,
    Player,
    is_terminal,
    outcome,
)

MoveCallback = Callable[[Player, Direction, MTGameState], None]


class SessionStatus(Enum):
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class Session:
    """
    Turn loop over a reset MinimaxTreeGame.

    Usage:
        game.reset(seed=7)
        session = Session(game, {Player.ONE: human, Player.TWO: OracleAgent(game)})
        result = session.run()
    """

    def __init__(
        self,
        game: MinimaxTreeGame,
        seats: Dict[Player, Agent],
        on_move: Optional[MoveCallback] = None,
    ):
        if game.tree is None or game.state is None:
            raise RuntimeError("Game not reset")
        missing = [p for p in Player if p not in seats]
        if missing:
            raise ValueError(f"No agent seated for {', '.join(str(p) for p in missing)}")
        self.game = game
        self.tree = game.tree
        self.seats = seats
        self.on_move = on_move
        self.state: MTGameState = game.state
        self.history: List[Tuple[Player, Direction]] = []
        self.outcome: Optional[int] = None

        # Same agent may fill both seats (two people at one keyboard).
        for agent in {id(a): a for a in seats.values()}.values():
            agent.reset()

        # A single-layer tree has no moves at all.
        if is_terminal(self.state, self.tree):
            self.outcome = outcome(self.state, self.tree)

    @property
    def status(self) -> SessionStatus:
        return SessionStatus.FINISHED if self.outcome is not None else SessionStatus.IN_PROGRESS

    @property
    def is_finished(self) -> bool:
        return self.status is SessionStatus.FINISHED

    def step(self) -> SessionStatus:
        """Let the active seat make exactly one move."""
        if self.is_finished:
            raise InvariantViolation("session already finished")
        player = self.state.active_player
        direction = Direction(self.seats[player].act(self.state))
        # Advance through the game so it always mirrors the session position.
        self.state, leaf, done, _ = self.game.step(direction)
        self.history.append((player, direction))
        if done:
            self.outcome = int(leaf)
        if self.on_move is not None:
            self.on_move(player, direction, self.state)
        return self.status

    def run(self) -> int:
        """Play until a leaf is reached and return its value."""
        while not self.is_finished:
            self.step()
        return self.outcome
