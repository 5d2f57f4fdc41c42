from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Tuple, List


@dataclass(frozen=True)
class GameState(ABC):
    """
    Immutable representation of a game state.

    Sub-classes add concrete fields (position, player to move, ...).
    Transitions always return a new instance.
    """

    @property
    @abstractmethod
    def is_terminal(self) -> bool:
        """Return True if the position ends the game."""
        raise NotImplementedError


class Game(ABC):
    """
    Turn-based game with a Gym-like stepping interface.
    """

    @abstractmethod
    def reset(self, seed: int | None = None) -> GameState:
        """
        Start a new game and return the initial state.
        """
        raise NotImplementedError

    @abstractmethod
    def step(
        self, action: Any
    ) -> Tuple[GameState, float, bool, Dict[str, Any]]:
        """
        Apply action and return (next_state, reward, done, info).
        """
        raise NotImplementedError

    @abstractmethod
    def legal_actions(self, state: GameState | None = None) -> List[Any]:
        """
        Return the actions available in the given state (empty when terminal).
        """
        raise NotImplementedError

    @abstractmethod
    def render(self, state: GameState | None = None, mode: str = "human") -> Any:
        """
        Render the current or provided state.

        mode:
            'ansi'  → str
            'human' → print to stdout
        """
        raise NotImplementedError
