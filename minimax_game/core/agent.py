from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .game import GameState


class Agent(ABC):
    """
    Base class for anything that can occupy a seat: humans, heuristics, learners.
    """

    @abstractmethod
    def act(self, state: GameState) -> Any:
        """
        Choose an action given the current GameState.
        """
        raise NotImplementedError

    def reset(self) -> None:
        """
        Forget per-game memory before a new game starts.
        Default implementation does nothing.
        """
