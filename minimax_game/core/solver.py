from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List

from .game import GameState


class HeuristicSolver(ABC):
    """
    Classical search algorithm that can back an agent or explain
    the optimal line of play from a position.
    """

    @abstractmethod
    def solve(self, state: GameState) -> List[Any]:
        """
        Return the sequence of actions leading from state to a terminal state.
        """
        raise NotImplementedError
