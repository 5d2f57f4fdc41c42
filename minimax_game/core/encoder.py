from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .game import GameState


class Encoder(ABC):
    """
    Converts a domain-specific GameState into an observation array
    suitable for a learning agent.
    """

    @abstractmethod
    def encode(self, state: GameState) -> Any:
        """
        Return observation; shape / dtype depends on concrete encoder.
        """
        raise NotImplementedError
