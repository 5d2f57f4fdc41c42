from __future__ import annotations

from typing import Callable, Dict

from ...core.agent import Agent
from ...games.minimax_tree.game import Direction, MTGameState

_WORDS: Dict[str, Direction] = {
    "l": Direction.LEFT,
    "left": Direction.LEFT,
    "r": Direction.RIGHT,
    "right": Direction.RIGHT,
}


def parse_direction(text: str) -> Direction | None:
    """Direction named by ``text`` or None if it names neither side."""
    return _WORDS.get(text.strip().lower())


class ConsoleInputAgent(Agent):
    """
    Asks a person at the terminal for each move.

    Keeps asking until the answer names a direction, so callers only ever
    receive a well-formed Direction.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ):
        self.input_fn = input_fn
        self.output = output

    def act(self, state: MTGameState) -> Direction:
        while True:
            answer = self.input_fn(f"{state.active_player}, left or right? ")
            direction = parse_direction(answer)
            if direction is not None:
                return direction
            self.output(f'"{answer.strip()}" is not a direction! Please answer "left" or "right".')
