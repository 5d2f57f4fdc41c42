from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, List, Tuple

import numpy as np

from ...core.config import MAX_DEPTH
from ...core.errors import ConfigError, InvariantViolation
from ...core.game import Game, GameState
from .rendering import render_text
from .tree import GameTree, generate


class Direction(Enum):
    LEFT = 0
    RIGHT = 1

    def __str__(self) -> str:
        return self.name.lower()


class Player(Enum):
    ONE = "One"
    TWO = "Two"

    @property
    def other(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE

    def __str__(self) -> str:
        return f"Player {self.value}"


@dataclass(frozen=True)
class MTGameState(GameState):
    """Position of play in a tree with ``depth`` layers."""

    active_layer: int
    active_branch: int
    active_player: Player
    depth: int

    @property
    def is_terminal(self) -> bool:
        return self.active_layer == self.depth - 1


def initial_state(depth: int) -> MTGameState:
    """Root of a tree with ``depth`` layers; player One always moves first."""
    if depth < 1:
        raise ConfigError(f"depth must be a positive integer, got {depth!r}")
    return MTGameState(active_layer=0, active_branch=0, active_player=Player.ONE, depth=depth)


def apply(state: MTGameState, direction: Direction) -> MTGameState:
    """Descend one layer; the other player moves next."""
    if state.is_terminal:
        raise InvariantViolation(
            f"cannot move {direction} from leaf ({state.active_layer}, {state.active_branch})"
        )
    return replace(
        state,
        active_layer=state.active_layer + 1,
        active_branch=2 * state.active_branch + Direction(direction).value,
        active_player=state.active_player.other,
    )


def _check_tree(state: MTGameState, tree: GameTree) -> None:
    if state.depth != len(tree):
        raise InvariantViolation(
            f"state expects a tree of depth {state.depth}, got depth {len(tree)}"
        )


def is_terminal(state: MTGameState, tree: GameTree) -> bool:
    _check_tree(state, tree)
    return state.active_layer == len(tree) - 1


def outcome(state: MTGameState, tree: GameTree) -> int:
    """Value of the leaf play ended on."""
    if not is_terminal(state, tree):
        raise InvariantViolation(f"no outcome yet: play is at layer {state.active_layer}")
    return tree.value(state.active_layer, state.active_branch)


class MinimaxTreeGame(Game):
    """
    Left/right descent game on a randomly valued perfect binary tree.

    Player One moves at even layers, Player Two at odd layers. The leaf
    reached is the result; the maximizer wants it high, the minimizer low.
    Reward from ``step`` is the leaf value on the final move and 0 otherwise.
    """

    def __init__(
        self,
        depth: int = 4,
        root_maximizes: bool = True,
        rng: np.random.Generator | None = None,
        tree: GameTree | None = None,
    ) -> None:
        if tree is not None:
            depth = len(tree)
            root_maximizes = tree.root_maximizes
        if isinstance(depth, bool) or not isinstance(depth, int) or depth < 1:
            raise ConfigError(f"depth must be a positive integer, got {depth!r}")
        if depth > MAX_DEPTH:
            raise ConfigError(f"depth must be at most {MAX_DEPTH}, got {depth}")
        self.depth = depth
        self.root_maximizes = root_maximizes
        self.rng = rng or np.random.default_rng()
        self._fixed_tree = tree

        # internal state
        self.tree: GameTree | None = None
        self._state: MTGameState | None = None

    # ------------------------------------------------------------------
    # Game interface
    # ------------------------------------------------------------------
    def reset(self, seed: int | None = None) -> MTGameState:
        if seed is not None:
            self.rng = np.random.default_rng(seed)
        if self._fixed_tree is not None:
            self.tree = self._fixed_tree
        else:
            self.tree = generate(self.depth, self.root_maximizes, self.rng)
        self._state = initial_state(self.depth)
        return self._state

    def step(self, action: Direction) -> Tuple[MTGameState, float, bool, Dict[str, Any]]:
        if self._state is None or self.tree is None:
            raise RuntimeError("Game not reset")
        direction = Direction(action)
        mover = self._state.active_player
        self._state = apply(self._state, direction)
        done = is_terminal(self._state, self.tree)
        reward = float(outcome(self._state, self.tree)) if done else 0.0
        info: Dict[str, Any] = {"player": mover, "direction": direction}
        return self._state, reward, done, info

    def legal_actions(self, state: MTGameState | None = None) -> List[Direction]:
        st = state or self._state
        if st is None:
            raise RuntimeError("Game not reset")
        if st.is_terminal:
            return []
        return [Direction.LEFT, Direction.RIGHT]

    def render(self, state: MTGameState | None = None, mode: str = "human") -> Any:
        st = state or self._state
        if st is None or self.tree is None:
            raise RuntimeError("Game not reset")
        if mode == "human":
            print(render_text(self.tree, st))
        elif mode == "ansi":
            return render_text(self.tree, st)
        else:
            raise ValueError(f"Unsupported render mode {mode}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def state(self) -> MTGameState | None:
        return self._state

    def goal_of(self, player: Player) -> str:
        """'maximize' or 'minimize' for the given seat."""
        maximizes = self.root_maximizes if player is Player.ONE else not self.root_maximizes
        return "maximize" if maximizes else "minimize"
