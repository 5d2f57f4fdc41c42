"""
Interactive command shell.

Commands:
    help                 List the commands
    example              Walk through an example game
    begin                Start a game with the current settings
    set <key> = <value>  Change a setting (depth, singleplayer, root_maximizes, seed, typing_delay)
    quit                 Leave
"""
from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

import numpy as np

from ..agents.heuristic import OracleAgent
from ..agents.human import ConsoleInputAgent
from ..core.agent import Agent
from ..core.config import GameConfig, load_config
from ..core.errors import ConfigError
from ..games.minimax_tree import (
    BackwardInductionSolver,
    Direction,
    GameTree,
    MTGameState,
    MinimaxTreeGame,
    Player,
    apply,
    render_text,
)
from .session import Session

TITLE = r"""
 +-----------------------------------+
 |  M   I   N   I   M   A   X        |
 |  a game of perfect knowledge      |
 +-----------------------------------+"""

WELCOME = """Welcome to Minimax!

A perfect binary tree is generated and every leaf gets a random value.
Starting at the root, two players take turns choosing a direction, left or right.
When play reaches the bottom, the value of that leaf is the result of the game.
One player wants that value as large as possible, the other as small as possible.

Enter "example" for a walkthrough or "help" to see everything I understand.
"""

HELP = """These are the commands I know:

example > Walks you through an example game
help    > Prints this list
begin   > Starts a game with the current settings
set {key} = {value} > Changes a setting. The available settings are:
    singleplayer   - true to play against me, false to play against a friend
    depth          - number of layers in the tree, leaves included
    root_maximizes - true if the first player wants the largest leaf
    seed           - an integer to make the tree reproducible, or none
    typing_delay   - seconds I may pause per character when announcing my moves
quit    > Leaves the game"""

# Tree used by the walkthrough; small enough to reason about by hand.
EXAMPLE_LEAVES = (4, 7, 1, 3)

# Depth above which the board stops fitting on a normal terminal.
WIDE_DEPTH = 7


class CommandType(Enum):
    EXAMPLE = "example"
    HELP = "help"
    BEGIN = "begin"
    SET = "set"
    QUIT = "quit"
    INVALID = "invalid"


@dataclass(frozen=True)
class Command:
    kind: CommandType
    argument: str = ""


def parse_command(line: str) -> Command:
    text = line.strip()
    if text in ("example", "help", "begin", "quit"):
        return Command(CommandType(text))
    if text.startswith("set "):
        return Command(CommandType.SET, text[len("set "):])
    return Command(CommandType.INVALID, text)


def parse_assignment(text: str) -> Tuple[str, str]:
    """Split ``key = value`` on the first ``=``; both sides must be non-empty."""
    key, sep, value = text.partition("=")
    key, value = key.strip(), value.strip()
    if not sep or not key or not value:
        raise ConfigError(
            f'Unfortunately I\'m not sure what you are trying to set with the command "{text}"!'
        )
    return key, value


class MinimaxShell:
    """
    Read-eval loop around Session.

    ``output`` must accept print's ``end`` and ``flush`` keywords when a
    typing delay is configured.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        input_fn: Callable[[str], str] = input,
        output: Callable[..., None] = print,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config or GameConfig()
        self.input_fn = input_fn
        self.output = output
        self.sleep = sleep
        self._delay_rng = np.random.default_rng()
        self.last_session: Optional[Session] = None

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------
    def run(self) -> None:
        self.output(TITLE + "\n")
        self.output(WELCOME)
        while True:
            try:
                line = self.input_fn("Please enter a command: ")
                if not self.handle(line):
                    break
            except EOFError:
                # stdin closed, possibly in the middle of a game
                break

    def handle(self, line: str) -> bool:
        """Execute one command line; False means the shell should stop."""
        command = parse_command(line)
        if command.kind is CommandType.QUIT:
            return False
        if command.kind is CommandType.HELP:
            self.output(HELP)
        elif command.kind is CommandType.EXAMPLE:
            self.cmd_example()
        elif command.kind is CommandType.BEGIN:
            self.cmd_begin()
        elif command.kind is CommandType.SET:
            self.cmd_set(command.argument)
        else:
            self.output(f'Beep! Bop! Boop! Cannot compute "{command.argument}"! Haha!')
        return True

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def cmd_set(self, argument: str) -> None:
        try:
            key, value = parse_assignment(argument)
            self.config = self.config.with_setting(key, value)
        except ConfigError as e:
            self.output(str(e))
            return
        value = getattr(self.config, key)
        if isinstance(value, bool):
            value = str(value).lower()
        self.output(f"{key} is now {value}")
        if key == "depth" and self.config.depth >= WIDE_DEPTH:
            self.output("[warn] That is a big tree! It may not fit on your screen.")

    def cmd_begin(self) -> Session:
        cfg = self.config
        game = MinimaxTreeGame(
            depth=cfg.depth,
            root_maximizes=cfg.root_maximizes,
            rng=np.random.default_rng(cfg.seed),
        )
        game.reset()
        human = ConsoleInputAgent(self.input_fn, self.output)
        seats: Dict[Player, Agent] = {
            Player.ONE: human,
            Player.TWO: OracleAgent(game) if cfg.singleplayer else human,
        }
        for player in Player:
            if cfg.singleplayer:
                who = " (me)" if isinstance(seats[player], OracleAgent) else " (you)"
            else:
                who = ""
            self.output(f"{player}{who} wants to {game.goal_of(player)} the result.")

        session = Session(game, seats, on_move=lambda p, d, s: self._announce(game, seats[p], p, d, s))
        self.output(render_text(game.tree, session.state))
        if session.is_finished:
            self.output("A tree with a single layer has nowhere to go!")
        result = session.run()

        self.output(f"The game is over! The result is {result}.")
        best = game.tree.root_value
        if result == best:
            self.output(f"That is exactly what perfect play from both sides gives: {best}.")
        else:
            self.output(f"With perfect play from both sides the result would have been {best}.")
        self.last_session = session
        return session

    def cmd_example(self) -> None:
        tree = GameTree.from_leaves(EXAMPLE_LEAVES, root_maximizes=True)
        game = MinimaxTreeGame(tree=tree)
        state = game.reset()
        left, right = tree.children(0, 0)

        self.output("Let's play on a tiny tree with three layers and four leaves:\n")
        self.output(render_text(tree, state))
        self.output(
            "\nPlayer One moves first and wants the largest leaf. Player Two moves second"
            "\nand wants the smallest. The trick is to work from the bottom up. If play"
            f"\nwent left, Player Two would pick min{tuple(int(v) for v in tree.leaves[:2])} = {left}."
            f"\nIf it went right, Player Two would pick min{tuple(int(v) for v in tree.leaves[2:])} = {right}."
            f"\nSo Player One should pick the larger of {left} and {right}, which is {tree.root_value}."
            "\nHere is the tree with every node labelled by its value under perfect play:\n"
        )
        self.output(render_text(tree, state, show_values=True))
        self.output("\nNow watch both players play perfectly:\n")
        for direction in BackwardInductionSolver(game).solve(state):
            self.output(f"{state.active_player} goes {direction}.")
            state = apply(state, direction)
            self.output(render_text(tree, state))
        self.output(f"\nThe result is {tree.value(state.active_layer, state.active_branch)}. Enter \"begin\" to try it yourself!")

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------
    def _announce(
        self,
        game: MinimaxTreeGame,
        agent: Agent,
        player: Player,
        direction: Direction,
        state: MTGameState,
    ) -> None:
        if isinstance(agent, OracleAgent):
            self._type_out(f"I choose {direction}!")
        else:
            self.output(f"{player} goes {direction}.")
        self.output(render_text(game.tree, state))

    def _type_out(self, text: str) -> None:
        if self.config.typing_delay <= 0:
            self.output(text)
            return
        for ch in text:
            self.output(ch, end="", flush=True)
            self.sleep(float(self._delay_rng.uniform(0.0, self.config.typing_delay)))
        self.output("")


def main(argv: list | None = None) -> None:
    parser = argparse.ArgumentParser(description="Play Minimax on a random binary tree")
    parser.add_argument("--config", type=str, help="Path to YAML configuration file")
    parser.add_argument("--depth", type=int, help="Number of layers in the tree")
    parser.add_argument("--seed", type=int, help="Seed for the leaf values")
    parser.add_argument("--two-player", action="store_true", help="Play against a friend instead of the computer")
    args = parser.parse_args(argv)

    try:
        config = GameConfig()
        if args.config:
            config_path = Path(args.config)
            if not config_path.exists():
                print(f"Configuration file not found: {config_path}")
                sys.exit(1)
            config = load_config(config_path)
        if args.depth is not None:
            config = config.with_setting("depth", str(args.depth))
        if args.seed is not None:
            config = config.with_setting("seed", str(args.seed))
        if args.two_player:
            config = config.with_setting("singleplayer", "false")
    except ConfigError as e:
        print(f"Invalid configuration: {e}")
        sys.exit(1)

    MinimaxShell(config).run()


if __name__ == "__main__":
    main()
