#!/usr/bin/env python3
"""
Pit agents against each other on many random trees and report how far
their results fall from perfect play.

Usage:
    python scripts/evaluate_agents.py --games 500 --depth 6 --seat-one random --seat-two oracle
"""

import argparse
import sys
from pathlib import Path

import numpy as np

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from minimax_game.agents.heuristic import OracleAgent, RandomAgent
from minimax_game.core.config import GameConfig, load_config
from minimax_game.core.errors import ConfigError
from minimax_game.games.minimax_tree import MinimaxTreeGame, Player
from minimax_game.play.session import Session


def create_agent(kind: str, game: MinimaxTreeGame, seed: int | None):
    """Create agent instance by name."""
    if kind == "oracle":
        return OracleAgent(game)
    elif kind == "random":
        return RandomAgent(game, rng=seed)
    else:
        raise ValueError(f"Unknown agent type: {kind}")


def evaluate(config: GameConfig, num_games: int, seat_one: str, seat_two: str) -> dict:
    game = MinimaxTreeGame(
        depth=config.depth,
        root_maximizes=config.root_maximizes,
        rng=np.random.default_rng(config.seed),
    )
    seats = {
        Player.ONE: create_agent(seat_one, game, config.seed),
        Player.TWO: create_agent(seat_two, game, None if config.seed is None else config.seed + 1),
    }
    results = []
    gaps = []
    for _ in range(num_games):
        game.reset()
        result = Session(game, seats).run()
        results.append(result)
        gaps.append(result - game.tree.root_value)

    gaps_arr = np.asarray(gaps)
    # Positive gap favours the maximizer
    return {
        "games": num_games,
        "mean_result": float(np.mean(results)),
        "mean_gap_vs_optimal": float(np.mean(gaps_arr)),
        "optimal_rate": float(np.mean(gaps_arr == 0)),
    }


def main():
    parser = argparse.ArgumentParser(description="Evaluate agent pairings on random trees")
    parser.add_argument("--config", type=str, help="Path to YAML configuration file")
    parser.add_argument("--games", type=int, default=200, help="Number of games to play")
    parser.add_argument("--depth", type=int, help="Override tree depth")
    parser.add_argument("--seat-one", choices=["oracle", "random"], default="random")
    parser.add_argument("--seat-two", choices=["oracle", "random"], default="oracle")
    args = parser.parse_args()

    try:
        config = load_config(args.config) if args.config else GameConfig()
        if args.depth is not None:
            config = config.with_setting("depth", str(args.depth))
    except (ConfigError, FileNotFoundError) as e:
        print(f"Invalid configuration: {e}")
        sys.exit(1)

    print(f"Playing {args.games} games: {args.seat_one} (One) vs {args.seat_two} (Two), depth={config.depth}")
    metrics = evaluate(config, args.games, args.seat_one, args.seat_two)
    print(f"Eval metrics: {metrics}")


if __name__ == "__main__":
    main()
