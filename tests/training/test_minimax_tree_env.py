import pytest
import numpy as np

from minimax_game.agents import RandomAgent
from minimax_game.core.errors import ConfigError
from minimax_game.games.minimax_tree import (
    Direction,
    GameTree,
    LeafArrayEncoder,
    LocalViewEncoder,
    MinimaxTreeGame,
)
from minimax_game.training import MinimaxTreeEnv


def _env(depth=5, root_maximizes=True, encoder_cls=LocalViewEncoder, opponent=None):
    game = MinimaxTreeGame(depth=depth, root_maximizes=root_maximizes)
    encoder = encoder_cls(lambda: game.tree)
    return MinimaxTreeEnv(game, encoder, opponent=opponent), game


def test_env_spaces():
    env, _ = _env()
    assert env.action_space.n == 2
    assert env.observation_space.shape == (5,)

    env, _ = _env(depth=4, encoder_cls=LeafArrayEncoder)
    assert env.observation_space.shape == (16,)


def test_env_reset_and_step():
    env, game = _env(depth=5)
    obs, info = env.reset(seed=42)
    assert isinstance(obs, np.ndarray)
    assert obs.shape == env.observation_space.shape
    assert info == {}

    obs, reward, done, truncated, info = env.step(0)
    # Agent moved, oracle replied: two layers down
    assert game.state.active_layer == 2
    assert not done and not truncated
    assert reward == 0.0
    assert info["opponent_direction"] in (Direction.LEFT, Direction.RIGHT)

    obs, reward, done, truncated, info = env.step(1)
    assert done
    assert 0.0 <= reward <= 1.0
    assert info["outcome"] == game.tree.value(4, game.state.active_branch)


def test_optimal_play_against_oracle_earns_root_value():
    tree = GameTree.from_leaves([4, 7, 1, 3], root_maximizes=True)
    game = MinimaxTreeGame(tree=tree)
    env = MinimaxTreeEnv(game, LocalViewEncoder(lambda: game.tree))
    env.reset()
    _, _, done, _, info = env.step(Direction.LEFT.value)
    assert done
    assert info["outcome"] == 4


def test_reward_flips_for_minimizing_seat():
    env, game = _env(depth=2, root_maximizes=False)
    env.reset(seed=3)
    _, reward, done, _, info = env.step(0)
    assert done
    expected = 1.0 - (info["outcome"] - 100) / 899.0
    assert reward == pytest.approx(expected)


def test_env_with_random_opponent():
    game = MinimaxTreeGame(depth=7)
    env = MinimaxTreeEnv(game, LeafArrayEncoder(lambda: game.tree), opponent=RandomAgent(game, rng=1))
    obs, _ = env.reset(seed=0)
    # The reachable-leaf mask starts all ones
    assert obs[64:].sum() == 64
    done = False
    steps = 0
    while not done:
        obs, _, done, truncated, _ = env.step(1)
        steps += 1
        assert not truncated
    assert steps == 3
    assert obs[64:].sum() == 1


def test_env_requires_two_layers():
    game = MinimaxTreeGame(depth=1)
    with pytest.raises(ConfigError):
        MinimaxTreeEnv(game, LocalViewEncoder(lambda: game.tree))


def test_local_view_encoding():
    tree = GameTree.from_leaves([100, 999, 100, 100], root_maximizes=True)
    game = MinimaxTreeGame(tree=tree)
    state = game.reset()
    obs = LocalViewEncoder(lambda: game.tree).encode(state)
    # Root maximizes; layer 1 minimizes so both children are worth 100
    assert obs.tolist() == [1.0, 0.0, 0.0, 0.0, 0.0]
