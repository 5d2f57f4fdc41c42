import pytest
from unittest.mock import Mock

from minimax_game.agents import OracleAgent, RandomAgent
from minimax_game.core.errors import InvariantViolation
from minimax_game.games.minimax_tree import Direction, GameTree, MinimaxTreeGame, Player
from minimax_game.play import Session, SessionStatus


def _example_game():
    game = MinimaxTreeGame(tree=GameTree.from_leaves([4, 7, 1, 3], root_maximizes=True))
    game.reset()
    return game


def test_oracle_vs_oracle_reaches_root_value():
    game = _example_game()
    oracle = OracleAgent(game)
    session = Session(game, {Player.ONE: oracle, Player.TWO: oracle})
    assert session.status is SessionStatus.IN_PROGRESS
    assert session.run() == 4
    assert session.status is SessionStatus.FINISHED
    assert session.state.active_branch == 0
    assert session.history == [(Player.ONE, Direction.LEFT), (Player.TWO, Direction.LEFT)]


def test_step_asks_active_seat_only():
    game = _example_game()
    human = Mock()
    human.act.return_value = Direction.RIGHT
    oracle = OracleAgent(game)
    session = Session(game, {Player.ONE: human, Player.TWO: oracle})

    assert session.step() is SessionStatus.IN_PROGRESS
    human.act.assert_called_once()
    assert session.state.active_player is Player.TWO

    assert session.step() is SessionStatus.FINISHED
    assert human.act.call_count == 1
    # Minimizer under the right branch takes the 1
    assert session.outcome == 1


def test_on_move_callback_sees_every_move():
    game = _example_game()
    oracle = OracleAgent(game)
    seen = []
    session = Session(
        game,
        {Player.ONE: oracle, Player.TWO: oracle},
        on_move=lambda player, direction, state: seen.append((player, direction, state.active_layer)),
    )
    session.run()
    assert seen == [(Player.ONE, Direction.LEFT, 1), (Player.TWO, Direction.LEFT, 2)]


def test_stepping_finished_session_is_invariant_violation():
    game = _example_game()
    oracle = OracleAgent(game)
    session = Session(game, {Player.ONE: oracle, Player.TWO: oracle})
    session.run()
    with pytest.raises(InvariantViolation):
        session.step()


def test_depth_one_finishes_immediately():
    game = MinimaxTreeGame(depth=1)
    game.reset(seed=4)
    agent = Mock()
    session = Session(game, {Player.ONE: agent, Player.TWO: agent})
    assert session.is_finished
    assert session.outcome == game.tree.root_value
    assert session.run() == game.tree.root_value
    agent.act.assert_not_called()


@pytest.mark.parametrize("depth", [2, 5, 9])
def test_session_takes_depth_minus_one_moves(depth):
    game = MinimaxTreeGame(depth=depth)
    game.reset(seed=depth)
    session = Session(game, {Player.ONE: RandomAgent(game, rng=1), Player.TWO: OracleAgent(game)})
    result = session.run()
    assert len(session.history) == depth - 1
    assert result == game.tree.value(depth - 1, session.state.active_branch)


def test_session_needs_reset_game_and_both_seats():
    game = MinimaxTreeGame(depth=3)
    with pytest.raises(RuntimeError):
        Session(game, {})
    game.reset(seed=0)
    with pytest.raises(ValueError):
        Session(game, {Player.ONE: OracleAgent(game)})


def test_game_tracks_session_position():
    game = _example_game()
    oracle = OracleAgent(game)
    session = Session(game, {Player.ONE: oracle, Player.TWO: oracle})
    session.step()
    assert game.state == session.state
    session.run()
    assert game.state == session.state
    assert game.state.active_layer == 2
    assert game.legal_actions() == []


def test_agents_reset_once_when_session_starts():
    game = _example_game()
    shared = Mock()
    shared.act.return_value = Direction.LEFT
    Session(game, {Player.ONE: shared, Player.TWO: shared})
    shared.reset.assert_called_once_with()

    one, two = Mock(), Mock()
    Session(game, {Player.ONE: one, Player.TWO: two})
    one.reset.assert_called_once_with()
    two.reset.assert_called_once_with()
