"""Tests for controllers and configuration."""

import pytest
from minmax_ai.config import SearchConfig
from minmax_ai.core import Board, Location, Player
from minmax_ai.players import MinMaxPlayer, build_engine, create_player
from minmax_ai.search import WIN_SCORE, GameOverError, MinimaxEngine, ParallelMinimaxEngine
from minmax_ai.strategies import AllEmptyCells, LineEvaluator, NeighborhoodMoves, ZeroEvaluator


def test_player_takes_win():
    board = Board.from_rows(["XX.", "OO.", "..."], win_length=3)
    player = MinMaxPlayer(Player.O, 2, AllEmptyCells(), ZeroEvaluator())

    assert player.next_move(board) == Location(2, 1)
    assert player.last_result.score == WIN_SCORE


def test_player_blocks_threat():
    """Test a two-ply search blocks the opponent's open line."""
    board = Board.from_rows(["OO.", "X..", "..X"], win_length=3)
    player = create_player(Player.X, SearchConfig(depth=2, move_generator="all", evaluator="zero"))

    assert player.next_move(board) == Location(2, 0)


def test_player_plays_sequence_without_mutation():
    """Test alternating two players never touches earlier boards."""
    x = create_player(Player.X, SearchConfig(depth=1))
    o = create_player(Player.O, SearchConfig(depth=1))
    board = Board.empty(4, 4, 3)
    history = [board]

    for player in (x, o, x, o):
        board = board.update(player.me, player.next_move(board))
        history.append(board)

    assert history[0] == Board.empty(4, 4, 3)
    assert [len(b.occupied_locations()) for b in history] == [0, 1, 2, 3, 4]


def test_player_on_finished_game():
    won = Board.from_rows(["XXX", "OO.", "..."], win_length=3)
    player = MinMaxPlayer(Player.O, 1, AllEmptyCells(), ZeroEvaluator())

    with pytest.raises(GameOverError):
        player.next_move(won)


def test_player_validation():
    with pytest.raises(ValueError):
        MinMaxPlayer(Player.X, 0, AllEmptyCells(), ZeroEvaluator())
    with pytest.raises(ValueError):
        MinMaxPlayer(Player.X, 2)


def test_build_engine():
    """Test configuration selects strategies and engine type."""
    engine = build_engine(SearchConfig(move_generator_options={"radius": 2}))

    assert type(engine) is MinimaxEngine
    assert isinstance(engine.move_generator, NeighborhoodMoves)
    assert engine.move_generator.radius == 2
    assert isinstance(engine.evaluator, LineEvaluator)

    parallel = build_engine(SearchConfig(workers=3, evaluator="zero", win_score=500))
    assert isinstance(parallel, ParallelMinimaxEngine)
    assert parallel.num_workers == 3
    assert parallel.win_score == 500
    assert parallel.evaluator.win_score == 500


def test_config_validation():
    with pytest.raises(ValueError):
        SearchConfig(depth=0)
    with pytest.raises(ValueError):
        SearchConfig(workers=0)
    with pytest.raises(ValueError):
        build_engine(SearchConfig(evaluator="unknown"))
