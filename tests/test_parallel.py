"""Tests for the parallel engine."""

import pytest
from minmax_ai.core import Board, Location, Player
from minmax_ai.search import WIN_SCORE, MinimaxEngine, NoCandidateMovesError, ParallelMinimaxEngine
from minmax_ai.strategies import AllEmptyCells, LineEvaluator, NeighborhoodMoves, ZeroEvaluator


def test_parallel_matches_serial():
    """Test both engines choose the same move with the same scores."""
    board = Board.from_rows(["....", ".X..", "..O.", "...."], win_length=3)

    serial = MinimaxEngine(AllEmptyCells(), LineEvaluator())
    parallel = ParallelMinimaxEngine(AllEmptyCells(), LineEvaluator(), num_workers=2)

    expected = serial.select_move(board, 2, Player.X)
    result = parallel.select_move(board, 2, Player.X)

    assert result == expected
    assert result.candidates == expected.candidates
    assert result.stats == expected.stats


def test_parallel_keeps_first_of_tied_moves():
    """Test tie-breaking follows generator order across workers."""
    board = Board.empty(3, 3, 3)
    parallel = ParallelMinimaxEngine(AllEmptyCells(), ZeroEvaluator(), num_workers=3)

    result = parallel.select_move(board, 1, Player.O)

    assert result.move == Location(0, 0)
    assert [c.move for c in result.candidates] == board.empty_locations()


def test_parallel_finds_win():
    board = Board.from_rows(["XX.", "OO.", "..."], win_length=3)
    parallel = ParallelMinimaxEngine(NeighborhoodMoves(), ZeroEvaluator(), num_workers=2)

    result = parallel.select_move(board, 2, Player.O)

    assert result.move == Location(2, 1)
    assert result.score == WIN_SCORE


def test_single_worker_runs_serially():
    """Test one worker (or one candidate) skips the process pool."""
    board = Board.empty(5, 5, 4)
    parallel = ParallelMinimaxEngine(NeighborhoodMoves(), LineEvaluator(), num_workers=4)

    # Empty board: the only candidate is the centre
    result = parallel.select_move(board, 1, Player.X)
    assert result.move == Location(2, 2)

    with pytest.raises(NoCandidateMovesError):
        ParallelMinimaxEngine(lambda state: [], ZeroEvaluator(), num_workers=1).select_move(
            board, 1, Player.X
        )


def test_invalid_worker_count():
    with pytest.raises(ValueError):
        ParallelMinimaxEngine(AllEmptyCells(), ZeroEvaluator(), num_workers=-1)
