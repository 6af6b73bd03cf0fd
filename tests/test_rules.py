"""Tests for game rules."""

from minmax_ai.core import Board, GameStatus, Location, Player, find_winner, game_status, windows


def test_window_count():
    """Test every straight run is enumerated once."""
    # 3 rows + 3 columns + 2 diagonals
    assert len(list(windows(Board.empty(3, 3, 3)))) == 8

    # 4x4, length 3: 8 horizontal + 8 vertical + 4 + 4 diagonal
    assert len(list(windows(Board.empty(4, 4, 3)))) == 24


def test_windows_custom_length():
    """Test windows of a length other than the win length."""
    board = Board.empty(3, 1, 3)

    assert list(windows(board, 2)) == [
        [Location(0, 0), Location(1, 0)],
        [Location(1, 0), Location(2, 0)],
    ]


def test_row_win():
    board = Board.from_rows(["...", "OOO", "XX."], win_length=3)
    assert find_winner(board) is Player.O


def test_column_win():
    board = Board.from_rows(["X.O", "X.O", "X.."], win_length=3)
    assert find_winner(board) is Player.X


def test_diagonal_wins():
    """Test both diagonal directions."""
    down_right = Board.from_rows(["X..", ".X.", "..X"], win_length=3)
    down_left = Board.from_rows(["..O", ".O.", "O.."], win_length=3)

    assert find_winner(down_right) is Player.X
    assert find_winner(down_left) is Player.O


def test_win_length_shorter_than_board():
    """Test k-in-a-row on a larger board."""
    board = Board.from_rows(["....", ".XX.", "....", "...."], win_length=2)
    assert find_winner(board) is Player.X

    broken = Board.from_rows(["X.X.", "....", "..O.", "O..."], win_length=2)
    assert find_winner(broken) is None


def test_draw():
    """Test a full board with no line is a draw."""
    board = Board.from_rows(["XOX", "XOO", "OXX"], win_length=3)

    assert find_winner(board) is None
    assert game_status(board) == GameStatus.DRAW
    assert board.status.is_over


def test_not_over():
    board = Board.from_rows(["XO.", "...", "..."], win_length=3)

    assert game_status(board) == GameStatus.NOT_OVER
    assert not board.status.is_over


def test_win_on_full_board():
    """Test a win on the last move is a win, not a draw."""
    board = Board.from_rows(["XOX", "OXO", "OXX"], win_length=3)

    assert board.status == GameStatus.won(Player.X)
