"""
m,n,k game rules.

- Players alternate placing one stone on any empty cell
- A player wins with ``win_length`` stones in an unbroken line
  (horizontal, vertical or either diagonal)
- The game is drawn when the board fills up with no winner
"""

from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from .board import GameStatus, Location, Player

if TYPE_CHECKING:
    from .board import Board


# Line directions: right, down, down-right, down-left
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((1, 0), (0, 1), (1, 1), (-1, 1))


def windows(board: "Board", length: Optional[int] = None) -> Iterator[List[Location]]:
    """
    Enumerate every straight run of ``length`` cells on the board.

    Args:
        board: Board to scan
        length: Run length (default: the board's win length)

    Yields:
        Lists of locations, one per window, in row-major order of their
        starting cell and then by direction
    """
    if length is None:
        length = board.win_length

    for start in board.locations():
        for dx, dy in DIRECTIONS:
            end = Location(start.x + dx * (length - 1), start.y + dy * (length - 1))
            if not board.in_bounds(end):
                continue
            yield [Location(start.x + dx * i, start.y + dy * i) for i in range(length)]


def find_winner(board: "Board") -> Optional[Player]:
    """
    Find the player owning a full winning line, if any.

    Args:
        board: Board to check

    Returns:
        The winning player, or None
    """
    for window in windows(board):
        first = board.get(window[0])
        if first is None:
            continue
        if all(board.get(loc) is first for loc in window[1:]):
            return first
    return None


def game_status(board: "Board") -> GameStatus:
    """
    Classify a board as won, drawn or still in progress.

    Args:
        board: Board to classify

    Returns:
        GameStatus for the board
    """
    winner = find_winner(board)
    if winner is not None:
        return GameStatus.won(winner)
    if board.is_full:
        return GameStatus.DRAW
    return GameStatus.NOT_OVER
