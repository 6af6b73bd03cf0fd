"""
Immutable m,n,k board representation.

A board is a grid of ``num_cols`` x ``num_rows`` cells, each either empty or
holding one player's stone. A player wins by owning ``win_length`` cells in a
row (horizontally, vertically or diagonally). Five-in-a-row on a 9x9 board and
tic-tac-toe on a 3x3 board are both instances.

Cells are stored row-major in a tuple:

    index = y * num_cols + x

Boards never change after construction: ``update`` returns a new board, so
every earlier reference stays valid. The search engine relies on this to
explore sibling branches without copying.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple


class Player(Enum):
    """One of the two players."""

    X = "X"
    O = "O"

    def opponent(self) -> "Player":
        """The other player."""
        return Player.O if self is Player.X else Player.X

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Location:
    """A cell on the board, addressed by column ``x`` and row ``y``."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


class Outcome(Enum):
    NOT_OVER = "not_over"
    DRAW = "draw"
    WON = "won"


@dataclass(frozen=True)
class GameStatus:
    """Terminal status of a board: not over, drawn, or won by someone."""

    outcome: Outcome
    winner: Optional[Player] = None

    def __post_init__(self) -> None:
        if (self.outcome is Outcome.WON) != (self.winner is not None):
            raise ValueError(
                f"Winner {self.winner} inconsistent with outcome {self.outcome.value}"
            )

    @classmethod
    def won(cls, player: Player) -> "GameStatus":
        return cls(Outcome.WON, player)

    @property
    def is_over(self) -> bool:
        return self.outcome is not Outcome.NOT_OVER

    def __str__(self) -> str:
        if self.outcome is Outcome.WON:
            return f"{self.winner} wins"
        if self.outcome is Outcome.DRAW:
            return "Draw"
        return "In progress"


GameStatus.NOT_OVER = GameStatus(Outcome.NOT_OVER)
GameStatus.DRAW = GameStatus(Outcome.DRAW)


EMPTY_CHAR = "."


@dataclass(frozen=True)
class Board:
    """
    Immutable board snapshot.

    Board layout for num_cols=3, num_rows=3:

        y=0   [0] [1] [2]
        y=1   [3] [4] [5]
        y=2   [6] [7] [8]
             x=0 x=1 x=2
    """

    num_cols: int
    num_rows: int
    win_length: int
    cells: Tuple[Optional[Player], ...]

    def __post_init__(self) -> None:
        """Validate board invariants."""
        if self.num_cols < 1 or self.num_rows < 1:
            raise ValueError(
                f"Board dimensions must be positive, got {self.num_cols}x{self.num_rows}"
            )
        if not 1 <= self.win_length <= max(self.num_cols, self.num_rows):
            raise ValueError(
                f"Win length {self.win_length} doesn't fit a "
                f"{self.num_cols}x{self.num_rows} board"
            )
        expected_size = self.num_cols * self.num_rows
        if len(self.cells) != expected_size:
            raise ValueError(
                f"Board size {len(self.cells)} doesn't match expected {expected_size}"
            )
        if any(cell is not None and not isinstance(cell, Player) for cell in self.cells):
            raise ValueError("Cells must hold a Player or None")

    @classmethod
    def empty(cls, num_cols: int, num_rows: int, win_length: int) -> "Board":
        """Create a board with no stones on it."""
        return cls(
            num_cols=num_cols,
            num_rows=num_rows,
            win_length=win_length,
            cells=(None,) * (num_cols * num_rows),
        )

    @classmethod
    def from_rows(cls, rows: Sequence[str], win_length: int) -> "Board":
        """
        Parse a board from one string per row.

        Args:
            rows: Row strings of equal length using ``X``, ``O`` and ``.``
            win_length: Stones in a row needed to win

        Returns:
            Parsed Board
        """
        if not rows:
            raise ValueError("Board needs at least one row")

        num_cols = len(rows[0])
        cells: List[Optional[Player]] = []
        for y, row in enumerate(rows):
            if len(row) != num_cols:
                raise ValueError(
                    f"Row {y} has {len(row)} cells, expected {num_cols}"
                )
            for char in row.upper():
                if char == EMPTY_CHAR:
                    cells.append(None)
                else:
                    try:
                        cells.append(Player(char))
                    except ValueError:
                        raise ValueError(f"Unknown cell {char!r} in row {y}") from None

        return cls(
            num_cols=num_cols,
            num_rows=len(rows),
            win_length=win_length,
            cells=tuple(cells),
        )

    def in_bounds(self, location: Location) -> bool:
        return 0 <= location.x < self.num_cols and 0 <= location.y < self.num_rows

    def _index(self, location: Location) -> int:
        if not self.in_bounds(location):
            raise ValueError(
                f"Location {location} is off the {self.num_cols}x{self.num_rows} board"
            )
        return location.y * self.num_cols + location.x

    def get(self, location: Location) -> Optional[Player]:
        """Player occupying ``location``, or None if the cell is empty."""
        return self.cells[self._index(location)]

    def update(self, player: Player, location: Location) -> "Board":
        """
        Place a stone and return the resulting board.

        The receiver is left untouched.

        Args:
            player: Player making the move
            location: Empty cell to play at

        Returns:
            New Board with the stone placed
        """
        index = self._index(location)
        if self.cells[index] is not None:
            raise ValueError(f"Location {location} is already occupied")
        if self.status.is_over:
            raise ValueError(f"Cannot play {location}: game is over ({self.status})")

        cells = list(self.cells)
        cells[index] = player
        return Board(
            num_cols=self.num_cols,
            num_rows=self.num_rows,
            win_length=self.win_length,
            cells=tuple(cells),
        )

    @property
    def status(self) -> GameStatus:
        """Whether the game is over, and who won."""
        from .rules import game_status

        return game_status(self)

    def locations(self) -> Iterator[Location]:
        """All cells, row-major."""
        for y in range(self.num_rows):
            for x in range(self.num_cols):
                yield Location(x, y)

    def empty_locations(self) -> List[Location]:
        return [loc for loc in self.locations() if self.get(loc) is None]

    def occupied_locations(self) -> List[Location]:
        return [loc for loc in self.locations() if self.get(loc) is not None]

    @property
    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def __str__(self) -> str:
        """Human-readable board representation."""
        rows = []
        for y in range(self.num_rows):
            row = self.cells[y * self.num_cols : (y + 1) * self.num_cols]
            rows.append("".join(EMPTY_CHAR if cell is None else cell.value for cell in row))
        return "\n".join(rows)
