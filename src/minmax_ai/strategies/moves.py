"""
Candidate move generators.

On a five-in-a-row board there are usually dozens of empty cells, but it is
rarely sensible to play far away from every stone already on the board.
Restricting the search to cells near existing stones shrinks the tree a lot.
"""

from typing import List

from ..core import Board, Location
from ..search import MoveGenerator


class AllEmptyCells(MoveGenerator):
    """Every empty cell, row-major. The full legal-move set."""

    def moves(self, state: Board) -> List[Location]:
        return state.empty_locations()

    def __repr__(self) -> str:
        return "AllEmptyCells()"


class NeighborhoodMoves(MoveGenerator):
    """
    Empty cells within ``radius`` (king moves) of an occupied cell.

    On an empty board only the centre cell is offered. Otherwise some empty
    cell always touches a stone, so the result is never empty while the
    board has room.
    """

    def __init__(self, radius: int = 1):
        if radius < 1:
            raise ValueError(f"Radius must be at least 1, got {radius}")
        self.radius = radius

    def moves(self, state: Board) -> List[Location]:
        empty = state.empty_locations()
        if len(empty) == len(state.cells):
            return [Location(state.num_cols // 2, state.num_rows // 2)]

        return [loc for loc in empty if self._near_stone(state, loc)]

    def _near_stone(self, state: Board, location: Location) -> bool:
        for dy in range(-self.radius, self.radius + 1):
            for dx in range(-self.radius, self.radius + 1):
                if dx == 0 and dy == 0:
                    continue
                neighbor = Location(location.x + dx, location.y + dy)
                if state.in_bounds(neighbor) and state.get(neighbor) is not None:
                    return True
        return False

    def __repr__(self) -> str:
        return f"NeighborhoodMoves(radius={self.radius})"
