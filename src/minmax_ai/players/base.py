"""Base controller interface."""

from abc import ABC, abstractmethod

from ..core import Board, Location, Player


class Controller(ABC):
    """Something that picks moves for one player."""

    def __init__(self, me: Player):
        self.me = me

    @abstractmethod
    def next_move(self, board: Board) -> Location:
        """Choose a move for ``self.me`` on ``board``."""
        raise NotImplementedError
