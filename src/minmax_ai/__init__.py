"""Fixed-depth minimax move selection for two-player board games."""

from .core import Board, GameStatus, Location, Player
from .search import MinimaxEngine, SearchResult

__version__ = "0.1.0"

__all__ = [
    "Board",
    "GameStatus",
    "Location",
    "Player",
    "MinimaxEngine",
    "SearchResult",
]
