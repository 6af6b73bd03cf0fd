"""Core board representation and rules."""

from .board import Board, GameStatus, Location, Outcome, Player
from .rules import find_winner, game_status, windows

__all__ = [
    "Board",
    "GameStatus",
    "Location",
    "Outcome",
    "Player",
    "find_winner",
    "game_status",
    "windows",
]
