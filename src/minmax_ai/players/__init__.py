"""Move-choosing controllers."""

from .base import Controller
from .minmax import MinMaxPlayer, build_engine, create_player

__all__ = ["Controller", "MinMaxPlayer", "build_engine", "create_player"]
