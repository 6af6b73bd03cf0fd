"""Utility modules for the minimax player."""

from .rich_display import SearchDisplay, describe_score, setup_rich_logging

__all__ = [
    "SearchDisplay",
    "describe_score",
    "setup_rich_logging",
]
