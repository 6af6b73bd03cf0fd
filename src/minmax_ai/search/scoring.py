"""
Score conventions and search result types.

All scores are integers from the searching player's perspective: larger is
better for "me". Finished games score a fixed sentinel that every heuristic
must stay strictly below in magnitude.
"""

from dataclasses import dataclass, field
from typing import Generic, Optional, Tuple, TypeVar

from ..core import GameStatus, Outcome, Player

M = TypeVar("M")

WIN_SCORE = 1_000_000_000
LOSS_SCORE = -WIN_SCORE


def terminal_score(status: GameStatus, me: Player, win_score: int = WIN_SCORE) -> int:
    """
    Score a finished game.

    Args:
        status: Terminal status of the game
        me: Player whose perspective the score is from
        win_score: Sentinel for a certain win

    Returns:
        ``win_score`` if ``me`` won, ``-win_score`` if the opponent won, 0 for a draw
    """
    if status.outcome is Outcome.DRAW:
        return 0
    if status.outcome is Outcome.WON:
        return win_score if status.winner is me else -win_score
    raise ValueError("Cannot score a game that is not over")


def clamp_heuristic(score: int, win_score: int = WIN_SCORE) -> int:
    """Keep a heuristic estimate strictly inside the win/loss sentinels."""
    return max(-win_score + 1, min(win_score - 1, score))


@dataclass(frozen=True)
class ScoredCandidate(Generic[M]):
    """A candidate move paired with its propagated subtree score."""

    move: M
    score: int


@dataclass
class SearchStats:
    """Counters for a single search."""

    nodes: int = 0  # Every state visited, root included
    leaves: int = 0  # Heuristic (depth-exhausted) leaves
    terminal_leaves: int = 0  # Finished-game leaves

    def merge(self, other: "SearchStats") -> None:
        self.nodes += other.nodes
        self.leaves += other.leaves
        self.terminal_leaves += other.terminal_leaves


@dataclass(frozen=True)
class SearchResult(Generic[M]):
    """
    Outcome of a search.

    ``move`` is None only at leaves (finished game or exhausted depth).
    ``candidates`` lists the root candidates in generator order.
    """

    move: Optional[M]
    score: int
    candidates: Tuple[ScoredCandidate[M], ...] = ()
    stats: SearchStats = field(default_factory=SearchStats, compare=False)


def better(score: int, best: Optional[int], maximizing: bool) -> bool:
    """
    Strict comparison used to pick the kept candidate.

    Equal scores never replace the current best, so the first candidate of a
    tied score wins.
    """
    if best is None:
        return True
    return score > best if maximizing else score < best
