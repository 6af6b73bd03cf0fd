"""
Collaborator interfaces for the search engine.

The engine only needs three things from the game: an immutable state with a
terminal-status query and a non-mutating ``update``, a move generator that
narrows the candidates worth searching, and an evaluator that scores
positions the search cannot see to the end of.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Protocol, Sequence

from ..core import GameStatus, Location, Player


class GameState(Protocol):
    """Immutable game snapshot consumed by the engine."""

    @property
    def status(self) -> GameStatus:
        ...

    def get(self, location: Location) -> Optional[Player]:
        ...

    def update(self, player: Player, location: Location) -> "GameState":
        """Return a new state with the move applied; never mutates self."""
        ...


class MoveGenerator(ABC):
    """Lists the moves the engine is willing to consider."""

    @abstractmethod
    def moves(self, state: GameState) -> Sequence[Location]:
        """
        Candidate moves for ``state``.

        Must contain at least one move if there are any legal moves to make.
        May leave out legal moves to shrink the search. Order matters: among
        equally scored moves the engine keeps the first one listed.

        Args:
            state: Non-terminal state to generate moves for

        Returns:
            Finite sequence of locations
        """
        pass


class Evaluator(ABC):
    """Estimates how good a position is for a player."""

    @abstractmethod
    def estimate(self, state: GameState, me: Player) -> int:
        """
        Score ``state`` from ``me``'s perspective (larger is better for me).

        On a finished game this must return the same value as
        ``terminal_score``; otherwise any finite estimate strictly inside the
        win/loss sentinels.

        Args:
            state: State to score
            me: Player the score is for

        Returns:
            Integer score
        """
        pass


class FunctionMoveGenerator(MoveGenerator):
    """Adapts a plain ``fn(state) -> moves`` callable."""

    def __init__(self, fn: Callable[[Any], Sequence[Location]]):
        self.fn = fn

    def moves(self, state: GameState) -> Sequence[Location]:
        return self.fn(state)


class FunctionEvaluator(Evaluator):
    """Adapts a plain ``fn(state, me) -> int`` callable."""

    def __init__(self, fn: Callable[[Any, Player], int]):
        self.fn = fn

    def estimate(self, state: GameState, me: Player) -> int:
        return self.fn(state, me)


def as_move_generator(obj) -> MoveGenerator:
    """Accept either a MoveGenerator or a callable."""
    if isinstance(obj, MoveGenerator):
        return obj
    if callable(obj):
        return FunctionMoveGenerator(obj)
    raise TypeError(f"Expected MoveGenerator or callable, got {type(obj).__name__}")


def as_evaluator(obj) -> Evaluator:
    """Accept either an Evaluator or a callable."""
    if isinstance(obj, Evaluator):
        return obj
    if callable(obj):
        return FunctionEvaluator(obj)
    raise TypeError(f"Expected Evaluator or callable, got {type(obj).__name__}")
