"""Errors raised by the search engine."""

from typing import Any


class SearchError(RuntimeError):
    """Base class for search failures."""


class NoCandidateMovesError(SearchError):
    """The move generator returned no candidates for a non-terminal state."""

    def __init__(self, state: Any):
        self.state = state
        super().__init__(f"No candidate moves but not terminal:\n{state}")


class InconsistentTerminalScoreError(SearchError):
    """The evaluator disagrees with the engine about a finished game."""

    def __init__(self, state: Any, estimate: int, expected: int):
        self.state = state
        self.estimate = estimate
        self.expected = expected
        super().__init__(
            f"Evaluator scored terminal state {estimate}, engine scored it {expected}:\n{state}"
        )


class GameOverError(SearchError):
    """A move was requested for a state where the game has already ended."""
