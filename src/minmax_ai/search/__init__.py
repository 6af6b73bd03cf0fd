"""Minimax search engine and its collaborator contracts."""

from .contracts import (
    Evaluator,
    FunctionEvaluator,
    FunctionMoveGenerator,
    GameState,
    MoveGenerator,
)
from .engine import MinimaxEngine, pick_best
from .errors import (
    GameOverError,
    InconsistentTerminalScoreError,
    NoCandidateMovesError,
    SearchError,
)
from .parallel import ParallelMinimaxEngine
from .scoring import (
    LOSS_SCORE,
    WIN_SCORE,
    ScoredCandidate,
    SearchResult,
    SearchStats,
    clamp_heuristic,
    terminal_score,
)

__all__ = [
    "Evaluator",
    "FunctionEvaluator",
    "FunctionMoveGenerator",
    "GameState",
    "MoveGenerator",
    "MinimaxEngine",
    "ParallelMinimaxEngine",
    "pick_best",
    "GameOverError",
    "InconsistentTerminalScoreError",
    "NoCandidateMovesError",
    "SearchError",
    "LOSS_SCORE",
    "WIN_SCORE",
    "ScoredCandidate",
    "SearchResult",
    "SearchStats",
    "clamp_heuristic",
    "terminal_score",
]
