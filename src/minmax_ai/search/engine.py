"""
Fixed-depth minimax search.

Scores every candidate move by searching the game tree below it to a fixed
number of plies, assuming the opponent always replies with the move that is
worst for us. Two things keep the tree small enough to search:

- a MoveGenerator that only proposes moves worth considering
- an Evaluator that scores positions once the depth budget runs out

Finished games are always scored by outcome, never by the evaluator.
"""

import logging
from typing import List, Optional, Sequence

from tqdm import tqdm

from ..core import GameStatus, Location, Player
from .contracts import GameState, as_evaluator, as_move_generator
from .errors import GameOverError, InconsistentTerminalScoreError, NoCandidateMovesError
from .scoring import (
    WIN_SCORE,
    ScoredCandidate,
    SearchResult,
    SearchStats,
    better,
    terminal_score,
)

logger = logging.getLogger(__name__)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def pick_best(candidates: Sequence[ScoredCandidate], maximizing: bool) -> ScoredCandidate:
    """
    Keep the candidate with the strictly best score.

    Args:
        candidates: Scored candidates in generator order
        maximizing: True at our own levels, False at the opponent's

    Returns:
        Highest (or lowest) scoring candidate; the earliest one on ties
    """
    best: Optional[ScoredCandidate] = None
    for candidate in candidates:
        if better(candidate.score, None if best is None else best.score, maximizing):
            best = candidate
    if best is None:
        raise ValueError("No candidates to choose from")
    return best


class MinimaxEngine:
    """
    Depth-limited minimax search without pruning.

    The engine keeps no state between or during searches: the searching
    player and the remaining depth are passed down every recursive call, and
    each search counts its own statistics.
    """

    def __init__(
        self,
        move_generator,
        evaluator,
        win_score: int = WIN_SCORE,
        check_terminal_scores: bool = False,
        show_progress: bool = False,
    ):
        """
        Initialize minimax engine.

        Args:
            move_generator: MoveGenerator, or a ``fn(state)`` callable
            evaluator: Evaluator, or a ``fn(state, me)`` callable
            win_score: Score of a certain win; must exceed any heuristic
            check_terminal_scores: Also ask the evaluator about finished games
                and fail if it disagrees with the outcome score
            show_progress: Show a progress bar over the root candidates
        """
        if win_score <= 0:
            raise ValueError(f"Win score must be positive, got {win_score}")
        self.move_generator = as_move_generator(move_generator)
        self.evaluator = as_evaluator(evaluator)
        self.win_score = win_score
        self.check_terminal_scores = check_terminal_scores
        self.show_progress = show_progress

    def select_move(self, state: GameState, depth: int, me: Player) -> SearchResult:
        """
        Find the best move for ``me``, who is to move in ``state``.

        Args:
            state: Current position
            depth: Plies to search (at least 1)
            me: Player to move, whose score is maximized

        Returns:
            SearchResult with the chosen move and its minimax score. The move
            is None only if ``state`` is already finished.
        """
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")

        stats = SearchStats(nodes=1)
        status = state.status
        if status.is_over:
            score = self._terminal_leaf(state, status, me, stats)
            return SearchResult(move=None, score=score, stats=stats)

        moves = self._candidates(state)
        logger.debug(f"Searching {len(moves)} candidates for {me} to depth {depth}")

        candidates = self._score_root(state, moves, depth, me, stats)
        best = pick_best(candidates, maximizing=True)

        self._log_candidates(candidates, best)
        logger.debug(
            f"Selected {best.move} with score {best.score} "
            f"({stats.nodes:,} nodes, {stats.leaves:,} leaves, "
            f"{stats.terminal_leaves:,} finished games)"
        )
        return SearchResult(
            move=best.move,
            score=best.score,
            candidates=tuple(candidates),
            stats=stats,
        )

    def next_move(self, state: GameState, depth: int, me: Player) -> Location:
        """Like ``select_move`` but return only the move."""
        result = self.select_move(state, depth, me)
        if result.move is None:
            raise GameOverError(f"No move to make: game is over ({state.status})")
        return result.move

    def score_move(
        self,
        state: GameState,
        move: Location,
        depth: int,
        me: Player,
        stats: Optional[SearchStats] = None,
    ) -> int:
        """
        Minimax score of ``me`` playing ``move`` in ``state``.

        Args:
            state: Position before the move, with ``me`` to move
            move: Candidate move
            depth: Plies remaining including this move
            me: Searching player
            stats: Counters to add to (default: discarded)

        Returns:
            Propagated subtree score of the resulting position
        """
        if stats is None:
            stats = SearchStats()
        child = state.update(me, move)
        return self._minimax(child, depth - 1, me.opponent(), me, stats)

    def _score_root(
        self,
        state: GameState,
        moves: Sequence[Location],
        depth: int,
        me: Player,
        stats: SearchStats,
    ) -> List[ScoredCandidate]:
        candidates = []
        for move in tqdm(moves, desc=f"Depth {depth}", unit=" move", disable=not self.show_progress):
            score = self.score_move(state, move, depth, me, stats)
            candidates.append(ScoredCandidate(move, score))
        return candidates

    def _minimax(
        self,
        state: GameState,
        depth: int,
        mover: Player,
        me: Player,
        stats: SearchStats,
    ) -> int:
        """
        Score ``state`` with ``mover`` to move and ``depth`` plies left.

        Returns:
            Minimax value from ``me``'s perspective
        """
        stats.nodes += 1

        # Finished games take precedence over the depth budget
        status = state.status
        if status.is_over:
            return self._terminal_leaf(state, status, me, stats)

        if depth == 0:
            stats.leaves += 1
            return self.evaluator.estimate(state, me)

        maximizing = mover == me
        best: Optional[int] = None

        for move in self._candidates(state):
            child = state.update(mover, move)
            score = self._minimax(child, depth - 1, mover.opponent(), me, stats)
            if better(score, best, maximizing):
                best = score

        return best

    def _candidates(self, state: GameState) -> Sequence[Location]:
        moves = list(self.move_generator.moves(state))
        if not moves:
            raise NoCandidateMovesError(state)
        return moves

    def _terminal_leaf(
        self, state: GameState, status: GameStatus, me: Player, stats: SearchStats
    ) -> int:
        stats.terminal_leaves += 1
        score = terminal_score(status, me, self.win_score)

        if self.check_terminal_scores:
            estimate = self.evaluator.estimate(state, me)
            if _sign(estimate) != _sign(score):
                raise InconsistentTerminalScoreError(state, estimate, score)

        return score

    def _log_candidates(self, candidates: Sequence[ScoredCandidate], chosen: ScoredCandidate) -> None:
        """Emit the candidate breakdown when DEBUG is enabled."""
        if not logger.isEnabledFor(logging.DEBUG):
            return
        for idx, candidate in enumerate(candidates, start=1):
            logger.debug(
                f"Candidate #{idx} move={candidate.move} score={candidate.score} "
                f"chosen={candidate is chosen}"
            )
