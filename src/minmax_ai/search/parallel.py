"""
Parallel minimax search.

Each root candidate's subtree is independent of its siblings, so the root
candidates are scored across worker processes. Scores come back in
generator order and go through the same strict comparison as the serial
engine, so both engines always pick the same move.
"""

import logging
from multiprocessing import Pool, cpu_count
from typing import List, Sequence, Tuple

from tqdm import tqdm

from ..core import Location, Player
from .contracts import GameState
from .engine import MinimaxEngine
from .scoring import ScoredCandidate, SearchStats

logger = logging.getLogger(__name__)


# Global engine for worker processes
_worker_engine = None


def _worker_init(engine: MinimaxEngine) -> None:
    """Initialize worker process with its own copy of the engine."""
    global _worker_engine
    _worker_engine = engine


def _worker_score_move(
    task: Tuple[GameState, Location, int, Player]
) -> Tuple[int, SearchStats]:
    """
    Worker: Score a single root candidate.

    Returns:
        (score, stats for the subtree)
    """
    state, move, depth, me = task
    stats = SearchStats()
    score = _worker_engine.score_move(state, move, depth, me, stats)
    return score, stats


class ParallelMinimaxEngine(MinimaxEngine):
    """
    Minimax engine that scores root candidates in a process pool.

    The move generator and evaluator are sent to the workers, so they must be
    picklable (module-level classes, not lambdas).
    """

    def __init__(self, move_generator, evaluator, num_workers: int = None, **kwargs):
        """
        Initialize parallel minimax engine.

        Args:
            move_generator: MoveGenerator, or a picklable ``fn(state)``
            evaluator: Evaluator, or a picklable ``fn(state, me)``
            num_workers: Number of worker processes (default: CPU count)
            **kwargs: Passed to MinimaxEngine
        """
        super().__init__(move_generator, evaluator, **kwargs)
        self.num_workers = num_workers or cpu_count()
        if self.num_workers < 1:
            raise ValueError(f"Need at least one worker, got {self.num_workers}")

    def _score_root(
        self,
        state: GameState,
        moves: Sequence[Location],
        depth: int,
        me: Player,
        stats: SearchStats,
    ) -> List[ScoredCandidate]:
        num_workers = min(self.num_workers, len(moves))
        if num_workers <= 1:
            return super()._score_root(state, moves, depth, me, stats)

        logger.debug(f"Scoring {len(moves)} root candidates with {num_workers} workers")

        # Workers get a serial engine with the same settings
        serial = MinimaxEngine(
            self.move_generator,
            self.evaluator,
            win_score=self.win_score,
            check_terminal_scores=self.check_terminal_scores,
        )
        tasks = [(state, move, depth, me) for move in moves]

        candidates = []
        with Pool(processes=num_workers, initializer=_worker_init, initargs=(serial,)) as pool:
            results = pool.imap(_worker_score_move, tasks)
            for move, (score, subtree_stats) in tqdm(
                zip(moves, results),
                total=len(moves),
                desc=f"Depth {depth}",
                unit=" move",
                disable=not self.show_progress,
            ):
                stats.merge(subtree_stats)
                candidates.append(ScoredCandidate(move, score))

        return candidates
