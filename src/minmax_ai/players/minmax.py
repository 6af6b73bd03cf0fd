"""Controller that picks moves with minimax search."""

import logging
import time
from typing import Optional

from ..config import SearchConfig
from ..core import Board, Location, Player
from ..search import (
    Evaluator,
    GameOverError,
    MinimaxEngine,
    MoveGenerator,
    ParallelMinimaxEngine,
    SearchResult,
)
from ..strategies import get_evaluator, get_move_generator
from .base import Controller

logger = logging.getLogger(__name__)


class MinMaxPlayer(Controller):
    """
    Plays the move the minimax search rates best, looking ``depth`` plies ahead.

    A higher depth plays better but takes longer to choose each move.
    """

    def __init__(
        self,
        me: Player,
        depth: int,
        move_generator: Optional[MoveGenerator] = None,
        evaluator: Optional[Evaluator] = None,
        engine: Optional[MinimaxEngine] = None,
    ):
        """
        Initialize minimax player.

        Args:
            me: Player this controller moves for
            depth: Plies to search per move
            move_generator: Candidate filter (ignored if ``engine`` is given)
            evaluator: Heuristic (ignored if ``engine`` is given)
            engine: Pre-built engine to search with
        """
        super().__init__(me)
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")
        if engine is None:
            if move_generator is None or evaluator is None:
                raise ValueError("Need an engine or both a move generator and an evaluator")
            engine = MinimaxEngine(move_generator, evaluator)
        self.depth = depth
        self.engine = engine
        self.last_result: Optional[SearchResult] = None

    def next_move(self, board: Board) -> Location:
        start = time.time()
        result = self.engine.select_move(board, self.depth, self.me)
        elapsed = time.time() - start

        self.last_result = result
        if result.move is None:
            raise GameOverError(f"No move to make: game is over ({board.status})")

        logger.info(
            f"{self.me} plays {result.move} (score {result.score}, "
            f"{result.stats.nodes:,} nodes in {elapsed:.2f}s)"
        )
        return result.move


def build_engine(config: SearchConfig) -> MinimaxEngine:
    """Build the engine described by ``config``."""
    move_generator = get_move_generator(config.move_generator, **config.move_generator_options)
    evaluator = get_evaluator(
        config.evaluator, win_score=config.win_score, **config.evaluator_options
    )
    options = dict(
        win_score=config.win_score,
        check_terminal_scores=config.check_terminal_scores,
        show_progress=config.show_progress,
    )

    if config.workers == 1:
        return MinimaxEngine(move_generator, evaluator, **options)
    return ParallelMinimaxEngine(
        move_generator, evaluator, num_workers=config.workers, **options
    )


def create_player(me: Player, config: Optional[SearchConfig] = None) -> MinMaxPlayer:
    """Create a minimax player from a search configuration."""
    if config is None:
        config = SearchConfig()
    return MinMaxPlayer(me, config.depth, engine=build_engine(config))
