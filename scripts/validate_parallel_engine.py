#!/usr/bin/env python3
"""
Validate the parallel engine against the serial one.

This tests the full pipeline on a handful of positions:
1. Serial minimax search
2. Parallel minimax search (N workers)
3. Verify both choose the same move with the same score
"""

import argparse
import logging
import sys
import time

from minmax_ai.core import Board, Player
from minmax_ai.search import MinimaxEngine, ParallelMinimaxEngine
from minmax_ai.strategies import LineEvaluator, NeighborhoodMoves

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    force=True,
)

logger = logging.getLogger(__name__)

POSITIONS = [
    (["XX.", "OO.", "..."], 3, Player.X),
    (["OO.", "X..", "..X"], 3, Player.X),
    ([".......", "..X....", "...O...", "..XO...", ".......", ".......", "......."], 4, Player.X),
    ([".......", ".......", "..XXO..", "...O...", "..O....", ".......", "......."], 4, Player.X),
]


def main():
    parser = argparse.ArgumentParser(description="Compare serial and parallel minimax")
    parser.add_argument("--depth", type=int, default=3)
    parser.add_argument("--workers", type=int, default=4)
    args = parser.parse_args()

    logger.info("=" * 70)
    logger.info(f"PARALLEL ENGINE VALIDATION - depth {args.depth}, {args.workers} workers")
    logger.info("=" * 70)

    serial = MinimaxEngine(NeighborhoodMoves(), LineEvaluator())
    parallel = ParallelMinimaxEngine(
        NeighborhoodMoves(), LineEvaluator(), num_workers=args.workers
    )

    failures = 0
    for rows, win_length, me in POSITIONS:
        board = Board.from_rows(rows, win_length)

        start = time.time()
        expected = serial.select_move(board, args.depth, me)
        serial_time = time.time() - start

        start = time.time()
        result = parallel.select_move(board, args.depth, me)
        parallel_time = time.time() - start

        match = result == expected
        if not match:
            failures += 1

        logger.info("")
        logger.info(f"Board {board.num_cols}x{board.num_rows}, {me} to move:\n{board}")
        logger.info(f"Serial:   {expected.move} score={expected.score} ({serial_time:.2f}s)")
        logger.info(f"Parallel: {result.move} score={result.score} ({parallel_time:.2f}s)")
        logger.info(f"Nodes: {expected.stats.nodes:,} | Match: {'✓' if match else '✗'}")

    logger.info("")
    logger.info("=" * 70)
    if failures:
        logger.error(f"❌ {failures} of {len(POSITIONS)} positions differ")
        return 1

    logger.info(f"✅ All {len(POSITIONS)} positions match")
    return 0


if __name__ == "__main__":
    sys.exit(main())
