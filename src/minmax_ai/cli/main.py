"""
Main CLI for the minimax player.
"""

import argparse
import logging
import sys

from ..config import SearchConfig
from ..core import Board, Player
from ..players import build_engine
from ..search import SearchError
from ..utils.rich_display import SearchDisplay, setup_rich_logging


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_board(text: str, win_length: int) -> Board:
    """Parse ``XX./OO./...`` (rows separated by ``/``) into a Board."""
    rows = [row.strip() for row in text.split("/") if row.strip()]
    return Board.from_rows(rows, win_length)


def config_from_args(args) -> SearchConfig:
    move_options = {}
    if args.moves == "neighborhood":
        move_options["radius"] = args.radius
    return SearchConfig(
        depth=args.depth,
        move_generator=args.moves,
        move_generator_options=move_options,
        evaluator=args.evaluator,
        workers=args.workers,
        check_terminal_scores=args.check_terminal_scores,
        show_progress=args.progress,
    )


def analyze_command(args) -> int:
    """Search a single position and report the best move."""
    if args.rich_logging:
        setup_rich_logging(args.log_level)
    else:
        setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    board = parse_board(args.board, args.win_length)
    me = Player(args.player.upper())
    config = config_from_args(args)
    engine = build_engine(config)
    display = SearchDisplay(win_score=config.win_score)

    logger.info(
        f"Searching {board.num_cols}x{board.num_rows} board for {me} "
        f"(depth {config.depth}, moves={config.move_generator}, evaluator={config.evaluator})"
    )
    display.show_header("Minimax analysis", board, me, config.depth)
    display.show_board(board)

    try:
        result = engine.select_move(board, config.depth, me)
    except SearchError as e:
        display.log_error(str(e))
        return 1

    display.show_result(board, result, show_candidates=not args.quiet)
    return 0


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Fixed-depth minimax player")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--rich-logging", action="store_true", help="Format log lines with rich"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Find the best move in a position")
    analyze_parser.add_argument(
        "--board",
        required=True,
        help="Board rows separated by '/', using X, O and '.' (e.g. 'XX./OO./...')",
    )
    analyze_parser.add_argument(
        "--player", choices=["X", "O", "x", "o"], required=True, help="Player to move"
    )
    analyze_parser.add_argument(
        "--win-length", type=int, default=3, help="Stones in a row needed to win"
    )
    analyze_parser.add_argument(
        "--depth", type=int, default=SearchConfig.depth, help="Plies to search"
    )
    analyze_parser.add_argument(
        "--moves",
        choices=["all", "neighborhood"],
        default=SearchConfig.move_generator,
        help="Candidate filter (all=every empty cell, neighborhood=cells near stones)",
    )
    analyze_parser.add_argument(
        "--radius", type=int, default=1, help="Neighborhood radius for --moves neighborhood"
    )
    analyze_parser.add_argument(
        "--evaluator",
        choices=["zero", "lines"],
        default=SearchConfig.evaluator,
        help="Heuristic for positions at the depth limit",
    )
    analyze_parser.add_argument(
        "--workers", type=int, default=1, help="Number of parallel workers"
    )
    analyze_parser.add_argument(
        "--check-terminal-scores",
        action="store_true",
        help="Fail if the evaluator disagrees with the engine about finished games",
    )
    analyze_parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar over root candidates"
    )
    analyze_parser.add_argument(
        "--quiet", action="store_true", help="Don't print the candidate table"
    )
    analyze_parser.set_defaults(func=analyze_command)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
