"""
Rich-based display for boards and search results.

Provides clean, formatted output with:
- The board as a grid with coordinates
- A table of root candidates and their scores
- Search statistics
"""

import logging
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core import Board, Location, Player
from ..search import SearchResult

console = Console()
logger = logging.getLogger(__name__)

PLAYER_STYLES = {Player.X: "bold red", Player.O: "bold blue"}


def describe_score(score: int, win_score: int) -> str:
    """Human-readable score, naming forced wins and losses."""
    if score >= win_score:
        return "[green]win[/green]"
    if score <= -win_score:
        return "[red]loss[/red]"
    return str(score)


class SearchDisplay:
    """
    Rich-based display for a search.

    Shows:
    - The position being searched
    - Every root candidate with its minimax score
    - Node counts
    """

    def __init__(self, win_score: int, target: Optional[Console] = None):
        """
        Initialize search display.

        Args:
            win_score: Sentinel used by the engine, to label forced results
            target: Console to print to (default: shared stdout console)
        """
        self.win_score = win_score
        self.console = target or console

    def log_info(self, message: str):
        """Log info message."""
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_success(self, message: str):
        """Log success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def log_error(self, message: str):
        """Log error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def show_header(self, title: str, board: Board, me: Player, depth: int):
        """Show search header."""
        self.console.rule(f"[bold blue]{title}[/bold blue]")
        self.console.print(
            f"Board: {board.num_cols}x{board.num_rows}, {board.win_length} in a row"
        )
        self.console.print(f"To move: [{PLAYER_STYLES[me]}]{me}[/{PLAYER_STYLES[me]}]")
        self.console.print(f"Depth: {depth}")
        self.console.print()

    def board_table(self, board: Board, highlight: Optional[Location] = None) -> Table:
        """Create a grid of the board, optionally marking one cell."""
        table = Table(show_header=True, box=None, padding=(0, 1))
        table.add_column("", style="dim", justify="right")
        for x in range(board.num_cols):
            table.add_column(str(x), justify="center", style="dim")

        for y in range(board.num_rows):
            row = [str(y)]
            for x in range(board.num_cols):
                loc = Location(x, y)
                occupant = board.get(loc)
                if loc == highlight:
                    row.append("[reverse green]*[/reverse green]")
                elif occupant is None:
                    row.append("[dim].[/dim]")
                else:
                    row.append(Text(occupant.value, style=PLAYER_STYLES[occupant]))
            table.add_row(*row)

        return table

    def show_board(self, board: Board, highlight: Optional[Location] = None):
        self.console.print(Panel.fit(self.board_table(board, highlight), title=str(board.status)))

    def candidates_table(self, result: SearchResult) -> Table:
        """Create a table of root candidates in generator order."""
        table = Table(title="Candidates")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Move", style="cyan")
        table.add_column("Score", justify="right")
        table.add_column("Chosen", justify="center")

        for idx, candidate in enumerate(result.candidates, start=1):
            chosen = "[green]✓[/green]" if candidate.move == result.move else ""
            table.add_row(
                str(idx),
                str(candidate.move),
                describe_score(candidate.score, self.win_score),
                chosen,
            )

        return table

    def show_result(self, board: Board, result: SearchResult, show_candidates: bool = True):
        """Show the chosen move, its score and the search statistics."""
        if show_candidates and result.candidates:
            self.console.print(self.candidates_table(result))

        if result.move is None:
            self.log_info(f"Game is over: {board.status}")
            return

        self.show_board(board, highlight=result.move)
        self.log_success(
            f"Best move {result.move} with score "
            f"{describe_score(result.score, self.win_score)}"
        )
        self.console.print(
            f"[dim]{result.stats.nodes:,} nodes | "
            f"{result.stats.leaves:,} evaluated | "
            f"{result.stats.terminal_leaves:,} finished games[/dim]"
        )


def setup_rich_logging(level: str = "INFO"):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Add rich handler
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        handlers=[rich_handler],
        format="%(message)s",
    )
