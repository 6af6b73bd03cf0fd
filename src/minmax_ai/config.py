"""Search configuration."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .search import WIN_SCORE


@dataclass
class SearchConfig:
    depth: int = 2
    move_generator: str = "neighborhood"
    move_generator_options: Dict[str, Any] = field(default_factory=dict)  # e.g. {"radius": 2}
    evaluator: str = "lines"
    evaluator_options: Dict[str, Any] = field(default_factory=dict)
    workers: Optional[int] = 1  # None means one per CPU
    win_score: int = WIN_SCORE
    check_terminal_scores: bool = False
    show_progress: bool = False

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {self.depth}")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"Workers must be at least 1, got {self.workers}")
