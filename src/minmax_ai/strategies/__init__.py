"""Concrete move generators and evaluators, looked up by name."""

from typing import Callable, Dict

from ..search import Evaluator, MoveGenerator
from .evaluators import LineEvaluator, ZeroEvaluator
from .moves import AllEmptyCells, NeighborhoodMoves

MOVE_GENERATORS: Dict[str, Callable[..., MoveGenerator]] = {
    "all": AllEmptyCells,
    "neighborhood": NeighborhoodMoves,
}

EVALUATORS: Dict[str, Callable[..., Evaluator]] = {
    "zero": ZeroEvaluator,
    "lines": LineEvaluator,
}


def get_move_generator(name: str, **kwargs) -> MoveGenerator:
    """Build a registered move generator."""
    try:
        factory = MOVE_GENERATORS[name]
    except KeyError:
        raise ValueError(
            f"Unknown move generator {name!r} (choose from {', '.join(MOVE_GENERATORS)})"
        ) from None
    return factory(**kwargs)


def get_evaluator(name: str, **kwargs) -> Evaluator:
    """Build a registered evaluator."""
    try:
        factory = EVALUATORS[name]
    except KeyError:
        raise ValueError(
            f"Unknown evaluator {name!r} (choose from {', '.join(EVALUATORS)})"
        ) from None
    return factory(**kwargs)


__all__ = [
    "AllEmptyCells",
    "NeighborhoodMoves",
    "LineEvaluator",
    "ZeroEvaluator",
    "MOVE_GENERATORS",
    "EVALUATORS",
    "get_move_generator",
    "get_evaluator",
]
