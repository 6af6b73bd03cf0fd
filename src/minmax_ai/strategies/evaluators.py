"""Position evaluators."""

from ..core import Board, Player, windows
from ..search import WIN_SCORE, Evaluator, clamp_heuristic, terminal_score


class ZeroEvaluator(Evaluator):
    """Scores every unfinished game as even; finished games by outcome."""

    def __init__(self, win_score: int = WIN_SCORE):
        self.win_score = win_score

    def estimate(self, state: Board, me: Player) -> int:
        status = state.status
        if status.is_over:
            return terminal_score(status, me, self.win_score)
        return 0

    def __repr__(self) -> str:
        return "ZeroEvaluator()"


class LineEvaluator(Evaluator):
    """
    Counts open lines.

    Every window of ``win_length`` cells that holds only one player's stones
    is still winnable by that player. A window with n of my stones adds
    ``base ** n``; one with n of the opponent's subtracts the same. Windows
    holding both players' stones are dead and score nothing.
    """

    def __init__(self, base: int = 10, win_score: int = WIN_SCORE):
        if base < 2:
            raise ValueError(f"Base must be at least 2, got {base}")
        self.base = base
        self.win_score = win_score

    def estimate(self, state: Board, me: Player) -> int:
        status = state.status
        if status.is_over:
            return terminal_score(status, me, self.win_score)

        opponent = me.opponent()
        score = 0
        for window in windows(state):
            mine = theirs = 0
            for loc in window:
                occupant = state.get(loc)
                if occupant is me:
                    mine += 1
                elif occupant is opponent:
                    theirs += 1

            if mine and not theirs:
                score += self.base ** mine
            elif theirs and not mine:
                score -= self.base ** theirs

        return clamp_heuristic(score, self.win_score)

    def __repr__(self) -> str:
        return f"LineEvaluator(base={self.base})"
