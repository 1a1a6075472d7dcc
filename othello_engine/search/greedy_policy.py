"""One-ply heuristic move selection."""

from __future__ import annotations

from typing import Optional, Sequence

from othello_engine.games.othello import (
    BitBoard,
    Evaluator,
    Move,
    Side,
    apply_move,
    legal_moves as list_legal_moves,
)
from .move_policy import MovePolicy


class GreedyPolicy(MovePolicy):
    """
    Scores each candidate on a board copy with the move applied and returns
    the highest-scoring one. Ties go to the earliest candidate.
    """

    def __init__(self, evaluator: Optional[Evaluator] = None) -> None:
        self.evaluator = evaluator or Evaluator()

    def select_move(
        self,
        board: BitBoard,
        side: Side,
        legal_moves: Optional[Sequence[Move]] = None,
    ) -> Optional[Move]:
        if legal_moves is None:
            legal_moves = list_legal_moves(board, side)

        best_move: Optional[Move] = None
        best_score: Optional[int] = None

        for move in legal_moves:
            hypothetical = board.copy()
            apply_move(hypothetical, move, side)
            score = self.evaluator.score(hypothetical, move, side)
            if best_score is None or score > best_score:
                best_move = move
                best_score = score

        return best_move
