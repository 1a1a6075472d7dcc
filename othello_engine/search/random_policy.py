"""Uniform-random move selection."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from othello_engine.games.othello import BitBoard, Move, Side, legal_moves as list_legal_moves
from .move_policy import MovePolicy


class RandomPolicy(MovePolicy):
    """Picks uniformly among the legal moves using an explicit generator."""

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def select_move(
        self,
        board: BitBoard,
        side: Side,
        legal_moves: Optional[Sequence[Move]] = None,
    ) -> Optional[Move]:
        if legal_moves is None:
            legal_moves = list_legal_moves(board, side)
        if not legal_moves:
            return None
        return legal_moves[int(self.rng.integers(len(legal_moves)))]
