"""Fixed-depth minimax from the perspective of the side that asked for a move."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from othello_engine.games.othello import (
    BitBoard,
    Evaluator,
    Move,
    Side,
    apply_move,
    legal_moves as list_legal_moves,
)
from .move_policy import MovePolicy

DEFAULT_NO_MOVE_SCORE = 100


@dataclass
class MinimaxConfig:
    depth: int = 3
    no_move_score: int = DEFAULT_NO_MOVE_SCORE


class MinimaxPolicy(MovePolicy):
    """
    Plain minimax over board copies, without pruning.

    Every node is valued for ``home``, the side the search runs for. At a
    home node the move's heuristic (for home) is added to the child value
    and the maximum is backed up; at a guest node the guest's own heuristic
    is subtracted and the minimum is backed up. A side with no placement
    scores ``-no_move_score`` when it is home and ``+no_move_score`` when
    it is the guest. Nodes below the depth limit are worth 0.
    """

    def __init__(
        self,
        evaluator: Optional[Evaluator] = None,
        config: Optional[MinimaxConfig] = None,
    ) -> None:
        self.evaluator = evaluator or Evaluator()
        self.config = config or MinimaxConfig()
        self.nodes = 0

    def select_move(
        self,
        board: BitBoard,
        side: Side,
        legal_moves: Optional[Sequence[Move]] = None,
    ) -> Optional[Move]:
        best_move: Optional[Move] = None
        best_value: Optional[int] = None

        for move, value in self.score_moves(board, side, legal_moves):
            if best_value is None or value > best_value:
                best_move = move
                best_value = value

        return best_move

    def score_moves(
        self,
        board: BitBoard,
        side: Side,
        legal_moves: Optional[Sequence[Move]] = None,
    ) -> List[Tuple[Move, int]]:
        """Backed-up value of every root move, in generator order."""
        if self.config.depth < 0:
            raise ValueError("Minimax depth must be >= 0")

        if legal_moves is None:
            legal_moves = list_legal_moves(board, side)

        self.nodes = 0
        scored = []
        for move in legal_moves:
            branch = board.copy()
            apply_move(branch, move, side)
            value = self._search(branch, side.opponent, side, self.config.depth - 1)
            value += self.evaluator.score(branch, move, side)
            scored.append((move, value))
        return scored

    def search_value(self, board: BitBoard, side_to_move: Side, home: Side, depth: int) -> int:
        """Value of ``board`` for ``home`` with ``side_to_move`` to play."""
        self.nodes = 0
        return self._search(board, side_to_move, home, depth)

    def _search(self, board: BitBoard, side_to_move: Side, home: Side, depth: int) -> int:
        self.nodes += 1
        if depth < 0:
            return 0

        moves = list_legal_moves(board, side_to_move)
        if not moves:
            if side_to_move is home:
                return -self.config.no_move_score
            return self.config.no_move_score

        is_home = side_to_move is home
        values = []
        for move in moves:
            branch = board.copy()
            apply_move(branch, move, side_to_move)
            child_value = self._search(branch, side_to_move.opponent, home, depth - 1)
            heuristic = self.evaluator.score(branch, move, side_to_move)
            values.append(child_value + heuristic if is_home else child_value - heuristic)

        return max(values) if is_home else min(values)
