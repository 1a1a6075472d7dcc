"""Static heuristic for scoring a position reached by a move."""

from __future__ import annotations

from dataclasses import dataclass, field

from .bitboard import BitBoard
from .types import BOARD_SIZE, Move, Side

_LAST = BOARD_SIZE - 1


def _distance_to_border(v: int) -> int:
    return min(v, _LAST - v)


def is_corner(move: Move) -> bool:
    return move.x in (0, _LAST) and move.y in (0, _LAST)


def is_edge(move: Move) -> bool:
    """Border cell that is not a corner."""
    on_border = move.x in (0, _LAST) or move.y in (0, _LAST)
    return on_border and not is_corner(move)


def is_next_to_corner(move: Move) -> bool:
    """X- and C-squares: the three cells touching each corner."""
    near = _distance_to_border(move.x) <= 1 and _distance_to_border(move.y) <= 1
    return near and not is_corner(move)


def is_next_to_edge(move: Move) -> bool:
    """Second-ring interior cell that does not touch a corner."""
    dx = _distance_to_border(move.x)
    dy = _distance_to_border(move.y)
    return dx >= 1 and dy >= 1 and min(dx, dy) == 1 and not is_next_to_corner(move)


@dataclass
class HeuristicWeights:
    corner: int = 40
    edge: int = 5
    next_to_corner: int = 20
    next_to_edge: int = 5


@dataclass
class Evaluator:
    """
    Additive static score of ``board`` for ``side`` after ``last_move``.

    The score is the stone difference, plus a bonus for corners and edges,
    minus a penalty for X/C-squares and for cells one step in from an edge.
    """

    weights: HeuristicWeights = field(default_factory=HeuristicWeights)

    def score(self, board: BitBoard, last_move: Move, side: Side) -> int:
        score = board.count_difference(side)

        if is_corner(last_move):
            score += self.weights.corner
        elif is_edge(last_move):
            score += self.weights.edge

        if is_next_to_corner(last_move):
            score -= self.weights.next_to_corner
        elif is_next_to_edge(last_move):
            score -= self.weights.next_to_edge

        return score
