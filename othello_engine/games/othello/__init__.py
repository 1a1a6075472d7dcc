"""Othello board, rules and static evaluation."""

from .types import BOARD_SIZE, InvalidCoordinate, Move, Side
from .bitboard import BitBoard
from .rules import (
    apply_move,
    get_flips,
    has_any_move,
    is_game_over,
    is_legal,
    legal_moves,
    winner,
)
from .eval import Evaluator, HeuristicWeights
from .render import render_board

__all__ = [
    "BOARD_SIZE",
    "InvalidCoordinate",
    "Move",
    "Side",
    "BitBoard",
    "apply_move",
    "get_flips",
    "has_any_move",
    "is_game_over",
    "is_legal",
    "legal_moves",
    "winner",
    "Evaluator",
    "HeuristicWeights",
    "render_board",
]
