"""Othello move legality and capture rules."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .bitboard import BitBoard
from .types import BOARD_SIZE, Move, Side, on_board

DIRECTIONS = [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]


def get_flips(board: BitBoard, side: Side, x: int, y: int) -> List[Tuple[int, int]]:
    """
    Get all stones that would be flipped by ``side`` placing at ``(x, y)``.

    Args:
        board: Board to inspect (not modified).
        side: Side placing the stone.
        x: Column of the placement.
        y: Row of the placement.

    Returns:
        List of ``(x, y)`` cells that change color. Empty when the target is
        occupied or nothing is flanked, i.e. when the move is illegal.
    """
    if board.is_occupied(x, y):
        return []

    opponent = side.opponent
    flips = []

    for dx, dy in DIRECTIONS:
        temp_flips = []
        cx, cy = x + dx, y + dy

        while on_board(cx, cy) and board.color_at(opponent, cx, cy):
            temp_flips.append((cx, cy))
            cx += dx
            cy += dy

        if temp_flips and on_board(cx, cy) and board.color_at(side, cx, cy):
            flips.extend(temp_flips)

    return flips


def _flanks_any(board: BitBoard, side: Side, x: int, y: int) -> bool:
    if board.is_occupied(x, y):
        return False

    opponent = side.opponent
    for dx, dy in DIRECTIONS:
        cx, cy = x + dx, y + dy
        if not (on_board(cx, cy) and board.color_at(opponent, cx, cy)):
            continue
        while on_board(cx, cy) and board.color_at(opponent, cx, cy):
            cx += dx
            cy += dy
        if on_board(cx, cy) and board.color_at(side, cx, cy):
            return True
    return False


def legal_moves(board: BitBoard, side: Side) -> List[Move]:
    """All legal placements for ``side``, scanning ``x`` outer and ``y`` inner.

    A pass is never included, even when no placement exists.
    """
    moves = []
    for x in range(BOARD_SIZE):
        for y in range(BOARD_SIZE):
            if _flanks_any(board, side, x, y):
                moves.append(Move(x, y))
    return moves


def has_any_move(board: BitBoard, side: Side) -> bool:
    return any(
        _flanks_any(board, side, x, y)
        for x in range(BOARD_SIZE)
        for y in range(BOARD_SIZE)
    )


def is_legal(board: BitBoard, side: Side, move: Optional[Move]) -> bool:
    """Legality of ``move`` for ``side``; passing is legal only without placements."""
    if move is None:
        return not has_any_move(board, side)
    return _flanks_any(board, side, move.x, move.y)


def is_game_over(board: BitBoard) -> bool:
    return not (has_any_move(board, Side.BLACK) or has_any_move(board, Side.WHITE))


def apply_move(board: BitBoard, move: Optional[Move], side: Side) -> bool:
    """
    Play ``move`` for ``side`` on ``board`` in place.

    A pass and an illegal move leave the board untouched.

    Returns:
        True if stones were placed and flipped.
    """
    if move is None:
        return False

    flips = get_flips(board, side, move.x, move.y)
    if not flips:
        return False

    for fx, fy in flips:
        board.place(side, fx, fy)
    board.place(side, move.x, move.y)
    return True


def winner(board: BitBoard) -> Optional[Side]:
    """Side with more stones, or None on a tie."""
    difference = board.count_difference(Side.BLACK)
    if difference > 0:
        return Side.BLACK
    if difference < 0:
        return Side.WHITE
    return None
