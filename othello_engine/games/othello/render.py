"""Text rendering of an Othello board."""

from __future__ import annotations

from typing import Optional

from .bitboard import BitBoard
from .types import BOARD_SIZE, Side

_SYMBOLS = {Side.BLACK: "X", Side.WHITE: "O", None: " "}


def render_board(board: BitBoard, side_to_move: Optional[Side] = None) -> str:
    """Render ``board`` with X for Black and O for White, rows are ``y``."""
    rule = "=" * (BOARD_SIZE * 2 + 3)
    lines = [rule, "  " + " ".join(str(i) for i in range(BOARD_SIZE)), rule]

    rows = [[" "] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    for x, y, side in board.cells():
        rows[y][x] = _SYMBOLS[side]
    for y, row in enumerate(rows):
        lines.append(f"{y}|" + "|".join(row) + "|")

    lines.append(rule)
    lines.append(f"X: {board.count_black()}, O: {board.count_white()}")
    if side_to_move is not None:
        lines.append(f"Current player: {_SYMBOLS[side_to_move]}")
    return "\n".join(lines)
