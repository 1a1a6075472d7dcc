"""Compact 8x8 two-color board backed by two 64-bit masks."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Union

import numpy as np

from .types import BOARD_SIZE, Side, check_coordinate

NUM_CELLS = BOARD_SIZE * BOARD_SIZE

# Grid symbols accepted by ``load_from_grid``. Integers follow the array
# convention (+1 black, -1 white, 0 empty).
_BLACK_CELLS = {"b", "B", "x", "X", 1}
_WHITE_CELLS = {"w", "W", "o", "O", -1}
_EMPTY_CELLS = {"-", ".", " ", "e", "", 0}

GridCell = Union[str, int]


def _bit(x: int, y: int) -> int:
    return 1 << (x + BOARD_SIZE * y)


class BitBoard:
    """
    Othello board state.

    ``taken`` marks occupied cells and ``black`` marks which of those hold a
    black stone; a taken cell that is not black holds a white stone. Cells are
    indexed ``x + 8 * y``.
    """

    __slots__ = ("taken", "black")

    def __init__(self, taken: int = 0, black: int = 0) -> None:
        self.taken = taken
        self.black = black & taken

    @classmethod
    def empty(cls) -> "BitBoard":
        return cls()

    @classmethod
    def standard(cls) -> "BitBoard":
        """Standard opening: White on (3,3)/(4,4), Black on (4,3)/(3,4)."""
        board = cls()
        board.place(Side.WHITE, 3, 3)
        board.place(Side.WHITE, 4, 4)
        board.place(Side.BLACK, 4, 3)
        board.place(Side.BLACK, 3, 4)
        return board

    def copy(self) -> "BitBoard":
        return BitBoard(self.taken, self.black)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitBoard):
            return NotImplemented
        return self.taken == other.taken and self.black == other.black

    def __repr__(self) -> str:
        return f"BitBoard(taken={self.taken:#018x}, black={self.black:#018x})"

    # Cell queries

    def is_occupied(self, x: int, y: int) -> bool:
        check_coordinate(x, y)
        return bool(self.taken & _bit(x, y))

    def color_at(self, side: Side, x: int, y: int) -> bool:
        """True iff the cell holds a stone of ``side``."""
        check_coordinate(x, y)
        bit = _bit(x, y)
        if not self.taken & bit:
            return False
        return bool(self.black & bit) == (side is Side.BLACK)

    def place(self, side: Side, x: int, y: int) -> None:
        """Put (or recolor) a stone of ``side``; prior occupancy is not checked."""
        check_coordinate(x, y)
        bit = _bit(x, y)
        self.taken |= bit
        if side is Side.BLACK:
            self.black |= bit
        else:
            self.black &= ~bit

    # Counting

    def count_black(self) -> int:
        return bin(self.black).count("1")

    def count_white(self) -> int:
        return bin(self.taken).count("1") - self.count_black()

    def count_stones(self, side: Side) -> int:
        return self.count_black() if side is Side.BLACK else self.count_white()

    def count_difference(self, side: Side) -> int:
        """Own stones minus opponent stones."""
        return self.count_stones(side) - self.count_stones(side.opponent)

    # Grid conversion

    def load_from_grid(self, cells: Union[Sequence[GridCell], np.ndarray, str]) -> None:
        """
        Replace the whole state from 64 cells in ``x + 8 * y`` order.

        Args:
            cells: 64 symbols, e.g. ``"b"``/``"w"``/``"-"`` characters or
                ``1``/``-1``/``0`` tokens. An 8x8 numpy array indexed
                ``[y, x]`` is flattened first.

        Raises:
            ValueError: wrong cell count or unknown symbol.
        """
        if isinstance(cells, np.ndarray):
            flat: List[GridCell] = [int(v) for v in cells.reshape(-1)]
        else:
            flat = list(cells)

        if len(flat) != NUM_CELLS:
            raise ValueError(f"Grid must hold {NUM_CELLS} cells, got {len(flat)}")

        taken = 0
        black = 0
        for index, cell in enumerate(flat):
            if cell in _BLACK_CELLS:
                taken |= 1 << index
                black |= 1 << index
            elif cell in _WHITE_CELLS:
                taken |= 1 << index
            elif cell not in _EMPTY_CELLS:
                raise ValueError(f"Unknown grid cell {cell!r} at index {index}")

        self.taken = taken
        self.black = black

    @classmethod
    def from_grid(cls, cells: Union[Sequence[GridCell], np.ndarray, str]) -> "BitBoard":
        board = cls()
        board.load_from_grid(cells)
        return board

    def to_grid(self) -> List[str]:
        """64 characters (``b``/``w``/``-``) in ``x + 8 * y`` order."""
        grid = []
        for index in range(NUM_CELLS):
            bit = 1 << index
            if not self.taken & bit:
                grid.append("-")
            elif self.black & bit:
                grid.append("b")
            else:
                grid.append("w")
        return grid

    def to_array(self) -> np.ndarray:
        """8x8 int8 array indexed ``[y, x]``: +1 black, -1 white, 0 empty."""
        board = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        for x, y, side in self.cells():
            if side is not None:
                board[y, x] = side.token
        return board

    def cells(self) -> Iterable[tuple]:
        """Yield ``(x, y, side_or_None)`` for every cell in index order."""
        for index, cell in enumerate(self.to_grid()):
            y, x = divmod(index, BOARD_SIZE)
            side = Side.BLACK if cell == "b" else Side.WHITE if cell == "w" else None
            yield x, y, side
