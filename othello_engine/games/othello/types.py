"""Sides, moves and coordinate errors for Othello."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BOARD_SIZE = 8


class InvalidCoordinate(ValueError):
    """Raised when a cell lies outside the 8x8 grid."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"Coordinate ({x}, {y}) is outside the {BOARD_SIZE}x{BOARD_SIZE} board")
        self.x = x
        self.y = y


def on_board(x: int, y: int) -> bool:
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def check_coordinate(x: int, y: int) -> None:
    if not on_board(x, y):
        raise InvalidCoordinate(x, y)


class Side(Enum):
    BLACK = "black"
    WHITE = "white"

    @property
    def opponent(self) -> "Side":
        return Side.WHITE if self is Side.BLACK else Side.BLACK

    @property
    def token(self) -> int:
        """Array token for this side: +1 for Black, -1 for White."""
        return 1 if self is Side.BLACK else -1


@dataclass(frozen=True)
class Move:
    """A stone placement at column ``x`` and row ``y``.

    Passing is not a ``Move``: APIs that accept or return a pass use
    ``Optional[Move]`` with ``None`` meaning "no move".
    """

    x: int
    y: int

    def __post_init__(self) -> None:
        check_coordinate(self.x, self.y)

    @property
    def index(self) -> int:
        return self.x + BOARD_SIZE * self.y

    @classmethod
    def from_index(cls, index: int) -> "Move":
        if not 0 <= index < BOARD_SIZE * BOARD_SIZE:
            raise InvalidCoordinate(index % BOARD_SIZE, index // BOARD_SIZE)
        return cls(index % BOARD_SIZE, index // BOARD_SIZE)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
