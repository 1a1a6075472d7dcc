from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from othello_engine.games.othello import BitBoard, Move, Side


class MovePolicy(ABC):
    """
    Abstract policy that picks a move for a side on a board.

    Knows only about:
      - a ``BitBoard`` (never mutated; hypothetical play uses copies)
      - the side to move
      - optionally the precomputed legal moves
    """

    @abstractmethod
    def select_move(
        self,
        board: BitBoard,
        side: Side,
        legal_moves: Optional[Sequence[Move]] = None,
    ) -> Optional[Move]:
        """
        Choose a move for ``side``.

        Args:
            board: current position.
            side: side to move.
            legal_moves: optional cached legal moves (falls back to
                ``rules.legal_moves`` when ``None``).

        Returns:
            The chosen move, or ``None`` when ``side`` has to pass.
        """
        raise NotImplementedError
