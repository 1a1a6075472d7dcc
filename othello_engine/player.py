"""Turn-taking player that keeps its own authoritative board."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

import numpy as np

from othello_engine.config import EngineConfig
from othello_engine.games.othello import BitBoard, Move, Side, apply_move
from othello_engine.search import SearchEngine

logger = logging.getLogger(__name__)


class Player:
    """
    Plays one side of a game.

    Each turn the opponent's reported move is applied to the player's board,
    a move is chosen for ``home`` and applied as well, so the board always
    reflects the position after the player's own move.
    """

    def __init__(
        self,
        side: Side,
        config: Optional[EngineConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.home = side
        self.guest = side.opponent
        self.config = config or EngineConfig()
        self.engine = SearchEngine.from_config(self.config, rng=rng)
        self.board = BitBoard.standard()
        self.testing_minimax = False

    def do_move(self, opponents_move: Optional[Move], ms_left: int = -1) -> Optional[Move]:
        """
        Apply the opponent's move and return our own.

        Args:
            opponents_move: the guest's last move, ``None`` if it passed or
                if we move first.
            ms_left: remaining time in milliseconds; negative means no limit.

        Returns:
            Our move, or ``None`` to pass.
        """
        apply_move(self.board, opponents_move, self.guest)

        mode = self.config.search.mode
        depth = self.config.search.depth
        if self.testing_minimax:
            mode = "minimax"
            depth = self.config.player.testing_minimax_depth
        elif 0 <= ms_left < self.config.player.low_time_ms and mode == "minimax":
            logger.info(
                "%s: %d ms left, falling back from minimax to greedy", self.home.name, ms_left
            )
            mode = "greedy"

        move = self.engine.choose_move(self.board, self.home, mode=mode, depth=depth)
        apply_move(self.board, move, self.home)
        return move

    def set_up_board(self, data: Union[Sequence[str], str, np.ndarray]) -> None:
        """Replace the board with an arbitrary 64-cell position."""
        self.board.load_from_grid(data)
