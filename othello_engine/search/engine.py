"""Move-selection entry point used by players."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import numpy as np

from othello_engine.games.othello import BitBoard, Evaluator, Move, Side, legal_moves
from othello_engine.registry import make_policy
from .minimax_policy import DEFAULT_NO_MOVE_SCORE, MinimaxPolicy

if TYPE_CHECKING:
    from othello_engine.config import EngineConfig

logger = logging.getLogger(__name__)


class SearchEngine:
    """
    Chooses moves in one of the registered modes (``random``, ``greedy``,
    ``minimax``). The caller's board is never mutated.
    """

    def __init__(
        self,
        evaluator: Optional[Evaluator] = None,
        mode: str = "minimax",
        depth: int = 3,
        no_move_score: int = DEFAULT_NO_MOVE_SCORE,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.evaluator = evaluator or Evaluator()
        self.mode = mode
        self.depth = depth
        self.no_move_score = no_move_score
        self.rng = rng or np.random.default_rng()

    @classmethod
    def from_config(
        cls,
        config: "EngineConfig",
        rng: Optional[np.random.Generator] = None,
    ) -> "SearchEngine":
        if rng is None:
            rng = np.random.default_rng(config.search.seed)
        return cls(
            evaluator=Evaluator(weights=config.weights),
            mode=config.search.mode,
            depth=config.search.depth,
            no_move_score=config.search.no_move_score,
            rng=rng,
        )

    def choose_move(
        self,
        board: BitBoard,
        side: Side,
        mode: Optional[str] = None,
        depth: Optional[int] = None,
    ) -> Optional[Move]:
        """
        Pick a move for ``side``.

        Args:
            board: current position.
            side: side to move.
            mode: policy name; defaults to the engine's mode.
            depth: minimax depth; defaults to the engine's depth. Ignored by
                the other modes.

        Returns:
            The chosen move, or ``None`` when ``side`` must pass.
        """
        mode = mode or self.mode
        depth = self.depth if depth is None else depth
        if mode == "minimax" and depth < 0:
            raise ValueError("Minimax depth must be >= 0")
        policy = make_policy(
            mode,
            evaluator=self.evaluator,
            rng=self.rng,
            depth=depth,
            no_move_score=self.no_move_score,
        )

        candidates = legal_moves(board, side)
        if not candidates:
            logger.debug("%s has no legal move (mode=%s), passing", side.name, mode)
            return None

        move = policy.select_move(board, side, candidates)
        if isinstance(policy, MinimaxPolicy):
            logger.debug(
                "%s: minimax depth=%d over %d candidates -> %s (%d nodes)",
                side.name, depth, len(candidates), move, policy.nodes,
            )
        else:
            logger.debug(
                "%s: %s over %d candidates -> %s", side.name, mode, len(candidates), move,
            )
        return move
