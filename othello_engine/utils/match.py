"""Utilities for playing games and matches between engine players."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

import numpy as np

from othello_engine.config import EngineConfig
from othello_engine.games.othello import BitBoard, Move, Side, apply_move, is_game_over, winner
from othello_engine.player import Player

logger = logging.getLogger(__name__)

MoveCallback = Callable[[Side, Optional[Move], BitBoard], None]


class BoardDesyncError(RuntimeError):
    """Raised when the two players' boards disagree after a ply."""


@dataclass
class GameResult:
    winner: Optional[Side]
    black_count: int
    white_count: int
    moves: List[Tuple[Side, Optional[Move]]] = field(default_factory=list)
    board: BitBoard = field(default_factory=BitBoard.standard)


def play_game(
    black_player: Player,
    white_player: Player,
    max_plies: int = 128,
    on_move: Optional[MoveCallback] = None,
) -> GameResult:
    """
    Play one game, Black first.

    Args:
        black_player: Player whose home side is Black.
        white_player: Player whose home side is White.
        max_plies: Safety cap on the number of plies (passes included).
        on_move: Optional callback invoked after every ply with the side,
            its move and the board.

    Returns:
        GameResult for the finished (or capped) game.
    """
    if black_player.home is not Side.BLACK or white_player.home is not Side.WHITE:
        raise ValueError("play_game expects a Black player and a White player")

    players = {Side.BLACK: black_player, Side.WHITE: white_player}
    side = Side.BLACK
    last_move: Optional[Move] = None
    consecutive_passes = 0
    moves: List[Tuple[Side, Optional[Move]]] = []
    final_board = black_player.board

    for _ in range(max_plies):
        mover = players[side]
        move = mover.do_move(last_move)
        moves.append((side, move))

        # The waiting player sees the move on its next turn; compare against
        # a copy with the move applied so both views stay in lockstep.
        waiting = players[side.opponent]
        if move is not None:
            expected = waiting.board.copy()
            apply_move(expected, move, side)
        else:
            expected = waiting.board
        if expected != mover.board:
            raise BoardDesyncError(
                f"Boards diverged after {side.name} played {move}: "
                f"{mover.board!r} != {expected!r}"
            )

        final_board = mover.board
        if on_move is not None:
            on_move(side, move, mover.board)

        consecutive_passes = consecutive_passes + 1 if move is None else 0
        if consecutive_passes >= 2 or is_game_over(mover.board):
            break

        last_move = move
        side = side.opponent

    final_board = final_board.copy()
    result = GameResult(
        winner=winner(final_board),
        black_count=final_board.count_black(),
        white_count=final_board.count_white(),
        moves=moves,
        board=final_board,
    )
    logger.info(
        "Game finished after %d plies: X %d - O %d, winner %s",
        len(moves),
        result.black_count,
        result.white_count,
        result.winner.name if result.winner else "draw",
    )
    return result


def play_match(
    black_config: EngineConfig,
    white_config: EngineConfig,
    num_games: int = 1,
    seed: Optional[int] = None,
    on_move: Optional[MoveCallback] = None,
) -> Tuple[int, int, int]:
    """
    Play a series of games with fixed colors.

    Args:
        black_config: Configuration for the Black player.
        white_config: Configuration for the White player.
        num_games: Number of games to play.
        seed: Base seed; each game derives its own generators from it.
        on_move: Optional per-ply callback forwarded to ``play_game``.

    Returns:
        Tuple of (black_wins, draws, white_wins).
    """
    black_wins = 0
    draws = 0
    white_wins = 0

    seed_sequence = np.random.SeedSequence(seed)
    for game_seed in seed_sequence.spawn(num_games):
        black_seed, white_seed = game_seed.spawn(2)
        black = Player(Side.BLACK, black_config, rng=np.random.default_rng(black_seed))
        white = Player(Side.WHITE, white_config, rng=np.random.default_rng(white_seed))

        result = play_game(black, white, on_move=on_move)
        if result.winner is Side.BLACK:
            black_wins += 1
        elif result.winner is Side.WHITE:
            white_wins += 1
        else:
            draws += 1

    return black_wins, draws, white_wins
