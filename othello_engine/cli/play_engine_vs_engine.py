"""CLI for playing engine vs engine Othello games."""

import logging
from dataclasses import replace
from typing import Literal, Optional

import tyro

from othello_engine.config import EngineConfig, load_config
from othello_engine.games.othello import render_board
from othello_engine.utils import play_match

Mode = Literal["random", "greedy", "minimax"]


def _side_config(base: EngineConfig, mode: Optional[Mode], depth: Optional[int]) -> EngineConfig:
    search = replace(
        base.search,
        mode=mode or base.search.mode,
        depth=base.search.depth if depth is None else depth,
    )
    return replace(base, search=search)


def play_engine_vs_engine(
    black_mode: Optional[Mode] = None,
    black_depth: Optional[int] = None,
    white_mode: Optional[Mode] = None,
    white_depth: Optional[int] = None,
    num_games: int = 1,
    render: bool = False,
    seed: int = 42,
    config: Optional[str] = None,
):
    """
    Play engine vs engine games.

    Args:
        black_mode: Move-selection mode for Black (defaults to the config's mode)
        black_depth: Minimax depth for Black
        white_mode: Move-selection mode for White
        white_depth: Minimax depth for White
        num_games: Number of games to play
        render: Whether to print the board after every ply
        seed: Random seed
        config: Optional YAML config file with engine defaults
    """
    base = load_config(config) if config else EngineConfig()
    logging.basicConfig(
        level=getattr(logging, base.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    black_config = _side_config(base, black_mode, black_depth)
    white_config = _side_config(base, white_mode, white_depth)

    print("=" * 50)
    print("Othello - Engine vs Engine")
    print("=" * 50)
    print(f"Black (X): {black_config.search.mode} depth={black_config.search.depth}")
    print(f"White (O): {white_config.search.mode} depth={white_config.search.depth}")
    print(f"Games: {num_games}")
    print("=" * 50)
    print()

    def _on_move(side, move, board):
        if not render:
            return
        action = f"plays {move}" if move is not None else "passes"
        print(f"{side.name} {action}")
        print(render_board(board, side.opponent))
        print()

    black_wins, draws, white_wins = play_match(
        black_config,
        white_config,
        num_games=num_games,
        seed=seed,
        on_move=_on_move,
    )

    print("=" * 50)
    print("Results Summary")
    print("=" * 50)
    print(f"Black wins: {black_wins} ({black_wins/num_games*100:.1f}%)")
    print(f"White wins: {white_wins} ({white_wins/num_games*100:.1f}%)")
    print(f"Draws: {draws} ({draws/num_games*100:.1f}%)")
    print("=" * 50)


def main() -> None:
    tyro.cli(play_engine_vs_engine)


if __name__ == "__main__":
    main()
