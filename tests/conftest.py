"""Shared board fixtures."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from othello_engine.games.othello import BitBoard


def _board_from_rows(*rows: str) -> BitBoard:
    """Build a board from up to 8 row strings; row ``y`` lists columns ``x``."""
    padded = list(rows) + ["--------"] * (8 - len(rows))
    assert all(len(row) == 8 for row in padded)
    return BitBoard.from_grid("".join(padded))


@pytest.fixture
def make_board():
    return _board_from_rows


@pytest.fixture
def white_stuck_board():
    """Black on (0,0), White on (1,0): Black's only move is (2,0), White has none."""
    return _board_from_rows("bw------")
