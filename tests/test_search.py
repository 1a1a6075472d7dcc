"""Tests for move selection: random, greedy and minimax."""

import numpy as np
import pytest

from othello_engine.games.othello import (
    BitBoard,
    Evaluator,
    Move,
    Side,
    apply_move,
    legal_moves,
)
from othello_engine.search import (
    GreedyPolicy,
    MinimaxConfig,
    MinimaxPolicy,
    RandomPolicy,
    SearchEngine,
)

MODES = ["random", "greedy", "minimax"]


class CountingEvaluator(Evaluator):
    def __init__(self):
        super().__init__()
        self.calls = 0

    def score(self, board, last_move, side):
        self.calls += 1
        return super().score(board, last_move, side)


def _midgame_board():
    board = BitBoard.standard()
    side = Side.BLACK
    greedy = GreedyPolicy()
    for _ in range(8):
        move = greedy.select_move(board, side)
        apply_move(board, move, side)
        side = side.opponent
    return board


@pytest.mark.parametrize("mode", MODES)
def test_no_move_returns_pass(mode, white_stuck_board):
    evaluator = CountingEvaluator()
    engine = SearchEngine(evaluator=evaluator, rng=np.random.default_rng(0))

    assert engine.choose_move(white_stuck_board, Side.WHITE, mode=mode, depth=3) is None
    assert evaluator.calls == 0


@pytest.mark.parametrize("mode", MODES)
def test_chosen_move_is_legal_and_board_untouched(mode):
    board = _midgame_board()
    before = board.copy()
    engine = SearchEngine(rng=np.random.default_rng(1))

    move = engine.choose_move(board, Side.BLACK, mode=mode, depth=1)

    assert move in legal_moves(board, Side.BLACK)
    assert board == before


def test_random_mode_is_reproducible_with_seed():
    board = _midgame_board()
    first = RandomPolicy(rng=np.random.default_rng(42))
    second = RandomPolicy(rng=np.random.default_rng(42))

    picks = [first.select_move(board, Side.WHITE) for _ in range(10)]
    assert picks == [second.select_move(board, Side.WHITE) for _ in range(10)]


def test_random_mode_covers_candidates():
    board = BitBoard.standard()
    policy = RandomPolicy(rng=np.random.default_rng(5))
    picks = {policy.select_move(board, Side.BLACK) for _ in range(200)}
    assert picks == set(legal_moves(board, Side.BLACK))


def test_greedy_opening_takes_first_of_tied_moves():
    assert GreedyPolicy().select_move(BitBoard.standard(), Side.BLACK) == Move(2, 3)


def test_greedy_is_deterministic():
    board = _midgame_board()
    engine = SearchEngine()
    assert engine.choose_move(board, Side.BLACK, mode="greedy") == engine.choose_move(
        board, Side.BLACK, mode="greedy"
    )


def test_greedy_prefers_corner(make_board):
    # Among Black's moves the corner (0,0) scores highest.
    board = make_board(
        "--------",
        "-w------",
        "--b-w---",
        "---wb---",
    )
    moves = legal_moves(board, Side.BLACK)
    assert Move(0, 0) in moves
    assert GreedyPolicy().select_move(board, Side.BLACK) == Move(0, 0)


@pytest.mark.parametrize("depth", [0, 1, 2, 3])
def test_minimax_forced_move(depth, white_stuck_board):
    policy = MinimaxPolicy(config=MinimaxConfig(depth=depth))
    assert policy.select_move(white_stuck_board, Side.BLACK) == Move(2, 0)


def test_minimax_forced_move_values(white_stuck_board):
    # After (2,0): three black stones (+3) on an edge cell (+5).
    depth0 = MinimaxPolicy(config=MinimaxConfig(depth=0))
    assert depth0.score_moves(white_stuck_board, Side.BLACK) == [(Move(2, 0), 8)]

    # One ply deeper White cannot move, which is worth +no_move_score to Black.
    depth1 = MinimaxPolicy(config=MinimaxConfig(depth=1, no_move_score=100))
    assert depth1.score_moves(white_stuck_board, Side.BLACK) == [(Move(2, 0), 108)]


def test_minimax_home_stuck_is_penalised(white_stuck_board):
    policy = MinimaxPolicy(config=MinimaxConfig(no_move_score=100))
    assert policy.search_value(white_stuck_board, Side.WHITE, Side.WHITE, 2) == -100
    assert policy.search_value(white_stuck_board, Side.WHITE, Side.BLACK, 2) == 100
    assert policy.search_value(white_stuck_board, Side.WHITE, Side.BLACK, -1) == 0


def _hand_expanded_three_ply(board, home, evaluator, no_move_score):
    """Root values for depth 2: home, guest and home plies, then nothing."""
    guest = home.opponent
    results = []
    for m1 in legal_moves(board, home):
        b1 = board.copy()
        apply_move(b1, m1, home)

        guest_values = []
        for m2 in legal_moves(b1, guest):
            b2 = b1.copy()
            apply_move(b2, m2, guest)

            home_values = []
            for m3 in legal_moves(b2, home):
                b3 = b2.copy()
                apply_move(b3, m3, home)
                home_values.append(0 + evaluator.score(b3, m3, home))
            v2 = max(home_values) if home_values else -no_move_score

            guest_values.append(v2 - evaluator.score(b2, m2, guest))
        v1 = min(guest_values) if guest_values else no_move_score

        results.append((m1, v1 + evaluator.score(b1, m1, home)))
    return results


@pytest.mark.parametrize("home", [Side.BLACK, Side.WHITE])
def test_minimax_matches_hand_expansion(home):
    board = _midgame_board()
    evaluator = Evaluator()
    policy = MinimaxPolicy(evaluator=evaluator, config=MinimaxConfig(depth=2, no_move_score=100))

    expected = _hand_expanded_three_ply(board, home, evaluator, 100)
    assert policy.score_moves(board, home) == expected

    best_value = max(value for _, value in expected)
    first_best = next(move for move, value in expected if value == best_value)
    assert policy.select_move(board, home) == first_best


def test_minimax_depth_zero_matches_greedy():
    board = _midgame_board()
    minimax = MinimaxPolicy(config=MinimaxConfig(depth=0))
    assert minimax.select_move(board, Side.WHITE) == GreedyPolicy().select_move(board, Side.WHITE)


def test_minimax_symmetric_opening_takes_first_move():
    policy = MinimaxPolicy(config=MinimaxConfig(depth=1))
    assert policy.select_move(BitBoard.standard(), Side.BLACK) == Move(2, 3)


def test_minimax_counts_nodes():
    policy = MinimaxPolicy(config=MinimaxConfig(depth=1))
    policy.select_move(BitBoard.standard(), Side.BLACK)
    # 4 guest nodes, each with 3 replies evaluated at depth -1.
    assert policy.nodes == 4 + 4 * 3


def test_negative_depth_rejected():
    engine = SearchEngine()
    with pytest.raises(ValueError):
        engine.choose_move(BitBoard.standard(), Side.BLACK, mode="minimax", depth=-1)
    with pytest.raises(ValueError):
        MinimaxPolicy(config=MinimaxConfig(depth=-1)).select_move(BitBoard.standard(), Side.BLACK)


def test_unknown_mode_rejected():
    with pytest.raises(KeyError):
        SearchEngine().choose_move(BitBoard.standard(), Side.BLACK, mode="alphabeta")


def test_engine_defaults_from_constructor():
    engine = SearchEngine(mode="greedy")
    assert engine.choose_move(BitBoard.standard(), Side.BLACK) == Move(2, 3)
