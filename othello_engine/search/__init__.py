"""Move-selection policies and the search engine."""

from .move_policy import MovePolicy
from .random_policy import RandomPolicy
from .greedy_policy import GreedyPolicy
from .minimax_policy import MinimaxConfig, MinimaxPolicy
from .engine import SearchEngine
from ..registry import list_policies, register_policy


def _random_factory(rng=None, **_kwargs):
    return RandomPolicy(rng=rng)


def _greedy_factory(evaluator=None, **_kwargs):
    return GreedyPolicy(evaluator=evaluator)


def _minimax_factory(evaluator=None, depth=None, no_move_score=None, **_kwargs):
    config = MinimaxConfig()
    if depth is not None:
        config.depth = depth
    if no_move_score is not None:
        config.no_move_score = no_move_score
    return MinimaxPolicy(evaluator=evaluator, config=config)


if "random" not in list_policies():
    register_policy("random", _random_factory)
if "greedy" not in list_policies():
    register_policy("greedy", _greedy_factory)
if "minimax" not in list_policies():
    register_policy("minimax", _minimax_factory)

__all__ = [
    "MovePolicy",
    "RandomPolicy",
    "GreedyPolicy",
    "MinimaxConfig",
    "MinimaxPolicy",
    "SearchEngine",
]
