"""Tests for configuration schemas."""

from __future__ import annotations

import pytest

from othello_engine.config import EngineConfig, load_config


def test_engine_config_defaults():
    cfg = EngineConfig.from_dict({})
    assert cfg.search.mode == "minimax"
    assert cfg.search.depth == 3
    assert cfg.search.no_move_score == 100
    assert cfg.search.seed is None
    assert cfg.weights.corner == 40
    assert cfg.player.low_time_ms == 1000
    assert cfg.log_level == "INFO"


def test_engine_config_parsing():
    data = {
        "search": {"mode": "greedy", "depth": 2, "seed": "7"},
        "weights": {"corner": 60, "next_to_edge": 0},
        "player": {"low_time_ms": 250},
        "log_level": "DEBUG",
    }

    cfg = EngineConfig.from_dict(data)
    assert cfg.search.mode == "greedy"
    assert cfg.search.depth == 2
    assert cfg.search.seed == 7
    assert cfg.weights.corner == 60
    assert cfg.weights.next_to_edge == 0
    assert cfg.weights.edge == 5
    assert cfg.player.low_time_ms == 250
    assert cfg.player.testing_minimax_depth == 2
    assert cfg.log_level == "DEBUG"
    assert cfg.to_dict()["weights"]["corner"] == 60


@pytest.mark.parametrize(
    "data",
    [
        {"search": {"mode": "alphabeta"}},
        {"search": {"depth": -1}},
        {"weights": {"mobility": 3}},
        {"weights": {"corner": -5}},
        {"weights": {"edge": 2.5}},
    ],
)
def test_engine_config_rejects_invalid(data):
    with pytest.raises(ValueError):
        EngineConfig.from_dict(data)


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "engine.yaml"
    path.write_text("search:\n  mode: random\n  seed: 3\nweights:\n  edge: 8\n")

    cfg = load_config(path)
    assert cfg.search.mode == "random"
    assert cfg.search.seed == 3
    assert cfg.weights.edge == 8


def test_load_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "engine.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_bundled_default_config_matches_defaults():
    from pathlib import Path

    path = Path(__file__).parent.parent / "configs" / "default.yaml"
    assert load_config(path) == EngineConfig()
