"""Configuration schema for the engine, players and matches."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from othello_engine.games.othello import HeuristicWeights
from othello_engine.registry import list_policies
from othello_engine.search.minimax_policy import DEFAULT_NO_MOVE_SCORE


@dataclass
class SearchConfig:
    mode: str = "minimax"
    depth: int = 3
    no_move_score: int = DEFAULT_NO_MOVE_SCORE
    seed: Optional[int] = None


@dataclass
class PlayerConfig:
    low_time_ms: int = 1000
    testing_minimax_depth: int = 2


@dataclass
class EngineConfig:
    search: SearchConfig = field(default_factory=SearchConfig)
    weights: HeuristicWeights = field(default_factory=HeuristicWeights)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    log_level: str = "INFO"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EngineConfig":
        search_data = data.get("search", {}) or {}
        seed = search_data.get("seed")
        search = SearchConfig(
            mode=str(search_data.get("mode", "minimax")),
            depth=int(search_data.get("depth", 3)),
            no_move_score=int(search_data.get("no_move_score", DEFAULT_NO_MOVE_SCORE)),
            seed=int(seed) if seed is not None else None,
        )
        if search.mode not in list_policies():
            raise ValueError(
                f"search.mode must be one of {sorted(list_policies())}, got '{search.mode}'"
            )
        if search.depth < 0:
            raise ValueError(f"search.depth must be >= 0, got {search.depth}")

        weights_data = data.get("weights", {}) or {}
        weights = HeuristicWeights()
        for key, value in weights_data.items():
            if not hasattr(weights, key):
                raise ValueError(f"Unknown heuristic weight 'weights.{key}'")
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"weights.{key} must be a non-negative integer, got {value!r}")
            setattr(weights, key, value)

        player_data = data.get("player", {}) or {}
        player = PlayerConfig(
            low_time_ms=int(player_data.get("low_time_ms", 1000)),
            testing_minimax_depth=int(player_data.get("testing_minimax_depth", 2)),
        )

        return cls(
            search=search,
            weights=weights,
            player=player,
            log_level=str(data.get("log_level", "INFO")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(path: Union[str, Path]) -> EngineConfig:
    """Load EngineConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    return EngineConfig.from_dict(data)
