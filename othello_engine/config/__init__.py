"""Config package exports."""

from .schema import EngineConfig, PlayerConfig, SearchConfig, load_config

__all__ = ["EngineConfig", "PlayerConfig", "SearchConfig", "load_config"]
