"""Utility modules."""

from .match import BoardDesyncError, GameResult, play_game, play_match

__all__ = ["BoardDesyncError", "GameResult", "play_game", "play_match"]
