"""Othello/Reversi move-selection engine."""

from .games.othello import BitBoard, Move, Side
from .search import SearchEngine

__all__ = ["BitBoard", "Move", "Side", "SearchEngine"]
