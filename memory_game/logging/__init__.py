"""Game logging module."""

from .formatters import format_card, format_deck, format_flip
from .game_logger import GameLogConfig, GameLogger

__all__ = [
    "GameLogConfig",
    "GameLogger",
    "format_card",
    "format_deck",
    "format_flip",
]
