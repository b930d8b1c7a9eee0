"""Game models."""

from .card import Card, ColorKind, SymbolKind
from .difficulty import (
    DIFFICULTY_PROFILES,
    Difficulty,
    DifficultyProfile,
    GameMode,
    get_profile,
)
from .score import BestScoreEntry, BestScoreTable
from .session import GameOutcome, GameSession, Phase

__all__ = [
    "Card",
    "ColorKind",
    "SymbolKind",
    "DIFFICULTY_PROFILES",
    "Difficulty",
    "DifficultyProfile",
    "GameMode",
    "get_profile",
    "BestScoreEntry",
    "BestScoreTable",
    "GameOutcome",
    "GameSession",
    "Phase",
]
