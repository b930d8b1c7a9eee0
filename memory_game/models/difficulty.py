"""Game modes, difficulty tiers and their fixed profiles."""

from enum import Enum

from pydantic import BaseModel


class GameMode(str, Enum):
    """Play mode."""

    NORMAL = "normal"
    CHRONO = "chrono"  # Countdown with time bonus


class Difficulty(str, Enum):
    """Difficulty tier."""

    FACILE = "facile"
    MOYEN = "moyen"
    DIFFICILE = "difficile"
    EXTREME = "extreme"


class DifficultyProfile(BaseModel, frozen=True):
    """Fixed parameters of a difficulty tier."""

    pair_count: int
    time_limit: int  # seconds
    base_score: int  # points per matched pair


DIFFICULTY_PROFILES: dict[Difficulty, DifficultyProfile] = {
    Difficulty.FACILE: DifficultyProfile(pair_count=6, time_limit=120, base_score=100),
    Difficulty.MOYEN: DifficultyProfile(pair_count=8, time_limit=90, base_score=200),
    Difficulty.DIFFICILE: DifficultyProfile(pair_count=10, time_limit=60, base_score=300),
    Difficulty.EXTREME: DifficultyProfile(pair_count=12, time_limit=45, base_score=400),
}

MODE_LABELS = {
    GameMode.NORMAL: "Normal",
    GameMode.CHRONO: "Chrono",
}

DIFFICULTY_LABELS = {
    Difficulty.FACILE: "Facile",
    Difficulty.MOYEN: "Moyen",
    Difficulty.DIFFICILE: "Difficile",
    Difficulty.EXTREME: "Extrême",
}


def get_profile(difficulty: Difficulty | str) -> DifficultyProfile:
    """Look up the profile of a difficulty tier."""
    return DIFFICULTY_PROFILES[Difficulty(difficulty)]


def mode_label(mode: GameMode | str) -> str:
    """Get the display label of a game mode."""
    return MODE_LABELS[GameMode(mode)]


def difficulty_label(difficulty: Difficulty | str) -> str:
    """Get the display label of a difficulty tier."""
    return DIFFICULTY_LABELS[Difficulty(difficulty)]
