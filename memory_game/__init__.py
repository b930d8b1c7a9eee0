"""Single-player memory matching game engine."""

from .config import Config, load_config
from .game import GameEngine, ManualScheduler
from .main import create_engine
from .models import Difficulty, GameMode, Phase

__version__ = "0.1.0"

__all__ = [
    "Config",
    "load_config",
    "GameEngine",
    "ManualScheduler",
    "create_engine",
    "Difficulty",
    "GameMode",
    "Phase",
]
