"""Game logic."""

from .deck import build_deck, create_pairs
from .engine import GameEngine
from .events import EventType, GameEvent, Notification
from .scheduler import AsyncioScheduler, ManualScheduler, Scheduler, TimerHandle
from .scoring import calculate_score
from .snapshot import CardView, GameSnapshot

__all__ = [
    "build_deck",
    "create_pairs",
    "GameEngine",
    "EventType",
    "GameEvent",
    "Notification",
    "AsyncioScheduler",
    "ManualScheduler",
    "Scheduler",
    "TimerHandle",
    "calculate_score",
    "CardView",
    "GameSnapshot",
]
