"""Engine events and end-of-game notifications."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from memory_game.models.session import GameOutcome


class EventType(str, Enum):
    """Kind of state change pushed to subscribers."""

    GAME_STARTED = "game_started"
    PLAY_STARTED = "play_started"  # Preview over
    CARD_FLIPPED = "card_flipped"
    PAIR_MATCHED = "pair_matched"
    PAIR_MISMATCHED = "pair_mismatched"
    TICK = "tick"
    GAME_WON = "game_won"
    GAME_LOST = "game_lost"
    BEST_SCORE_UPDATED = "best_score_updated"
    RETURNED_TO_SETUP = "returned_to_setup"


class GameEvent(BaseModel):
    """State change of the engine."""

    type: EventType
    session_id: str
    payload: dict[str, Any] = Field(default_factory=dict)


NOTIFICATION_MESSAGES = {
    GameOutcome.WIN: "🎉 Félicitations ! Vous avez trouvé toutes les paires ! 🎈",
    GameOutcome.LOSS: "⏰ Temps écoulé ! Meilleure chance la prochaine fois !",
}


class Notification(BaseModel, frozen=True):
    """Message shown to the player when a game ends."""

    outcome: GameOutcome
    message: str

    @classmethod
    def for_outcome(cls, outcome: GameOutcome) -> "Notification":
        """Create the fixed notification for an outcome."""
        return cls(outcome=outcome, message=NOTIFICATION_MESSAGES[outcome])
