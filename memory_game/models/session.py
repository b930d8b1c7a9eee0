"""Game session state."""

from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field

from .card import Card
from .difficulty import Difficulty, GameMode, get_profile


class Phase(str, Enum):
    """Engine phase."""

    SETUP = "setup"  # Idle, choosing mode and difficulty
    PREVIEW = "preview"  # All cards revealed for memorization
    PLAYING = "playing"
    FINISHED = "finished"


class GameOutcome(str, Enum):
    """How a finished game ended."""

    WIN = "win"
    LOSS = "loss"


def _new_session_id() -> str:
    return uuid4().hex


class GameSession(BaseModel):
    """State of the single active game."""

    session_id: str = Field(default_factory=_new_session_id)
    mode: GameMode = GameMode.NORMAL
    difficulty: Difficulty = Difficulty.FACILE
    phase: Phase = Phase.SETUP

    deck: list[Card] = Field(default_factory=list)
    flipped_indices: list[int] = Field(default_factory=list)
    matched_pair_count: int = 0
    time_remaining: int = 0  # seconds, chrono only
    is_checking: bool = False  # Two cards flipped, match pending

    final_score: int | None = None
    outcome: GameOutcome | None = None

    @property
    def total_pairs(self) -> int:
        """Number of pairs in the deck."""
        return len(self.deck) // 2

    @property
    def time_limit(self) -> int:
        """Time limit of the chosen difficulty in seconds."""
        return get_profile(self.difficulty).time_limit

    def is_flipped(self, index: int) -> bool:
        """Check if the card at index is currently flipped."""
        return index in self.flipped_indices

    def is_face_up(self, index: int) -> bool:
        """Check if the card at index shows its face."""
        return self.deck[index].is_matched or self.is_flipped(index)

    def all_matched(self) -> bool:
        """Check if every pair has been found."""
        return self.total_pairs > 0 and self.matched_pair_count >= self.total_pairs

    def __str__(self) -> str:
        parts = [f"Session {self.session_id[:8]}", self.mode.value, self.difficulty.value]
        parts.append(f"[{self.phase.value.upper()}]")
        if self.deck:
            parts.append(f"{self.matched_pair_count}/{self.total_pairs} pairs")
        if self.mode == GameMode.CHRONO:
            parts.append(f"{self.time_remaining}s")
        return " ".join(parts)
