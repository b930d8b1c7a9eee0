"""Read-only view of the engine state for rendering."""

from pydantic import BaseModel

from memory_game.models.card import ColorKind, SymbolKind
from memory_game.models.difficulty import (
    DIFFICULTY_LABELS,
    MODE_LABELS,
    Difficulty,
    GameMode,
)
from memory_game.models.score import BestScoreEntry
from memory_game.models.session import Phase

from .events import Notification


class CardView(BaseModel, frozen=True):
    """Rendering state of one deck position."""

    index: int
    id: int
    symbol: SymbolKind
    color: ColorKind
    is_matched: bool
    is_flipped: bool

    @property
    def face_up(self) -> bool:
        """Whether the card face is visible."""
        return self.is_matched or self.is_flipped


class GameSnapshot(BaseModel, frozen=True):
    """Everything a presentation layer needs to draw the game."""

    session_id: str
    phase: Phase
    mode: GameMode
    difficulty: Difficulty
    cards: list[CardView]
    matched_pairs: int
    total_pairs: int
    time_remaining: int | None  # None outside chrono mode
    live_score: int
    final_score: int | None
    is_checking: bool
    best_scores: list[BestScoreEntry]
    notification: Notification | None = None

    @property
    def mode_label(self) -> str:
        return MODE_LABELS[self.mode]

    @property
    def difficulty_label(self) -> str:
        return DIFFICULTY_LABELS[self.difficulty]

    def pairs_found_text(self) -> str:
        """Progress line (e.g. "Paires trouvées : 2 sur 6")."""
        return f"Paires trouvées : {self.matched_pairs} sur {self.total_pairs}"

    def time_remaining_text(self) -> str | None:
        """Countdown line, None outside chrono mode."""
        if self.time_remaining is None:
            return None
        return f"Temps restant : {self.time_remaining} secondes"

    def score_text(self) -> str:
        """Live score line, or the final score once finished."""
        if self.phase == Phase.FINISHED and self.final_score is not None:
            return f"Score final : {self.final_score}"
        return f"Score : {self.live_score}"
