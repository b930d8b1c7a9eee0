"""Game event log for replaying a session."""

from collections import deque
from typing import Any

from pydantic import BaseModel

from memory_game.models.session import GameOutcome, GameSession

from .formatters import format_deck, format_flip


class GameLogConfig(BaseModel):
    """Configuration for the game event log."""

    enabled: bool = True
    max_records: int = 1000


class GameLogger:
    """Keeps structured game events in memory.

    Each record is a dict with a "type" field. Records of all sessions are
    kept in order, oldest dropped first once max_records is reached.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, defaults are used.
        """
        self.config = config or GameLogConfig()
        self._records: deque[dict[str, Any]] = deque(maxlen=self.config.max_records)

    def _write(self, event: dict[str, Any]) -> None:
        if self.config.enabled:
            self._records.append(event)

    @property
    def records(self) -> list[dict[str, Any]]:
        """Get logged records, oldest first."""
        return list(self._records)

    def records_for(self, session_id: str) -> list[dict[str, Any]]:
        """Get the records of one session."""
        return [r for r in self._records if r.get("session") == session_id]

    def clear(self) -> None:
        """Drop all records."""
        self._records.clear()

    def log_game_start(self, session: GameSession) -> None:
        """Log game start with the shuffled deck."""
        self._write({
            "type": "game_start",
            "session": session.session_id,
            "mode": session.mode.value,
            "difficulty": session.difficulty.value,
            "deck": format_deck(session.deck),
            "time": session.time_remaining,
        })

    def log_flip(self, session: GameSession, index: int) -> None:
        """Log a card flip."""
        self._write({
            "type": "flip",
            "session": session.session_id,
            "cards": format_flip(session.deck, [index]),
            "time": session.time_remaining,
        })

    def log_check(self, session: GameSession, indices: list[int], matched: bool) -> None:
        """Log the result of comparing two flipped cards.

        Args:
            session: Session being played.
            indices: The two flipped deck positions.
            matched: Whether the cards formed a pair.
        """
        self._write({
            "type": "match" if matched else "mismatch",
            "session": session.session_id,
            "cards": format_flip(session.deck, indices),
            "matched_pairs": session.matched_pair_count,
        })

    def log_game_end(
        self,
        session: GameSession,
        outcome: GameOutcome,
        score: int,
        is_best: bool,
    ) -> None:
        """Log game end with the final result."""
        self._write({
            "type": "game_end",
            "session": session.session_id,
            "outcome": outcome.value,
            "score": score,
            "matched_pairs": session.matched_pair_count,
            "time": session.time_remaining,
            "best": is_best,
        })
