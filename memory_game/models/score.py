"""Best score models."""

from typing import Iterator

from pydantic import BaseModel

from .difficulty import Difficulty, GameMode


class BestScoreEntry(BaseModel, frozen=True):
    """Best score for one (mode, difficulty) combination."""

    mode: GameMode
    difficulty: Difficulty
    score: int
    time: int | None = None  # Seconds left, chrono games only

    @property
    def key(self) -> tuple[GameMode, Difficulty]:
        """Table key of this entry."""
        return (self.mode, self.difficulty)

    def display_score(self) -> str:
        """Format the score for display (e.g. "1200 (45s)")."""
        if self.time is None:
            return str(self.score)
        return f"{self.score} ({self.time}s)"

    def __str__(self) -> str:
        return f"{self.mode.value} - {self.difficulty.value}: {self.display_score()}"


class BestScoreTable:
    """Ordered best scores with at most one entry per (mode, difficulty).

    New keys are appended, improved scores replace the existing entry in place.
    """

    def __init__(self, entries: list[BestScoreEntry] | None = None):
        """Initialize table.

        Args:
            entries: Initial entries. Duplicate keys keep the highest score.
        """
        self._entries: list[BestScoreEntry] = []
        for entry in entries or []:
            self.record(entry)

    def get(
        self, mode: GameMode | str, difficulty: Difficulty | str
    ) -> BestScoreEntry | None:
        """Get the entry for a mode and difficulty."""
        key = (GameMode(mode), Difficulty(difficulty))
        for entry in self._entries:
            if entry.key == key:
                return entry
        return None

    def record(self, entry: BestScoreEntry) -> bool:
        """Insert or improve an entry.

        Args:
            entry: Candidate entry.

        Returns:
            True if the table changed.
        """
        for i, existing in enumerate(self._entries):
            if existing.key == entry.key:
                if entry.score > existing.score:
                    self._entries[i] = entry
                    return True
                return False
        self._entries.append(entry)
        return True

    def to_list(self) -> list[BestScoreEntry]:
        """Get entries in display order."""
        return list(self._entries)

    def is_empty(self) -> bool:
        """Check if the table has no entries."""
        return not self._entries

    def __iter__(self) -> Iterator[BestScoreEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"BestScoreTable({self._entries!r})"
