"""Best score persistence."""

import json
import logging

from pydantic import TypeAdapter, ValidationError

from memory_game.models.score import BestScoreEntry, BestScoreTable

from .store import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_KEY = "bestScores"

_ENTRIES = TypeAdapter(list[BestScoreEntry])


def dump_table(table: BestScoreTable) -> str:
    """Serialize a table to a JSON array.

    Each record has mode, difficulty and score fields. The time field is
    omitted when unset.
    """
    records = [entry.model_dump(mode="json", exclude_none=True) for entry in table]
    return json.dumps(records, ensure_ascii=False)


def parse_table(raw: str | None) -> BestScoreTable:
    """Parse a serialized table.

    Args:
        raw: JSON array as written by dump_table, or None.

    Returns:
        Parsed table. Empty if raw is None or malformed.
    """
    if raw is None:
        return BestScoreTable()
    try:
        entries = _ENTRIES.validate_json(raw)
    except ValidationError as e:
        logger.warning(f"Discarding malformed best scores: {e.error_count()} error(s)")
        return BestScoreTable()
    return BestScoreTable(entries)


class BestScoreRepository:
    """Loads and saves the best score table under one store key."""

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_KEY):
        """Initialize repository.

        Args:
            store: Backing key-value store.
            key: Key holding the serialized table.
        """
        self.store = store
        self.key = key

    def load(self) -> BestScoreTable:
        """Load the table. Missing or malformed data gives an empty table."""
        try:
            raw = self.store.get(self.key)
        except OSError as e:
            logger.warning(f"Could not read best scores: {e}")
            return BestScoreTable()
        table = parse_table(raw)
        logger.debug(f"Loaded {len(table)} best score(s)")
        return table

    def save(self, table: BestScoreTable) -> bool:
        """Write the whole table.

        Returns:
            True if the write succeeded.
        """
        try:
            self.store.set(self.key, dump_table(table))
        except OSError as e:
            logger.error(f"Could not save best scores: {e}")
            return False
        return True
