"""Persistence of best scores."""

from .best_scores import BestScoreRepository, dump_table, parse_table
from .store import InMemoryStore, JsonFileStore, KeyValueStore

__all__ = [
    "BestScoreRepository",
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
    "dump_table",
    "parse_table",
]
