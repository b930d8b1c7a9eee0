"""Engine construction for host applications."""

import logging
from pathlib import Path

from memory_game.config import Config, load_config
from memory_game.game.engine import GameEngine
from memory_game.game.scheduler import AsyncioScheduler, Scheduler
from memory_game.logging import GameLogConfig, GameLogger
from memory_game.storage import (
    BestScoreRepository,
    InMemoryStore,
    JsonFileStore,
    KeyValueStore,
)
from memory_game.utils.logger import setup_logging

logger = logging.getLogger(__name__)


def create_store(config: Config) -> KeyValueStore:
    """Create the best score store described by the configuration."""
    if config.storage.in_memory:
        return InMemoryStore()
    return JsonFileStore(config.storage.path)


def create_engine(
    config: Config | Path | str | None = None,
    scheduler: Scheduler | None = None,
    store: KeyValueStore | None = None,
    configure_logging: bool = False,
) -> GameEngine:
    """Build a ready-to-use engine.

    Best scores are loaded once here.

    Args:
        config: Config object, or path to a YAML config file.
        scheduler: Timer source (asyncio event loop if not provided).
        store: Best score store (built from config if not provided).
        configure_logging: Whether to call setup_logging with the
            configured level.

    Returns:
        GameEngine in setup phase.
    """
    if not isinstance(config, Config):
        config = load_config(config)

    if configure_logging:
        setup_logging(config.logging.level)

    repository = BestScoreRepository(store or create_store(config), key=config.storage.key)
    game_logger = GameLogger(GameLogConfig(max_records=config.logging.max_event_records))

    engine = GameEngine(
        scheduler or AsyncioScheduler(),
        repository=repository,
        config=config,
        game_logger=game_logger,
    )
    logger.info(f"Engine ready with {len(engine.best_scores())} best score(s)")
    return engine
