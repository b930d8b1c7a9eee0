"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel


class TimingConfig(BaseModel):
    """Delays of the timed transitions, in milliseconds."""

    preview_ms: int = 2000
    match_delay_ms: int = 500
    mismatch_delay_ms: int = 1000
    tick_ms: int = 1000  # One chrono second


class StorageConfig(BaseModel):
    """Best score storage configuration."""

    path: str = "best_scores.json"
    key: str = "bestScores"
    in_memory: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    max_event_records: int = 1000


class Config(BaseModel):
    """Root configuration."""

    timing: TimingConfig = TimingConfig()
    storage: StorageConfig = StorageConfig()
    logging: LoggingConfig = LoggingConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
