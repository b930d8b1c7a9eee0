"""Tests for engine construction."""

from memory_game.config import Config, StorageConfig
from memory_game.game.scheduler import ManualScheduler
from memory_game.main import create_engine
from memory_game.models.difficulty import Difficulty, GameMode
from memory_game.models.score import BestScoreEntry, BestScoreTable
from memory_game.models.session import Phase
from memory_game.storage import BestScoreRepository, JsonFileStore


class TestCreateEngine:
    """Tests for create_engine function."""

    def test_in_memory(self):
        """Test building an engine without a score file."""
        config = Config(storage=StorageConfig(in_memory=True))
        engine = create_engine(config, scheduler=ManualScheduler())

        assert engine.phase == Phase.SETUP
        assert engine.best_scores() == []
        assert engine.game_logger is not None

    def test_loads_scores_from_file(self, tmp_path):
        """Test that best scores are loaded from the configured file."""
        path = tmp_path / "scores.json"
        table = BestScoreTable([
            BestScoreEntry(mode=GameMode.NORMAL, difficulty=Difficulty.MOYEN, score=1600)
        ])
        BestScoreRepository(JsonFileStore(path)).save(table)

        config = Config(storage=StorageConfig(path=str(path)))
        engine = create_engine(config, scheduler=ManualScheduler())

        assert engine.best_score("normal", "moyen").score == 1600

    def test_config_path(self, tmp_path):
        """Test building from a YAML file path."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "timing:\n"
            "  preview_ms: 100\n"
            "storage:\n"
            "  in_memory: true\n"
        )
        scheduler = ManualScheduler()
        engine = create_engine(path, scheduler=scheduler)

        engine.start_game("normal", "facile")
        scheduler.advance(100)
        assert engine.phase == Phase.PLAYING
