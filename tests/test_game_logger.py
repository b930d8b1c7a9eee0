"""Tests for the game event log."""

import pytest

from memory_game.game import engine as engine_module
from memory_game.game.deck import create_pairs
from memory_game.game.engine import GameEngine
from memory_game.game.scheduler import ManualScheduler
from memory_game.logging import GameLogConfig, GameLogger, format_card, format_deck
from memory_game.models.card import Card, ColorKind, SymbolKind
from memory_game.models.difficulty import get_profile


@pytest.fixture(autouse=True)
def unshuffled(monkeypatch):
    monkeypatch.setattr(
        engine_module,
        "build_deck",
        lambda difficulty, rng=None: create_pairs(get_profile(difficulty).pair_count),
    )


class TestFormatters:
    """Tests for card formatters."""

    def test_format_card(self):
        """Test single card format."""
        card = Card(id=7, symbol=SymbolKind.SUN, color=ColorKind.YELLOW)
        assert format_card(card) == "sun/yellow#7"

    def test_format_deck(self):
        """Test deck format keeps deck order."""
        assert format_deck(create_pairs(1)) == "heart/rose#0,heart/rose#1"
        assert format_deck([]) == ""


class TestGameLogger:
    """Tests for GameLogger class."""

    def test_records_game(self):
        """Test the records of a played game."""
        scheduler = ManualScheduler()
        game_logger = GameLogger()
        engine = GameEngine(scheduler, game_logger=game_logger)

        session = engine.start_game("normal", "facile")
        scheduler.advance(2000)
        engine.flip_card(0)
        engine.flip_card(2)
        scheduler.advance(1000)
        for i in range(0, 12, 2):
            engine.flip_card(i)
            engine.flip_card(i + 1)
            scheduler.advance(500)

        records = game_logger.records_for(session.session_id)
        types = [r["type"] for r in records]
        assert types[0] == "game_start"
        assert types.count("flip") == 14
        assert types.count("mismatch") == 1
        assert types.count("match") == 6
        assert records[-1]["type"] == "game_end"
        assert records[-1]["outcome"] == "win"
        assert records[-1]["score"] == 600
        assert records[-1]["best"] is True

    def test_max_records(self):
        """Test that old records are dropped past the limit."""
        game_logger = GameLogger(GameLogConfig(max_records=2))
        engine = GameEngine(ManualScheduler(), game_logger=game_logger)
        for _ in range(3):
            engine.start_game("normal", "facile")

        assert len(game_logger.records) == 2

    def test_disabled(self):
        """Test that a disabled log keeps nothing."""
        game_logger = GameLogger(GameLogConfig(enabled=False))
        engine = GameEngine(ManualScheduler(), game_logger=game_logger)
        engine.start_game("normal", "facile")

        assert game_logger.records == []
