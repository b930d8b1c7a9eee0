"""Tests for game models."""

import pytest
from pydantic import ValidationError

from memory_game.models.card import Card, ColorKind, SymbolKind
from memory_game.models.difficulty import (
    DIFFICULTY_PROFILES,
    Difficulty,
    GameMode,
    difficulty_label,
    get_profile,
    mode_label,
)
from memory_game.models.score import BestScoreEntry, BestScoreTable
from memory_game.models.session import GameSession, Phase


class TestCard:
    """Tests for Card class."""

    def test_create_card(self):
        """Test creating a card."""
        card = Card(id=3, symbol=SymbolKind.MOON, color=ColorKind.PURPLE)
        assert card.id == 3
        assert card.symbol == SymbolKind.MOON
        assert not card.is_matched

    def test_matches_by_symbol_only(self):
        """Test that pairs compare by symbol, not color or id."""
        heart = Card(id=0, symbol=SymbolKind.HEART, color=ColorKind.ROSE)
        other_heart = Card(id=12, symbol=SymbolKind.HEART, color=ColorKind.SKY)
        star = Card(id=2, symbol=SymbolKind.STAR, color=ColorKind.ROSE)

        assert heart.matches(other_heart)
        assert not heart.matches(star)

    def test_card_string(self):
        """Test card string representation."""
        card = Card(id=0, symbol=SymbolKind.FLOWER, color=ColorKind.EMERALD)
        assert str(card) == "flower/emerald"


class TestDifficulty:
    """Tests for difficulty profiles."""

    @pytest.mark.parametrize(
        "difficulty,pairs,time_limit,base_score",
        [
            (Difficulty.FACILE, 6, 120, 100),
            (Difficulty.MOYEN, 8, 90, 200),
            (Difficulty.DIFFICILE, 10, 60, 300),
            (Difficulty.EXTREME, 12, 45, 400),
        ],
    )
    def test_profiles(self, difficulty, pairs, time_limit, base_score):
        """Test the fixed profile table."""
        profile = get_profile(difficulty)
        assert profile.pair_count == pairs
        assert profile.time_limit == time_limit
        assert profile.base_score == base_score

    def test_get_profile_accepts_string(self):
        """Test looking up a profile by its string value."""
        assert get_profile("moyen") is DIFFICULTY_PROFILES[Difficulty.MOYEN]

    def test_profiles_are_immutable(self):
        """Test that profiles cannot be modified."""
        profile = get_profile(Difficulty.FACILE)
        with pytest.raises(ValidationError):
            profile.pair_count = 99

    def test_labels(self):
        """Test display labels."""
        assert mode_label(GameMode.CHRONO) == "Chrono"
        assert difficulty_label("extreme") == "Extrême"


class TestGameSession:
    """Tests for GameSession."""

    def test_defaults(self):
        """Test a fresh session is idle."""
        session = GameSession()
        assert session.phase == Phase.SETUP
        assert session.deck == []
        assert session.total_pairs == 0
        assert not session.all_matched()

    def test_unique_session_ids(self):
        """Test that each session gets its own id."""
        assert GameSession().session_id != GameSession().session_id

    def test_face_up(self):
        """Test face-up status from flipped and matched state."""
        deck = [
            Card(id=0, symbol=SymbolKind.HEART, color=ColorKind.ROSE),
            Card(id=1, symbol=SymbolKind.HEART, color=ColorKind.ROSE, is_matched=True),
            Card(id=2, symbol=SymbolKind.STAR, color=ColorKind.AMBER),
        ]
        session = GameSession(deck=deck, flipped_indices=[0])

        assert session.is_face_up(0)
        assert session.is_face_up(1)
        assert not session.is_face_up(2)


class TestBestScoreTable:
    """Tests for BestScoreTable."""

    def entry(self, score, mode=GameMode.NORMAL, difficulty=Difficulty.FACILE, time=None):
        return BestScoreEntry(mode=mode, difficulty=difficulty, score=score, time=time)

    def test_record_new_key(self):
        """Test that a new key is inserted."""
        table = BestScoreTable()
        assert table.record(self.entry(300))
        assert table.get("normal", "facile").score == 300

    def test_record_higher_replaces(self):
        """Test that a strictly greater score replaces the entry."""
        table = BestScoreTable([self.entry(300)])
        assert table.record(self.entry(400))
        assert table.get(GameMode.NORMAL, Difficulty.FACILE).score == 400
        assert len(table) == 1

    def test_record_equal_or_lower_ignored(self):
        """Test that equal or lower scores leave the entry unchanged."""
        table = BestScoreTable([self.entry(300)])
        assert not table.record(self.entry(300))
        assert not table.record(self.entry(100))
        assert table.get("normal", "facile").score == 300

    def test_replacement_keeps_order(self):
        """Test that improving a score keeps its display position."""
        table = BestScoreTable()
        table.record(self.entry(100))
        table.record(self.entry(200, mode=GameMode.CHRONO, time=30))
        table.record(self.entry(500))

        keys = [e.key for e in table]
        assert keys == [
            (GameMode.NORMAL, Difficulty.FACILE),
            (GameMode.CHRONO, Difficulty.FACILE),
        ]

    def test_duplicate_keys_keep_best(self):
        """Test that duplicate keys in initial entries collapse to the best."""
        table = BestScoreTable([self.entry(100), self.entry(700), self.entry(200)])
        assert len(table) == 1
        assert table.get("normal", "facile").score == 700

    def test_display_score(self):
        """Test score display with and without remaining time."""
        assert self.entry(600).display_score() == "600"
        chrono = self.entry(1185, mode=GameMode.CHRONO, time=117)
        assert chrono.display_score() == "1185 (117s)"
        assert str(chrono) == "chrono - facile: 1185 (117s)"
