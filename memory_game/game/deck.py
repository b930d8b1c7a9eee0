"""Deck generation."""

import logging
import random

from memory_game.models.card import PALETTE_SIZE, Card, ColorKind, SymbolKind
from memory_game.models.difficulty import Difficulty, get_profile

logger = logging.getLogger(__name__)


def create_pairs(pair_count: int) -> list[Card]:
    """Create the unshuffled cards for a number of pairs.

    Pair i uses palette entry i mod 6, so decks with more than six pairs
    reuse symbols. Cards of pair i get ids 2i and 2i+1.
    """
    cards: list[Card] = []
    for i in range(pair_count):
        symbol = SymbolKind(i % PALETTE_SIZE)
        color = ColorKind(i % PALETTE_SIZE)
        cards.append(Card(id=i * 2, symbol=symbol, color=color))
        cards.append(Card(id=i * 2 + 1, symbol=symbol, color=color))
    return cards


def build_deck(
    difficulty: Difficulty | str, rng: random.Random | None = None
) -> list[Card]:
    """Build a shuffled deck for a difficulty tier.

    Args:
        difficulty: Difficulty tier.
        rng: Random source (module-level random if not provided).

    Returns:
        2 x pair_count unmatched cards in uniformly random order.
    """
    profile = get_profile(difficulty)
    cards = create_pairs(profile.pair_count)
    # Fisher-Yates
    (rng or random).shuffle(cards)

    logger.debug(f"Built {len(cards)}-card deck for {Difficulty(difficulty).value}")
    return cards
