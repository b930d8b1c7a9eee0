"""Formatters for game log output."""

from memory_game.models.card import COLOR_NAMES, SYMBOL_NAMES, Card


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "heart/rose#3").
    """
    return f"{SYMBOL_NAMES[card.symbol]}/{COLOR_NAMES[card.color]}#{card.id}"


def format_deck(deck: list[Card]) -> str:
    """Format a deck to comma-separated string in deck order.

    Returns:
        Comma-separated card strings. Empty string if no cards.
    """
    return ",".join(format_card(c) for c in deck)


def format_flip(deck: list[Card], indices: list[int]) -> list[str]:
    """Format the cards at the given deck positions."""
    return [f"{i}:{format_card(deck[i])}" for i in indices]
