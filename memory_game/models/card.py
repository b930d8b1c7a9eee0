"""Card model and palette."""

from enum import IntEnum

from pydantic import BaseModel


class SymbolKind(IntEnum):
    """Card face symbol (index-aligned with ColorKind)."""

    HEART = 0
    STAR = 1
    SUN = 2
    MOON = 3
    CLOUD = 4
    FLOWER = 5


class ColorKind(IntEnum):
    """Card face color."""

    ROSE = 0
    AMBER = 1
    YELLOW = 2
    PURPLE = 3
    SKY = 4
    EMERALD = 5


PALETTE_SIZE = len(SymbolKind)

SYMBOL_NAMES = {
    SymbolKind.HEART: "heart",
    SymbolKind.STAR: "star",
    SymbolKind.SUN: "sun",
    SymbolKind.MOON: "moon",
    SymbolKind.CLOUD: "cloud",
    SymbolKind.FLOWER: "flower",
}

COLOR_NAMES = {
    ColorKind.ROSE: "rose",
    ColorKind.AMBER: "amber",
    ColorKind.YELLOW: "yellow",
    ColorKind.PURPLE: "purple",
    ColorKind.SKY: "sky",
    ColorKind.EMERALD: "emerald",
}


class Card(BaseModel):
    """Single card of the deck.

    Two cards are created for every pair and share symbol and color.
    Matching compares symbols only.
    """

    id: int
    symbol: SymbolKind
    color: ColorKind
    is_matched: bool = False

    def matches(self, other: "Card") -> bool:
        """Check if this card forms a pair with another card."""
        return self.symbol == other.symbol

    def __str__(self) -> str:
        return f"{SYMBOL_NAMES[self.symbol]}/{COLOR_NAMES[self.color]}"
