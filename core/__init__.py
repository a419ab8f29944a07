"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Deck, Rank, ShuffleAlgorithm, Suit
from core.hand import Hand, compare_hands

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "ShuffleAlgorithm",
    "Suit",
    "Hand",
    "compare_hands",
]
