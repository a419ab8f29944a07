"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterable, Iterator


class Suit(Enum):
    """Card suits, in deck-building order."""

    SPADES = auto()
    CLUBS = auto()
    HEARTS = auto()
    DIAMONDS = auto()

    def __str__(self) -> str:
        return self.name.title()

    @property
    def symbol(self) -> str:
        """Return the unicode suit symbol."""
        return {
            Suit.SPADES: "♠",
            Suit.CLUBS: "♣",
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
        }[self]


class Rank(Enum):
    """Card ranks, in deck-building order."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return self.name.title()

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self == Rank.ACE:
            return 11
        if self.value <= 10:
            return self.value
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    suit: Suit
    rank: Rank

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.rank.name})"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like 'AS', '10D', 'K♥'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {
            "A": Rank.ACE,
            "2": Rank.TWO,
            "3": Rank.THREE,
            "4": Rank.FOUR,
            "5": Rank.FIVE,
            "6": Rank.SIX,
            "7": Rank.SEVEN,
            "8": Rank.EIGHT,
            "9": Rank.NINE,
            "10": Rank.TEN,
            "T": Rank.TEN,
            "J": Rank.JACK,
            "Q": Rank.QUEEN,
            "K": Rank.KING,
        }

        suit_map = {
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(suit_map[suit_str], rank_map[rank_str])


class ShuffleAlgorithm(Enum):
    """Available shuffle passes."""

    # j drawn from [0, i]
    FISHER_YATES = "fisher_yates"

    # j drawn from [0, len - 2] for every i, last index never a source
    LEGACY = "legacy"


class Deck:
    """A standard 52-card deck. Cards are drawn from the end of the sequence."""

    def __init__(
        self,
        rng: Random | None = None,
        algorithm: ShuffleAlgorithm = ShuffleAlgorithm.FISHER_YATES,
    ) -> None:
        """
        Initialize a new deck in canonical order.

        Args:
            rng: Random number generator for shuffling
            algorithm: Shuffle pass to use
        """
        self._rng = rng or Random()
        self._algorithm = algorithm
        self._cards: list[Card] = []
        self.reset()

    @classmethod
    def stacked(
        cls,
        cards: Iterable[Card],
        rng: Random | None = None,
    ) -> "Deck":
        """
        Build a deck whose successive draws yield ``cards`` in order.

        Once the stacked cards run out, the deck behaves like any other
        exhausted deck: ``reset`` restores the full 52.
        """
        deck = cls(rng=rng)
        deck._cards = list(reversed(list(cards)))
        return deck

    def reset(self) -> None:
        """Reset deck to all 52 cards in order."""
        self._cards = [Card(suit, rank) for suit in Suit for rank in Rank]

    def shuffle(self) -> None:
        """Shuffle the deck in place."""
        if self._algorithm == ShuffleAlgorithm.LEGACY:
            self._legacy_shuffle()
        else:
            self._fisher_yates_shuffle()

    def _fisher_yates_shuffle(self) -> None:
        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]

    def _legacy_shuffle(self) -> None:
        cards = self._cards
        for i in range(len(cards) - 2, 0, -1):
            j = self._rng.randint(0, len(cards) - 2)
            cards[i], cards[j] = cards[j], cards[i]

    def draw(self) -> Card | None:
        """Draw the top card, or return None if the deck is empty."""
        if not self._cards:
            return None
        return self._cards.pop()

    def draw_multiple(self, count: int) -> list[Card]:
        """Draw up to ``count`` cards, stopping early if the deck runs out."""
        if count < 0:
            raise ValueError("Cannot draw a negative number of cards")

        drawn: list[Card] = []
        for _ in range(count):
            card = self.draw()
            if card is None:
                break
            drawn.append(card)
        return drawn

    @property
    def algorithm(self) -> ShuffleAlgorithm:
        """Return the configured shuffle algorithm."""
        return self._algorithm

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __str__(self) -> str:
        return "\n".join(str(card) for card in self._cards)
