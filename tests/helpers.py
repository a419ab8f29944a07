"""Builders shared across test modules."""

from random import Random

from hypothesis import strategies as st

from core.cards import Card, Deck, Rank, Suit
from core.hand import Hand
from core.game import BlackjackGame


def make_hand(*codes: str) -> Hand:
    """Build a hand from short card strings like 'AS', '10H'."""
    hand = Hand()
    for code in codes:
        hand.add_card(Card.from_string(code))
    return hand


def stacked_game(*codes: str) -> BlackjackGame:
    """
    A game whose deck deals ``codes`` in order.

    The first four cards go player, dealer, player, dealer.
    """
    deck = Deck.stacked(
        (Card.from_string(code) for code in codes),
        rng=Random(42),
    )
    return BlackjackGame(deck=deck)


@st.composite
def card_strategy(draw):
    """Generate a random card."""
    suit = draw(st.sampled_from(list(Suit)))
    rank = draw(st.sampled_from(list(Rank)))
    return Card(suit, rank)


@st.composite
def hand_strategy(draw, min_cards=1, max_cards=8):
    """Generate a random hand."""
    cards = draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))
    return Hand(cards=cards)
