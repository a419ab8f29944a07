"""Blackjack round engine with state machine."""

import logging
from dataclasses import dataclass, field
from random import Random
from typing import Callable

from transitions import Machine

from core.cards import Card, Deck, ShuffleAlgorithm
from core.hand import BLACKJACK_VALUE, Hand, compare_hands
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.outcome import EndReason, Outcome, RoundResult
from core.game.state import GameState

logger = logging.getLogger(__name__)

DEALER_STANDS_ON = 17


@dataclass
class Participant:
    """A named seat at the table holding one hand."""

    name: str
    hand: Hand = field(default_factory=Hand)

    def hit(self, card: Card) -> None:
        """Take a card into the hand."""
        self.hand.add_card(card)

    @property
    def upcard(self) -> Card | None:
        """The first card dealt, shown face up."""
        return self.hand.cards[0] if self.hand.cards else None


class BlackjackGame:
    """
    Single-player blackjack round engine using a state machine.

    This is the core game logic, completely UI-agnostic.
    Communication happens through events and return values only.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "start_dealing", "source": ["waiting_for_deal", "round_complete"], "dest": "dealing"},
        {"trigger": "peek_for_blackjack", "source": "dealing", "dest": "dealer_blackjack_check"},
        {"trigger": "begin_player_turn", "source": ["dealing", "dealer_blackjack_check"], "dest": "player_turn"},
        {"trigger": "player_action", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "begin_dealer_turn", "source": "player_turn", "dest": "dealer_turn"},
        {
            "trigger": "settle",
            "source": ["dealer_blackjack_check", "player_turn", "dealer_turn"],
            "dest": "round_complete",
        },
    ]

    def __init__(
        self,
        deck: Deck | None = None,
        rng: Random | None = None,
        shuffle_algorithm: ShuffleAlgorithm = ShuffleAlgorithm.FISHER_YATES,
        player_name: str = "Player",
        dealer_name: str = "Dealer",
    ) -> None:
        """
        Initialize a new blackjack game.

        Args:
            deck: Deck to deal from, used in its current order. A fresh
                shuffled deck is built when omitted.
            rng: Random number generator for reproducible games
            shuffle_algorithm: Shuffle pass for a freshly built deck
            player_name: Display name of the player
            dealer_name: Display name of the dealer
        """
        if deck is None:
            deck = Deck(rng=rng, algorithm=shuffle_algorithm)
            deck.shuffle()
        self.deck = deck

        self.player = Participant(player_name)
        self.dealer = Participant(dealer_name)
        self.events = EventEmitter()
        self.result: RoundResult | None = None
        self.rounds_played = 0

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="waiting_for_deal",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def deal(self) -> bool:
        """
        Start a new round: clear both hands and deal two cards each.

        If the dealer shows an Ace the hole card is checked for blackjack,
        which may settle the round before the player acts.

        Returns:
            True if a round was started
        """
        if self.state not in (GameState.WAITING_FOR_DEAL, GameState.ROUND_COMPLETE):
            self._reject("Cannot deal in current state")
            return False

        self.player.hand.clear()
        self.dealer.hand.clear()
        self.result = None
        self.rounds_played += 1
        self.start_dealing()

        # Deal: player, dealer, player, dealer
        self._deal_card_to(self.player)
        self._deal_card_to(self.dealer)
        self._deal_card_to(self.player)
        self._deal_card_to(self.dealer)

        logger.debug(
            "Round %d dealt: player %s, dealer shows %s",
            self.rounds_played,
            self.player.hand,
            self.dealer.upcard,
        )
        self.events.emit_new(
            EventType.ROUND_STARTED,
            round=self.rounds_played,
            player=self.player.name,
            player_cards=tuple(self.player.hand.cards),
            player_value=self.player.hand.value,
            dealer=self.dealer.name,
            dealer_upcard=self.dealer.upcard,
        )

        upcard = self.dealer.upcard
        if upcard is not None and upcard.is_ace:
            self.peek_for_blackjack()
            if self._check_dealer_blackjack():
                return True
            self.events.emit_new(EventType.DEALER_NO_BLACKJACK)

        self.begin_player_turn()
        return True

    def _check_dealer_blackjack(self) -> bool:
        """Settle the round if the dealer's two cards total 21."""
        if self.dealer.hand.value != BLACKJACK_VALUE:
            return False

        self.events.emit_new(
            EventType.DEALER_BLACKJACK,
            dealer_cards=tuple(self.dealer.hand.cards),
        )
        if self.player.hand.value == BLACKJACK_VALUE:
            outcome = Outcome.PUSH
        else:
            outcome = Outcome.HOUSE_WINS
        self._finish(outcome, EndReason.DEALER_BLACKJACK)
        return True

    def _draw_card(self) -> Card:
        """Draw a card, rebuilding and reshuffling the deck when it is empty."""
        card = self.deck.draw()
        if card is None:
            logger.info("Deck exhausted, resetting and reshuffling")
            self.deck.reset()
            self.deck.shuffle()
            self.events.emit_new(EventType.DECK_RESHUFFLED, cards=len(self.deck))
            card = self.deck.draw()
            if card is None:
                raise RuntimeError("Deck is empty after reset")
        return card

    def _deal_card_to(self, participant: Participant) -> Card:
        """Deal a card to a participant."""
        card = self._draw_card()
        participant.hit(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=card,
            recipient=participant.name,
            hand_value=participant.hand.value,
        )
        return card

    def hit(self) -> bool:
        """Player hits (takes another card)."""
        if self.state != GameState.PLAYER_TURN:
            self._reject("Cannot hit in current state")
            return False

        self._deal_card_to(self.player)
        hand = self.player.hand
        self.events.emit_new(
            EventType.PLAYER_HIT,
            player=self.player.name,
            cards=tuple(hand.cards),
            hand_value=hand.value,
        )

        if hand.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=hand.value)
            self._finish(Outcome.HOUSE_WINS, EndReason.PLAYER_BUST)
            return True

        self.player_action()  # Stay in player turn
        return True

    def stand(self) -> bool:
        """Player stands; the dealer plays out and the round is settled."""
        if self.state != GameState.PLAYER_TURN:
            self._reject("Cannot stand in current state")
            return False

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player.hand.value)
        self.begin_dealer_turn()
        self._play_dealer()
        return True

    def _play_dealer(self) -> None:
        """Dealer hits below 17 and stands on 17 or more."""
        hand = self.dealer.hand

        while self._dealer_should_hit():
            self._deal_card_to(self.dealer)
            self.events.emit_new(
                EventType.DEALER_HITS,
                dealer=self.dealer.name,
                cards=tuple(hand.cards),
                hand_value=hand.value,
            )
            if hand.is_busted:
                self.events.emit_new(EventType.DEALER_BUSTS, hand_value=hand.value)
                self._finish(Outcome.PLAYER_WINS, EndReason.DEALER_BUST)
                return

        self.events.emit_new(EventType.DEALER_STANDS, hand_value=hand.value)

        comparison = compare_hands(self.player.hand, hand)
        if comparison > 0:
            outcome = Outcome.PLAYER_WINS
        elif comparison < 0:
            outcome = Outcome.HOUSE_WINS
        else:
            outcome = Outcome.PUSH
        self._finish(outcome, EndReason.COMPARISON)

    def _dealer_should_hit(self) -> bool:
        """Determine if dealer should hit."""
        return self.dealer.hand.value < DEALER_STANDS_ON

    def _finish(self, outcome: Outcome, reason: EndReason) -> None:
        """Record the round result and move to ROUND_COMPLETE."""
        self.result = RoundResult(
            outcome=outcome,
            reason=reason,
            player_value=self.player.hand.value,
            dealer_value=self.dealer.hand.value,
        )
        logger.info("Round %d settled: %s", self.rounds_played, self.result)
        self.settle()
        self.events.emit_new(
            EventType.ROUND_ENDED,
            outcome=outcome,
            reason=reason,
            player_value=self.result.player_value,
            dealer_value=self.result.dealer_value,
        )

    def _reject(self, message: str) -> None:
        logger.debug("%s (state=%s)", message, self.state.name)
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=message,
            state=self.state.name,
        )

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.state == GameState.PLAYER_TURN

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state == GameState.PLAYER_TURN

    @property
    def round_over(self) -> bool:
        """Check if the current round has been settled."""
        return self.state == GameState.ROUND_COMPLETE
