"""Console rendering of game events."""

from typing import Iterable, TextIO

from core.cards import Card
from core.game import BlackjackGame, EndReason, EventType, GameEvent, Outcome

OUTCOME_MESSAGES = {
    Outcome.PLAYER_WINS: "Player wins.",
    Outcome.HOUSE_WINS: "House wins.",
    Outcome.PUSH: "Push!",
}


def format_card(card: Card) -> str:
    """Return a card listing line, e.g. 'Ace of Spades: 11'."""
    return f"{card}: {card.value}"


class ConsoleRenderer:
    """Prints the round as it unfolds by listening to engine events."""

    def __init__(self, output: TextIO) -> None:
        self._output = output

    def attach(self, game: BlackjackGame) -> None:
        """Subscribe to every event the console shows."""
        handlers = {
            EventType.ROUND_STARTED: self._on_round_started,
            EventType.DEALER_NO_BLACKJACK: self._on_dealer_no_blackjack,
            EventType.PLAYER_HIT: self._on_player_hit,
            EventType.PLAYER_BUSTS: self._on_player_busts,
            EventType.DEALER_HITS: self._on_dealer_hits,
            EventType.DEALER_BUSTS: self._on_dealer_busts,
            EventType.DEALER_STANDS: self._on_dealer_stands,
            EventType.ROUND_ENDED: self._on_round_ended,
        }
        for event_type, handler in handlers.items():
            game.subscribe(handler, event_type)

    def _write(self, text: str = "") -> None:
        print(text, file=self._output)

    def show_hand(self, name: str, cards: Iterable[Card], value: int) -> None:
        self._write(f"{name}'s hand:")
        for card in cards:
            self._write(format_card(card))
        self._write(f"Value: {value}")
        self._write()

    def show_first_card(self, name: str, card: Card) -> None:
        self._write(f"{name}'s first card:")
        self._write(format_card(card))
        self._write()

    def _on_round_started(self, event: GameEvent) -> None:
        data = event.data
        self.show_hand(data["player"], data["player_cards"], data["player_value"])
        self.show_first_card(data["dealer"], data["dealer_upcard"])

    def _on_dealer_no_blackjack(self, event: GameEvent) -> None:
        self._write("House does not have blackjack.")

    def _on_player_hit(self, event: GameEvent) -> None:
        data = event.data
        self.show_hand(data["player"], data["cards"], data["hand_value"])

    def _on_player_busts(self, event: GameEvent) -> None:
        self._write("Bust! You lose.")

    def _on_dealer_hits(self, event: GameEvent) -> None:
        data = event.data
        self._write("House hits.")
        self._write()
        self.show_hand(data["dealer"], data["cards"], data["hand_value"])

    def _on_dealer_busts(self, event: GameEvent) -> None:
        self._write("House busts! Player wins.")

    def _on_dealer_stands(self, event: GameEvent) -> None:
        self._write("Dealer stands.")

    def _on_round_ended(self, event: GameEvent) -> None:
        # Bust endings were already announced
        if event.data["reason"] in (EndReason.PLAYER_BUST, EndReason.DEALER_BUST):
            return
        self._write(OUTCOME_MESSAGES[event.data["outcome"]])
