"""Tests for console rendering."""

from helpers import stacked_game
from core.cards import Card
from terminal_ui.console import ConsoleRenderer, format_card


def render(game, output):
    ConsoleRenderer(output).attach(game)
    return game


class TestFormatting:
    def test_format_card(self):
        assert format_card(Card.from_string("AS")) == "Ace of Spades: 11"
        assert format_card(Card.from_string("QD")) == "Queen of Diamonds: 10"

    def test_show_hand(self, output):
        renderer = ConsoleRenderer(output)
        renderer.show_hand("Player", [Card.from_string("7C"), Card.from_string("AH")], 18)
        assert output.getvalue() == (
            "Player's hand:\n"
            "Seven of Clubs: 7\n"
            "Ace of Hearts: 11\n"
            "Value: 18\n"
            "\n"
        )


class TestRoundRendering:
    """Rendering of complete rounds driven by engine events."""

    def test_initial_reveal_shows_one_dealer_card(self, output):
        game = render(stacked_game("10S", "9H", "7S", "KH"), output)
        game.deal()

        assert output.getvalue() == (
            "Player's hand:\n"
            "Ten of Spades: 10\n"
            "Seven of Spades: 7\n"
            "Value: 17\n"
            "\n"
            "Dealer's first card:\n"
            "Nine of Hearts: 9\n"
            "\n"
        )

    def test_dealer_blackjack_push(self, output):
        game = render(stacked_game("AS", "AH", "KS", "KH"), output)
        game.deal()
        assert output.getvalue().splitlines()[-1] == "Push!"

    def test_dealer_blackjack_house_wins(self, output):
        game = render(stacked_game("KS", "AH", "QS", "KH"), output)
        game.deal()
        assert output.getvalue().splitlines()[-1] == "House wins."

    def test_dealer_no_blackjack(self, output):
        game = render(stacked_game("KS", "AH", "QS", "5H"), output)
        game.deal()
        assert output.getvalue().splitlines()[-1] == "House does not have blackjack."

    def test_player_bust(self, output):
        game = render(stacked_game("10S", "9H", "6S", "7H", "KC"), output)
        game.deal()
        game.hit()

        lines = output.getvalue().splitlines()
        assert lines[-1] == "Bust! You lose."
        assert "King of Clubs: 10" in lines
        assert "Value: 26" in lines
        assert "House wins." not in lines

    def test_dealer_hits_then_busts(self, output):
        game = render(stacked_game("10S", "10H", "8S", "6H", "KC"), output)
        game.deal()
        output.truncate(0)
        output.seek(0)
        game.stand()

        assert output.getvalue() == (
            "House hits.\n"
            "\n"
            "Dealer's hand:\n"
            "Ten of Hearts: 10\n"
            "Six of Hearts: 6\n"
            "King of Clubs: 10\n"
            "Value: 26\n"
            "\n"
            "House busts! Player wins.\n"
        )

    def test_dealer_stands_and_player_wins(self, output):
        game = render(stacked_game("10S", "10H", "9S", "7H"), output)
        game.deal()
        game.stand()

        assert output.getvalue().splitlines()[-2:] == ["Dealer stands.", "Player wins."]

    def test_comparison_push(self, output):
        game = render(stacked_game("10S", "10H", "8S", "8H"), output)
        game.deal()
        game.stand()

        assert output.getvalue().splitlines()[-2:] == ["Dealer stands.", "Push!"]
