"""Main entry point for the terminal blackjack game."""

import logging
import sys
from random import Random
from typing import TextIO

from config import AppConfig, config as default_config
from core.game import BlackjackGame
from terminal_ui.console import ConsoleRenderer
from terminal_ui.input import InputClosedError, InputReader, input_scope

logger = logging.getLogger(__name__)

ACTIONS = {"h": "hit", "s": "stand"}


class Application:
    """Main application class managing the round loop."""

    def __init__(
        self,
        app_config: AppConfig | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        game: BlackjackGame | None = None,
    ) -> None:
        """Initialize the application."""
        self.config = app_config or default_config
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

        game_config = self.config.game
        self.game = game or BlackjackGame(
            rng=Random(game_config.seed),
            shuffle_algorithm=game_config.shuffle_algorithm,
            player_name=game_config.player_name,
            dealer_name=game_config.dealer_name,
        )
        self.renderer = ConsoleRenderer(self.stdout)
        self.renderer.attach(self.game)

    def run(self) -> int:
        """Play rounds until the player quits. Returns the exit status."""
        with input_scope(
            self.stdin,
            self.stdout,
            max_read_errors=self.config.game.max_read_errors,
        ) as reader:
            try:
                while True:
                    self.play_round(reader)
                    if reader.ask("Play again? (y/n)") == "n":
                        break
            except InputClosedError as exc:
                logger.info("Input closed, exiting: %s", exc)
            except KeyboardInterrupt:
                print(file=self.stdout)
                return 130
        return 0

    def play_round(self, reader: InputReader) -> None:
        """Deal one round and take the player's decisions until it settles."""
        self.game.deal()
        while self.game.can_hit:
            action = reader.choose("Hit or stand? (h/s)", ACTIONS)
            if action == "hit":
                self.game.hit()
            else:
                self.game.stand()


def main() -> None:
    """Run the game."""
    logging.basicConfig(
        stream=sys.stderr,
        level=default_config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(Application().run())


if __name__ == "__main__":
    main()
