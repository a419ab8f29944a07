"""Round outcomes."""

from dataclasses import dataclass
from enum import Enum, auto


class Outcome(Enum):
    """Who won the round."""

    PLAYER_WINS = auto()
    HOUSE_WINS = auto()
    PUSH = auto()


class EndReason(Enum):
    """How the round came to an end."""

    DEALER_BLACKJACK = auto()
    PLAYER_BUST = auto()
    DEALER_BUST = auto()
    COMPARISON = auto()


@dataclass(frozen=True)
class RoundResult:
    """Final result of a settled round."""

    outcome: Outcome
    reason: EndReason
    player_value: int
    dealer_value: int

    def __str__(self) -> str:
        return (
            f"{self.outcome.name} by {self.reason.name.lower()} "
            f"({self.player_value} vs {self.dealer_value})"
        )
