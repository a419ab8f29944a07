"""Round state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Round state machine states.

    Flow: WAITING_FOR_DEAL → DEALING → DEALER_BLACKJACK_CHECK → PLAYER_TURN → DEALER_TURN → ROUND_COMPLETE
    """

    # Before the first round
    WAITING_FOR_DEAL = auto()

    # Cards being dealt
    DEALING = auto()

    # Dealer shows an Ace, peeking for blackjack
    DEALER_BLACKJACK_CHECK = auto()

    # Player hits or stands
    PLAYER_TURN = auto()

    # Dealer plays
    DEALER_TURN = auto()

    # Round settled, ready for the next deal
    ROUND_COMPLETE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[GameState, list[GameState]] = {
    GameState.WAITING_FOR_DEAL: [GameState.DEALING],
    GameState.DEALING: [GameState.DEALER_BLACKJACK_CHECK, GameState.PLAYER_TURN],
    GameState.DEALER_BLACKJACK_CHECK: [GameState.PLAYER_TURN, GameState.ROUND_COMPLETE],
    GameState.PLAYER_TURN: [GameState.PLAYER_TURN, GameState.DEALER_TURN, GameState.ROUND_COMPLETE],
    GameState.DEALER_TURN: [GameState.ROUND_COMPLETE],
    GameState.ROUND_COMPLETE: [GameState.DEALING],
}


def is_valid_transition(from_state: GameState, to_state: GameState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
