"""Game engine and state management."""

from core.game.events import GameEvent, EventType
from core.game.outcome import EndReason, Outcome, RoundResult
from core.game.state import GameState
from core.game.engine import BlackjackGame, Participant

__all__ = [
    "GameEvent",
    "EventType",
    "EndReason",
    "Outcome",
    "RoundResult",
    "GameState",
    "BlackjackGame",
    "Participant",
]
