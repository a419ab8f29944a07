"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field

from core.cards import ShuffleAlgorithm


def _parse_shuffle_algorithm() -> ShuffleAlgorithm:
    """Parse BLACKJACK_SHUFFLE environment variable."""
    raw = os.getenv("BLACKJACK_SHUFFLE", ShuffleAlgorithm.FISHER_YATES.value)
    try:
        return ShuffleAlgorithm(raw.strip().lower())
    except ValueError:
        choices = ", ".join(a.value for a in ShuffleAlgorithm)
        raise ValueError(f"BLACKJACK_SHUFFLE must be one of: {choices}") from None


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED environment variable."""
    raw = os.getenv("BLACKJACK_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"BLACKJACK_SEED must be an integer, got {raw!r}") from None


def _parse_debug() -> bool:
    return os.getenv("DEBUG", "false").lower() == "true"


def _parse_log_level() -> str:
    """Parse LOG_LEVEL, falling back to DEBUG when DEBUG=true."""
    default = "DEBUG" if _parse_debug() else "WARNING"
    level = os.getenv("LOG_LEVEL", default).strip().upper()
    if level not in logging.getLevelNamesMapping():
        raise ValueError(f"Unknown LOG_LEVEL: {level}")
    return level


@dataclass(frozen=True)
class GameConfig:
    """Game configuration."""

    player_name: str = field(
        default_factory=lambda: os.getenv("BLACKJACK_PLAYER_NAME", "Player")
    )
    dealer_name: str = "Dealer"
    shuffle_algorithm: ShuffleAlgorithm = field(default_factory=_parse_shuffle_algorithm)
    seed: int | None = field(default_factory=_parse_seed)
    max_read_errors: int = 3

    def __post_init__(self) -> None:
        if not self.player_name.strip():
            raise ValueError("Player name must not be empty")
        if self.max_read_errors < 1:
            raise ValueError("max_read_errors must be at least 1")


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=_parse_debug)
    log_level: str = field(default_factory=_parse_log_level)

    game: GameConfig = field(default_factory=GameConfig)


# Global configuration instance
config = AppConfig()
