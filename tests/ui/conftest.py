"""Pytest fixtures for terminal UI tests."""

import io

import pytest

from config import AppConfig, GameConfig
from core.cards import ShuffleAlgorithm


@pytest.fixture
def output():
    """Captured console output."""
    return io.StringIO()


@pytest.fixture
def app_config():
    """Configuration independent of the test environment."""
    return AppConfig(
        debug=False,
        log_level="WARNING",
        game=GameConfig(
            player_name="Player",
            shuffle_algorithm=ShuffleAlgorithm.FISHER_YATES,
            seed=42,
        ),
    )


class FailingStream(io.StringIO):
    """A stream whose first ``failures`` reads raise OSError."""

    def __init__(self, text: str = "", failures: int = 1) -> None:
        super().__init__(text)
        self.failures = failures

    def readline(self, *args):
        if self.failures > 0:
            self.failures -= 1
            raise OSError("read failed")
        return super().readline(*args)


@pytest.fixture
def failing_stream():
    """Factory for streams that fail before yielding data."""
    return FailingStream
