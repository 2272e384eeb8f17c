"""Pytest configuration and shared fixtures for tests."""

import io
import logging

import pytest

from src.core.config import config

GUESS_ENV_VARS = ("GUESS_MIN", "GUESS_MAX", "GUESS_SEED", "LOG_LEVEL", "LOG_TO_FILE", "LOG_FILE")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate each test from the caller's environment and logging setup."""
    for name in GUESS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    config.reload()

    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    config.reload()


@pytest.fixture
def scripted_input():
    """Build a stdin replacement from a list of lines."""

    def _make(*lines: str) -> io.StringIO:
        return io.StringIO("".join(f"{line}\n" for line in lines))

    return _make


@pytest.fixture
def winning_transcript():
    """Expected output for secret 42 and the guesses 10, 80, 42."""
    return [
        "Guess the number!",
        "Please input your guess.",
        "You guessed: 10",
        "Too small!",
        "Please input your guess.",
        "You guessed: 80",
        "Too big!",
        "Please input your guess.",
        "You guessed: 42",
        "You win!",
    ]
