"""Formatting utilities for the fixed program messages."""

from __future__ import annotations

from src.core.models import Ordering

HELLO_WORLD = "Hello, world!"

GAME_TITLE = "Guess the number!"
GUESS_PROMPT = "Please input your guess."

_VERDICTS = {
    Ordering.LESS: "Too small!",
    Ordering.GREATER: "Too big!",
    Ordering.EQUAL: "You win!",
}


def format_guess(guess: int) -> str:
    """Return the line echoing a parsed guess."""
    return f"You guessed: {guess}"


def format_verdict(ordering: Ordering) -> str:
    """Return the verdict line for a compared guess."""
    return _VERDICTS[ordering]


def format_x(value: int, inner: bool = False) -> str:
    """Return the line reporting the value of `x`."""
    if inner:
        return f"The value of x in the inner scope is: {value}"
    return f"The value of x is: {value}"
