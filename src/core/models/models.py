"""Data models shared by the playground programs.

Provides the Ordering enum, the GuessOutcome record produced by each
guessing-game round, and the VariablesReport returned by the variables demo.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Largest value a guess can take (unsigned 32-bit)
U32_MAX = 2**32 - 1


class Ordering(Enum):
    """Result of a three-way comparison between two values."""

    LESS = "less"
    GREATER = "greater"
    EQUAL = "equal"

    @classmethod
    def of(cls, left: int, right: int) -> Ordering:
        """Compare `left` against `right`."""
        if left < right:
            return cls.LESS
        if left > right:
            return cls.GREATER
        return cls.EQUAL


@dataclass(frozen=True)
class GuessOutcome:
    """One evaluated guess.

    Attributes:
        guess: The parsed guess.
        ordering: How the guess compares to the secret number.
        message: The verdict line printed for this guess.
    """

    guess: int
    ordering: Ordering
    message: str

    @property
    def is_win(self) -> bool:
        return self.ordering is Ordering.EQUAL


@dataclass(frozen=True)
class VariablesReport:
    """Final values observed by the variables demo.

    Attributes:
        outer: Value of `x` before it is shadowed.
        inner: Value of `x` inside the nested scope.
        shadowed: Value of `x` after the nested scope ends.
        spaces: Length of the `spaces` string after rebinding it to a number.
        three_hours_in_seconds: The module constant.
    """

    outer: int
    inner: int
    shadowed: int
    spaces: int
    three_hours_in_seconds: int
