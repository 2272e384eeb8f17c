"""Interactive number-guessing game.

A secret number is drawn once per game. The player is prompted for guesses
on stdin until one matches; each guess is answered with "Too small!",
"Too big!" or "You win!". Input that is not an unsigned 32-bit integer is
discarded and the player is prompted again.
"""

from __future__ import annotations

import logging
import random
import re
import sys
from typing import TextIO

from src.core import formatting
from src.core.config import config
from src.core.models import U32_MAX, GuessOutcome, Ordering

logger = logging.getLogger(__name__)

_U32_DIGITS = len(str(U32_MAX))

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


class InputReadError(OSError):
    """Raised when a guess cannot be read from the input stream."""


def draw_secret_number(rng: random.Random | None = None, low: int = 1, high: int = 100) -> int:
    """Draw a uniformly distributed integer in the inclusive range [low, high]."""
    if low > high:
        raise ValueError(f"Empty range: low ({low}) is greater than high ({high})")
    rng = rng or random.SystemRandom()
    return rng.randint(low, high)


def parse_guess(text: str) -> int | None:
    """Parse `text` as an unsigned 32-bit integer.

    Surrounding whitespace and leading zeros are ignored. Returns None if
    the text is not a valid number in range.
    """
    candidate = text.strip()
    if not _UNSIGNED_RE.fullmatch(candidate):
        return None
    digits = candidate.lstrip("+").lstrip("0") or "0"
    if len(digits) > _U32_DIGITS:
        return None
    value = int(digits)
    if value > U32_MAX:
        return None
    return value


def compare(guess: int, secret: int) -> Ordering:
    """Compare a guess against the secret number."""
    return Ordering.of(guess, secret)


class GuessingGame:
    """One run of the guessing game over a pair of text streams."""

    def __init__(
        self,
        secret_number: int | None = None,
        rng: random.Random | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        low: int = 1,
        high: int = 100,
    ) -> None:
        self.low = low
        self.high = high
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        if secret_number is None:
            secret_number = draw_secret_number(rng, low, high)
        self.secret_number = secret_number
        self.attempts = 0
        logger.debug("Secret number drawn in [%d, %d]: %d", low, high, secret_number)

    def _say(self, line: str) -> None:
        print(line, file=self.stdout, flush=True)

    def _read_line(self) -> str:
        try:
            line = self.stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(f"Failed to read line: {e}") from e
        if not line:
            raise InputReadError("Failed to read line: end of input")
        return line

    def guess(self, text: str) -> GuessOutcome | None:
        """Evaluate one line of input.

        Returns None when the input is not a valid guess; nothing is printed
        in that case.
        """
        value = parse_guess(text)
        if value is None:
            logger.debug("Discarding unparseable guess: %r", text)
            return None

        self._say(formatting.format_guess(value))
        self.attempts += 1
        ordering = compare(value, self.secret_number)
        message = formatting.format_verdict(ordering)
        self._say(message)
        return GuessOutcome(guess=value, ordering=ordering, message=message)

    def play(self) -> int:
        """Play until the secret number is guessed.

        Returns:
            Number of valid guesses that were compared.

        Raises:
            InputReadError: If the input stream fails or is exhausted.
        """
        self._say(formatting.GAME_TITLE)
        while True:
            self._say(formatting.GUESS_PROMPT)
            outcome = self.guess(self._read_line())
            if outcome is None:
                continue
            if outcome.is_win:
                break

        logger.info("Secret number guessed after %d attempt(s)", self.attempts)
        return self.attempts


def run(
    seed: int | None = None,
    low: int | None = None,
    high: int | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Play one game using configured defaults for anything not given."""
    seed = seed if seed is not None else config.guess_seed
    low = low if low is not None else config.guess_min
    high = high if high is not None else config.guess_max

    rng = random.Random(seed) if seed is not None else random.SystemRandom()
    game = GuessingGame(rng=rng, stdin=stdin, stdout=stdout, low=low, high=high)
    return game.play()
