"""Demonstrates variable mutation, shadowing and block scope.

Python has no block scope, so the nested scope is a helper function: the
name `x` bound inside it does not affect `x` in the caller.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from src.core.formatting import format_x
from src.core.models import VariablesReport

logger = logging.getLogger(__name__)

THREE_HOURS_IN_SECONDS = 60 * 60 * 3


def _mutation(out: TextIO) -> None:
    x = 5
    print(format_x(x), file=out)
    x = 6
    print(format_x(x), file=out)


def _inner_scope(x: int, out: TextIO) -> int:
    x = x * 2
    print(format_x(x, inner=True), file=out)
    return x


def run(out: TextIO | None = None, show_mutation: bool = False) -> VariablesReport:
    """Print the demo lines and return the observed values.

    By default prints 5, 12 and 6. With `show_mutation` the reassignment of a
    mutable `x` is printed first (5 and 6) and the shadowed 5 is not printed,
    giving 5, 6, 12 and 6.
    """
    out = out or sys.stdout
    if show_mutation:
        _mutation(out)

    x = 5
    outer = x
    if not show_mutation:
        print(format_x(x), file=out)
    x = x + 1
    inner = _inner_scope(x, out)
    print(format_x(x), file=out)

    # Rebinding a name to a value of another type
    spaces = "   "
    spaces = len(spaces)

    logger.debug("x: outer=%d inner=%d shadowed=%d, spaces=%d", outer, inner, x, spaces)
    return VariablesReport(
        outer=outer,
        inner=inner,
        shadowed=x,
        spaces=spaces,
        three_hours_in_seconds=THREE_HOURS_IN_SECONDS,
    )
