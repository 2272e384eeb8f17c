"""Prints a single greeting line."""

from __future__ import annotations

import sys
from typing import TextIO

from src.core.formatting import HELLO_WORLD


def run(out: TextIO | None = None) -> None:
    out = out or sys.stdout
    print(HELLO_WORLD, file=out)
