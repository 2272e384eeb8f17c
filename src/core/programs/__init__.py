"""The playground programs, one module per entry point."""

from __future__ import annotations

from . import guessing_game, hello_world, variables

__all__ = ["guessing_game", "hello_world", "variables"]
