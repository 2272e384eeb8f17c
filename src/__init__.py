"""Top-level src package for the language playground programs."""

from __future__ import annotations

__all__: list[str] = []
