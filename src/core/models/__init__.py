"""Models package re-exports.

Allows `from src.core.models import Ordering` imports by re-exporting
from the implementation module.
"""

from __future__ import annotations

from .models import U32_MAX, GuessOutcome, Ordering, VariablesReport

__all__ = ["U32_MAX", "GuessOutcome", "Ordering", "VariablesReport"]
