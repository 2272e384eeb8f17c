"""src.core package (lightweight).

This file avoids importing submodules at package import time. Import
submodules explicitly where needed.
"""

from __future__ import annotations

__all__ = []
