"""Configuration management implementation.

Contains the AppConfig class implementation.
"""

import logging
import os
from typing import Any

from src.core.models import U32_MAX

logger = logging.getLogger(__name__)


class AppConfig:
    """Application configuration (Singleton pattern).

    Centralizes configuration of the playground programs with environment
    variable support. Use the `config` instance from __init__.py instead of
    creating new instances.
    """

    _instance: "AppConfig | None" = None
    _initialized: bool

    def __new__(cls) -> "AppConfig":
        """Singleton implementation - only one instance allowed."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        if self._initialized:
            return

        self._load_from_env()
        self._initialized = True
        logger.debug("Configuration initialized")

    def _load_from_env(self) -> None:
        """Internal method to load values from environment variables."""
        self.load_errors: list[str] = []

        # Guessing game
        self.guess_min = self._int_env("GUESS_MIN", 1)
        self.guess_max = self._int_env("GUESS_MAX", 100)
        self.guess_seed = self._int_env("GUESS_SEED", None)

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "WARNING").upper()

    def _int_env(self, name: str, default: int | None) -> int | None:
        """Read an integer variable, recording an issue and keeping the default if invalid."""
        raw = os.getenv(name, "").strip()
        if not raw:
            return default
        try:
            return int(raw)
        except ValueError:
            logger.debug("Invalid integer in %s: %r", name, raw)
            self.load_errors.append(f"{name} must be an integer, got {raw!r}")
            return default

    def reload(self) -> None:
        """Force reload configuration from environment variables."""
        logger.debug("Reloading configuration from environment...")
        self._load_from_env()

    @staticmethod
    def check_range(low: int, high: int) -> list[str]:
        """Return issues that would make a guessing range unwinnable."""
        issues = []
        if low < 0:
            issues.append(f"minimum must not be negative: {low}")
        if high > U32_MAX:
            issues.append(f"maximum must not exceed {U32_MAX}: {high}")
        if low > high:
            issues.append(f"minimum ({low}) is greater than maximum ({high})")
        return issues

    def validate(self) -> list[str]:
        """Validate configuration and return list of issues."""
        return self.load_errors + self.check_range(self.guess_min, self.guess_max)

    def to_dict(self) -> dict[str, Any]:
        """Export configuration as dictionary."""
        return {
            "guess_min": self.guess_min,
            "guess_max": self.guess_max,
            "guess_seed": self.guess_seed,
            "log_level": self.log_level,
        }
