"""Centralized logging configuration for the language playgrounds.

Console logs go to stderr so that program output on stdout stays exactly
as printed.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | None = None, log_file: str | None = None, console: bool = True) -> None:
    """Set up centralized logging configuration.

    Args:
        level: Logging level name. When omitted, LOG_LEVEL is used (default WARNING).
        log_file: Optional file path for logging to file. LOG_FILE is used
            instead when LOG_TO_FILE is "true".
        console: Whether to log to stderr
    """
    level = level or os.getenv("LOG_LEVEL", "WARNING")
    if os.getenv("LOG_TO_FILE", "false").lower() == "true":
        log_file = os.getenv("LOG_FILE", log_file)

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(numeric_level)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=1024 * 1024, backupCount=3  # 1MB
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger("src").setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger by name (typically __name__)."""
    return logging.getLogger(name)
