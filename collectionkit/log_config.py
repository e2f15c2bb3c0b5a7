"""
Logging setup for applications and test runs using collectionkit.
"""

import logging
import os

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """
    Configure root logging the same way for every entry point.

    Args:
        level: Log level name or number. If None, read from the LOG_LEVEL
               environment variable, defaulting to INFO.

    Raises:
        ValueError: If the level name is not a known logging level.
    """
    if level is None:
        level = os.environ.get("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        name = level.upper()
        if name not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {level}")
        level = logging.getLevelNamesMapping()[name]

    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
