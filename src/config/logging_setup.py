"""
Yacht Dice - Logging Configuration

Installs a single stream handler on the root logger at the configured level.
"""

import logging

from src.config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings. DEBUG wins when ``debug`` is set."""
    level_name = "DEBUG" if settings.debug else settings.log_level.upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {settings.log_level!r}.")
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
