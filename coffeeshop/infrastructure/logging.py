"""
Logging infrastructure.

Provides logging utilities shared by all layers.
"""
import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get logger instance.

    Args:
        name: Logger name (usually module name)
        level: Optional level name; defaults to the configured app log level

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

        if level is None:
            from coffeeshop.settings import get_app_settings
            level = get_app_settings().log_level
        logger.setLevel(level.upper())
    return logger
