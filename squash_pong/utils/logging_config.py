"""
Logging configuration for Squash Pong
"""

import logging
import sys

from squash_pong.utils.config import game_config


def setup_logging(level: int | str | None = None, log_file: str | None = None) -> None:
    """
    Configures the logger of the 'squash_pong' namespace.

    Args:
        level: Logging level, defaults to game_config.LOG_LEVEL
        log_file: Optional path to also write logs to a file
    """
    if level is None:
        level = game_config.LOG_LEVEL

    logger = logging.getLogger("squash_pong")
    logger.setLevel(level)

    # Avoid duplicated output when called twice
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized")
