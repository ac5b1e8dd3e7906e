"""Logging setup for command-line use.

Library modules only create ``logging.getLogger(__name__)`` loggers;
nothing is configured until :func:`setup_logging` is called.
"""

from __future__ import annotations

import logging
import sys


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> None:
    """Configure the ``polycast`` namespace logger.

    Existing handlers are cleared first, so calling this again replaces
    the configuration instead of duplicating output.

    Args:
        level: Logging level (e.g. ``logging.DEBUG``).
        log_file: Optional path to also write the log to.
    """
    logger = logging.getLogger("polycast")
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
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

    logger.debug("Logging initialised.")
