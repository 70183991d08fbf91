"""
Logging configuration for the landing page.
Sets up console (and optional file) output for the app's loggers.
"""

import logging
import sys
from typing import Optional

# Modules whose loggers belong to the app
LOGGER_NAMESPACES = ("landing", "config", "components", "features", "services")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configure the app loggers.

    Streamlit re-runs the script on every interaction, so existing handlers
    are closed and removed first to avoid duplicate lines and open files.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to also write logs to
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)

    for name in LOGGER_NAMESPACES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for old in list(logger.handlers):
            logger.removeHandler(old)
            old.close()
        for handler in handlers:
            logger.addHandler(handler)

    logging.getLogger("landing").debug("Logging initialized.")
