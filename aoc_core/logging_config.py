"""
Logging Configuration
Sets up the package loggers for the solver and its command-line front end.
"""
import logging
import sys
from typing import Optional, Tuple

LOGGER_NAMESPACES: Tuple[str, ...] = ("aoc_core", "cli_solver")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the loggers for the 'aoc_core' and 'cli_solver' namespaces.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # One file handle shared by every namespace
    file_handler: Optional[logging.FileHandler] = None
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)

    for namespace in LOGGER_NAMESPACES:
        logger = logging.getLogger(namespace)
        logger.setLevel(level)

        # Drop handlers from a previous setup to avoid duplicate logs
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        # Report output goes to stdout, so logs go to stderr
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if file_handler is not None:
            logger.addHandler(file_handler)

    logging.getLogger("aoc_core").debug("Logging initialized.")
