"""Logging configuration for Bankbook.

Every operation reports through the "bankbook" logger. The console shows
those reports as plain user-facing lines, while a dated log file keeps the
full record with timestamps.
"""

import logging
import sys
from datetime import date
from config import Config

LOGGER_NAME = "bankbook"


class ConsoleFormatter(logging.Formatter):
    """Show INFO and below as bare messages, prefix problems with their level."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.levelno >= logging.WARNING:
            return f"{record.levelname}: {message}"
        return message


def setup_logging(config: Config) -> logging.Logger:
    """Set up the application logger with a dated file and the console.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)
    logger.handlers.clear()

    log_file_path = config.log_dir / f"bankbook-{date.today().isoformat()}.log"
    file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(levelname)s - %(module)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    # Debug detail goes to the file only
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(max(logger.level, logging.INFO))
    console_handler.setFormatter(ConsoleFormatter())

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger."""
    return logging.getLogger(LOGGER_NAME)
