"""Logging configuration for CoinKeeper.

Sets up logging to both file (with date-based naming) and console.
"""

import logging
from datetime import date
from pathlib import Path

LOGGER_NAME = "coinkeeper"


def setup_logging(log_dir: Path, level: str = "INFO") -> logging.Logger:
    """Set up application logging with file and console handlers.

    Args:
        log_dir: Folder for the dated log files. Created if missing.
        level: Logging level name, e.g. "INFO" or "DEBUG".

    Returns:
        Configured logger instance.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Clear any existing handlers (in case this is called multiple times)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_formatter = logging.Formatter("%(levelname)s - %(message)s")

    # File handler - logs to coinkeeper-{date}.log
    log_file_path = log_dir / f"{LOGGER_NAME}-{date.today().isoformat()}.log"
    file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(detailed_formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(console_formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger."""
    return logging.getLogger(LOGGER_NAME)
