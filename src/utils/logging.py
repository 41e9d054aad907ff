"""
Structured logging setup for Twitter cleanup project.
"""
import logging
import sys
from datetime import datetime

from config import settings

LOGGER_NAME = "twitter_cleanup"


def setup_logging(log_level: str = None, debug: bool = False) -> logging.Logger:
    """
    Set up structured logging with file and console handlers.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
                   Defaults to settings.LOG_LEVEL
        debug: Also show DEBUG messages on the console (the -d flag)

    Returns:
        Configured logger instance
    """
    if log_level is None:
        log_level = "DEBUG" if debug else settings.LOG_LEVEL

    # Create logger
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Clear any existing handlers
    logger.handlers.clear()

    # Log format
    log_format = logging.Formatter(
        "[%(asctime)s] %(levelname)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    console_handler.setFormatter(log_format)
    logger.addHandler(console_handler)

    # File handler
    settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = settings.LOG_DIR / f"cleanup_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)  # File gets all logs
    file_handler.setFormatter(log_format)
    logger.addHandler(file_handler)

    logger.debug(f"Logging initialized. Log file: {log_file}")
    logger.debug(f"Log level: {log_level}, debug console: {debug}")

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Get a logger instance nested under the project logger.

    Args:
        name: Logger name (usually the module's __name__)

    Returns:
        Logger instance
    """
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
