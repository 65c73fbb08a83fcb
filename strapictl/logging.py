"""Logging configuration for the strapictl package."""
import logging
import sys

from strapictl.config import Config

def setup_logger(name: str = "strapictl", level: int = logging.INFO) -> logging.Logger:
    """
    Set up a logger with the specified name and log level.

    Calling it again only adjusts the level of the existing handler.

    Args:
        name: The name of the logger
        level: The logging level (default: logging.INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Don't add handlers if they're already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(Config.LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
