"""Logging setup shared by the service, the registry and the CLI."""
import logging
import sys
from typing import Optional

from src.config import config

ROOT_LOGGER_NAME = "deckservice"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def _stdout_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a configured logger instance.
    
    Args:
        name: Logger name, typically __name__ of the calling module.
        
    Returns:
        Logger writing to stdout at the configured LOG_LEVEL.
    """
    logger = logging.getLogger(name or ROOT_LOGGER_NAME)
    
    if not logger.handlers:
        logger.addHandler(_stdout_handler())
        logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
    
    return logger
