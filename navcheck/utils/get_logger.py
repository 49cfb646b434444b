import logging

from . import logger as _logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not _logger._CONFIGURED:
        _logger.configure_logging()

    return logging.getLogger(f"navcheck.{name}")
