"""Shared utilities."""

from .get_logger import get_logger
from .logger import configure_logging, get_navcheck_home

__all__ = ["configure_logging", "get_logger", "get_navcheck_home"]
