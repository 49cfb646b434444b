"""Configuration domain."""

from .ConfigError import ConfigError
from .NavConfig import CONFIG_FILENAME, NavConfig

__all__ = ["CONFIG_FILENAME", "ConfigError", "NavConfig"]
