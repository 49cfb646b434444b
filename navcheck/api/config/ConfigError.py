"""Configuration error."""


class ConfigError(ValueError):
    """Raised when a navcheck configuration file cannot be loaded or validated."""
