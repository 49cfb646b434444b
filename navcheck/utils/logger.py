import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def get_navcheck_home() -> Path:
    """Get navcheck home directory based on NAVCHECK_HOME or default to ~/.navcheck."""
    env_home = os.environ.get("NAVCHECK_HOME")
    if env_home:
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".navcheck"


def configure_logging(navcheck_home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified navcheck logging.

    Args:
        navcheck_home: Directory holding navcheck.log. If None, derived from environment.
        level: Logging level name for the ``navcheck`` logger.
    """
    global _CONFIGURED
    root_logger = logging.getLogger("navcheck")
    root_logger.setLevel(getattr(logging, level, logging.INFO))
    if _CONFIGURED:
        return

    if navcheck_home is None:
        navcheck_home = get_navcheck_home()

    try:
        navcheck_home.mkdir(parents=True, exist_ok=True)
    except OSError:
        # Read-only home: drop records rather than mixing them into stderr
        root_logger.addHandler(logging.NullHandler())
        _CONFIGURED = True
        return
    log_file = navcheck_home / "navcheck.log"

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
