"""Unrecoverable I/O error."""

from pathlib import Path


class FatalIOError(OSError):
    """Raised when the corpus root itself cannot be read."""

    def __init__(self, root: Path, reason: str):
        super().__init__(f"Cannot read root directory {root}: {reason}")
        self.root = root
        self.reason = reason
