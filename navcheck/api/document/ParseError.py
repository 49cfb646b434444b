"""Parse error for markdown documents."""

from pathlib import Path


class ParseError(ValueError):
    """Raised when a markdown file cannot be tokenized at all."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
