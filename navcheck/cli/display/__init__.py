"""Display utilities for the CLI."""

from .CLIDisplay import CLIDisplay
from .Display import Display

__all__ = ["CLIDisplay", "Display", "get_display"]


def get_display() -> Display:
    """Create the display for the current process streams."""
    return CLIDisplay()
