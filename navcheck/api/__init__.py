"""API module for navcheck.

Command functions defined here (``cmd_*``) return a StageResult and are the
single source of truth for the CLI.
"""

__all__ = []
