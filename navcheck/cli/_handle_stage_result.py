"""Decorator to handle StageResult for CLI display."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)

DISPLAY_FORMATS = ("text", "json", "yaml")


def _extract_display_format(ctx: Any) -> str:
    """Get the display format stored on a Typer context or one of its parents.

    The innermost value wins, so ``check --display`` overrides the global flag.

    Raises:
        ValueError: If an invalid display format value is encountered.
    """
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") is not None:
            value = obj["display_format"]
            if value in DISPLAY_FORMATS:
                return value
            raise ValueError(f"Invalid display_format value: {value!r}")
        current = current.parent
    return "text"


def _handle_stage_result(
    func: F,
    result_printer: Callable[[dict], None] | None = None,
    quiet: bool = False,
    display_format: str = "text",
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (text report, JSON or YAML to stdout)

    Args:
        func: Function that returns StageResult
        result_printer: Renders the output dict in ``text`` display mode
        quiet: Skip stages 1-3
        display_format: One of ``DISPLAY_FORMATS``

    Returns:
        Wrapped function that handles display and exits with the command's status
    """
    if display_format not in DISPLAY_FORMATS:
        raise ValueError(f"Invalid display_format value: {display_format!r}")

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from .display import get_display

        _run_single_execution(func, args, kwargs, get_display(), display_format, result_printer, quiet)

    return wrapper  # type: ignore[return-value]
