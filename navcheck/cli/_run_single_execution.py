"""Run command once and display result using 4-stage pattern."""

from collections.abc import Callable
from datetime import datetime
from typing import Any, TypeVar

import typer

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Any,
    display_format: str,
    result_printer: Callable[[dict], None] | None = None,
    quiet: bool = False,
) -> None:
    """Run command once and display result.

    Commands must handle all exceptions internally and format errors
    via their output schema. ``quiet`` silences stages 1-3 (stderr) only.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    if not quiet:
        display.status(result.announce)

    # Stage 2: Progress - generator yielding (progress_percent, message) tuples
    for progress_percent, message in result.progress_callback(result):
        if not quiet:
            timestamp = datetime.now().strftime("%H:%M:%S")
            display.info(f"[dim]{timestamp}[/dim] Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Stage 3: Result
    if not quiet:
        if result.success:
            display.success(result.result)
        else:
            display.error(result.result)

    # Stage 4: Output - text report or JSON/YAML based on --display
    if display_format == "text" and result_printer:
        result_printer(result.output)
    else:
        display.json_output(result.output, format="yaml" if display_format == "yaml" else "json")

    exit_code = result.exit_code if result.exit_code is not None else (0 if result.success else 1)
    raise typer.Exit(code=exit_code)
