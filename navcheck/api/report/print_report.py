"""Text reporter for check output (CLI result printer)."""

from typing import Any

import typer

from ..check.Finding import Finding
from .format_finding import format_finding, format_summary


def print_report(output: dict[str, Any]) -> None:
    """Print one line per finding and a summary line to stdout.

    Run-level errors (fatal configuration or root problems) are printed
    before the summary.
    """
    findings = sorted((Finding.from_dict(item) for item in output.get("findings", [])), key=lambda f: f.sort_key)
    for finding in findings:
        typer.echo(format_finding(finding))
    for message in output.get("errors", []):
        typer.echo(f"error: {message}")
    typer.echo(format_summary(findings))
