"""Check command registration."""

import typer

from navcheck.api.check.cmd_check import cmd_check
from navcheck.api.report.print_report import print_report
from navcheck.cli._handle_stage_result import DISPLAY_FORMATS, _extract_display_format, _handle_stage_result


def register_check(app: typer.Typer) -> None:
    """Register the ``check`` command on ``app``."""

    @app.command(name="check")
    def check_cmd(
        ctx: typer.Context,
        root: str = typer.Option(".", "--root", "-r", help="Root directory of the markdown corpus"),
        strict: bool | None = typer.Option(None, "--strict/--no-strict", help="Treat warnings as errors"),
        jobs: int | None = typer.Option(None, "--jobs", "-j", min=1, help="Worker threads for parsing"),
        config: str | None = typer.Option(None, "--config", "-c", help="Config file (default: ROOT/.navcheck.json)"),
        display: str | None = typer.Option(None, "--display", "-d", help="Output format: text, json or yaml"),
        quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the report"),
    ) -> None:
        """Validate links, anchors and guide navigation."""
        if display is not None and display not in DISPLAY_FORMATS:
            typer.echo(f"Error: --display must be one of {', '.join(DISPLAY_FORMATS)}, got '{display}'", err=True)
            raise typer.Exit(2)
        display_format = display or _extract_display_format(ctx)
        _handle_stage_result(cmd_check, result_printer=print_report, quiet=quiet, display_format=display_format)(
            root=root, strict=strict, jobs=jobs, config_path=config
        )
