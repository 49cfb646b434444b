"""Create the main Typer CLI app."""

import typer

from navcheck.cli._handle_stage_result import DISPLAY_FORMATS
from navcheck.cli.check import register_check


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Validate navigation and link integrity of a markdown corpus",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    register_check(app)

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("text", "--display", "-d", help="Output format: text, json or yaml"),
    ) -> None:
        if display not in DISPLAY_FORMATS:
            typer.echo(f"Error: --display must be one of {', '.join(DISPLAY_FORMATS)}, got '{display}'", err=True)
            raise typer.Exit(2)

        # Store display format in context for use by commands
        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
