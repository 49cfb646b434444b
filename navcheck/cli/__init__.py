"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    The app runs in standalone mode so Typer itself renders usage errors and
    turns every exit into ``SystemExit``; its code is returned here.
    """
    from navcheck.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-V" in argv:
        from navcheck.api.config.get_package_version import get_package_version

        print(f"navcheck {get_package_version()}")
        return 0

    app = _create_app()
    try:
        app(argv, prog_name="navcheck")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except KeyboardInterrupt:
        return 130
    return 0


def validate_navigation(argv: list[str] | None = None) -> int:
    """Entry point for ``validate-navigation``: the ``check`` command with no subcommand."""
    if argv is None:
        argv = sys.argv[1:]
    if "--version" in argv or "-V" in argv:
        return main(["--version"])
    return main(["check", *argv])
