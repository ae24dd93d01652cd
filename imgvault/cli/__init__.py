"""CLI - main entry point."""

import sys


def _configure_logging() -> None:
    from imgvault.api.config.ImgVaultConfig import ImgVaultConfig
    from imgvault.utils.configure_logging import configure_logging

    try:
        level = ImgVaultConfig.load().log.level
    except ValueError:
        level = "INFO"
    configure_logging(level=level)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from imgvault import __version__
    from imgvault.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"imgvault {__version__}")
        return 0

    _configure_logging()
    app = _create_app()
    try:
        app(argv)
        return 0
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
