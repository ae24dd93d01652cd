"""Create the main Typer CLI app."""

import typer

from imgvault.api.rename.cmd_rename import cmd_rename
from imgvault.cli._handle_stage_result import _handle_stage_result
from imgvault.cli.attachment import attachment
from imgvault.cli.config import config
from imgvault.cli.document import document
from imgvault.cli.log import log


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="imgvault CLI",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(document(), name="document")
    app.add_typer(attachment(), name="attachment")
    app.add_typer(config(), name="config")
    app.add_typer(log(), name="log")

    @app.command(name="rename")
    def rename_cmd(
        old_path: str = typer.Argument(..., help="Current store-relative document path"),
        new_path: str = typer.Argument(..., help="New store-relative document path"),
    ) -> None:
        """Rename a document and the images it embeds."""
        _handle_stage_result(cmd_rename)(old_path, new_path)

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
