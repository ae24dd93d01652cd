"""Attachment Typer app factory."""

import typer

from imgvault.api.attachment.cmd_clean import cmd_clean
from imgvault.api.attachment.cmd_unused import cmd_unused
from imgvault.cli._domain_app import _domain_app
from imgvault.cli._handle_stage_result import _handle_stage_result

_KIND_OPTION = typer.Option("image", "--kind", "-k", help="image or all")


def attachment() -> typer.Typer:
    """Create the attachment Typer app (unused-attachment queries and cleanup)."""
    app = _domain_app("attachment", "Unused attachment operations")

    @app.command(name="unused")
    def unused_cmd(kind: str = _KIND_OPTION) -> None:
        """List attachments no document references."""
        _handle_stage_result(cmd_unused)(kind)

    @app.command(name="clean")
    def clean_cmd(kind: str = _KIND_OPTION) -> None:
        """Trash or delete unused attachments outside the excluded folders."""
        _handle_stage_result(cmd_clean)(kind)

    return app
