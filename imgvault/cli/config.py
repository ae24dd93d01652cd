"""Config Typer app factory."""

import typer

from imgvault.api.config.cmd_show import cmd_show
from imgvault.cli._domain_app import _domain_app
from imgvault.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    app = _domain_app("config", "Inspect $IMGVAULT_HOME/config.json")

    @app.command(name="show")
    def show_cmd(
        section: str = typer.Argument("", help="store, link, convert, fetch, rename, cleanup or log; omit to list"),
    ) -> None:
        """Print one configuration section, or the section names."""
        _handle_stage_result(cmd_show)(section)

    return app
