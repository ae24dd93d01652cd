"""Log Typer app factory."""

import typer

from imgvault.api.log.cmd_status import cmd_status
from imgvault.cli._domain_app import _domain_app
from imgvault.cli._handle_stage_result import _handle_stage_result


def log() -> typer.Typer:
    app = _domain_app("log", "Activity logfile")

    @app.command(name="status")
    def status_cmd() -> None:
        """Count retained warnings and errors (expired entries are pruned)."""
        _handle_stage_result(cmd_status)()

    return app
