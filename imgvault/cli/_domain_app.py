"""Shared construction of per-domain Typer sub-apps."""

import typer


def _domain_app(name: str, help_text: str) -> typer.Typer:
    """Typer sub-app that prints its help (to stderr) when called without a command."""
    app = typer.Typer(
        name=name,
        help=help_text,
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    return app
