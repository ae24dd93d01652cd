"""Document Typer app factory."""

import typer

from imgvault.api.document.cmd_convert import cmd_convert
from imgvault.api.document.cmd_paste import cmd_paste
from imgvault.api.document.cmd_paste_url import cmd_paste_url
from imgvault.api.document.cmd_preview import cmd_preview
from imgvault.api.document.cmd_process import cmd_process
from imgvault.cli._domain_app import _domain_app
from imgvault.cli._handle_stage_result import _handle_stage_result


def document() -> typer.Typer:
    """Create the document Typer app (per-document image operations)."""
    app = _domain_app("document", "Image operations on a single document")

    @app.command(name="process")
    def process_cmd(
        path: str = typer.Argument(..., help="Store-relative document path"),
        referer: str | None = typer.Option(None, "--referer", "-r", help="Referer header for every download"),
    ) -> None:
        """Download remote images and relink them to local copies."""
        _handle_stage_result(cmd_process)(path, referer)

    @app.command(name="convert")
    def convert_cmd(
        path: str = typer.Argument(..., help="Store-relative document path"),
        style: str | None = typer.Option(None, "--style", "-s", help="bracket-embed or markdown"),
    ) -> None:
        """Convert local image links to another link style."""
        _handle_stage_result(cmd_convert)(path, style)

    @app.command(name="preview")
    def preview_cmd(
        path: str = typer.Argument(..., help="Store-relative document path"),
        map_file: str = typer.Argument(..., help="JSON file mapping old targets to new paths"),
        style: str | None = typer.Option(None, "--style", "-s", help="bracket-embed or markdown"),
    ) -> None:
        """Show the document with links rewritten, without saving."""
        _handle_stage_result(cmd_preview)(path, map_file, style)

    @app.command(name="paste")
    def paste_cmd(
        path: str = typer.Argument(..., help="Store-relative document path"),
        image_file: str = typer.Argument(..., help="Image file to store as an attachment"),
        alt: str = typer.Option("", "--alt", help="Alt text for the rendered link"),
    ) -> None:
        """Store an image as an attachment and print the link to insert."""
        _handle_stage_result(cmd_paste)(path, image_file, alt)

    @app.command(name="paste-url")
    def paste_url_cmd(
        selection: str = typer.Argument(..., help="Selected text"),
        url: str = typer.Argument(..., help="Pasted clipboard text"),
        embed: list[str] = typer.Option([], "--embed", "-e", help="Regex of URLs to paste as images (repeatable)"),
    ) -> None:
        """Print the link that replaces the selection when a URL is pasted over it."""
        _handle_stage_result(cmd_paste_url)(selection, url, embed)

    return app
