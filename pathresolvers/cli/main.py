"""Typer CLI for pathresolvers."""

from __future__ import annotations

from typing import Annotated

import typer

from pathresolvers.cli._helpers import console

app = typer.Typer(
    name="pathresolvers",
    help="Resolve application directories (vendor, root, www, temp, log).",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    if value:
        from pathresolvers import __version__

        console.print(f"pathresolvers {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging"),
    ] = False,
) -> None:
    """pathresolvers — where do my application's directories live?"""
    from pathresolvers._log import setup_logging

    setup_logging(verbose=verbose)


from pathresolvers.cli.paths_cmd import get, show  # noqa: E402

app.command()(show)
app.command()(get)


def app_entry() -> None:
    """Entry point for the CLI."""
    app()
