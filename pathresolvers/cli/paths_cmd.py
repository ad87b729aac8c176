"""Commands that print resolved directories."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from pathresolvers.cli._helpers import (
    RESOLVER_NAMES,
    SUBPATH_RESOLVERS,
    console,
    load_container,
)


def show() -> None:
    """Show every resolved directory."""
    from pathresolvers.errors import ResolutionError

    table = Table(title="Resolved Paths")
    table.add_column("Name", style="cyan")
    table.add_column("Path")

    failed = False
    results = load_container().resolve_all()
    for short, key in RESOLVER_NAMES.items():
        value = results[key]
        if isinstance(value, ResolutionError):
            failed = True
            table.add_row(short, f"[red]{escape(str(value))}[/red]")
        else:
            table.add_row(short, escape(value))

    console.print(table)
    if failed:
        raise typer.Exit(1)


def get(
    name: Annotated[str, typer.Argument(help="One of: vendor, root, www, temp, log")],
    subpath: Annotated[
        str | None, typer.Argument(help="Subpath to append (root, temp, log only)")
    ] = None,
) -> None:
    """Print a single resolved directory."""
    from pathresolvers.errors import ResolutionError

    key = RESOLVER_NAMES.get(name)
    if key is None:
        choices = ", ".join(RESOLVER_NAMES)
        console.print(f"[red]Error:[/red] unknown resolver '{escape(name)}' (choose from {choices})")
        raise typer.Exit(2)
    if subpath is not None and name not in SUBPATH_RESOLVERS:
        console.print(f"[red]Error:[/red] '{name}' does not accept a subpath")
        raise typer.Exit(2)

    resolver = load_container().get(key)
    try:
        path = resolver.get(subpath) if subpath is not None else resolver.get()
    except ResolutionError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1) from None

    typer.echo(path)
