"""Shared CLI helpers."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from pathresolvers import container as _container

console = Console()

# CLI names mapped to container registration names.
RESOLVER_NAMES: dict[str, str] = {
    "vendor": _container.VENDOR,
    "root": _container.ROOT,
    "www": _container.WWW,
    "temp": _container.TEMP,
    "log": _container.LOG,
}

# Resolvers whose ``get()`` accepts a subpath.
SUBPATH_RESOLVERS = frozenset({"root", "temp", "log"})


def load_container() -> _container.ResolverContainer:
    """Return the process-wide container, exiting with 1 on invalid configuration."""
    from pydantic import ValidationError

    try:
        return _container.get_container()
    except ValidationError as exc:
        console.print(f"[red]Error:[/red] invalid configuration: {escape(str(exc))}")
        raise typer.Exit(1) from None
