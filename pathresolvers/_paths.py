"""String helpers shared by the resolvers.

Resolvers never touch the filesystem; every helper here is pure string work
on ``/`` and ``\\`` separated paths.
"""

from __future__ import annotations

import os
import posixpath

# Read at call time so tests can simulate a backslash host.
HOST_SEP = os.sep


def to_forward_slashes(path: str) -> str:
    return path.replace("\\", "/")


def normalize_separators(path: str, sep: str | None = None) -> str:
    """Rewrite every ``/`` and ``\\`` in *path* to *sep* (default: host separator)."""
    target = HOST_SEP if sep is None else sep
    return to_forward_slashes(path).replace("/", target)


def join_subpath(base: str, custom_path: str | None = None) -> str:
    """Append *custom_path* to *base* with ``/`` and normalize the result."""
    if custom_path is not None:
        base = f"{base}/{custom_path}"
    return normalize_separators(base)


def parent_dir(path: str) -> str:
    """Return the parent of *path*, normalized to the host separator."""
    trimmed = to_forward_slashes(path).rstrip("/") or "/"
    return normalize_separators(posixpath.dirname(trimmed))
