"""Resolve well-known application directories (vendor, root, www, temp, log)."""

__version__ = "1.0.0"

from pathresolvers.container import ResolverContainer, get_container  # noqa: E402
from pathresolvers.errors import ResolutionError  # noqa: E402
from pathresolvers.resolvers import (  # noqa: E402
    LogDirResolver,
    RootDirResolver,
    TempDirResolver,
    VendorResolver,
    WwwDirResolver,
)

__all__ = [
    "LogDirResolver",
    "ResolutionError",
    "ResolverContainer",
    "RootDirResolver",
    "TempDirResolver",
    "VendorResolver",
    "WwwDirResolver",
    "__version__",
    "get_container",
]
