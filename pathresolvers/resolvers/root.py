"""Project root directory: the parent of the vendor directory."""

from __future__ import annotations

from pathresolvers._paths import join_subpath, parent_dir
from pathresolvers.resolvers.vendor import VendorResolver


class RootDirResolver:
    def __init__(self, vendor_resolver: VendorResolver) -> None:
        self._vendor_resolver = vendor_resolver

    def get(self, custom_path: str | None = None) -> str:
        """Return the project root, optionally with *custom_path* appended."""
        return join_subpath(parent_dir(self._vendor_resolver.get()), custom_path)
