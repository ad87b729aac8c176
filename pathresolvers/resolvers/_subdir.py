"""Shared shape of the root-relative directory resolvers (temp, log)."""

from __future__ import annotations

from pathresolvers._paths import join_subpath
from pathresolvers.resolvers.root import RootDirResolver


class SubdirResolver:
    """Return an explicit override, or ``<root>/<dir_name>``.

    ``get(custom_path)`` appends *custom_path* to whichever base applies.
    """

    def __init__(
        self,
        root_dir_resolver: RootDirResolver,
        override: str | None,
        dir_name: str,
    ) -> None:
        self._root_dir_resolver = root_dir_resolver
        self._override = override
        self._dir_name = dir_name

    def get(self, custom_path: str | None = None) -> str:
        if self._override is not None:
            base = self._override
        else:
            base = self._root_dir_resolver.get(self._dir_name)
        return join_subpath(base, custom_path)
