"""Temporary directory resolution."""

from __future__ import annotations

from pathresolvers.resolvers._subdir import SubdirResolver
from pathresolvers.resolvers.root import RootDirResolver

DEFAULT_TEMP_DIR_NAME = "temp"


class TempDirResolver(SubdirResolver):
    def __init__(
        self,
        root_dir_resolver: RootDirResolver,
        temp_dir: str | None = None,
        temp_dir_name: str = DEFAULT_TEMP_DIR_NAME,
    ) -> None:
        super().__init__(root_dir_resolver, temp_dir, temp_dir_name)
