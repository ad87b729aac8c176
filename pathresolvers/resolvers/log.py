"""Log directory resolution."""

from __future__ import annotations

from pathresolvers.resolvers._subdir import SubdirResolver
from pathresolvers.resolvers.root import RootDirResolver

DEFAULT_LOG_DIR_NAME = "log"


class LogDirResolver(SubdirResolver):
    def __init__(
        self,
        root_dir_resolver: RootDirResolver,
        log_dir: str | None = None,
        log_dir_name: str = DEFAULT_LOG_DIR_NAME,
    ) -> None:
        super().__init__(root_dir_resolver, log_dir, log_dir_name)
