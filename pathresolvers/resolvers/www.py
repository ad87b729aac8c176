"""Public web root detection from the process entry script."""

from __future__ import annotations

from collections.abc import Sequence

from pathresolvers._log import get_logger
from pathresolvers._paths import parent_dir, to_forward_slashes
from pathresolvers.errors import ResolutionError
from pathresolvers.introspection import CallStackInspector, StackInspector
from pathresolvers.resolvers.root import RootDirResolver

_logger = get_logger("resolvers.www")

DEFAULT_FRONT_CONTROLLERS: tuple[str, ...] = ("index.py", "wsgi.py", "asgi.py", "index.php")
FALLBACK_WWW_DIR_NAME = "www"


class WwwDirResolver:
    """Resolve the directory meant to be served over HTTP.

    Without an override, the outermost stack frame (the script that started
    the process) decides: when it is a front controller, its directory is the
    web root; otherwise ``<root>/www`` is used. The result therefore depends
    on where in the call chain the process was started.
    """

    def __init__(
        self,
        root_dir_resolver: RootDirResolver,
        www_dir: str | None = None,
        *,
        stack: StackInspector | None = None,
        front_controllers: Sequence[str] = DEFAULT_FRONT_CONTROLLERS,
    ) -> None:
        self._root_dir_resolver = root_dir_resolver
        self._www_dir = www_dir
        self._stack = stack if stack is not None else CallStackInspector()
        self._front_controllers = tuple(front_controllers)

    def get(self) -> str:
        if self._www_dir is not None:
            return self._www_dir

        frames = self._stack.frames()
        entry = frames[-1].source_file if frames else None
        if entry is None:
            raise ResolutionError("WwwDir can not be detected. Did you use dependency injection?")

        normalized = to_forward_slashes(entry)
        if not any(normalized.endswith("/" + name) for name in self._front_controllers):
            _logger.debug("entry script %s is not a front controller", entry)
            return self._root_dir_resolver.get(FALLBACK_WWW_DIR_NAME)

        return parent_dir(entry)
