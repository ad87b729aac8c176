"""Dependency ("vendor") directory detection."""

from __future__ import annotations

import re
import threading
from collections.abc import Sequence

from pathresolvers._log import get_logger
from pathresolvers._paths import normalize_separators, to_forward_slashes
from pathresolvers.errors import ResolutionError
from pathresolvers.introspection import (
    CallStackInspector,
    EnvironmentProbe,
    StackInspector,
    VirtualEnvProbe,
)

_logger = get_logger("resolvers.vendor")

# System-wide install locations where a detected loader path does not point
# at the application's own dependencies.
DEFAULT_UNRELIABLE_PREFIXES: tuple[str, ...] = ("/usr/share", "/usr/lib", "/usr/local/lib")
DEFAULT_VENDOR_DIR_NAME = "vendor"


class VendorResolver:
    """Resolve the directory holding third-party packages.

    The first successful result is cached on the instance and returned by
    every later call; share one instance to share the cache. Failures are
    not cached, so a later call may succeed from a different context.
    """

    def __init__(
        self,
        probe: EnvironmentProbe | None = None,
        stack: StackInspector | None = None,
        *,
        cli: bool = True,
        unreliable_prefixes: Sequence[str] = DEFAULT_UNRELIABLE_PREFIXES,
        vendor_dir_name: str = DEFAULT_VENDOR_DIR_NAME,
    ) -> None:
        self._probe = probe if probe is not None else VirtualEnvProbe()
        self._stack = stack if stack is not None else CallStackInspector()
        self._cli = cli
        self._unreliable_prefixes = tuple(unreliable_prefixes)
        self._vendor_dir_name = vendor_dir_name
        self._segment = re.compile(rf"^(.*?/{re.escape(vendor_dir_name)})(?=/|$)")
        self._cache: str | None = None
        self._lock = threading.Lock()

    def get(self) -> str:
        cached = self._cache
        if cached is not None:
            return cached
        with self._lock:
            if self._cache is None:
                self._cache = self._detect()
            return self._cache

    def _detect(self) -> str:
        try:
            vendor_dir = self._probe.locate()
        except (ImportError, OSError, ValueError) as exc:
            _logger.debug("probe %r failed: %s", self._probe, exc)
            vendor_dir = None

        if vendor_dir is not None and self._cli and self._is_unreliable(vendor_dir):
            _logger.debug("distrusting %s, falling back to call stack", vendor_dir)
            vendor_dir = self._from_stack()

        if vendor_dir is None:
            raise ResolutionError(
                'Can not resolve "vendorDir". Did you install the dependencies '
                f'(e.g. "pip install --target {self._vendor_dir_name} ..." or '
                "inside a virtual environment)?"
            )

        _logger.debug("vendor directory resolved to %s", vendor_dir)
        return vendor_dir

    def _is_unreliable(self, path: str) -> bool:
        normalized = to_forward_slashes(path)
        return any(normalized.startswith(prefix) for prefix in self._unreliable_prefixes)

    def _from_stack(self) -> str:
        frames = self._stack.frames()
        if not frames or frames[0].source_file is None:
            raise ResolutionError(
                "Can not resolve \"vendorDir\": the call stack carries no source file."
            )
        source = to_forward_slashes(frames[0].source_file)
        match = self._segment.match(source)
        if match is None:
            raise ResolutionError(
                f'Can not resolve "vendorDir": no "{self._vendor_dir_name}" '
                f'directory in path "{source}".'
            )
        return normalize_separators(match.group(1))
