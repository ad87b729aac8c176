"""Composition root: lazily built, shared resolver singletons.

Resolvers are registered under stable names and created on first access.
Every downstream resolver receives the same :class:`VendorResolver` and
:class:`RootDirResolver` instances, so the vendor memo is shared.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from functools import lru_cache
from typing import Any

from pathresolvers.config import PathsConfig, load_config
from pathresolvers.errors import ResolutionError
from pathresolvers.introspection import (
    EnvironmentProbe,
    ModuleOriginProbe,
    StackInspector,
    VirtualEnvProbe,
)
from pathresolvers.resolvers import (
    LogDirResolver,
    RootDirResolver,
    TempDirResolver,
    VendorResolver,
    WwwDirResolver,
)

VENDOR = "vendorResolver"
ROOT = "rootResolver"
WWW = "wwwResolver"
TEMP = "tempResolver"
LOG = "logResolver"


def build_probe(config: PathsConfig) -> EnvironmentProbe:
    if config.loader_module:
        return ModuleOriginProbe(config.loader_module, levels=config.loader_levels)
    return VirtualEnvProbe()


class ResolverContainer:
    """Hold one instance of each resolver, created on demand.

    *probe* and *stack* override the introspection sources, which is how
    tests and embedding applications supply deterministic values.
    """

    def __init__(
        self,
        config: PathsConfig | None = None,
        *,
        probe: EnvironmentProbe | None = None,
        stack: StackInspector | None = None,
    ) -> None:
        self.config = config if config is not None else PathsConfig()
        self._probe = probe
        self._stack = stack
        self._instances: dict[str, Any] = {}
        self._lock = threading.RLock()
        self._factories: dict[str, Callable[[], Any]] = {
            VENDOR: self._make_vendor,
            ROOT: self._make_root,
            WWW: self._make_www,
            TEMP: self._make_temp,
            LOG: self._make_log,
        }

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    def _make_vendor(self) -> VendorResolver:
        cfg = self.config
        return VendorResolver(
            self._probe if self._probe is not None else build_probe(cfg),
            self._stack,
            cli=cfg.cli,
            unreliable_prefixes=cfg.unreliable_prefixes,
            vendor_dir_name=cfg.vendor_dir_name,
        )

    def _make_root(self) -> RootDirResolver:
        return RootDirResolver(self.vendor)

    def _make_www(self) -> WwwDirResolver:
        return WwwDirResolver(
            self.root,
            self.config.www_dir,
            stack=self._stack,
            front_controllers=self.config.front_controllers,
        )

    def _make_temp(self) -> TempDirResolver:
        return TempDirResolver(self.root, self.config.temp_dir, self.config.temp_dir_name)

    def _make_log(self) -> LogDirResolver:
        return LogDirResolver(self.root, self.config.log_dir, self.config.log_dir_name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def names(self) -> list[str]:
        return list(self._factories)

    def get(self, name: str) -> Any:
        """Return the singleton registered as *name*; ``KeyError`` if unknown."""
        if name not in self._factories:
            raise KeyError(f"Unknown resolver '{name}'")
        instance = self._instances.get(name)
        if instance is not None:
            return instance
        # Re-entrant: building www/temp/log builds root, which builds vendor.
        with self._lock:
            instance = self._instances.get(name)
            if instance is None:
                instance = self._factories[name]()
                self._instances[name] = instance
            return instance

    @property
    def vendor(self) -> VendorResolver:
        return self.get(VENDOR)

    @property
    def root(self) -> RootDirResolver:
        return self.get(ROOT)

    @property
    def www(self) -> WwwDirResolver:
        return self.get(WWW)

    @property
    def temp(self) -> TempDirResolver:
        return self.get(TEMP)

    @property
    def log(self) -> LogDirResolver:
        return self.get(LOG)

    def resolve_all(self) -> dict[str, str | ResolutionError]:
        """Resolve every registered path, reporting failures in place."""
        results: dict[str, str | ResolutionError] = {}
        for name in self._factories:
            try:
                results[name] = self.get(name).get()
            except ResolutionError as exc:
                results[name] = exc
        return results


@lru_cache(maxsize=1)
def get_container() -> ResolverContainer:
    """Return the process-wide container configured from the environment."""
    return ResolverContainer(load_config())
