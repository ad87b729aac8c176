"""Shared test fixtures and helpers."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

from pathresolvers.introspection import FixedProbe, FixedStackInspector
from pathresolvers.resolvers import RootDirResolver, VendorResolver

PROJECT_DIR = Path(__file__).resolve().parents[1]


def run_python_c(code: str) -> subprocess.CompletedProcess[str]:
    """Run *code* with ``python -c`` so the entry frame is ``<string>``."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_DIR), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "-c", code],
        cwd=PROJECT_DIR,
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )


def make_root(vendor_dir: str = "/proj/vendor") -> RootDirResolver:
    """Build a RootDirResolver on top of a fixed vendor directory."""
    return RootDirResolver(VendorResolver(FixedProbe(vendor_dir), FixedStackInspector()))


class CountingProbe:
    """Probe returning queued results in order and counting calls."""

    def __init__(self, *results: str | None) -> None:
        self._results = list(results)
        self.calls = 0

    def locate(self) -> str | None:
        self.calls += 1
        if len(self._results) > 1:
            return self._results.pop(0)
        return self._results[0]


@pytest.fixture(autouse=True)
def _posix_separator(monkeypatch):
    """Pin the host separator so expectations read the same on every platform."""
    monkeypatch.setattr("pathresolvers._paths.HOST_SEP", "/")


@pytest.fixture
def root():
    """Provide a RootDirResolver rooted at ``/proj``."""
    return make_root()
