"""Runtime introspection sources injected into the resolvers.

Two capabilities are modelled here:

- :class:`StackInspector` returns the frames of the current call stack,
  innermost first, each carrying the frame's source file (or ``None``).
- :class:`EnvironmentProbe` answers "where do third-party packages live?"
  using a documented detection strategy.

Both are plain protocols so tests and composition roots can substitute fixed
values instead of relying on the real invocation context.
"""

from __future__ import annotations

import importlib.util
import inspect
import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class StackFrame:
    """One call-stack frame. ``source_file`` is ``None`` when the frame has no file."""

    source_file: str | None


@runtime_checkable
class StackInspector(Protocol):
    def frames(self) -> Sequence[StackFrame]:
        """Return frames ordered innermost (index 0) to outermost (last)."""
        ...


@runtime_checkable
class EnvironmentProbe(Protocol):
    def locate(self) -> str | None:
        """Return the dependency directory, or ``None`` when undetermined."""
        ...


def _frame_file(filename: str) -> str | None:
    # "<stdin>", "<string>", "<frozen runpy>" and friends carry no real file.
    if not filename or (filename.startswith("<") and filename.endswith(">")):
        return None
    return filename


class CallStackInspector:
    """Read the live interpreter stack via :func:`inspect.stack`.

    Frames belonging to this module are skipped, so index 0 is the caller of
    :meth:`frames`. Outermost ``<frozen ...>`` frames (``runpy`` when started
    with ``python -m``) are dropped so the last frame is the real entry
    module. ``<string>`` and ``<stdin>`` frames are kept with no file, so
    a process started with ``python -c`` or a REPL has no entry script.
    """

    def frames(self) -> list[StackFrame]:
        here = os.path.normcase(os.path.abspath(__file__))
        raw = inspect.stack(context=0)
        try:
            filenames = [
                info.filename
                for info in raw
                if os.path.normcase(os.path.abspath(info.filename)) != here
            ]
        finally:
            del raw
        while filenames and filenames[-1].startswith("<frozen "):
            filenames.pop()
        return [StackFrame(_frame_file(name)) for name in filenames]


class FixedStackInspector:
    """Return a predetermined stack. Accepts plain paths or ``None`` entries."""

    def __init__(self, frames: Sequence[str | StackFrame | None] = ()) -> None:
        self._frames = [
            f if isinstance(f, StackFrame) else StackFrame(f) for f in frames
        ]

    def frames(self) -> list[StackFrame]:
        return list(self._frames)


class ModuleOriginProbe:
    """Locate the dependency directory from an installed module's source file.

    The module's origin is found with :func:`importlib.util.find_spec` and
    ``dirname`` is applied *levels* times, so with the default of 2 the
    origin ``/app/vendor/loader/__init__.py`` yields ``/app/vendor``.
    """

    def __init__(self, module: str, levels: int = 2) -> None:
        if levels < 1:
            raise ValueError("levels must be >= 1")
        self.module = module
        self.levels = levels

    def locate(self) -> str | None:
        spec = importlib.util.find_spec(self.module)
        if spec is None or not spec.origin or spec.origin in ("built-in", "frozen"):
            return None
        path = spec.origin
        for _ in range(self.levels):
            path = os.path.dirname(path)
        return path or None

    def __repr__(self) -> str:
        return f"ModuleOriginProbe({self.module!r}, levels={self.levels})"


class VirtualEnvProbe:
    """Report the active virtual environment (``sys.prefix``), if any."""

    def locate(self) -> str | None:
        if sys.prefix == getattr(sys, "base_prefix", sys.prefix):
            return None
        return sys.prefix

    def __repr__(self) -> str:
        return "VirtualEnvProbe()"


class FixedProbe:
    """Return a known install-marker path, e.g. one baked in at build time."""

    def __init__(self, path: str | None) -> None:
        self.path = path

    def locate(self) -> str | None:
        return self.path

    def __repr__(self) -> str:
        return f"FixedProbe({self.path!r})"


__all__ = [
    "CallStackInspector",
    "EnvironmentProbe",
    "FixedProbe",
    "FixedStackInspector",
    "ModuleOriginProbe",
    "StackFrame",
    "StackInspector",
    "VirtualEnvProbe",
]
