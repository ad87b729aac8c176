"""Error types for path resolution."""

from __future__ import annotations


class ResolutionError(RuntimeError):
    """Raised when a directory cannot be determined."""


__all__ = ["ResolutionError"]
