"""Centralized logging for pathresolvers."""

from __future__ import annotations

import logging
import sys
import threading

_ROOT = "pathresolvers"

_lock = threading.Lock()
_setup_done = False


class _Formatter(logging.Formatter):
    """Render records as ``[tag] message`` with the package prefix removed."""

    def format(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith(_ROOT + "."):
            name = name[len(_ROOT) + 1 :]
        record.msg = f"[{name}] {record.msg}"
        return super().format(record)


def setup_logging(verbose: bool = False) -> None:
    """Configure the ``pathresolvers`` logger once per process.

    A single ``StreamHandler(sys.stderr)`` is attached at WARNING level, or
    DEBUG when *verbose* is True. Records do not propagate to the root logger.
    A later verbose call lowers the level to DEBUG without adding handlers.
    """
    global _setup_done
    with _lock:
        logger = logging.getLogger(_ROOT)
        if _setup_done:
            if verbose:
                logger.setLevel(logging.DEBUG)
            return
        logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(_Formatter())
        logger.addHandler(handler)
        logger.propagate = False
        _setup_done = True


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(f"pathresolvers.{name}")``, setting up logging lazily."""
    setup_logging()
    return logging.getLogger(f"{_ROOT}.{name}")
