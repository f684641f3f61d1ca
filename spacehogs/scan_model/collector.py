"""Thread-safe, append-only collection of space hogs for one scan run."""

from __future__ import annotations

import threading
from pathlib import Path

from .types import ScanError, SpaceHog


class HogCollector:
    """Accumulates hogs and node errors from concurrent traversal threads.

    Entries are only ever appended. Snapshot accessors return copies so
    callers never observe the list while another thread mutates it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._hogs: list[SpaceHog] = []
        self._errors: list[ScanError] = []

    def add(self, path: Path, size: int, is_dir: bool) -> SpaceHog:
        """Record one qualifying file or directory."""
        hog = SpaceHog(path=path, size=size, is_dir=is_dir)
        with self._lock:
            self._hogs.append(hog)
        return hog

    def add_error(self, path: Path, message: str) -> None:
        with self._lock:
            self._errors.append(ScanError(path=path, message=message))

    def hogs(self) -> list[SpaceHog]:
        with self._lock:
            return list(self._hogs)

    def errors(self) -> list[ScanError]:
        with self._lock:
            return list(self._errors)

    def __len__(self) -> int:
        with self._lock:
            return len(self._hogs)


__all__ = ["HogCollector"]
