"""Domain datatypes produced by a directory-size scan."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


class SizeFormatError(ValueError):
    """Raised when a size expression cannot be parsed into bytes."""


@dataclass(frozen=True)
class SpaceHog:
    """One file or directory whose total size met the reporting threshold."""

    path: Path
    size: int
    is_dir: bool


@dataclass(frozen=True)
class ScanError:
    """Non-fatal I/O failure observed while scanning one node."""

    path: Path
    message: str


@dataclass(frozen=True)
class ScanReport:
    """Completed scan: sorted hogs plus the root total and node errors."""

    root: Path
    threshold: int
    excluded: frozenset[str]
    total_size: int
    hogs: tuple[SpaceHog, ...] = ()
    errors: tuple[ScanError, ...] = field(default_factory=tuple)


__all__ = [
    "SizeFormatError",
    "SpaceHog",
    "ScanError",
    "ScanReport",
]
