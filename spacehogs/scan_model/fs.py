"""One-level filesystem listing used by the size aggregator."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DirectoryChild:
    """One direct child of a scanned directory plus its observed size.

    ``size`` is ``None`` for directories and for files whose stat failed;
    in the latter case ``stat_error`` carries the failure.
    """

    name: str
    path: Path
    is_dir: bool
    size: int | None
    stat_error: OSError | None = None


def list_directory_children(directory: Path) -> tuple[list[DirectoryChild], OSError | None]:
    """List direct children of ``directory`` without following symlinks.

    Returns ``(children, scan_error)``. ``scan_error`` is set, with an empty
    child list, when the directory itself cannot be listed. Symlinks are
    reported as files sized by their own ``lstat`` entry.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                child_path = directory / child.name
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False

                if is_dir:
                    children.append(DirectoryChild(name=child.name, path=child_path, is_dir=True, size=None))
                    continue

                try:
                    size = int(child.stat(follow_symlinks=False).st_size)
                except OSError as exc:
                    children.append(
                        DirectoryChild(name=child.name, path=child_path, is_dir=False, size=None, stat_error=exc)
                    )
                    continue
                children.append(DirectoryChild(name=child.name, path=child_path, is_dir=False, size=size))
    except OSError as exc:
        return [], exc

    return children, None


__all__ = [
    "DirectoryChild",
    "list_directory_children",
]
