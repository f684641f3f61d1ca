"""Concurrent post-order directory-size aggregation.

Every subdirectory is measured on its own thread. A parent lists its
children, starts one thread per child directory, sums its direct files
inline, then joins the child threads and adds their totals. A directory is
recorded as a hog only after its full recursive size is known, so records
flow bottom-up from leaves to the root.

Per-node I/O failures never abort a scan: the node is reported through the
module logger and the run's error list and contributes zero bytes.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from pathlib import Path
from queue import Empty, Queue

from .collector import HogCollector
from .fs import list_directory_children
from .types import ScanReport, SpaceHog

logger = logging.getLogger(__name__)


class ScanRun:
    """State owned by one scan invocation and shared by all its threads.

    Only ``collector`` is mutated concurrently; threshold and exclusion set
    are fixed for the lifetime of the run.
    """

    def __init__(
        self,
        threshold: int,
        exclude: Iterable[str] = (),
        collector: HogCollector | None = None,
    ) -> None:
        self.threshold = int(threshold)
        self.exclude = frozenset(exclude)
        self.collector = collector if collector is not None else HogCollector()

    def is_excluded(self, name: str) -> bool:
        return name in self.exclude

    def report_error(self, path: Path, message: str) -> None:
        """Send one non-fatal node failure to the log and the run's error list."""
        logger.warning("%s", message)
        self.collector.add_error(path, message)


def _measure_subdirectory(directory: Path, run: ScanRun) -> int:
    """Aggregate ``directory`` and record it when it reaches the threshold."""
    size = _aggregate_directory(directory, run)
    if size >= run.threshold:
        run.collector.add(directory, size, is_dir=True)
    return size


def _subtree_worker(directory: Path, run: ScanRun, child_sizes: Queue[int]) -> None:
    child_sizes.put(_measure_subdirectory(directory, run))


def _start_subtree_worker(directory: Path, run: ScanRun, child_sizes: Queue[int]) -> threading.Thread | None:
    """Start a thread measuring ``directory``; ``None`` if no thread is available."""
    worker = threading.Thread(
        target=_subtree_worker,
        args=(directory, run, child_sizes),
        name=f"spacehogs-scan:{directory.name}",
        daemon=True,
    )
    try:
        worker.start()
    except RuntimeError as exc:
        logger.debug("Scanning %s inline, thread start failed: %s", directory, exc)
        return None
    return worker


def _aggregate_directory(directory: Path, run: ScanRun) -> int:
    logger.debug("Scanning %s", directory)
    children, scan_error = list_directory_children(directory)
    if scan_error is not None:
        run.report_error(directory, f"Error reading directory {directory}: {scan_error}")
        return 0

    total_size = 0
    child_sizes: Queue[int] = Queue()
    workers: list[threading.Thread] = []

    for child in children:
        if run.is_excluded(child.name):
            continue

        if child.is_dir:
            worker = _start_subtree_worker(child.path, run, child_sizes)
            if worker is None:
                child_sizes.put(_measure_subdirectory(child.path, run))
            else:
                workers.append(worker)
            continue

        if child.stat_error is not None or child.size is None:
            run.report_error(child.path, f"Error getting info for {child.path}: {child.stat_error}")
            continue

        if child.size >= run.threshold:
            run.collector.add(child.path, child.size, is_dir=False)
        total_size += child.size

    for worker in workers:
        worker.join()

    while True:
        try:
            total_size += child_sizes.get_nowait()
        except Empty:
            break
    return total_size


def aggregate(
    path: Path | str,
    threshold: int,
    exclude: Iterable[str] = (),
    collector: HogCollector | None = None,
) -> int:
    """Return the total size of ``path`` recording descendants into ``collector``.

    ``path`` itself is not recorded; only its files and subdirectories whose
    size is at least ``threshold`` are. Children named in ``exclude`` are
    skipped together with their whole subtree.
    """
    run = ScanRun(threshold, exclude, collector)
    return _aggregate_directory(Path(path), run)


def hog_sort_key(hog: SpaceHog) -> tuple[bool, int, str]:
    """Directories first, then larger sizes, then path order."""
    return (not hog.is_dir, -hog.size, str(hog.path))


def sort_hogs(hogs: Iterable[SpaceHog]) -> list[SpaceHog]:
    return sorted(hogs, key=hog_sort_key)


def scan(root: Path | str, threshold: int, exclude: Iterable[str] = ()) -> ScanReport:
    """Scan ``root`` and return its sorted hogs, root included when it qualifies.

    Each call owns a fresh collector, so repeated scans never share results.
    """
    root_path = Path(root)
    run = ScanRun(threshold, exclude)
    total_size = _aggregate_directory(root_path, run)
    if total_size >= run.threshold:
        run.collector.add(root_path, total_size, is_dir=True)

    return ScanReport(
        root=root_path,
        threshold=run.threshold,
        excluded=run.exclude,
        total_size=total_size,
        hogs=tuple(sort_hogs(run.collector.hogs())),
        errors=tuple(run.collector.errors()),
    )


__all__ = [
    "ScanRun",
    "aggregate",
    "hog_sort_key",
    "sort_hogs",
    "scan",
]
