"""Domain model for concurrent directory-size scans.

This package contains non-UI scan primitives:
- hog/report datatypes
- one-level filesystem listing
- the lock-guarded result collector
- the recursive, thread-per-subdirectory size aggregator
"""

from __future__ import annotations

from .types import ScanError, ScanReport, SizeFormatError, SpaceHog
from .fs import DirectoryChild, list_directory_children
from .collector import HogCollector
from .aggregator import ScanRun, aggregate, hog_sort_key, scan, sort_hogs

__all__ = [
    "SizeFormatError",
    "SpaceHog",
    "ScanError",
    "ScanReport",
    "DirectoryChild",
    "list_directory_children",
    "HogCollector",
    "ScanRun",
    "aggregate",
    "hog_sort_key",
    "sort_hogs",
    "scan",
]
