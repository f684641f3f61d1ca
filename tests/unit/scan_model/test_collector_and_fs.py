"""Tests for the lock-guarded hog collector and one-level directory listing."""

from __future__ import annotations

import tempfile
import threading
import unittest
from pathlib import Path

from spacehogs.scan_model import HogCollector, SpaceHog, list_directory_children


class HogCollectorTests(unittest.TestCase):
    def test_concurrent_appends_are_not_lost(self) -> None:
        collector = HogCollector()
        start = threading.Event()

        def producer(worker_id: int) -> None:
            start.wait(timeout=1.0)
            for idx in range(500):
                collector.add(Path(f"w{worker_id}/f{idx}"), idx, is_dir=False)

        workers = [threading.Thread(target=producer, args=(worker_id,)) for worker_id in range(8)]
        for worker in workers:
            worker.start()
        start.set()
        for worker in workers:
            worker.join()

        self.assertEqual(len(collector), 4000)
        self.assertEqual(len(set(collector.hogs())), 4000)

    def test_snapshots_are_copies(self) -> None:
        collector = HogCollector()
        hog = collector.add(Path("big.iso"), 4096, is_dir=False)
        collector.add_error(Path("locked"), "Error reading directory locked: denied")

        snapshot = collector.hogs()
        snapshot.clear()

        self.assertEqual(hog, SpaceHog(path=Path("big.iso"), size=4096, is_dir=False))
        self.assertEqual(collector.hogs(), [hog])
        self.assertEqual([error.path for error in collector.errors()], [Path("locked")])


class ListDirectoryChildrenTests(unittest.TestCase):
    def test_lists_files_with_sizes_and_directories_without(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "docs").mkdir()
            (root / "notes.txt").write_text("twelve bytes", encoding="utf-8")

            children, scan_error = list_directory_children(root)

            self.assertIsNone(scan_error)
            by_name = {child.name: child for child in children}
            self.assertSetEqual(set(by_name), {"docs", "notes.txt"})
            self.assertTrue(by_name["docs"].is_dir)
            self.assertIsNone(by_name["docs"].size)
            self.assertFalse(by_name["notes.txt"].is_dir)
            self.assertEqual(by_name["notes.txt"].size, 12)
            self.assertEqual(by_name["notes.txt"].path, root / "notes.txt")
            self.assertIsNone(by_name["notes.txt"].stat_error)

    def test_missing_directory_returns_scan_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            children, scan_error = list_directory_children(Path(tmp) / "missing")

            self.assertEqual(children, [])
            self.assertIsInstance(scan_error, FileNotFoundError)

    def test_child_paths_join_the_listed_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "inner").mkdir()
            (root / "inner" / "a.bin").write_bytes(b"\0" * 3)

            children, scan_error = list_directory_children(root / "inner")

            self.assertIsNone(scan_error)
            self.assertEqual([child.path for child in children], [root / "inner" / "a.bin"])


if __name__ == "__main__":
    unittest.main()
