"""Tests for report header/row rendering and theme selection."""

from __future__ import annotations

import unittest
from pathlib import Path

from spacehogs.render import COLUMN_HEADER, COLUMN_RULE, render_header, render_hog_row, render_rows
from spacehogs.scan_model import SpaceHog
from spacehogs.ui_theme import DEFAULT_THEME, MONO_THEME, available_theme_names, resolve_theme, styled


class RenderHeaderTests(unittest.TestCase):
    def test_header_lists_root_threshold_and_exclusions(self) -> None:
        lines = render_header(Path("/data"), 1536, "proc,dev,sys")

        self.assertListEqual(
            lines,
            [
                "Scanning directory: /data",
                "Minimum size threshold: 1.50 KiB",
                "Excluding: proc,dev,sys",
                "",
                COLUMN_HEADER,
                COLUMN_RULE,
            ],
        )

    def test_header_omits_exclusion_line_when_empty(self) -> None:
        lines = render_header(Path("/data"), 10, "")

        self.assertNotIn("Excluding", "\n".join(lines))
        self.assertEqual(lines[1], "Minimum size threshold: 10 B")


class RenderRowTests(unittest.TestCase):
    def test_plain_rows_pad_size_column(self) -> None:
        dir_row = render_hog_row(SpaceHog(path=Path("/data/big"), size=2048, is_dir=True))
        file_row = render_hog_row(SpaceHog(path=Path("/data/a.txt"), size=5, is_dir=False))

        self.assertEqual(dir_row, "[DIR]  2.00 KiB    /data/big")
        self.assertEqual(file_row, "[FILE] 5 B         /data/a.txt")

    def test_color_rows_keep_visible_text(self) -> None:
        hog = SpaceHog(path=Path("/data/big"), size=2048, is_dir=True)

        row = render_hog_row(hog, theme=DEFAULT_THEME, color=True)

        self.assertIn("\x1b[", row)
        self.assertIn("[DIR] ", row)
        self.assertIn("2.00 KiB", row)
        self.assertTrue(row.endswith("/data/big"))

    def test_render_rows_preserves_order(self) -> None:
        hogs = [
            SpaceHog(path=Path("z"), size=1, is_dir=True),
            SpaceHog(path=Path("a"), size=1, is_dir=False),
        ]

        rows = render_rows(hogs)

        self.assertEqual([row[:6] for row in rows], ["[DIR] ", "[FILE]"])


class ThemeTests(unittest.TestCase):
    def test_unknown_theme_falls_back_to_default(self) -> None:
        self.assertIs(resolve_theme("nope"), DEFAULT_THEME)
        self.assertIs(resolve_theme(None), DEFAULT_THEME)
        self.assertIs(resolve_theme(" MONO "), MONO_THEME)
        self.assertIn("ocean", available_theme_names())

    def test_empty_attr_leaves_text_unstyled(self) -> None:
        self.assertEqual(styled("", "plain"), "plain")
        self.assertTrue(styled("*blue*", "bold").startswith("\x1b["))


if __name__ == "__main__":
    unittest.main()
