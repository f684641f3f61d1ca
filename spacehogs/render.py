"""Plain-text report rendering for scan results.

The header is rendered before a scan starts so traversal warnings on the
error stream appear after it; rows are rendered once the sorted report is
available.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .scan_model.types import SpaceHog
from .sizes import human_readable_size
from .ui_theme import DEFAULT_THEME, UITheme, styled

COLUMN_HEADER = "TYPE   SIZE        NAME"
COLUMN_RULE = "-" * 32
DIR_TAG = "[DIR] "
FILE_TAG = "[FILE]"
SIZE_COLUMN_WIDTH = 10


def render_header(
    root: Path,
    threshold: int,
    exclude_text: str,
    *,
    theme: UITheme = DEFAULT_THEME,
    color: bool = False,
) -> list[str]:
    """Return header lines describing the scan that is about to run."""

    def paint(attr: str, text: str) -> str:
        return styled(attr, text) if color else text

    lines = [
        f"Scanning directory: {root}",
        f"Minimum size threshold: {human_readable_size(threshold)}",
    ]
    if exclude_text:
        lines.append(f"Excluding: {exclude_text}")
    lines.append("")
    lines.append(paint(theme.header, COLUMN_HEADER))
    lines.append(paint(theme.rule, COLUMN_RULE))
    return lines


def render_hog_row(hog: SpaceHog, *, theme: UITheme = DEFAULT_THEME, color: bool = False) -> str:
    """Render one ``[DIR] ``/``[FILE]`` row with padded size and path."""
    tag = DIR_TAG if hog.is_dir else FILE_TAG
    size_text = human_readable_size(hog.size).ljust(SIZE_COLUMN_WIDTH)
    path_text = str(hog.path)
    if color:
        tag = styled(theme.dir_tag if hog.is_dir else theme.file_tag, tag)
        size_text = styled(theme.size, size_text)
        path_text = styled(theme.path, path_text)
    return f"{tag} {size_text}  {path_text}"


def render_rows(hogs: Iterable[SpaceHog], *, theme: UITheme = DEFAULT_THEME, color: bool = False) -> list[str]:
    return [render_hog_row(hog, theme=theme, color=color) for hog in hogs]


__all__ = [
    "COLUMN_HEADER",
    "COLUMN_RULE",
    "render_header",
    "render_hog_row",
    "render_rows",
]
