"""Command-line front door for spacehogs.

Parses CLI options, validates the scan root and size threshold, then runs
the concurrent scan and prints the sorted report. Validation failures exit
before any traversal starts; per-node I/O errors during the scan are logged
to stderr and do not stop the report.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .config import load_default_exclude, load_no_color, load_theme_name, split_names
from .render import render_header, render_rows
from .scan_model import SizeFormatError, scan
from .sizes import parse_size
from .ui_theme import available_theme_names, resolve_theme

USAGE_EPILOG = "Size format: number[unit] (e.g., 100M, 1.5G)\nUnits: B, K, M, G, T, P"

_LOG_HANDLER_MARKER = "_spacehogs_cli_handler"


def _configure_logging(verbose: bool) -> None:
    """Route package log records to stderr as bare messages."""
    package_logger = logging.getLogger("spacehogs")
    for handler in list(package_logger.handlers):
        if getattr(handler, _LOG_HANDLER_MARKER, False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(handler, _LOG_HANDLER_MARKER, True)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


def _pass_through_undecodable_names() -> None:
    """Let stdout/stderr write file names that are not valid in their encoding.

    Names that fail to decode reach Python as lone surrogates; writing them
    back with ``surrogateescape`` reproduces the original bytes.
    """
    for stream in (sys.stdout, sys.stderr):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="surrogateescape")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spacehogs",
        description="Find files and directories at or above a minimum size.",
        epilog=USAGE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("directory", help="Directory to scan.")
    parser.add_argument("min_size", help="Minimum size to report, e.g. 100M or 1.5G.")
    parser.add_argument(
        "--exclude",
        default=None,
        help="Comma-separated names to skip at any depth (default: proc,dev,sys; empty disables).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Report color theme ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every directory as it is scanned.")
    return parser


def _use_color(no_color_flag: bool) -> bool:
    if no_color_flag or load_no_color():
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, scan the directory, and print the hog report.

    ``argv`` is primarily for tests; when omitted ``sys.argv`` is used.
    Raises ``SystemExit`` with a one-line message for invalid sizes and
    unusable paths.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _pass_through_undecodable_names()
    _configure_logging(args.verbose)

    exclude_text = args.exclude if args.exclude is not None else load_default_exclude()
    exclude = split_names(exclude_text)

    scan_path = Path(os.path.normpath(args.directory))
    if scan_path.name in exclude:
        sys.stdout.write(f"Top-level directory '{scan_path}' is in the exclude list. Nothing to do.\n")
        return

    try:
        threshold = parse_size(args.min_size)
    except SizeFormatError as exc:
        raise SystemExit(f"error: {exc}") from exc

    try:
        scan_path.stat()
    except OSError as exc:
        raise SystemExit(f"error accessing '{scan_path}': {exc}") from exc
    if not scan_path.is_dir():
        raise SystemExit(f"error: '{scan_path}' is not a directory")

    theme = resolve_theme(args.theme or load_theme_name())
    color = _use_color(args.no_color)

    header = render_header(scan_path, threshold, exclude_text if exclude else "", theme=theme, color=color)
    sys.stdout.write("\n".join(header) + "\n")
    sys.stdout.flush()

    report = scan(scan_path, threshold, exclude)

    rows = render_rows(report.hogs, theme=theme, color=color)
    if rows:
        sys.stdout.write("\n".join(rows) + "\n")


if __name__ == "__main__":
    main()
