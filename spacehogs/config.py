"""Persistent JSON config helpers.

Stores default exclusion names, report theme, and color preference.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "spacehogs"
CONFIG_FILENAME = "config.json"
CONFIG_ENV_VAR = "SPACEHOGS_CONFIG"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
DEFAULT_EXCLUDE = ("proc", "dev", "sys")


def _load_config_path() -> Path:
    """Return the config path, preferring ``$SPACEHOGS_CONFIG`` when set."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    if override:
        return Path(override).expanduser()
    return CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = _load_config_path()
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so a read-only config location never
    breaks a scan.
    """
    config_path = _load_config_path()
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def split_names(text: str) -> tuple[str, ...]:
    """Split a comma-separated name list, trimming blanks away."""
    return tuple(name.strip() for name in text.split(",") if name.strip())


def load_default_exclude() -> str:
    """Return the default ``--exclude`` value as a comma-separated string.

    Accepts either a JSON list of names or a comma string under ``exclude``.
    An explicit empty list or string disables exclusion by default.
    """
    value = load_config().get("exclude")
    if isinstance(value, str):
        return ",".join(split_names(value))
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return ",".join(name.strip() for name in value if name.strip())
    return ",".join(DEFAULT_EXCLUDE)


def load_theme_name() -> str | None:
    value = load_config().get("theme")
    return value if isinstance(value, str) and value.strip() else None


def load_no_color() -> bool:
    """Return persisted color opt-out; only explicit booleans count."""
    value = load_config().get("no_color")
    return bool(value) if isinstance(value, bool) else False


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_EXCLUDE",
    "load_config",
    "save_config",
    "split_names",
    "load_default_exclude",
    "load_theme_name",
    "load_no_color",
]
