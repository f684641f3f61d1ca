"""Report theme definitions and selection helpers.

Themes map report roles to pygments console attribute strings
(``"*blue*"`` is bold blue, ``"_cyan_"`` underlined cyan). An empty string
leaves that role unstyled.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import ansiformat


@dataclass(frozen=True)
class UITheme:
    """Semantic palette used by the report renderer."""

    name: str
    header: str
    dir_tag: str
    file_tag: str
    size: str
    path: str
    rule: str


DEFAULT_THEME = UITheme(
    name="default",
    header="*white*",
    dir_tag="*brightblue*",
    file_tag="brightgreen",
    size="yellow",
    path="",
    rule="brightblack",
)

OCEAN_THEME = UITheme(
    name="ocean",
    header="*brightcyan*",
    dir_tag="*cyan*",
    file_tag="brightblue",
    size="brightcyan",
    path="",
    rule="blue",
)

MONO_THEME = UITheme(
    name="mono",
    header="*white*",
    dir_tag="*white*",
    file_tag="",
    size="",
    path="",
    rule="",
)

_THEMES = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME, MONO_THEME)}


def available_theme_names() -> list[str]:
    return list(_THEMES)


def resolve_theme(name: str | None) -> UITheme:
    """Return theme by name, falling back to the default palette."""
    if not name:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)


def styled(attr: str, text: str) -> str:
    """Wrap ``text`` in ANSI codes for ``attr``; empty attrs pass through."""
    if not attr or not text:
        return text
    return ansiformat(attr, text)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "MONO_THEME",
    "available_theme_names",
    "resolve_theme",
    "styled",
]
