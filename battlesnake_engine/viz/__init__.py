"""Visualization layer: board themes and snapshot rendering."""

from battlesnake_engine.viz.render import render_snapshot
from battlesnake_engine.viz.theme import (
    DARK_THEME,
    DEFAULT_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "DARK_THEME",
    "DEFAULT_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "get_theme",
    "render_snapshot",
]
