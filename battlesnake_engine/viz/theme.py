"""Visualization theme presets for board renderers.

Themes are frozen dataclasses that group all styling constants together,
so a palette can be swapped via the ``--theme`` CLI argument or
programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of board style tokens."""

    # Cell fills, indexed by the codes of Board.cell_grid()
    empty_cell_color: str = "#F0F0F0"
    food_color: str = "#E53935"
    hazard_color: str = "#9E9E9E"
    body_color: str = "#5AE645"
    head_color: str = "#2E7D32"

    grid_line_color: str = "#CCCCCC"
    move_arrow_color: str = "#1565C0"
    title_color: str = "#212121"

    @property
    def cell_colors(self) -> tuple[str, ...]:
        return (
            self.empty_cell_color,
            self.food_color,
            self.hazard_color,
            self.body_color,
            self.head_color,
        )


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

DEFAULT_THEME = Theme()

DARK_THEME = Theme(
    empty_cell_color="#1A1A1A",
    food_color="#FF7043",
    hazard_color="#424242",
    body_color="#5AE645",
    head_color="#A5D6A7",
    grid_line_color="#333333",
    move_arrow_color="#FFD54F",
    title_color="#EEEEEE",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "dark": DARK_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
