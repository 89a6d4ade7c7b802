"""Matplotlib-based rendering of board snapshots."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.image import AxesImage
from matplotlib.patches import Patch

from battlesnake_engine.domain.board import GameState
from battlesnake_engine.domain.coord import Coord, Direction
from battlesnake_engine.io.paths import resolve_within_base
from battlesnake_engine.viz.theme import DEFAULT_THEME, Theme

CELL_LABELS: tuple[str, ...] = ("Empty", "Food", "Hazard", "Body", "Head")


# ---------------------------------------------------------------------------
# Cell-fill helpers
# ---------------------------------------------------------------------------


def _cell_cmap(theme: Theme = DEFAULT_THEME) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete colormap over the five cell codes."""
    cmap = ListedColormap(list(theme.cell_colors))
    norm = BoundaryNorm([-0.5, 0.5, 1.5, 2.5, 3.5, 4.5], cmap.N)
    return cmap, norm


def _build_legend_handles(theme: Theme = DEFAULT_THEME) -> list[Patch]:
    return [
        Patch(facecolor=color, edgecolor="gray", label=label)
        for label, color in zip(CELL_LABELS, theme.cell_colors, strict=True)
    ]


def _draw_board(
    ax: plt.Axes,
    grid: np.ndarray,
    cmap: ListedColormap,
    norm: BoundaryNorm,
    theme: Theme = DEFAULT_THEME,
) -> AxesImage:
    """imshow with grid lines; row 0 at the bottom so up is +y."""
    img = ax.imshow(grid, cmap=cmap, norm=norm, origin="lower", aspect="equal")
    h, w = grid.shape
    for x in range(w + 1):
        ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
    for y in range(h + 1):
        ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
    ax.set_xticks([])
    ax.set_yticks([])
    return img


def _draw_move(ax: plt.Axes, head: Coord, move: Direction, theme: Theme) -> None:
    dx, dy = move.delta
    ax.annotate(
        "",
        xy=(head.x + dx * 0.9, head.y + dy * 0.9),
        xytext=(head.x, head.y),
        arrowprops={"arrowstyle": "->", "color": theme.move_arrow_color, "linewidth": 2},
    )


def _draw_path(ax: plt.Axes, path: list[Coord], theme: Theme) -> None:
    xs = [coord.x for coord in path]
    ys = [coord.y for coord in path]
    ax.plot(xs, ys, color=theme.move_arrow_color, linewidth=1.5, linestyle="--", marker=".")


# ---------------------------------------------------------------------------
# render_snapshot
# ---------------------------------------------------------------------------


def render_snapshot(
    state: GameState,
    output_path: Path,
    move: Direction | None = None,
    path: list[Coord] | None = None,
    theme: Theme = DEFAULT_THEME,
    base_dir: Path | None = None,
) -> Path:
    """Render *state* as a cell grid, optionally with the chosen move and a path.

    When *base_dir* is given, *output_path* must resolve inside it.
    Returns the written path.
    """
    output_path = Path(output_path)
    if base_dir is not None:
        output_path = resolve_within_base(output_path, base_dir)

    board = state.board
    grid = board.cell_grid()
    scale = max(3.0, 0.45 * max(board.width, board.height))
    fig, ax = plt.subplots(figsize=(scale, scale))
    cmap, norm = _cell_cmap(theme)
    _draw_board(ax, grid, cmap, norm, theme)

    if path is not None and len(path) > 1:
        _draw_path(ax, path, theme)
    if move is not None:
        _draw_move(ax, state.you.head, move, theme)

    title = f"{state.game.id} turn {state.turn}: {state.you.name} ({state.you.health} hp)"
    if move is not None:
        title += f" -> {move.value}"
    ax.set_title(title, fontsize=9, color=theme.title_color)
    fig.legend(
        handles=_build_legend_handles(theme),
        loc="lower center",
        ncol=len(CELL_LABELS),
        fontsize=7,
        frameon=False,
    )
    fig.tight_layout(rect=(0, 0.06, 1, 1))
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
