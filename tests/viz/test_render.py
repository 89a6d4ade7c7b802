"""Tests for battlesnake_engine.viz.render and viz.theme."""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from battlesnake_engine.domain.coord import Coord, Direction  # noqa: E402
from battlesnake_engine.viz.render import _cell_cmap, render_snapshot  # noqa: E402
from battlesnake_engine.viz.theme import DARK_THEME, DEFAULT_THEME, get_theme  # noqa: E402
from tests.builders import scenario_boxed, scenario_food_north  # noqa: E402


class TestRenderSnapshot:
    def test_writes_png(self, tmp_path: Path) -> None:
        output = tmp_path / "frames" / "turn.png"
        written = render_snapshot(scenario_food_north(), output, move=Direction.UP)
        assert written == output
        assert output.exists() and output.stat().st_size > 0

    def test_draws_path_and_dark_theme(self, tmp_path: Path) -> None:
        output = tmp_path / "path.png"
        path = [Coord(5, 5), Coord(5, 6), Coord(5, 7), Coord(5, 8)]
        render_snapshot(scenario_food_north(), output, path=path, theme=DARK_THEME)
        assert output.exists()

    def test_without_move(self, tmp_path: Path) -> None:
        output = tmp_path / "boxed.png"
        render_snapshot(scenario_boxed(), output)
        assert output.exists()

    def test_rejects_output_outside_base_dir(self, tmp_path: Path) -> None:
        base = tmp_path / "base"
        base.mkdir()
        with pytest.raises(ValueError, match="escapes"):
            render_snapshot(scenario_food_north(), tmp_path / "outside.png", base_dir=base)


class TestTheme:
    def test_colormap_has_one_color_per_cell_code(self) -> None:
        cmap, norm = _cell_cmap(DEFAULT_THEME)
        assert cmap.N == 5
        assert norm.N == 6

    def test_get_theme_is_case_insensitive(self) -> None:
        assert get_theme("Dark") is DARK_THEME

    def test_unknown_theme(self) -> None:
        with pytest.raises(ValueError, match="Unknown theme"):
            get_theme("neon")
