"""Tests for battlesnake_engine.search.reachability."""

from __future__ import annotations

import pytest

from battlesnake_engine.domain.coord import Coord, Direction
from battlesnake_engine.search.reachability import count_reachable, reachable_by_move
from tests.builders import make_board, make_snake


class TestCountReachable:
    def test_empty_board_counts_every_cell(self) -> None:
        assert count_reachable(Coord(1, 1), make_board(width=3, height=3)) == 9

    def test_food_and_hazards_do_not_block(self) -> None:
        board = make_board(width=3, height=3, food=[(0, 0)], hazards=[(2, 2)])
        assert count_reachable(Coord(1, 1), board) == 9

    def test_bodies_block(self) -> None:
        wall = make_snake("wall", [(1, 2), (1, 1), (1, 0)])
        board = make_board([wall], width=3, height=3)
        assert count_reachable(Coord(0, 0), board) == 3

    def test_occupied_start_is_counted(self) -> None:
        you = make_snake("you", [(0, 0)])
        board = make_board([you], width=2, height=2)
        assert count_reachable(you.head, board) == 4

    def test_fully_enclosed_start_counts_itself(self) -> None:
        fence = make_snake("fence", [(1, 0), (1, 1), (0, 1)])
        board = make_board([fence], width=3, height=3)
        assert count_reachable(Coord(0, 0), board) == 1

    def test_depth_caps_layers(self) -> None:
        board = make_board()
        center = Coord(5, 5)
        assert count_reachable(center, board, max_depth=1) == 5
        assert count_reachable(center, board, max_depth=2) == 13
        assert count_reachable(center, board) == 121

    def test_unlimited_depth_dominates_any_cap(self) -> None:
        wall = make_snake("wall", [(3, 8), (3, 7), (3, 6), (3, 5), (3, 4)])
        board = make_board([wall])
        unlimited = count_reachable(Coord(1, 6), board)
        for depth in range(1, 12):
            assert unlimited >= count_reachable(Coord(1, 6), board, max_depth=depth)

    def test_monotone_in_obstacles(self) -> None:
        start = Coord(0, 0)
        segments: list[tuple[int, int]] = []
        previous = count_reachable(start, make_board())
        for y in range(10, -1, -1):
            segments.append((4, y))
            board = make_board([make_snake("wall", segments)])
            current = count_reachable(start, board)
            assert current <= previous
            previous = current
        assert previous == 44

    def test_rejects_negative_depth(self) -> None:
        with pytest.raises(ValueError, match="max_depth"):
            count_reachable(Coord(0, 0), make_board(), max_depth=-1)


class TestReachableByMove:
    def test_keys_follow_given_order(self) -> None:
        you = make_snake("you", [(1, 1), (1, 0)])
        board = make_board([you], width=3, height=3)
        result = reachable_by_move(you.head, (Direction.RIGHT, Direction.UP), board)
        assert list(result) == [Direction.RIGHT, Direction.UP]
        assert result == {Direction.RIGHT: 7, Direction.UP: 7}
