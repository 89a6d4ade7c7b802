"""Tests for battlesnake_engine.search.pathfinding."""

from __future__ import annotations

import pytest

from battlesnake_engine.domain.board import Board
from battlesnake_engine.domain.coord import Coord
from battlesnake_engine.search.budget import Deadline
from battlesnake_engine.search.pathfinding import find_path, path_cost, step_cost
from tests.builders import make_board, make_snake


def _edges(path: list[Coord]) -> int:
    return len(path) - 1


def _vertical_wall(x: int, height: int) -> list[tuple[int, int]]:
    """A snake body filling column *x* except its top cell."""
    return [(x, y) for y in range(height - 2, -1, -1)]


class TestFindPathBasics:
    def test_start_equals_goal(self) -> None:
        board = make_board()
        assert find_path(Coord(3, 3), Coord(3, 3), board) == [Coord(3, 3)]

    def test_goal_out_of_bounds(self) -> None:
        assert find_path(Coord(0, 0), Coord(11, 0), make_board()) is None

    def test_food_scenario_path_runs_north(self) -> None:
        you = make_snake("you", [(5, 5), (5, 4), (5, 3)])
        board = make_board([you], food=[(5, 8)])
        path = find_path(you.head, Coord(5, 8), board)
        assert path == [Coord(5, 5), Coord(5, 6), Coord(5, 7), Coord(5, 8)]

    def test_tie_break_is_deterministic(self) -> None:
        path = find_path(Coord(0, 0), Coord(2, 2), make_board())
        assert path == [Coord(0, 0), Coord(0, 1), Coord(0, 2), Coord(1, 2), Coord(2, 2)]

    def test_endpoints_and_adjacency(self) -> None:
        path = find_path(Coord(1, 9), Coord(8, 2), make_board())
        assert path is not None
        assert path[0] == Coord(1, 9) and path[-1] == Coord(8, 2)
        for a, b in zip(path, path[1:]):
            assert a.distance_to(b) == 1


class TestFindPathObstacles:
    def test_length_equals_manhattan_without_obstacle_policy(self) -> None:
        wall = make_snake("wall", _vertical_wall(5, 11))
        board = make_board([wall])
        start, goal = Coord(0, 0), Coord(10, 0)
        path = find_path(start, goal, board, avoid_snakes=False, avoid_hazards=False)
        assert path is not None
        assert _edges(path) == start.distance_to(goal)

    def test_snake_avoiding_path_detours_around_bodies(self) -> None:
        wall = make_snake("wall", _vertical_wall(2, 5))
        board = make_board([wall], width=5, height=5)
        path = find_path(Coord(0, 0), Coord(4, 0), board)
        assert path is not None
        assert _edges(path) == 12
        assert _edges(path) >= Coord(0, 0).distance_to(Coord(4, 0))
        assert not any(board.has_snake_body(cell) for cell in path[1:])

    def test_occupied_start_is_not_an_obstacle(self) -> None:
        you = make_snake("you", [(2, 2), (2, 1)])
        board = make_board([you], width=5, height=5)
        path = find_path(you.head, Coord(4, 4), board)
        assert path is not None and path[0] == you.head

    def test_occupied_goal_is_unreachable_when_avoiding_snakes(self) -> None:
        other = make_snake("other", [(4, 4), (4, 3)])
        board = make_board([other], width=5, height=5)
        assert find_path(Coord(0, 0), Coord(4, 4), board) is None
        assert find_path(Coord(0, 0), Coord(4, 4), board, avoid_snakes=False) is not None

    def test_enclosed_goal_returns_none(self) -> None:
        fence = make_snake("fence", [(3, 4), (3, 3), (4, 3)])
        board = make_board([fence], width=5, height=5)
        assert find_path(Coord(0, 0), Coord(4, 4), board) is None


class TestFindPathHazards:
    def test_detours_around_costly_hazard(self) -> None:
        board = make_board(width=3, height=2, hazards=[(1, 0)])
        path = find_path(Coord(0, 0), Coord(2, 0), board)
        assert path == [Coord(0, 0), Coord(0, 1), Coord(1, 1), Coord(2, 1), Coord(2, 0)]
        assert path_cost(path, board) == 4

    def test_crosses_hazard_when_not_avoiding(self) -> None:
        board = make_board(width=3, height=2, hazards=[(1, 0)])
        path = find_path(Coord(0, 0), Coord(2, 0), board, avoid_hazards=False)
        assert path == [Coord(0, 0), Coord(1, 0), Coord(2, 0)]

    def test_step_cost(self) -> None:
        board = make_board(hazards=[(1, 1)])
        assert step_cost(Coord(1, 1), board, avoid_hazards=True) == 5
        assert step_cost(Coord(1, 1), board, avoid_hazards=False) == 1
        assert step_cost(Coord(2, 2), board, avoid_hazards=True) == 1

    def test_path_never_shorter_than_manhattan_with_hazards(self) -> None:
        board = make_board(hazards=[(x, 5) for x in range(11)])
        start, goal = Coord(2, 0), Coord(7, 10)
        path = find_path(start, goal, board)
        assert path is not None
        assert _edges(path) >= start.distance_to(goal)


class TestFindPathBudget:
    def _detour_board(self) -> tuple[Coord, Coord, Board]:
        wall = make_snake("wall", _vertical_wall(15, 30))
        return Coord(14, 0), Coord(16, 0), make_board([wall], width=30, height=30)

    def test_expansion_ceiling_returns_none(self) -> None:
        board = make_board()
        assert find_path(Coord(0, 0), Coord(10, 10), board, max_expansions=1) is None

    def test_long_detour_found_without_deadline(self) -> None:
        start, goal, board = self._detour_board()
        path = find_path(start, goal, board)
        assert path is not None
        assert _edges(path) == 60

    def test_expired_deadline_returns_none(self) -> None:
        start, goal, board = self._detour_board()
        expired = Deadline(expires_at=0.0, clock=lambda: 1.0)
        assert find_path(start, goal, board, deadline=expired) is None

    @pytest.mark.parametrize("max_expansions", [1, 10, 100])
    def test_ceiling_never_raises(self, max_expansions: int) -> None:
        start, goal, board = self._detour_board()
        result = find_path(start, goal, board, max_expansions=max_expansions)
        assert result is None or result[-1] == goal
