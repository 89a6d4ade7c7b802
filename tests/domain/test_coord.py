"""Tests for battlesnake_engine.domain.coord."""

from __future__ import annotations

from battlesnake_engine.domain.coord import DIRECTIONS, Coord, Direction, direction_between


class TestDirection:
    def test_iteration_order(self) -> None:
        assert [d.value for d in DIRECTIONS] == ["up", "down", "left", "right"]

    def test_is_a_string(self) -> None:
        assert Direction.UP == "up"
        assert str(Direction.LEFT) == "left"

    def test_up_increases_y(self) -> None:
        assert Direction.UP.delta == (0, 1)
        assert Direction.DOWN.delta == (0, -1)


class TestCoord:
    def test_move(self) -> None:
        origin = Coord(3, 3)
        assert origin.move(Direction.UP) == Coord(3, 4)
        assert origin.move(Direction.DOWN) == Coord(3, 2)
        assert origin.move(Direction.LEFT) == Coord(2, 3)
        assert origin.move(Direction.RIGHT) == Coord(4, 3)

    def test_manhattan_distance(self) -> None:
        assert Coord(0, 0).distance_to(Coord(3, 4)) == 7
        assert Coord(2, 5).distance_to(Coord(2, 5)) == 0
        assert Coord(-1, 2).distance_to(Coord(1, -2)) == 6

    def test_neighbors_follow_direction_order(self) -> None:
        assert Coord(1, 1).neighbors() == (Coord(1, 2), Coord(1, 0), Coord(0, 1), Coord(2, 1))

    def test_hashable_and_ordered(self) -> None:
        assert len({Coord(1, 2), Coord(1, 2), Coord(2, 1)}) == 2
        assert sorted([Coord(2, 0), Coord(1, 5), Coord(1, 2)]) == [
            Coord(1, 2),
            Coord(1, 5),
            Coord(2, 0),
        ]


class TestDirectionBetween:
    def test_adjacent_steps(self) -> None:
        here = Coord(4, 4)
        for direction in DIRECTIONS:
            assert direction_between(here, here.move(direction)) is direction

    def test_x_is_compared_first(self) -> None:
        assert direction_between(Coord(0, 0), Coord(1, 1)) is Direction.RIGHT
        assert direction_between(Coord(2, 0), Coord(1, -1)) is Direction.LEFT
