"""Tests for battlesnake_engine.strategies.aggressive."""

from __future__ import annotations

import pytest

from battlesnake_engine.domain.board import GameState
from battlesnake_engine.domain.coord import Coord, Direction
from battlesnake_engine.domain.moves import legal_moves
from battlesnake_engine.search.budget import Deadline
from battlesnake_engine.strategies.aggressive import AggressiveStrategy, cornering_cells
from tests.builders import make_board, make_snake, make_state


def _hunter_state(health: int = 100) -> GameState:
    you = make_snake("you", [(3, 5), (2, 5), (1, 5), (0, 5), (0, 4)], health=health)
    prey = make_snake("prey", [(5, 5), (6, 5)])
    return make_state(you, [prey])


def _cornering_state(prey_body: list[tuple[int, int]], health: int = 100) -> GameState:
    you = make_snake("you", [(5, 5), (4, 5), (3, 5)], health=health)
    return make_state(you, [make_snake("prey", prey_body)])


class TestAggressiveScore:
    def test_alone(self) -> None:
        you = make_snake("you", [(5, 5), (5, 4), (5, 3)])
        assert AggressiveStrategy().score(make_state(you)) == pytest.approx(0.9)

    def test_healthy_with_targets(self) -> None:
        assert AggressiveStrategy().score(_hunter_state()) == pytest.approx(1.1)

    def test_targets_ignored_when_weak(self) -> None:
        assert AggressiveStrategy().score(_hunter_state(health=40)) == pytest.approx(0.9)

    def test_threats_halve_base(self) -> None:
        you = make_snake("you", [(5, 5), (5, 4)])
        rival = make_snake("rival", [(9, 9), (9, 8), (9, 7)])
        assert AggressiveStrategy().score(make_state(you, [rival])) == pytest.approx(0.45)


class TestCorneringCells:
    def test_neighbors_then_cells_beyond(self) -> None:
        state = _hunter_state()
        cells = cornering_cells(Coord(5, 5), state.board)
        assert cells == [Coord(5, 6), Coord(5, 7), Coord(5, 4), Coord(5, 3), Coord(4, 5)]

    def test_board_edges_are_skipped(self) -> None:
        board = make_board(width=3, height=3)
        assert cornering_cells(Coord(0, 0), board) == [
            Coord(0, 1),
            Coord(0, 2),
            Coord(1, 0),
            Coord(2, 0),
        ]


class TestAggressiveDecide:
    def test_corners_nearby_shorter_snake(self) -> None:
        # The cell above the prey head is one step right of ours
        state = _cornering_state([(6, 4), (6, 3)])
        assert AggressiveStrategy().decide(state) is Direction.RIGHT

    def test_distant_target_is_not_pursued(self) -> None:
        state = _cornering_state([(7, 4), (7, 3)])
        # Open board: every legal move reaches the same space, first one wins
        assert AggressiveStrategy().decide(state) is Direction.UP

    def test_weak_snake_does_not_corner(self) -> None:
        state = _cornering_state([(6, 4), (6, 3)], health=40)
        assert AggressiveStrategy().decide(state) is Direction.UP

    def test_plays_safe_when_threatened(self) -> None:
        you = make_snake("you", [(5, 5), (5, 4), (5, 3)])
        rival = make_snake("rival", [(7, 5), (7, 4), (7, 3), (7, 2)])
        state = make_state(you, [rival])
        move = AggressiveStrategy().decide(state)
        assert move is Direction.UP

    def test_expired_deadline_still_returns_a_legal_move(self) -> None:
        state = _hunter_state()
        expired = Deadline(expires_at=0.0, clock=lambda: 1.0)
        move = AggressiveStrategy().decide(state, expired)
        assert move in legal_moves(state.you, state.board)
