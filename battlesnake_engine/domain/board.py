"""Immutable per-turn snapshot: snakes, board occupancy, and game metadata.

A snapshot is built once per inbound turn and never mutated. ``GameState.you``
is the same object as the matching entry of ``Board.snakes``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np

from battlesnake_engine.domain.coord import Coord

# Cell codes returned by Board.cell_grid()
EMPTY_CELL = 0
FOOD_CELL = 1
HAZARD_CELL = 2
BODY_CELL = 3
HEAD_CELL = 4


@dataclass(frozen=True, eq=False)
class Snake:
    """One snake on the board, body ordered head first."""

    id: str
    name: str
    health: int
    body: tuple[Coord, ...]
    length: int
    shout: str = ""
    squad: str = ""
    customizations: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.body:
            raise ValueError(f"snake {self.id!r} has an empty body")
        if self.length != len(self.body):
            raise ValueError(
                f"snake {self.id!r} length {self.length} != body length {len(self.body)}"
            )
        if not 0 <= self.health <= 100:
            raise ValueError(f"snake {self.id!r} health must be in [0, 100]")

    @property
    def head(self) -> Coord:
        return self.body[0]

    @property
    def tail(self) -> Coord:
        return self.body[-1]


@dataclass(frozen=True)
class Board:
    """Grid dimensions plus every positional element of one turn."""

    width: int
    height: int
    food: frozenset[Coord] = frozenset()
    hazards: frozenset[Coord] = frozenset()
    snakes: tuple[Snake, ...] = ()
    _occupancy: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("board dimensions must be >= 1")
        occupancy = np.zeros((self.width, self.height), dtype=bool)
        for snake in self.snakes:
            for segment in snake.body:
                if self.within_bounds(segment):
                    occupancy[segment.x, segment.y] = True
        occupancy.setflags(write=False)
        object.__setattr__(self, "_occupancy", occupancy)

    @property
    def area(self) -> int:
        return self.width * self.height

    def within_bounds(self, coord: Coord) -> bool:
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def has_food(self, coord: Coord) -> bool:
        return coord in self.food

    def has_hazard(self, coord: Coord) -> bool:
        return coord in self.hazards

    def has_snake_body(self, coord: Coord) -> bool:
        """True iff any snake segment (head and tail included) sits on *coord*."""
        if not self.within_bounds(coord):
            return False
        return bool(self._occupancy[coord.x, coord.y])

    def will_grow(self, snake: Snake) -> bool:
        """A snake grows this turn iff its head is currently on food."""
        return self.has_food(snake.head)

    def snake_by_id(self, snake_id: str) -> Snake | None:
        for snake in self.snakes:
            if snake.id == snake_id:
                return snake
        return None

    def others(self, snake: Snake) -> tuple[Snake, ...]:
        """Every snake except *snake*, compared by id."""
        return tuple(s for s in self.snakes if s.id != snake.id)

    def total_snake_length(self) -> int:
        return sum(snake.length for snake in self.snakes)

    def cell_grid(self) -> np.ndarray:
        """Return an (H, W) int array of cell codes, row index = y.

        Later layers overwrite earlier ones: food, hazards, bodies, heads.
        """
        grid = np.full((self.height, self.width), EMPTY_CELL, dtype=int)
        for coord in self.food:
            grid[coord.y, coord.x] = FOOD_CELL
        for coord in self.hazards:
            grid[coord.y, coord.x] = HAZARD_CELL
        for snake in self.snakes:
            for segment in snake.body[1:]:
                if self.within_bounds(segment):
                    grid[segment.y, segment.x] = BODY_CELL
        for snake in self.snakes:
            if self.within_bounds(snake.head):
                grid[snake.head.y, snake.head.x] = HEAD_CELL
        return grid


@dataclass(frozen=True)
class Ruleset:
    """Ruleset name plus raw settings with typed accessors."""

    name: str = "standard"
    version: str = ""
    settings: dict[str, Any] = field(default_factory=dict)

    def setting(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)

    @property
    def food_spawn_chance(self) -> int:
        return int(self.setting("foodSpawnChance", 15))

    @property
    def minimum_food(self) -> int:
        return int(self.setting("minimumFood", 1))

    @property
    def hazard_damage_per_turn(self) -> int:
        return int(self.setting("hazardDamagePerTurn", 0))


@dataclass(frozen=True)
class Game:
    """Game-level metadata: id, ruleset, and the move timeout in ms."""

    id: str
    ruleset: Ruleset
    timeout: int
    map: str = ""
    source: str = ""


@dataclass(frozen=True, eq=False)
class GameState:
    """Everything the engine sees for one turn."""

    game: Game
    turn: int
    board: Board
    you: Snake

    def __post_init__(self) -> None:
        if not any(snake is self.you for snake in self.board.snakes):
            raise ValueError("you must be one of the snakes on the board")
        if self.turn < 0:
            raise ValueError("turn must be >= 0")
