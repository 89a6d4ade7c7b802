"""Board coordinates and move directions.

Coordinates are Cartesian: ``up`` increases y, ``(0, 0)`` is bottom-left.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    """One of the four move tokens, iterated in up/down/left/right order."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def __str__(self) -> str:
        return self.value

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

DIRECTIONS: tuple[Direction, ...] = tuple(Direction)


@dataclass(frozen=True, order=True)
class Coord:
    """An integer board cell. Boundedness is checked by the board."""

    x: int
    y: int

    def move(self, direction: Direction) -> Coord:
        dx, dy = direction.delta
        return Coord(self.x + dx, self.y + dy)

    def distance_to(self, other: Coord) -> int:
        """Manhattan distance to *other*."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def neighbors(self) -> tuple[Coord, ...]:
        """The four adjacent cells in direction order, bounds unchecked."""
        return tuple(self.move(direction) for direction in DIRECTIONS)


def direction_between(current: Coord, nxt: Coord) -> Direction:
    """Direction of the step from *current* to an adjacent *nxt*.

    x is compared first, so a diagonal step resolves horizontally.
    """
    if nxt.x > current.x:
        return Direction.RIGHT
    if nxt.x < current.x:
        return Direction.LEFT
    if nxt.y > current.y:
        return Direction.UP
    return Direction.DOWN
