"""Legal move enumeration for a single snake."""

from __future__ import annotations

from battlesnake_engine.config.constants import FALLBACK_MOVE
from battlesnake_engine.domain.board import Board, Snake
from battlesnake_engine.domain.coord import DIRECTIONS, Coord, Direction

FALLBACK_DIRECTION = Direction(FALLBACK_MOVE)
"""Returned by every strategy when no legal move exists."""


def is_blocked(coord: Coord, board: Board) -> bool:
    """True iff moving onto *coord* this turn collides with a snake segment.

    A tail segment is passable when its owner will not grow this turn, since
    the tail vacates the cell as the owner moves.
    """
    if not board.has_snake_body(coord):
        return False
    for snake in board.snakes:
        last = len(snake.body) - 1
        vacates_tail = not board.will_grow(snake)
        for index, segment in enumerate(snake.body):
            if segment != coord:
                continue
            if index == last and vacates_tail:
                continue
            return True
    return False


def legal_moves(snake: Snake, board: Board) -> tuple[Direction, ...]:
    """Directions *snake* may take without dying this instant, in up/down/left/right order.

    An empty tuple means the snake has no legal escape.
    """
    moves: list[Direction] = []
    for direction in DIRECTIONS:
        destination = snake.head.move(direction)
        if not board.within_bounds(destination):
            continue
        if is_blocked(destination, board):
            continue
        moves.append(direction)
    return tuple(moves)


def legal_destinations(snake: Snake, board: Board) -> dict[Direction, Coord]:
    """Map each legal direction of *snake* to the cell it leads to."""
    return {direction: snake.head.move(direction) for direction in legal_moves(snake, board)}
