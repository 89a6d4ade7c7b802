"""Flood-fill space analysis: how many cells can be reached from a point."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from battlesnake_engine.domain.board import Board
from battlesnake_engine.domain.coord import Coord, Direction

__all__ = ["count_reachable", "reachable_by_move"]


def count_reachable(start: Coord, board: Board, max_depth: int = 0) -> int:
    """Count distinct cells reachable from *start*, the start included.

    Expansion only enters in-bounds cells without a snake segment; food and
    hazards do not block. The start is counted even when occupied, so the
    space around a snake head can be measured. *max_depth* caps the number of
    BFS layers expanded; 0 means unlimited.
    """
    if max_depth < 0:
        raise ValueError("max_depth must be >= 0")
    visited: set[Coord] = {start}
    frontier: deque[Coord] = deque([start])
    depth = 0
    while frontier and (max_depth == 0 or depth < max_depth):
        for _ in range(len(frontier)):
            current = frontier.popleft()
            for neighbor in current.neighbors():
                if neighbor in visited:
                    continue
                if not board.within_bounds(neighbor) or board.has_snake_body(neighbor):
                    continue
                visited.add(neighbor)
                frontier.append(neighbor)
        depth += 1
    return len(visited)


def reachable_by_move(
    head: Coord, directions: Iterable[Direction], board: Board, max_depth: int = 0
) -> dict[Direction, int]:
    """Reachable-cell count of each one-step destination from *head*."""
    return {
        direction: count_reachable(head.move(direction), board, max_depth)
        for direction in directions
    }
