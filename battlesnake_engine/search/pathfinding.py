"""A* shortest-path search over board cells.

Edge costs are 1, or ``HAZARD_STEP_COST`` for hazard cells when hazards are
avoided. Snake bodies are impassable when snakes are avoided. Manhattan
distance is admissible and consistent for this cost model, so the first time
the goal is popped its path is optimal.

Frontier ties break on ``(f, h, x, y)``: lowest estimated total, then nearest
to the goal, then lowest coordinate.
"""

from __future__ import annotations

import heapq
import logging

from battlesnake_engine.config.constants import (
    HAZARD_STEP_COST,
    MAX_PATH_EXPANSIONS,
    NORMAL_STEP_COST,
)
from battlesnake_engine.domain.board import Board
from battlesnake_engine.domain.coord import Coord, direction_between
from battlesnake_engine.search.budget import Deadline, is_expired

__all__ = ["direction_between", "find_path", "path_cost", "step_cost"]

logger = logging.getLogger(__name__)

# Deadline checks are amortized over this many expansions
_DEADLINE_CHECK_INTERVAL = 64


def step_cost(coord: Coord, board: Board, avoid_hazards: bool) -> int:
    """Cost of entering *coord*."""
    if avoid_hazards and board.has_hazard(coord):
        return HAZARD_STEP_COST
    return NORMAL_STEP_COST


def path_cost(path: list[Coord], board: Board, avoid_hazards: bool = True) -> int:
    """Total cost of *path*, excluding its start cell."""
    return sum(step_cost(coord, board, avoid_hazards) for coord in path[1:])


def find_path(
    start: Coord,
    goal: Coord,
    board: Board,
    avoid_snakes: bool = True,
    avoid_hazards: bool = True,
    max_expansions: int = MAX_PATH_EXPANSIONS,
    deadline: Deadline | None = None,
) -> list[Coord] | None:
    """Return the cheapest path from *start* to *goal*, both inclusive.

    Returns ``[start]`` when start equals goal and ``None`` when the goal is
    unreachable under the obstacle policy, or when the expansion ceiling or
    *deadline* is exhausted first. The start cell itself is never treated as
    an obstacle.
    """
    if start == goal:
        return [start]
    if not board.within_bounds(goal):
        return None

    g_score: dict[Coord, int] = {start: 0}
    came_from: dict[Coord, Coord] = {}
    closed: set[Coord] = set()
    h0 = start.distance_to(goal)
    frontier: list[tuple[int, int, int, int, Coord]] = [(h0, h0, start.x, start.y, start)]
    expansions = 0

    while frontier:
        _, _, _, _, current = heapq.heappop(frontier)
        if current in closed:
            continue
        if current == goal:
            return _reconstruct(came_from, current)
        closed.add(current)

        expansions += 1
        if expansions > max_expansions:
            logger.warning(
                "pathfinder expansion ceiling %d hit searching %s -> %s",
                max_expansions,
                start,
                goal,
            )
            return None
        if expansions % _DEADLINE_CHECK_INTERVAL == 0 and is_expired(deadline):
            logger.warning("pathfinder deadline expired searching %s -> %s", start, goal)
            return None

        for neighbor in current.neighbors():
            if neighbor in closed or not board.within_bounds(neighbor):
                continue
            if avoid_snakes and board.has_snake_body(neighbor):
                continue
            tentative = g_score[current] + step_cost(neighbor, board, avoid_hazards)
            if tentative >= g_score.get(neighbor, tentative + 1):
                continue
            came_from[neighbor] = current
            g_score[neighbor] = tentative
            h = neighbor.distance_to(goal)
            heapq.heappush(frontier, (tentative + h, h, neighbor.x, neighbor.y, neighbor))

    return None


def _reconstruct(came_from: dict[Coord, Coord], current: Coord) -> list[Coord]:
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path
