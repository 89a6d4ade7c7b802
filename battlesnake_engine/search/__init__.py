"""Search layer: A* pathfinding, flood-fill reachability, and deadlines."""

from battlesnake_engine.search.budget import Deadline, is_expired
from battlesnake_engine.search.pathfinding import direction_between, find_path, path_cost
from battlesnake_engine.search.reachability import count_reachable, reachable_by_move

__all__ = [
    "Deadline",
    "count_reachable",
    "direction_between",
    "find_path",
    "is_expired",
    "path_cost",
    "reachable_by_move",
]
