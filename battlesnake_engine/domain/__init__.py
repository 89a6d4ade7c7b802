"""Domain layer: coordinates, the turn snapshot, and legal move enumeration."""

from battlesnake_engine.domain.board import Board, Game, GameState, Ruleset, Snake
from battlesnake_engine.domain.coord import DIRECTIONS, Coord, Direction, direction_between
from battlesnake_engine.domain.moves import (
    FALLBACK_DIRECTION,
    is_blocked,
    legal_destinations,
    legal_moves,
)

__all__ = [
    "DIRECTIONS",
    "FALLBACK_DIRECTION",
    "Board",
    "Coord",
    "Direction",
    "Game",
    "GameState",
    "Ruleset",
    "Snake",
    "direction_between",
    "is_blocked",
    "legal_destinations",
    "legal_moves",
]
