"""Strategy interface and the opponent analysis shared by every strategy."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from battlesnake_engine.config.types import SearchConfig
from battlesnake_engine.domain.board import Board, GameState, Snake
from battlesnake_engine.domain.coord import Coord, Direction, direction_between
from battlesnake_engine.domain.moves import legal_moves
from battlesnake_engine.search.budget import Deadline
from battlesnake_engine.search.pathfinding import find_path
from battlesnake_engine.search.reachability import count_reachable


class Strategy(ABC):
    """A self-scoring move policy.

    The selector only calls :meth:`score`; the winning strategy's
    :meth:`decide` produces the move. Implementations must not mutate the
    state they are handed.
    """

    name: ClassVar[str]

    def __init__(self, search: SearchConfig | None = None) -> None:
        self.search = search or SearchConfig()

    @abstractmethod
    def score(self, state: GameState) -> float:
        """How well this strategy fits *state*; higher is better."""

    @abstractmethod
    def decide(self, state: GameState, deadline: Deadline | None = None) -> Direction:
        """Return the move for *state*, falling back to ``up`` when none is legal."""

    def path_step(
        self,
        start: Coord,
        goal: Coord,
        board: Board,
        avoid_snakes: bool = True,
        deadline: Deadline | None = None,
    ) -> Direction | None:
        """First direction of the cheapest path from *start* to *goal*, if any."""
        path = find_path(
            start,
            goal,
            board,
            avoid_snakes=avoid_snakes,
            avoid_hazards=self.search.avoid_hazards,
            max_expansions=self.search.max_expansions,
            deadline=deadline,
        )
        if path is None or len(path) < 2:
            return None
        return direction_between(start, path[1])

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


@dataclass(frozen=True)
class Opponent:
    """Another snake as seen from our head."""

    snake: Snake
    distance: int
    advantage: int
    """Our length minus theirs."""
    escape_routes: int = 0
    space_around: int = 0

    @property
    def head(self) -> Coord:
        return self.snake.head


def classify_opponents(
    state: GameState, analyze_targets: bool = False
) -> tuple[list[Opponent], list[Opponent]]:
    """Split the other snakes into threats (length >= ours) and targets.

    With *analyze_targets*, each target also records its legal move count and
    the space reachable from its head.
    """
    you, board = state.you, state.board
    threats: list[Opponent] = []
    targets: list[Opponent] = []
    for snake in board.others(you):
        distance = you.head.distance_to(snake.head)
        advantage = you.length - snake.length
        if snake.length >= you.length:
            threats.append(Opponent(snake, distance, advantage))
        elif analyze_targets:
            targets.append(
                Opponent(
                    snake,
                    distance,
                    advantage,
                    escape_routes=len(legal_moves(snake, board)),
                    space_around=count_reachable(snake.head, board),
                )
            )
        else:
            targets.append(Opponent(snake, distance, advantage))
    return threats, targets


def count_threats(state: GameState) -> tuple[int, int]:
    """Return ``(threats, targets)`` counts without any board analysis."""
    threats = sum(1 for s in state.board.others(state.you) if s.length >= state.you.length)
    return threats, len(state.board.snakes) - 1 - threats


def nearby_food_count(state: GameState, radius: int) -> int:
    head = state.you.head
    return sum(1 for food in state.board.food if head.distance_to(food) <= radius)
