"""Domination strategy: hunt clearly shorter snakes, otherwise grow.

Hunting needs health and a length lead. Food is scored by distance, how
contested it is, and whether a threat gets there first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from battlesnake_engine.config.constants import (
    DOMINATION_APPROACH_PENALTY,
    DOMINATION_BASE_SCORE,
    DOMINATION_CRITICAL_HEALTH,
    DOMINATION_HEAD_ON_PENALTY,
    DOMINATION_LOW_HEALTH,
    DOMINATION_MIN_SAFE_SPACE,
    DOMINATION_PROXIMITY_PENALTY,
    FOOD_COMPETITION_WEIGHT,
    FOOD_DANGER_SKIP_LEVEL,
    FOOD_DISTANCE_WEIGHT,
    FOOD_SAFETY_WEIGHT,
    FOOD_SEEKING_HEALTH,
    HEAD_COLLISION_DISTANCE,
    HUNTING_HEALTH_THRESHOLD,
    LENGTH_ADVANTAGE_THRESHOLD,
    NEARBY_FOOD_DISTANCE,
    SAFE_DISTANCE_FROM_LARGER_SNAKE,
)
from battlesnake_engine.config.types import SafetyPenalties, SearchConfig
from battlesnake_engine.domain.board import GameState
from battlesnake_engine.domain.coord import DIRECTIONS, Coord, Direction
from battlesnake_engine.domain.moves import FALLBACK_DIRECTION, legal_moves
from battlesnake_engine.search.budget import Deadline, is_expired
from battlesnake_engine.strategies.base import (
    Opponent,
    Strategy,
    classify_opponents,
    count_threats,
    nearby_food_count,
)
from battlesnake_engine.strategies.safety import best_move, safety_scores

logger = logging.getLogger(__name__)

DOMINATION_PENALTIES = SafetyPenalties(
    threat_distance=SAFE_DISTANCE_FROM_LARGER_SNAKE,
    proximity_scale=DOMINATION_PROXIMITY_PENALTY,
    approach=DOMINATION_APPROACH_PENALTY,
    head_on_distance=HEAD_COLLISION_DISTANCE,
    head_on=DOMINATION_HEAD_ON_PENALTY,
)


@dataclass(frozen=True)
class FoodTarget:
    """One food item with its blended desirability score."""

    food: Coord
    distance: int
    danger: int
    score: float


def score_food(state: GameState, threats: list[Opponent]) -> list[FoodTarget]:
    """Score every food, best first.

    A food is contested by each threat at least as close to it as we are.
    """
    board, head = state.board, state.you.head
    max_distance = board.width + board.height
    targets: list[FoodTarget] = []
    for food in board.food:
        distance = head.distance_to(food)
        danger = sum(1 for t in threats if t.head.distance_to(food) <= distance)
        distance_score = 1 - distance / max_distance
        safety_score = 1.0 if danger == 0 else 1 / (1 + danger)
        competition_score = 1 / (1 + danger)
        total = (
            distance_score * FOOD_DISTANCE_WEIGHT
            + safety_score * FOOD_SAFETY_WEIGHT
            + competition_score * FOOD_COMPETITION_WEIGHT
        )
        targets.append(FoodTarget(food, distance, danger, total))
    targets.sort(key=lambda t: (-t.score, t.distance, t.food.x, t.food.y))
    return targets


class DominationStrategy(Strategy):
    name = "domination"

    def __init__(
        self,
        search: SearchConfig | None = None,
        penalties: SafetyPenalties = DOMINATION_PENALTIES,
        min_safe_space: float = DOMINATION_MIN_SAFE_SPACE,
    ) -> None:
        super().__init__(search)
        self.penalties = penalties
        self.min_safe_space = min_safe_space

    def score(self, state: GameState) -> float:
        you = state.you
        threats, targets = count_threats(state)
        score = DOMINATION_BASE_SCORE
        if you.health < DOMINATION_LOW_HEALTH:
            score -= 0.2
        if threats == 0:
            score += 0.2
        score += min(0.3, targets * 0.1)
        score -= min(0.4, threats * 0.2)
        score += min(0.3, nearby_food_count(state, NEARBY_FOOD_DISTANCE) * 0.1)
        return score

    def decide(self, state: GameState, deadline: Deadline | None = None) -> Direction:
        you, board = state.you, state.board
        moves = legal_moves(you, board)
        if not moves:
            return FALLBACK_DIRECTION

        threats, targets = classify_opponents(state, analyze_targets=True)
        scores = safety_scores(state, moves, self.penalties, threats)

        if you.health >= HUNTING_HEALTH_THRESHOLD and targets:
            hunt = self._hunt(state, targets, scores, deadline)
            if hunt is not None:
                return hunt

        desperate = you.health <= DOMINATION_CRITICAL_HEALTH
        if you.health <= DOMINATION_LOW_HEALTH or self._should_seek_food(state):
            food_move = self._food_move(state, threats, scores, desperate, deadline)
            if food_move is not None:
                return food_move

        return best_move(scores)

    def _hunt(
        self,
        state: GameState,
        targets: list[Opponent],
        scores: dict[Direction, float],
        deadline: Deadline | None,
    ) -> Direction | None:
        # Fewest escape routes first, then closest, then least room
        ordered = sorted(
            targets, key=lambda t: (t.escape_routes * 10 + t.distance, t.space_around)
        )
        for target in ordered:
            if target.advantage < LENGTH_ADVANTAGE_THRESHOLD:
                continue
            for move in self._hunting_moves(state, target, deadline):
                if move in scores and scores[move] >= self.min_safe_space:
                    logger.debug("domination: hunting %s with %s", target.snake.id, move)
                    return move
            if is_expired(deadline):
                break
        return None

    def _hunting_moves(
        self, state: GameState, target: Opponent, deadline: Deadline | None
    ) -> list[Direction]:
        """First steps toward the cells around the target head, deduplicated in order."""
        head, board = state.you.head, state.board
        moves: list[Direction] = []
        for direction in DIRECTIONS:
            escape = target.head.move(direction)
            if not board.within_bounds(escape):
                continue
            step = self.path_step(head, escape, board, deadline=deadline)
            if step is not None and step not in moves:
                moves.append(step)
        if target.advantage >= LENGTH_ADVANTAGE_THRESHOLD + 1:
            # The head itself is occupied, so only a snake-blind path can end on it
            step = self.path_step(head, target.head, board, avoid_snakes=False, deadline=deadline)
            if step is not None and step not in moves:
                moves.append(step)
        return moves

    def _should_seek_food(self, state: GameState) -> bool:
        you = state.you
        if you.health < FOOD_SEEKING_HEALTH:
            return True
        longest_other = max((s.length for s in state.board.others(you)), default=0)
        if you.length < longest_other + LENGTH_ADVANTAGE_THRESHOLD:
            return True
        return nearby_food_count(state, NEARBY_FOOD_DISTANCE) > 0

    def _food_move(
        self,
        state: GameState,
        threats: list[Opponent],
        scores: dict[Direction, float],
        desperate: bool,
        deadline: Deadline | None,
    ) -> Direction | None:
        head, board = state.you.head, state.board
        for target in score_food(state, threats):
            if not desperate and target.danger >= FOOD_DANGER_SKIP_LEVEL:
                continue
            if is_expired(deadline):
                return None
            step = self.path_step(head, target.food, board, deadline=deadline)
            if step is None or step not in scores:
                continue
            # Higher-scoring food tolerates a tighter space
            min_safety = self.min_safe_space * (1 - target.score * 0.3)
            if desperate or scores[step] >= min_safety:
                logger.debug("domination: food at %s (score %.3f)", target.food, target.score)
                return step
        return None
