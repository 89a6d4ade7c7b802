"""Food strategy: path to the safest reachable food when hungry."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from battlesnake_engine.config.constants import (
    EARLY_GAME_BONUS,
    EARLY_GAME_TURNS,
    FOOD_APPROACH_PENALTY,
    FOOD_BETWEEN_SLACK,
    FOOD_DANGER_DISTANCE_WEIGHT,
    FOOD_HAZARD_PENALTY,
    FOOD_HEAD_ON_PENALTY,
    FOOD_HEAD_THREAT_PENALTY,
    FOOD_MAX_DANGER_LEVEL,
    FOOD_MAX_DANGER_PENALTY,
    FOOD_NEAR_THREAT_PENALTY,
    FOOD_PROXIMITY_PENALTY,
    FOOD_STRATEGY_WEIGHT,
    HEAD_COLLISION_DISTANCE,
    LOW_HEALTH_THRESHOLD,
    SAFE_DISTANCE_FROM_LARGER_SNAKE,
)
from battlesnake_engine.config.types import SafetyPenalties, SearchConfig
from battlesnake_engine.domain.board import GameState
from battlesnake_engine.domain.coord import Coord, Direction
from battlesnake_engine.domain.moves import FALLBACK_DIRECTION, legal_moves
from battlesnake_engine.search.budget import Deadline, is_expired
from battlesnake_engine.strategies.base import Opponent, Strategy, classify_opponents
from battlesnake_engine.strategies.safety import best_move, safety_scores

logger = logging.getLogger(__name__)

FOOD_PENALTIES = SafetyPenalties(
    hazard=FOOD_HAZARD_PENALTY,
    threat_distance=SAFE_DISTANCE_FROM_LARGER_SNAKE,
    proximity_scale=FOOD_PROXIMITY_PENALTY,
    approach=FOOD_APPROACH_PENALTY,
    head_on_distance=HEAD_COLLISION_DISTANCE,
    head_on=FOOD_HEAD_ON_PENALTY,
)


@dataclass(frozen=True)
class FoodCandidate:
    """A food item ranked by distance and accumulated danger."""

    food: Coord
    distance: int
    danger: int

    @property
    def rank(self) -> tuple[int, int, int, int]:
        cost = self.distance + FOOD_DANGER_DISTANCE_WEIGHT * self.danger
        return (cost, self.distance, self.food.x, self.food.y)


def food_danger(head: Coord, food: Coord, threats: list[Opponent]) -> int:
    """Count threats closer to *food* than *head*, plus threats roughly in the way."""
    distance = head.distance_to(food)
    danger = 0
    for threat in threats:
        threat_to_food = threat.head.distance_to(food)
        if threat_to_food < distance:
            danger += 1
        if threat.distance + threat_to_food <= distance + FOOD_BETWEEN_SLACK:
            danger += 1
    return danger


def rank_food(state: GameState, threats: list[Opponent]) -> list[FoodCandidate]:
    """Acceptable food ordered best first; food above the danger cap is dropped."""
    head = state.you.head
    candidates = [
        FoodCandidate(food, head.distance_to(food), food_danger(head, food, threats))
        for food in state.board.food
    ]
    return sorted(
        (c for c in candidates if c.danger <= FOOD_MAX_DANGER_LEVEL), key=lambda c: c.rank
    )


class FoodStrategy(Strategy):
    name = "food"

    def __init__(
        self,
        search: SearchConfig | None = None,
        penalties: SafetyPenalties = FOOD_PENALTIES,
        low_health: int = LOW_HEALTH_THRESHOLD,
    ) -> None:
        super().__init__(search)
        self.penalties = penalties
        self.low_health = low_health

    def score(self, state: GameState) -> float:
        you = state.you
        hunger = (100 - you.health) / 100 * FOOD_STRATEGY_WEIGHT
        early = EARLY_GAME_BONUS * max(0.0, (EARLY_GAME_TURNS - state.turn) / EARLY_GAME_TURNS)
        danger = 0.0
        for snake in state.board.others(you):
            if snake.length < you.length:
                continue
            distance = you.head.distance_to(snake.head)
            if distance <= HEAD_COLLISION_DISTANCE:
                danger += FOOD_HEAD_THREAT_PENALTY
            elif distance <= SAFE_DISTANCE_FROM_LARGER_SNAKE:
                danger += FOOD_NEAR_THREAT_PENALTY
        score = hunger + early - min(FOOD_MAX_DANGER_PENALTY, danger)
        logger.debug("food strategy score %.3f", score)
        return score

    def decide(self, state: GameState, deadline: Deadline | None = None) -> Direction:
        you, board = state.you, state.board
        moves = legal_moves(you, board)
        if not moves:
            return FALLBACK_DIRECTION

        threats, _ = classify_opponents(state)
        if you.health <= self.low_health:
            for candidate in rank_food(state, threats):
                if is_expired(deadline):
                    break
                step = self.path_step(you.head, candidate.food, board, deadline=deadline)
                if step in moves:
                    logger.debug(
                        "food: heading %s to %s (distance %d, danger %d)",
                        step,
                        candidate.food,
                        candidate.distance,
                        candidate.danger,
                    )
                    return step

        return best_move(safety_scores(state, moves, self.penalties, threats))
