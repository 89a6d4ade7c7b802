"""Survival strategy: maximize room to maneuver, keep away from bigger heads."""

from __future__ import annotations

from battlesnake_engine.config.constants import (
    SURVIVAL_BASE_SCORE,
    SURVIVAL_CROWDEDNESS_WEIGHT,
    SURVIVAL_HAZARD_PENALTY,
    SURVIVAL_HEAD_PENALTY,
    SURVIVAL_HEAD_PROXIMITY,
    SURVIVAL_TURN_BONUS_CAP,
    SURVIVAL_TURN_DIVISOR,
)
from battlesnake_engine.config.types import SafetyPenalties, SearchConfig
from battlesnake_engine.domain.board import GameState
from battlesnake_engine.domain.coord import Direction
from battlesnake_engine.domain.moves import FALLBACK_DIRECTION, legal_moves
from battlesnake_engine.search.budget import Deadline
from battlesnake_engine.strategies.base import Strategy, classify_opponents
from battlesnake_engine.strategies.safety import best_move, safety_scores

SURVIVAL_PENALTIES = SafetyPenalties(
    hazard=SURVIVAL_HAZARD_PENALTY,
    threat_distance=SURVIVAL_HEAD_PROXIMITY,
    proximity_flat=SURVIVAL_HEAD_PENALTY,
)


class SurvivalStrategy(Strategy):
    name = "survival"

    def __init__(
        self, search: SearchConfig | None = None, penalties: SafetyPenalties = SURVIVAL_PENALTIES
    ) -> None:
        super().__init__(search)
        self.penalties = penalties

    def score(self, state: GameState) -> float:
        """Grows as the board fills up and as the game goes on."""
        board = state.board
        assert board.area > 0
        crowdedness = board.total_snake_length() / board.area
        turn_bonus = min(SURVIVAL_TURN_BONUS_CAP, state.turn / SURVIVAL_TURN_DIVISOR)
        return SURVIVAL_BASE_SCORE + crowdedness * SURVIVAL_CROWDEDNESS_WEIGHT + turn_bonus

    def decide(self, state: GameState, deadline: Deadline | None = None) -> Direction:
        moves = legal_moves(state.you, state.board)
        if not moves:
            return FALLBACK_DIRECTION
        threats, _ = classify_opponents(state)
        return best_move(safety_scores(state, moves, self.penalties, threats))
