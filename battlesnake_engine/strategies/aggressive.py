"""Aggressive strategy: corner shorter snakes while respecting longer ones."""

from __future__ import annotations

import logging

from battlesnake_engine.config.constants import (
    AGGRESSIVE_MIN_SAFE_SPACE,
    AGGRESSIVE_NEARBY_DISTANCE,
    AGGRESSIVE_THREAT_PENALTY,
    MIN_AGGRESSIVE_HEALTH,
)
from battlesnake_engine.config.types import SafetyPenalties, SearchConfig
from battlesnake_engine.domain.board import Board, GameState
from battlesnake_engine.domain.coord import DIRECTIONS, Coord, Direction
from battlesnake_engine.domain.moves import FALLBACK_DIRECTION, legal_moves
from battlesnake_engine.search.budget import Deadline, is_expired
from battlesnake_engine.strategies.base import Strategy, classify_opponents, count_threats
from battlesnake_engine.strategies.safety import best_move, safety_scores

logger = logging.getLogger(__name__)

AGGRESSIVE_PENALTIES = SafetyPenalties(
    threat_distance=AGGRESSIVE_NEARBY_DISTANCE,
    proximity_scale=AGGRESSIVE_THREAT_PENALTY,
)


def cornering_cells(target_head: Coord, board: Board) -> list[Coord]:
    """Free cells next to *target_head*, each followed by the free cell beyond it."""
    cells: list[Coord] = []
    for direction in DIRECTIONS:
        adjacent = target_head.move(direction)
        if not board.within_bounds(adjacent) or board.has_snake_body(adjacent):
            continue
        cells.append(adjacent)
        beyond = adjacent.move(direction)
        if board.within_bounds(beyond) and not board.has_snake_body(beyond):
            cells.append(beyond)
    return cells


class AggressiveStrategy(Strategy):
    name = "aggressive"

    def __init__(
        self,
        search: SearchConfig | None = None,
        penalties: SafetyPenalties = AGGRESSIVE_PENALTIES,
        min_safe_space: float = AGGRESSIVE_MIN_SAFE_SPACE,
    ) -> None:
        super().__init__(search)
        self.penalties = penalties
        self.min_safe_space = min_safe_space

    def score(self, state: GameState) -> float:
        total = len(state.board.snakes)
        assert total > 0
        threats, targets = count_threats(state)
        base = 0.5 * (0.5 if threats else 1.0)
        if targets and state.you.health >= MIN_AGGRESSIVE_HEALTH:
            base += 0.2
        return base + (total - threats) / total * 0.4

    def decide(self, state: GameState, deadline: Deadline | None = None) -> Direction:
        you, board = state.you, state.board
        moves = legal_moves(you, board)
        if not moves:
            return FALLBACK_DIRECTION

        threats, targets = classify_opponents(state, analyze_targets=True)
        scores = safety_scores(state, moves, self.penalties, threats)

        if you.health < MIN_AGGRESSIVE_HEALTH or threats:
            safest = best_move(scores)
            if scores[safest] >= self.min_safe_space:
                return safest

        for target in sorted(targets, key=lambda t: (t.distance, t.escape_routes)):
            if target.distance > AGGRESSIVE_NEARBY_DISTANCE:
                continue
            for cell in cornering_cells(target.head, board):
                if is_expired(deadline):
                    return best_move(scores)
                step = self.path_step(you.head, cell, board, avoid_snakes=False, deadline=deadline)
                if step in scores and scores[step] >= self.min_safe_space:
                    logger.debug("aggressive: cornering %s via %s", target.snake.id, cell)
                    return step

        return best_move(scores)
