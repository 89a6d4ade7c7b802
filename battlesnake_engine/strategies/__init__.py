"""Strategy layer: the four move policies and the selector that picks one."""

from battlesnake_engine.strategies.aggressive import AggressiveStrategy, cornering_cells
from battlesnake_engine.strategies.base import Opponent, Strategy, classify_opponents
from battlesnake_engine.strategies.domination import DominationStrategy, score_food
from battlesnake_engine.strategies.food import FoodStrategy, food_danger, rank_food
from battlesnake_engine.strategies.safety import best_move, safety_scores
from battlesnake_engine.strategies.selector import (
    STRATEGY_FACTORIES,
    MoveDecision,
    StrategySelector,
    build_strategies,
)
from battlesnake_engine.strategies.survival import SurvivalStrategy

__all__ = [
    "STRATEGY_FACTORIES",
    "AggressiveStrategy",
    "DominationStrategy",
    "FoodStrategy",
    "MoveDecision",
    "Opponent",
    "Strategy",
    "StrategySelector",
    "SurvivalStrategy",
    "best_move",
    "build_strategies",
    "classify_opponents",
    "cornering_cells",
    "food_danger",
    "rank_food",
    "safety_scores",
    "score_food",
]
