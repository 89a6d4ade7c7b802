"""Configuration layer: constants and typed config dataclasses."""

from battlesnake_engine.config.constants import (
    API_VERSION,
    DEFAULT_TIMEOUT_MS,
    FALLBACK_MOVE,
    HAZARD_STEP_COST,
    LOW_HEALTH_THRESHOLD,
    MAX_PATH_EXPANSIONS,
    MOVE_TIMEOUT_BUFFER_MS,
)
from battlesnake_engine.config.types import (
    DEFAULT_STRATEGIES,
    LOG_LEVELS,
    SafetyPenalties,
    SearchConfig,
    ServerConfig,
)

__all__ = [
    "API_VERSION",
    "DEFAULT_STRATEGIES",
    "DEFAULT_TIMEOUT_MS",
    "FALLBACK_MOVE",
    "HAZARD_STEP_COST",
    "LOG_LEVELS",
    "LOW_HEALTH_THRESHOLD",
    "MAX_PATH_EXPANSIONS",
    "MOVE_TIMEOUT_BUFFER_MS",
    "SafetyPenalties",
    "SearchConfig",
    "ServerConfig",
]
