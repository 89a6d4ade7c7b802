"""Configuration dataclasses for the decision engine and its HTTP surface.

All frozen dataclasses that parameterise move scoring, search budgets, and
the server live here. Invalid values raise ``ValueError`` at construction.
"""

from __future__ import annotations

from dataclasses import dataclass

from battlesnake_engine.config.constants import (
    API_VERSION,
    MAX_PATH_EXPANSIONS,
    MOVE_TIMEOUT_BUFFER_MS,
    SNAKE_AUTHOR,
    SNAKE_COLOR,
    SNAKE_HEAD,
    SNAKE_TAIL,
    SNAKE_VERSION,
)

__all__ = [
    "DEFAULT_STRATEGIES",
    "LOG_LEVELS",
    "SafetyPenalties",
    "SearchConfig",
    "ServerConfig",
]

DEFAULT_STRATEGIES: tuple[str, ...] = ("aggressive", "food", "survival")
"""Strategy registration order used when none is configured."""

LOG_LEVELS: tuple[str, ...] = ("debug", "info", "warning", "error")
"""Accepted log level names."""


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SafetyPenalties:
    """Penalty preset applied on top of the reachable-cell count of a move.

    Threat penalties only apply to snakes at least as long as the mover.
    A head-on penalty replaces the proximity penalties for the same threat.
    """

    hazard: float = 0.0
    """Flat penalty for a hazard destination."""
    threat_distance: int = 0
    """Radius within which proximity penalties apply (0 disables them)."""
    proximity_flat: float = 0.0
    """Flat penalty per threat inside ``threat_distance``."""
    proximity_scale: float = 0.0
    """Penalty per step of closeness, ``(threat_distance - d + 1) * scale``."""
    approach: float = 0.0
    """Extra penalty when the move shortens the distance to a threat."""
    head_on_distance: int = 0
    """Radius within which a head-on collision is checked (0 disables it)."""
    head_on: float = 0.0
    """Penalty for a destination a threat can reach or flank next turn."""

    def __post_init__(self) -> None:
        if self.threat_distance < 0:
            raise ValueError("threat_distance must be >= 0")
        if self.head_on_distance < 0:
            raise ValueError("head_on_distance must be >= 0")
        for name in ("hazard", "proximity_flat", "proximity_scale", "approach", "head_on"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SearchConfig:
    """Budget knobs shared by pathfinder calls."""

    max_expansions: int = MAX_PATH_EXPANSIONS
    avoid_hazards: bool = True

    def __post_init__(self) -> None:
        if self.max_expansions < 1:
            raise ValueError("max_expansions must be >= 1")


# ---------------------------------------------------------------------------
# Server
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ServerConfig:
    """HTTP server settings and the snake's advertised appearance."""

    host: str = "0.0.0.0"
    port: int = 8000
    author: str = SNAKE_AUTHOR
    color: str = SNAKE_COLOR
    head: str = SNAKE_HEAD
    tail: str = SNAKE_TAIL
    version: str = SNAKE_VERSION
    api_version: str = API_VERSION
    strategies: tuple[str, ...] = DEFAULT_STRATEGIES
    log_level: str = "info"
    timeout_buffer_ms: int = MOVE_TIMEOUT_BUFFER_MS

    def __post_init__(self) -> None:
        if not 0 < self.port < 65536:
            raise ValueError("port must be in [1, 65535]")
        if not self.strategies:
            raise ValueError("strategies must not be empty")
        if len(set(self.strategies)) != len(self.strategies):
            raise ValueError("strategies must not contain duplicates")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        if self.timeout_buffer_ms < 0:
            raise ValueError("timeout_buffer_ms must be >= 0")

    def info(self) -> dict[str, str]:
        """Return the ``GET /`` response body."""
        return {
            "apiversion": self.api_version,
            "author": self.author,
            "color": self.color,
            "head": self.head,
            "tail": self.tail,
            "version": self.version,
        }
