"""Centralized decision-engine constants.

Thresholds and weights that the strategies treat as part of their contract
are defined here. Consuming modules should import from this module rather
than defining their own inline literals.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Appearance and API metadata
# ---------------------------------------------------------------------------

API_VERSION = "1"
"""Battlesnake API version reported by ``GET /``."""

SNAKE_AUTHOR = "battlesnake-engine"
"""Author string reported by ``GET /``."""

SNAKE_COLOR = "#5ae645"
"""Body colour reported by ``GET /``."""

SNAKE_HEAD = "rbc-bowler"
"""Head customization reported by ``GET /``."""

SNAKE_TAIL = "replit-notmark"
"""Tail customization reported by ``GET /``."""

SNAKE_VERSION = "1.0.0"
"""Snake version string reported by ``GET /``."""

# ---------------------------------------------------------------------------
# Timing and search budgets
# ---------------------------------------------------------------------------

DEFAULT_TIMEOUT_MS = 500
"""Move timeout assumed when the game payload omits one."""

MOVE_TIMEOUT_BUFFER_MS = 50
"""Milliseconds of the move timeout reserved for transport."""

MAX_PATH_EXPANSIONS = 4_096
"""Node-expansion ceiling for a single pathfinder call."""

HAZARD_STEP_COST = 5
"""Pathfinder edge cost for entering a hazard cell when hazards are avoided."""

NORMAL_STEP_COST = 1
"""Pathfinder edge cost for entering any other cell."""

FALLBACK_MOVE = "up"
"""Move returned when no legal move exists."""

MOVE_LOG_FLUSH_THRESHOLD = 1_024
"""Flush move-log rows to Parquet once this in-memory row count is reached."""

# ---------------------------------------------------------------------------
# Food strategy
# ---------------------------------------------------------------------------

FOOD_STRATEGY_WEIGHT = 2.0
"""Multiplier applied to the hunger term of the food selector score."""

LOW_HEALTH_THRESHOLD = 30
"""Health at or below which the food strategy paths to food."""

EARLY_GAME_TURNS = 50
"""Number of opening turns over which the early-game food bonus decays."""

EARLY_GAME_BONUS = 0.2
"""Food selector bonus at turn 0."""

HEAD_COLLISION_DISTANCE = 2
"""Manhattan radius within which an enemy head can collide with ours."""

SAFE_DISTANCE_FROM_LARGER_SNAKE = 3
"""Manhattan radius within which an equal-or-larger head is considered close."""

FOOD_HEAD_THREAT_PENALTY = 0.5
"""Food selector penalty per threat inside head-collision range."""

FOOD_NEAR_THREAT_PENALTY = 0.2
"""Food selector penalty per threat inside the safe distance."""

FOOD_MAX_DANGER_PENALTY = 0.9
"""Cap on the accumulated food selector danger penalty."""

FOOD_MAX_DANGER_LEVEL = 2
"""Food with a higher accumulated danger level is never targeted."""

FOOD_DANGER_DISTANCE_WEIGHT = 5
"""Distance-equivalent cost of one danger level when ranking food."""

FOOD_BETWEEN_SLACK = 2
"""Detour slack for deciding that a threat sits between us and a food."""

FOOD_HAZARD_PENALTY = 10
"""Food safety penalty for stepping into a hazard."""

FOOD_PROXIMITY_PENALTY = 10
"""Food safety penalty per step of closeness to a threat."""

FOOD_APPROACH_PENALTY = 10
"""Extra food safety penalty for closing distance to a threat."""

FOOD_HEAD_ON_PENALTY = 100
"""Food safety penalty for a move that risks a head-on collision."""

# ---------------------------------------------------------------------------
# Survival strategy
# ---------------------------------------------------------------------------

SURVIVAL_BASE_SCORE = 0.5
"""Survival selector score before crowdedness and turn adjustments."""

SURVIVAL_CROWDEDNESS_WEIGHT = 0.3
"""Multiplier on (total snake length / board area)."""

SURVIVAL_TURN_DIVISOR = 250
"""Turn count divisor for the survival late-game bonus."""

SURVIVAL_TURN_BONUS_CAP = 0.2
"""Cap on the survival late-game bonus."""

SURVIVAL_HAZARD_PENALTY = 5
"""Survival move penalty for stepping into a hazard."""

SURVIVAL_HEAD_PROXIMITY = 2
"""Radius within which an equal-or-larger head penalizes a survival move."""

SURVIVAL_HEAD_PENALTY = 20
"""Survival move penalty per nearby equal-or-larger head."""

# ---------------------------------------------------------------------------
# Aggressive strategy
# ---------------------------------------------------------------------------

AGGRESSIVE_MIN_SAFE_SPACE = 8
"""Minimum safety score an aggressive move must reach."""

AGGRESSIVE_NEARBY_DISTANCE = 2
"""Radius for threat penalties and for pursuing a target."""

AGGRESSIVE_THREAT_PENALTY = 10
"""Per-step-of-closeness penalty near a threat."""

MIN_AGGRESSIVE_HEALTH = 50
"""Health below which the aggressive strategy plays safe."""

# ---------------------------------------------------------------------------
# Domination strategy
# ---------------------------------------------------------------------------

DOMINATION_MIN_SAFE_SPACE = 6
"""Minimum safety score a hunting or food move must reach."""

DOMINATION_HEAD_ON_PENALTY = 100
"""Penalty for a move that risks a head-on collision with a threat."""

DOMINATION_PROXIMITY_PENALTY = 15
"""Per-step-of-closeness penalty inside the safe distance."""

DOMINATION_APPROACH_PENALTY = 20
"""Extra penalty for closing distance to a threat."""

DOMINATION_LOW_HEALTH = 50
"""Health at or below which domination seeks food."""

DOMINATION_CRITICAL_HEALTH = 25
"""Health at or below which domination accepts any food path."""

HUNTING_HEALTH_THRESHOLD = 60
"""Minimum health for domination to hunt."""

LENGTH_ADVANTAGE_THRESHOLD = 2
"""Length lead required to hunt a target."""

FOOD_SEEKING_HEALTH = 85
"""Health below which domination always considers food."""

FOOD_DISTANCE_WEIGHT = 0.7
"""Weight of the distance term in domination food scoring."""

FOOD_SAFETY_WEIGHT = 0.3
"""Weight of the safety term in domination food scoring."""

FOOD_COMPETITION_WEIGHT = 0.2
"""Weight of the competition term in domination food scoring."""

FOOD_DANGER_SKIP_LEVEL = 3
"""Danger level at which domination skips a food unless desperate."""

NEARBY_FOOD_DISTANCE = 3
"""Radius within which food counts as nearby."""

DOMINATION_BASE_SCORE = 0.7
"""Domination selector score before adjustments."""
