"""Per-direction safety scoring shared by the strategies.

A move's safety is the number of cells reachable from its destination,
reduced by the penalties of a :class:`SafetyPenalties` preset.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from battlesnake_engine.config.types import SafetyPenalties
from battlesnake_engine.domain.board import GameState
from battlesnake_engine.domain.coord import Coord, Direction
from battlesnake_engine.domain.moves import legal_destinations
from battlesnake_engine.search.reachability import count_reachable
from battlesnake_engine.strategies.base import Opponent


def safety_scores(
    state: GameState,
    moves: Iterable[Direction],
    penalties: SafetyPenalties,
    threats: list[Opponent],
) -> dict[Direction, float]:
    """Safety score of each move in *moves*, keyed in the order given."""
    board = state.board
    head = state.you.head
    threat_reach: dict[str, tuple[Coord, ...]] = {}
    if penalties.head_on > 0:
        threat_reach = {
            t.snake.id: tuple(legal_destinations(t.snake, board).values()) for t in threats
        }

    scores: dict[Direction, float] = {}
    for move in moves:
        destination = head.move(move)
        score = float(count_reachable(destination, board))
        if penalties.hazard > 0 and board.has_hazard(destination):
            score -= penalties.hazard
        for threat in threats:
            score -= _threat_penalty(
                head, destination, threat, penalties, threat_reach.get(threat.snake.id, ())
            )
        scores[move] = score
    return scores


def _threat_penalty(
    head: Coord,
    destination: Coord,
    threat: Opponent,
    penalties: SafetyPenalties,
    reach: tuple[Coord, ...],
) -> float:
    new_distance = destination.distance_to(threat.head)
    if (
        penalties.head_on > 0
        and new_distance <= penalties.head_on_distance
        and any(cell.distance_to(destination) <= 1 for cell in reach)
    ):
        return penalties.head_on
    if new_distance > penalties.threat_distance:
        return 0.0
    penalty = penalties.proximity_flat
    penalty += penalties.proximity_scale * (penalties.threat_distance - new_distance + 1)
    if new_distance < head.distance_to(threat.head):
        penalty += penalties.approach
    return penalty


def best_move(scores: Mapping[Direction, float]) -> Direction:
    """First move holding the strictly greatest score."""
    if not scores:
        raise ValueError("best_move needs at least one scored move")
    best: Direction | None = None
    best_score = 0.0
    for move, score in scores.items():
        if best is None or score > best_score:
            best, best_score = move, score
    assert best is not None
    return best
