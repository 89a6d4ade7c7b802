"""Strategy arbitration: the highest-scoring strategy decides the move."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from battlesnake_engine.config.types import DEFAULT_STRATEGIES, SearchConfig
from battlesnake_engine.domain.board import GameState
from battlesnake_engine.domain.coord import Direction
from battlesnake_engine.search.budget import Deadline
from battlesnake_engine.strategies.aggressive import AggressiveStrategy
from battlesnake_engine.strategies.base import Strategy
from battlesnake_engine.strategies.domination import DominationStrategy
from battlesnake_engine.strategies.food import FoodStrategy
from battlesnake_engine.strategies.survival import SurvivalStrategy

_logger = logging.getLogger(__name__)

STRATEGY_FACTORIES: dict[str, Callable[[SearchConfig | None], Strategy]] = {
    AggressiveStrategy.name: AggressiveStrategy,
    DominationStrategy.name: DominationStrategy,
    FoodStrategy.name: FoodStrategy,
    SurvivalStrategy.name: SurvivalStrategy,
}
"""Every available strategy, keyed by its configuration name."""


def build_strategies(
    names: Iterable[str] = DEFAULT_STRATEGIES, search: SearchConfig | None = None
) -> list[Strategy]:
    """Instantiate strategies by name, preserving the given order."""
    strategies: list[Strategy] = []
    for name in names:
        try:
            factory = STRATEGY_FACTORIES[name]
        except KeyError as exc:
            valid = ", ".join(sorted(STRATEGY_FACTORIES))
            raise ValueError(f"unknown strategy {name!r}; must be one of {valid}") from exc
        strategies.append(factory(search))
    return strategies


@dataclass(frozen=True)
class MoveDecision:
    """The move for one turn and the strategy that produced it."""

    direction: Direction
    strategy: str
    score: float

    @property
    def shout(self) -> str:
        return f"Moving {self.direction.value}!"

    def to_response(self) -> dict[str, str]:
        return {"move": self.direction.value, "shout": self.shout}


class StrategySelector:
    """Ordered strategy registry.

    Ties go to the earlier-registered strategy. An empty selector installs
    the aggressive, food, and survival strategies on first use.
    """

    def __init__(
        self,
        strategies: Iterable[Strategy] = (),
        logger: logging.Logger | None = None,
    ) -> None:
        self._strategies: list[Strategy] = list(strategies)
        self._logger = logger or _logger

    @property
    def strategies(self) -> tuple[Strategy, ...]:
        return tuple(self._strategies)

    def add_strategy(self, strategy: Strategy) -> None:
        self._strategies.append(strategy)

    def select(self, state: GameState) -> tuple[Strategy, float]:
        """Return the first strategy with the strictly greatest score, and that score."""
        if not self._strategies:
            self._strategies.extend(build_strategies(DEFAULT_STRATEGIES))

        best: Strategy | None = None
        best_score = 0.0
        for strategy in self._strategies:
            score = strategy.score(state)
            self._logger.debug("strategy %s scored %.3f", strategy.name, score)
            if best is None or score > best_score:
                best, best_score = strategy, score
        assert best is not None
        self._logger.info(
            "Selected strategy: %s with score: %.3f (game %s, turn %d)",
            best.name,
            best_score,
            state.game.id,
            state.turn,
        )
        return best, best_score

    def decide(self, state: GameState, deadline: Deadline | None = None) -> MoveDecision:
        strategy, score = self.select(state)
        direction = strategy.decide(state, deadline)
        return MoveDecision(direction=direction, strategy=strategy.name, score=score)
