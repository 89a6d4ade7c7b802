"""Per-call deadline passed explicitly into searches."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from battlesnake_engine.config.constants import MOVE_TIMEOUT_BUFFER_MS


@dataclass(frozen=True)
class Deadline:
    """Point in time (seconds on *clock*) after which searches must stop.

    The clock is injectable so tests can drive expiry deterministically.
    """

    expires_at: float
    clock: Callable[[], float] = field(default=time.monotonic, compare=False)

    @classmethod
    def from_timeout(
        cls,
        timeout_ms: int,
        buffer_ms: int = MOVE_TIMEOUT_BUFFER_MS,
        clock: Callable[[], float] = time.monotonic,
    ) -> Deadline:
        """Start counting now; reserve *buffer_ms* of *timeout_ms* for transport."""
        budget_s = max(0, timeout_ms - buffer_ms) / 1000.0
        return cls(expires_at=clock() + budget_s, clock=clock)

    def remaining_ms(self) -> float:
        return max(0.0, (self.expires_at - self.clock()) * 1000.0)

    def expired(self) -> bool:
        return self.clock() >= self.expires_at


def is_expired(deadline: Deadline | None) -> bool:
    """``None`` means no deadline."""
    return deadline is not None and deadline.expired()
