"""Parquet persistence for per-turn move decisions."""

from __future__ import annotations

from pathlib import Path
from types import TracebackType

import pyarrow as pa
import pyarrow.parquet as pq

from battlesnake_engine.config.constants import MOVE_LOG_FLUSH_THRESHOLD
from battlesnake_engine.domain.board import GameState
from battlesnake_engine.io.schemas import MOVE_LOG_COLUMNS, MOVE_LOG_SCHEMA
from battlesnake_engine.strategies.selector import MoveDecision


def flush_move_columns(
    columns: dict[str, list[int | float | str]],
    path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated rows to Parquet and clear the in-memory buffers."""
    if not columns["game_id"]:
        return writer
    table = pa.Table.from_pydict(columns, schema=MOVE_LOG_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(path, MOVE_LOG_SCHEMA)
    writer.write_table(table)
    for values in columns.values():
        values.clear()
    return writer


class MoveLogWriter:
    """Buffered writer for the move log; use as a context manager."""

    def __init__(self, path: Path, flush_threshold: int = MOVE_LOG_FLUSH_THRESHOLD) -> None:
        if flush_threshold < 1:
            raise ValueError("flush_threshold must be >= 1")
        self.path = Path(path)
        self.flush_threshold = flush_threshold
        self.rows_written = 0
        self._columns: dict[str, list[int | float | str]] = {c: [] for c in MOVE_LOG_COLUMNS}
        self._writer: pq.ParquetWriter | None = None
        self._closed = False

    def append(self, state: GameState, decision: MoveDecision, elapsed_ms: float) -> None:
        row: dict[str, int | float | str] = {
            "game_id": state.game.id,
            "turn": state.turn,
            "snake_id": state.you.id,
            "health": state.you.health,
            "length": state.you.length,
            "strategy": decision.strategy,
            "score": decision.score,
            "move": decision.direction.value,
            "elapsed_ms": elapsed_ms,
        }
        for key, value in row.items():
            self._columns[key].append(value)
        self.rows_written += 1
        if len(self._columns["game_id"]) >= self.flush_threshold:
            self.flush()

    def flush(self) -> None:
        self._writer = flush_move_columns(self._columns, self.path, self._writer)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.flush()
        if self._writer is None:
            # Nothing was logged: still leave a readable, empty file behind
            pq.write_table(MOVE_LOG_SCHEMA.empty_table(), self.path)
            return
        self._writer.close()

    def __enter__(self) -> MoveLogWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
