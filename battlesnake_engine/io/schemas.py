"""Parquet schema definitions for engine artifacts."""

from __future__ import annotations

import pyarrow as pa

MOVE_LOG_SCHEMA = pa.schema(
    [
        ("game_id", pa.string()),
        ("turn", pa.int64()),
        ("snake_id", pa.string()),
        ("health", pa.int64()),
        ("length", pa.int64()),
        ("strategy", pa.string()),
        ("score", pa.float64()),
        ("move", pa.string()),
        ("elapsed_ms", pa.float64()),
    ]
)
"""One row per decided turn."""

MOVE_LOG_COLUMNS: tuple[str, ...] = tuple(MOVE_LOG_SCHEMA.names)
