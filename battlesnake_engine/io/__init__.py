"""I/O layer: payload decoding, Parquet move logs, and path helpers."""

from battlesnake_engine.io.move_log import MoveLogWriter, flush_move_columns
from battlesnake_engine.io.paths import resolve_within_base, snapshot_paths
from battlesnake_engine.io.payload import (
    PayloadError,
    decode_board,
    decode_coord,
    decode_game,
    decode_game_state,
    decode_snake,
    load_game_state,
)
from battlesnake_engine.io.schemas import MOVE_LOG_COLUMNS, MOVE_LOG_SCHEMA

__all__ = [
    "MOVE_LOG_COLUMNS",
    "MOVE_LOG_SCHEMA",
    "MoveLogWriter",
    "PayloadError",
    "decode_board",
    "decode_coord",
    "decode_game",
    "decode_game_state",
    "decode_snake",
    "flush_move_columns",
    "load_game_state",
    "resolve_within_base",
    "snapshot_paths",
]
