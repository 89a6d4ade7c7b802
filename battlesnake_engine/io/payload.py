"""Decode Battlesnake API payloads into immutable snapshots.

The decoder is the only place that touches raw request data; everything it
returns has already been validated. Malformed input raises
:class:`PayloadError`.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from battlesnake_engine.config.constants import DEFAULT_TIMEOUT_MS
from battlesnake_engine.domain.board import Board, Game, GameState, Ruleset, Snake
from battlesnake_engine.domain.coord import Coord

__all__ = [
    "PayloadError",
    "decode_board",
    "decode_coord",
    "decode_game",
    "decode_game_state",
    "decode_snake",
    "load_game_state",
]


class PayloadError(ValueError):
    """Raised when a request payload is structurally invalid."""


def _as_mapping(raw: object, key: str) -> Mapping[str, Any]:
    if not isinstance(raw, Mapping):
        raise PayloadError(f"expected an object containing {key!r}")
    return raw


def _require(raw: object, key: str) -> Any:
    raw = _as_mapping(raw, key)
    if key not in raw:
        raise PayloadError(f"missing required field {key!r}")
    return raw[key]


def _coerce_int(raw: object, key: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise PayloadError(f"{key} must be an integer")
    return raw


def _coerce_str(raw: object, key: str) -> str:
    if not isinstance(raw, str):
        raise PayloadError(f"{key} must be a string")
    return raw


def _coerce_list(raw: object, key: str) -> list[Any]:
    if not isinstance(raw, list):
        raise PayloadError(f"{key} must be a list")
    return raw


def decode_coord(raw: object) -> Coord:
    return Coord(_coerce_int(_require(raw, "x"), "x"), _coerce_int(_require(raw, "y"), "y"))


def decode_snake(raw: object) -> Snake:
    raw = _as_mapping(raw, "id")
    snake_id = _coerce_str(_require(raw, "id"), "snake.id")
    body = tuple(decode_coord(item) for item in _coerce_list(_require(raw, "body"), "body"))
    length = raw.get("length", len(body))
    customizations = raw.get("customizations") or {}
    if not isinstance(customizations, Mapping):
        raise PayloadError("customizations must be an object")
    try:
        return Snake(
            id=snake_id,
            name=_coerce_str(raw.get("name", snake_id), "name"),
            health=_coerce_int(_require(raw, "health"), "health"),
            body=body,
            length=_coerce_int(length, "length"),
            shout=_coerce_str(raw.get("shout") or "", "shout"),
            squad=_coerce_str(raw.get("squad") or "", "squad"),
            customizations=dict(customizations),
        )
    except PayloadError:
        raise
    except ValueError as exc:
        raise PayloadError(str(exc)) from exc


def _check_on_board(board: Board, what: str, coords: Iterable[Coord]) -> None:
    for coord in coords:
        if not board.within_bounds(coord):
            raise PayloadError(
                f"{what} coordinate ({coord.x}, {coord.y}) is outside the "
                f"{board.width}x{board.height} board"
            )


def decode_board(raw: object) -> Board:
    """Decode the board; every food, hazard and body coordinate must lie on it."""
    raw = _as_mapping(raw, "width")
    width = _coerce_int(_require(raw, "width"), "width")
    height = _coerce_int(_require(raw, "height"), "height")
    food = frozenset(decode_coord(c) for c in _coerce_list(raw.get("food", []), "food"))
    hazards = frozenset(decode_coord(c) for c in _coerce_list(raw.get("hazards", []), "hazards"))
    snakes = tuple(decode_snake(s) for s in _coerce_list(raw.get("snakes", []), "snakes"))
    ids = [snake.id for snake in snakes]
    if len(set(ids)) != len(ids):
        raise PayloadError("snake ids must be unique")
    try:
        board = Board(width=width, height=height, food=food, hazards=hazards, snakes=snakes)
    except ValueError as exc:
        raise PayloadError(str(exc)) from exc
    _check_on_board(board, "food", board.food)
    _check_on_board(board, "hazards", board.hazards)
    for snake in snakes:
        _check_on_board(board, f"snake {snake.id!r} body", snake.body)
    return board


def decode_game(raw: object) -> Game:
    raw = _as_mapping(raw, "id")
    game_id = _coerce_str(_require(raw, "id"), "game.id")
    ruleset_raw = raw.get("ruleset") or {}
    if not isinstance(ruleset_raw, Mapping):
        raise PayloadError("game.ruleset must be an object")
    settings = ruleset_raw.get("settings") or {}
    if not isinstance(settings, Mapping):
        raise PayloadError("game.ruleset.settings must be an object")
    ruleset = Ruleset(
        name=_coerce_str(ruleset_raw.get("name", "standard"), "game.ruleset.name"),
        version=_coerce_str(ruleset_raw.get("version", ""), "game.ruleset.version"),
        settings=dict(settings),
    )
    timeout = _coerce_int(raw.get("timeout", DEFAULT_TIMEOUT_MS), "game.timeout")
    if timeout < 1:
        raise PayloadError("game.timeout must be >= 1")
    return Game(
        id=game_id,
        ruleset=ruleset,
        timeout=timeout,
        map=_coerce_str(raw.get("map", ""), "game.map"),
        source=_coerce_str(raw.get("source", ""), "game.source"),
    )


def decode_game_state(raw: object) -> GameState:
    """Build a :class:`GameState` whose ``you`` is the matching board snake."""
    game = decode_game(_require(raw, "game"))
    turn = _coerce_int(_require(raw, "turn"), "turn")
    board = decode_board(_require(raw, "board"))
    you_id = _coerce_str(_require(_require(raw, "you"), "id"), "you.id")
    you = board.snake_by_id(you_id)
    if you is None:
        raise PayloadError(f"snake {you_id!r} is not on the board")
    try:
        return GameState(game=game, turn=turn, board=board, you=you)
    except ValueError as exc:
        raise PayloadError(str(exc)) from exc


def load_game_state(path: Path) -> GameState:
    """Decode a snapshot stored as a JSON file."""
    try:
        raw = json.loads(Path(path).read_text())
    except json.JSONDecodeError as exc:
        raise PayloadError(f"{path} is not valid JSON: {exc}") from exc
    return decode_game_state(raw)
