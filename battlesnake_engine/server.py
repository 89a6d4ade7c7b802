"""Flask application exposing the Battlesnake webhook API."""

from __future__ import annotations

import logging
import time
from typing import Any

from flask import Flask, jsonify, request
from flask.typing import ResponseReturnValue

from battlesnake_engine.config.types import ServerConfig
from battlesnake_engine.domain.board import GameState
from battlesnake_engine.io.move_log import MoveLogWriter
from battlesnake_engine.io.payload import PayloadError, decode_game_state
from battlesnake_engine.search.budget import Deadline
from battlesnake_engine.strategies.selector import StrategySelector, build_strategies

logger = logging.getLogger(__name__)


def _request_state() -> GameState:
    raw: Any = request.get_json(silent=True)
    if raw is None:
        raise PayloadError("request body must be a JSON object")
    return decode_game_state(raw)


def create_app(
    config: ServerConfig | None = None,
    selector: StrategySelector | None = None,
    move_log: MoveLogWriter | None = None,
) -> Flask:
    """Build the webhook app.

    Without an explicit *selector*, one is built from ``config.strategies``.
    Every decided move is appended to *move_log* when one is given; the
    caller owns closing it.
    """
    config = config or ServerConfig()
    if selector is None:
        selector = StrategySelector(build_strategies(config.strategies))

    app = Flask(__name__)
    app.config["SERVER_CONFIG"] = config
    app.extensions["battlesnake_selector"] = selector

    @app.errorhandler(PayloadError)
    def handle_payload_error(exc: PayloadError) -> ResponseReturnValue:
        logger.warning("rejected payload on %s: %s", request.path, exc)
        return jsonify({"error": str(exc)}), 400

    @app.get("/")
    def info() -> ResponseReturnValue:
        return jsonify(config.info())

    @app.post("/start")
    def start() -> ResponseReturnValue:
        state = _request_state()
        logger.info("game %s started (turn %d)", state.game.id, state.turn)
        return jsonify({})

    @app.post("/move")
    def move() -> ResponseReturnValue:
        started = time.perf_counter()
        state = _request_state()
        deadline = Deadline.from_timeout(state.game.timeout, config.timeout_buffer_ms)
        decision = selector.decide(state, deadline)
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        logger.info(
            "game %s turn %d: %s via %s in %.1f ms",
            state.game.id,
            state.turn,
            decision.direction.value,
            decision.strategy,
            elapsed_ms,
        )
        if move_log is not None:
            move_log.append(state, decision, elapsed_ms)
        return jsonify(decision.to_response())

    @app.post("/end")
    def end() -> ResponseReturnValue:
        state = _request_state()
        logger.info("game %s ended (turn %d)", state.game.id, state.turn)
        return jsonify({})

    return app
