"""Tests for battlesnake_engine.server."""

from __future__ import annotations

from pathlib import Path

import pyarrow.parquet as pq
import pytest
from flask.testing import FlaskClient

from battlesnake_engine.config.types import ServerConfig
from battlesnake_engine.io.move_log import MoveLogWriter
from battlesnake_engine.server import create_app
from battlesnake_engine.strategies.selector import StrategySelector
from battlesnake_engine.strategies.survival import SurvivalStrategy
from tests.builders import raw_game_state, raw_snake


@pytest.fixture()
def client() -> FlaskClient:
    return create_app().test_client()


class TestInfo:
    def test_index_reports_appearance(self, client: FlaskClient) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert response.get_json() == ServerConfig().info()

    def test_custom_config(self) -> None:
        config = ServerConfig(color="#123456", author="someone")
        body = create_app(config).test_client().get("/").get_json()
        assert body["color"] == "#123456"
        assert body["author"] == "someone"


class TestMove:
    def test_food_scenario_moves_up(self, client: FlaskClient) -> None:
        response = client.post("/move", json=raw_game_state())
        assert response.status_code == 200
        assert response.get_json() == {"move": "up", "shout": "Moving up!"}

    def test_boxed_snake_goes_right(self, client: FlaskClient) -> None:
        you = raw_snake("you", [(0, 5), (0, 5), (0, 5)])
        north = raw_snake("north", [(2, 6), (1, 6), (0, 6), (0, 7)])
        south = raw_snake("south", [(2, 4), (1, 4), (0, 4), (0, 3)])
        response = client.post("/move", json=raw_game_state(you=you, others=[north, south]))
        assert response.get_json()["move"] == "right"

    def test_malformed_payload_is_rejected(self, client: FlaskClient) -> None:
        raw = raw_game_state()
        del raw["you"]
        response = client.post("/move", json=raw)
        assert response.status_code == 400
        assert "you" in response.get_json()["error"]

    def test_off_board_food_is_rejected(self, client: FlaskClient) -> None:
        response = client.post("/move", json=raw_game_state(food=[(11, 0)]))
        assert response.status_code == 400
        assert "outside the 11x11 board" in response.get_json()["error"]

    def test_non_json_body_is_rejected(self, client: FlaskClient) -> None:
        response = client.post("/move", data="up please", content_type="text/plain")
        assert response.status_code == 400
        assert "error" in response.get_json()

    def test_custom_selector(self) -> None:
        selector = StrategySelector([SurvivalStrategy()])
        app = create_app(selector=selector)
        response = app.test_client().post("/move", json=raw_game_state())
        assert response.get_json()["move"] == "up"

    def test_moves_are_logged(self, tmp_path: Path) -> None:
        path = tmp_path / "moves.parquet"
        with MoveLogWriter(path) as log:
            app = create_app(move_log=log)
            app.test_client().post("/move", json=raw_game_state())
        rows = pq.read_table(path).to_pylist()
        assert len(rows) == 1
        assert rows[0]["game_id"] == "game-1"
        assert rows[0]["strategy"] == "food"


class TestLifecycle:
    @pytest.mark.parametrize("route", ["/start", "/end"])
    def test_returns_empty_object(self, client: FlaskClient, route: str) -> None:
        response = client.post(route, json=raw_game_state())
        assert response.status_code == 200
        assert response.get_json() == {}

    @pytest.mark.parametrize("route", ["/start", "/end"])
    def test_rejects_bad_payload(self, client: FlaskClient, route: str) -> None:
        response = client.post(route, json={"turn": 0})
        assert response.status_code == 400
