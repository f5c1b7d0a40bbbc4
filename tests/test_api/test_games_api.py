"""Tests for the games REST API."""

import logging

import pytest

from beerball.api.services.session_manager import GameSessionManager


@pytest.fixture
def game(client) -> dict:
    response = client.post("/api/v1/games", json={"team1_name": "Bears", "team2_name": "Lions"})
    assert response.status_code == 201
    return response.json()


def _act(client, game_id, action, **data):
    return client.post(f"/api/v1/games/{game_id}/actions", json={"action": action, "data": data})


class TestAppEndpoints:
    """Tests for the top-level endpoints."""

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["name"] == "Beerball API"

    def test_health(self, client, game):
        response = client.get("/health")
        assert response.json() == {"status": "healthy", "active_games": 1}


class TestGamesRouter:
    """Tests for /api/v1/games."""

    def test_create_game(self, game):
        state = game["state"]
        assert state["phase"] == "COIN_TOSS"
        assert state["team1"]["name"] == "Bears"
        assert state["team2"]["abbreviation"] == "LIO"
        assert state["headline"] == "Coin Toss"
        assert game["legal_actions"] == ["COIN_TOSS"]
        assert game["can_undo"] is False

    def test_create_game_rejects_bad_color(self, client):
        response = client.post("/api/v1/games", json={"team1_color": "blue"})
        assert response.status_code == 422

    def test_list_games(self, client, game):
        assert client.get("/api/v1/games").json() == [game["game_id"]]

    def test_get_game(self, client, game):
        response = client.get(f"/api/v1/games/{game['game_id']}")
        assert response.status_code == 200
        assert response.json()["game_id"] == game["game_id"]

    def test_unknown_game(self, client):
        assert client.get("/api/v1/games/nope").status_code == 404
        assert _act(client, "nope", "COIN_TOSS", team=1).status_code == 404

    def test_actions(self, client, game):
        response = client.get(f"/api/v1/games/{game['game_id']}/actions")
        assert response.json() == {
            "game_id": game["game_id"],
            "phase": "COIN_TOSS",
            "actions": ["COIN_TOSS"],
        }

    def test_post_action(self, client, game):
        game_id = game["game_id"]
        _act(client, game_id, "COIN_TOSS", team=1)
        _act(client, game_id, "REGULAR_KICKOFF")
        response = _act(client, game_id, "KICKOFF_HIT", cup="1")

        body = response.json()
        assert response.status_code == 200
        assert body["state"]["phase"] == "KICKOFF_RETURN"
        assert body["state"]["phase_data"] == {"kind": "kick", "landing": -5}
        assert len(body["state"]["cup_effects"]) == 19
        assert body["can_undo"] is True

    def test_play_description(self, client, game):
        game_id = game["game_id"]
        for action, data in [
            ("COIN_TOSS", {"team": 2}),
            ("REGULAR_KICKOFF", {}),
            ("KICKOFF_MISS", {}),
            ("RETURN_MISS", {}),
        ]:
            response = _act(client, game_id, action, **data)

        last_play = response.json()["state"]["last_play"]
        assert last_play["outcome"] == "RETURN"
        assert last_play["description"] == "Returned to LIO 25"

    def test_illegal_action_conflict(self, client, game):
        response = _act(client, game["game_id"], "PUNT")
        assert response.status_code == 409
        assert "PUNT" in response.json()["detail"]

    def test_missing_data_unprocessable(self, client, game):
        response = _act(client, game["game_id"], "COIN_TOSS")
        assert response.status_code == 422

    def test_unknown_action_unprocessable(self, client, game):
        response = _act(client, game["game_id"], "HAIL_MARY")
        assert response.status_code == 422

    def test_undo(self, client, game):
        game_id = game["game_id"]
        assert client.post(f"/api/v1/games/{game_id}/undo").status_code == 409

        _act(client, game_id, "COIN_TOSS", team=1)
        response = client.post(f"/api/v1/games/{game_id}/undo")
        assert response.status_code == 200
        assert response.json()["state"]["phase"] == "COIN_TOSS"

    def test_delete(self, client, game):
        game_id = game["game_id"]
        assert client.delete(f"/api/v1/games/{game_id}").status_code == 204
        assert client.get(f"/api/v1/games/{game_id}").status_code == 404
        assert client.delete(f"/api/v1/games/{game_id}").status_code == 404


class TestSessionManager:
    """Tests for the session registry."""

    def test_newest_game_owns_save(self, store):
        manager = GameSessionManager(store=store)
        first = manager.create_session("A", "B")
        second = manager.create_session("C", "D")

        assert first.store is None
        assert second.store is store
        assert store.load().state.team1.name == "C"

    def test_configure_resumes_saved_game(self, store):
        GameSessionManager(store=store).create_session("Bears", "Lions")

        manager = GameSessionManager()
        manager.configure(store)

        assert len(manager.active_sessions) == 1
        session = manager.get_session(manager.active_sessions[0])
        assert session.state.team1.name == "Bears"

    def test_remove_clears_save(self, store):
        manager = GameSessionManager(store=store)
        session = manager.create_session()
        manager.remove_session(session.game_id)

        assert not store.exists
        assert manager.get_session(session.game_id) is None

    def test_configure_keeps_game_id(self, store):
        created = GameSessionManager(store=store).create_session("Bears", "Lions")

        manager = GameSessionManager()
        manager.configure(store)

        assert manager.active_sessions == [created.game_id]

    def test_logs_session_events(self, caplog):
        caplog.set_level(logging.DEBUG, logger="beerball.api.services.session_manager")
        manager = GameSessionManager()
        session = manager.create_session()

        session.act("COIN_TOSS", {"team": 1})

        assert f"Game {session.game_id}: PhaseChangedEvent" in caplog.text
