from __future__ import annotations

from fastapi.testclient import TestClient


def test_healthcheck_and_info(client: TestClient) -> None:
    assert client.get("/healthcheck").json() == {"status": "ok"}
    assert client.get("/info").json()["name"] == "office-hustle"


def test_fresh_game_waits_in_menu(client: TestClient) -> None:
    state = client.get("/game").json()
    assert state["phase"] == "main_menu"
    assert state["pending_tasks"] == []

    res = client.post("/game/tick", json={"delta": 1.0})
    assert res.status_code == 200
    assert res.json()["ticked"] is False


def test_play_a_task_over_http(client: TestClient) -> None:
    res = client.post("/game/actions/start_game")
    assert res.status_code == 200
    assert res.json()["applied"] is True
    assert res.json()["game"]["phase"] == "playing"

    # The spawn interval never exceeds 15s, so one big tick yields a task.
    tick = client.post("/game/tick", json={"delta": 15.0}).json()
    assert tick["ticked"] is True
    pending = tick["game"]["pending_tasks"]
    assert len(pending) == 1

    task_id = pending[0]["task_id"]
    accepted = client.post("/game/actions/accept_task", json={"task_id": task_id}).json()
    assert accepted["applied"] is True
    assert accepted["game"]["active_task"]["task_id"] == task_id

    location = pending[0]["location"]
    away = {"x": location["x"] + 10.0, "y": 0.0, "z": location["z"]}
    far = client.post("/game/actions/complete_task", json={"position": away}).json()
    assert far["applied"] is False

    done = client.post("/game/actions/complete_task", json={"position": location}).json()
    assert done["applied"] is True
    assert done["game"]["score"] == 60
    assert done["game"]["active_task"] is None


def test_pause_toggle_over_http(client: TestClient) -> None:
    client.post("/game/actions/start_game")
    paused = client.post("/game/actions/pause_toggle").json()
    assert paused["game"]["phase"] == "paused"

    tick = client.post("/game/tick", json={"delta": 5.0}).json()
    assert tick["ticked"] is False
    assert tick["game"]["stress"] == 0.0


def test_bad_requests_return_422(client: TestClient) -> None:
    res = client.post("/game/actions/quit_job")
    assert res.status_code == 422
    assert "Unknown action" in res.json()["detail"]

    res = client.post("/game/actions/accept_task", json={})
    assert res.status_code == 422

    res = client.post("/game/actions/interact", json={"position": {"x": "left"}})
    assert res.status_code == 422

    res = client.post("/game/tick", json={"delta": 0})
    assert res.status_code == 422


def test_ws_receives_game_events(client: TestClient) -> None:
    with client.websocket_connect("/ws/game") as ws:
        res = client.post("/game/actions/start_game")
        assert res.status_code == 200

        types: list[str] = []
        for _ in range(10):
            msg = ws.receive_json()
            types.append(msg["type"])
            if msg["type"] == "state_changed":
                assert msg["phase"] == "playing"
                break

        assert "score_changed" in types
        assert types[-1] == "state_changed"
