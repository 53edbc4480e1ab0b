from fastapi.testclient import TestClient

from server.app import app


def _create_game(client: TestClient, seed: int = 42, **extra) -> str:
    resp = client.post("/games", json={"seed": seed, **extra})
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert "game_id" in data and isinstance(data["game_id"], str)
    return data["game_id"]


def test_create_game_and_snapshot():
    client = TestClient(app)
    gid = _create_game(client)

    snap = client.get(f"/games/{gid}/snapshot")
    assert snap.status_code == 200
    data = snap.json()

    assert data["turn_number"] == 0
    assert data["to_move"] == "player"
    assert data["chain"] == []
    assert len(data["player_hand"]) == 5
    assert data["opponent_hand_size"] == 5
    assert data["stock_size"] == 18


def test_snapshot_404_for_unknown_game():
    client = TestClient(app)
    resp = client.get("/games/doesnotexist/snapshot")
    assert resp.status_code == 404


def test_legal_actions_endpoint():
    client = TestClient(app)
    gid = _create_game(client)
    resp = client.get(f"/games/{gid}/legal_actions")
    assert resp.status_code == 200
    data = resp.json()
    assert data["game_id"] == gid
    # empty chain: every tile is playable
    assert [a["params"]["hand_index"] for a in data["actions"]] == [0, 1, 2, 3, 4]


def test_play_action_runs_opponent_turn():
    client = TestClient(app)
    gid = _create_game(client)

    resp = client.post(f"/games/{gid}/actions", json={"action_type": "play_tile", "hand_index": 0})
    assert resp.status_code == 200
    body = resp.json()
    assert body["accepted"] is True
    assert body["outcome"] == "ok"
    assert "tile" in body["details"]
    assert body["details"]["opponent"]["outcome"] in ("opponent_played", "opponent_no_move")
    assert body["snapshot"]["to_move"] == "player"
    assert len(body["snapshot"]["chain"]) >= 1


def test_draw_with_playable_tile_is_rejected():
    client = TestClient(app)
    gid = _create_game(client)
    resp = client.post(f"/games/{gid}/actions", json={"action_type": "draw"})
    body = resp.json()
    assert body["accepted"] is False
    assert body["outcome"] == "has_legal_move"


def test_apply_action_rejects_unknown_action():
    client = TestClient(app)
    gid = _create_game(client)
    resp = client.post(f"/games/{gid}/actions", json={"action_type": "not_an_action"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["accepted"] is False
    assert body["outcome"] is None


def test_bad_index_reported():
    client = TestClient(app)
    gid = _create_game(client)
    resp = client.post(f"/games/{gid}/actions", json={"action_type": "play_tile", "hand_index": 9})
    body = resp.json()
    assert body["accepted"] is False
    assert body["outcome"] == "bad_index"


def test_events_since():
    client = TestClient(app)
    gid = _create_game(client)
    first = client.get(f"/games/{gid}/events").json()
    assert [e["event_type"] for e in first["events"]] == ["game_start", "deal"]

    client.post(f"/games/{gid}/actions", json={"action_type": "play_tile", "hand_index": 0})
    delta = client.get(f"/games/{gid}/events", params={"since": first["next"]}).json()
    assert delta["since"] == 2
    assert delta["events"][0]["event_type"] == "play"


def test_delete_game():
    client = TestClient(app)
    gid = _create_game(client)
    assert client.delete(f"/games/{gid}").status_code == 200
    assert client.get(f"/games/{gid}/snapshot").status_code == 404
    assert client.delete(f"/games/{gid}").status_code == 404


def test_create_game_uses_settings_defaults(monkeypatch):
    from dominoes.settings import get_game_settings

    monkeypatch.setenv("DOMINO_HAND_SIZE", "7")
    monkeypatch.setenv("DOMINO_END_ON_EMPTY_HAND", "true")
    get_game_settings.cache_clear()
    try:
        client = TestClient(app)
        gid = _create_game(client)
        data = client.get(f"/games/{gid}/snapshot").json()
        assert len(data["player_hand"]) == 7
        assert data["opponent_hand_size"] == 7
        assert data["stock_size"] == 14

        # request fields still win over the environment
        gid = _create_game(client, hand_size=4)
        data = client.get(f"/games/{gid}/snapshot").json()
        assert len(data["player_hand"]) == 4
    finally:
        get_game_settings.cache_clear()
