SMALL_BODY = {
    "seed": 42,
    "levelWidth": 30,
    "levelHeight": 30,
    "minRooms": 3,
    "maxRooms": 5,
    "minRoomSize": [3, 3],
    "maxRoomSize": [6, 6],
}


def test_generate_endpoint_returns_layout(client):
    r = client.post("/api/dungeon/generate", json=SMALL_BODY)
    assert r.status_code == 200
    data = r.get_json()
    for key in ("seed", "attempts", "width", "height", "grid", "rooms", "corridors", "metrics"):
        assert key in data
    assert data["width"] == 30 and data["height"] == 30
    assert len(data["grid"]) == 30 and all(len(row) == 30 for row in data["grid"])
    assert 3 <= len(data["rooms"]) <= 5
    assert data["rooms"][0]["type"] == "start"
    # pinned seed; later attempts advance it by one
    assert 42 <= data["seed"] < 42 + data["attempts"]


def test_generate_endpoint_deterministic_for_seed(client):
    first = client.post("/api/dungeon/generate", json=SMALL_BODY).get_json()
    second = client.post("/api/dungeon/generate", json=SMALL_BODY).get_json()
    assert first["grid"] == second["grid"]
    assert first["rooms"] == second["rooms"]


def test_generate_without_paths(client):
    r = client.post("/api/dungeon/generate?paths=0", json=SMALL_BODY)
    assert r.status_code == 200
    corridors = r.get_json()["corridors"]
    assert corridors
    assert all("path" not in c and c["length"] > 0 for c in corridors)


def test_generate_with_preset(client):
    r = client.post("/api/dungeon/generate", json={"preset": "small", "seed": 3, "minRoomSize": 3, "maxRoomSize": 5})
    assert r.status_code == 200
    assert r.get_json()["width"] == 30


def test_generate_invalid_config_is_400(client):
    r = client.post("/api/dungeon/generate", json={"minRooms": 6, "maxRooms": 2})
    assert r.status_code == 400
    assert "error" in r.get_json()


def test_generate_unknown_option_is_400(client):
    r = client.post("/api/dungeon/generate", json={"dragons": 3})
    assert r.status_code == 400


def test_generate_non_object_body_is_400(client):
    r = client.post("/api/dungeon/generate", json=[1, 2, 3])
    assert r.status_code == 400


def test_generate_exhausted_is_422(client):
    body = {
        "seed": 1,
        "levelWidth": 10,
        "levelHeight": 10,
        "minRooms": 50,
        "maxRooms": 50,
        "maxPlacementAttempts": 5,
    }
    r = client.post("/api/dungeon/generate", json=body)
    assert r.status_code == 422
    data = r.get_json()
    assert data["error"] == "generation_exhausted"
    assert data["attempts"] == 10
    assert data["seed"] == 10


def test_map_uses_session_seed(client):
    client.post("/api/dungeon/seed", json={"seed": 1234})
    r = client.get("/api/dungeon/map")
    assert r.status_code == 200
    data = r.get_json()
    assert data["seed"] >= 1234
    assert data["width"] == 30 and len(data["grid"]) == 30
    assert data["start_room"] == data["rooms"][0]
    again = client.get("/api/dungeon/map").get_json()
    assert again["grid"] == data["grid"]


def test_map_unknown_preset_is_400(client):
    r = client.get("/api/dungeon/map?preset=gigantic")
    assert r.status_code == 400


def test_generation_metrics_endpoint(client):
    client.post("/api/dungeon/seed", json={"seed": 77})
    r = client.get("/api/dungeon/gen/metrics")
    assert r.status_code == 200
    data = r.get_json()
    assert "metrics" in data and "seed" in data
    for k in ["attempts", "rooms", "corridors", "tiles_wall", "tiles_floor", "runtime_ms", "phase_ms"]:
        assert k in data["metrics"]
    assert isinstance(data["metrics"]["rooms"], int)


def test_generate_with_preset_keeps_app_defaults(test_app, client):
    saved = test_app.config["DUNGEON_ENABLE_GENERATION_METRICS"]
    test_app.config["DUNGEON_ENABLE_GENERATION_METRICS"] = False
    try:
        r = client.post("/api/dungeon/generate", json={"preset": "small", "seed": 8})
        assert r.status_code == 200
        data = r.get_json()
        assert data["width"] == 30
        assert data["metrics"] == {}
    finally:
        test_app.config["DUNGEON_ENABLE_GENERATION_METRICS"] = saved
