from mazecrawl.maze import Maze
from mazecrawl.routes.maze_api import get_cached_maze


def test_maze_endpoint_shape(client):
    r = client.get("/api/maze?seed=7&size=11")
    assert r.status_code == 200
    data = r.get_json()
    assert data["seed"] == 7
    assert data["size"] == 11
    assert len(data["grid"]) == 11
    kinds = {p["kind"] for p in data["placements"]}
    assert {"floor", "wall", "entry_floor", "exit_floor", "exit_marker"} <= kinds
    marker = next(p for p in data["placements"] if p["kind"] == "exit_marker")
    assert marker["tags"] == ["exit", "trigger"]


def test_default_size_from_config(test_app):
    test_app.config["MAZE_DEFAULT_SIZE"] = 9
    r = test_app.test_client().get("/api/maze?seed=1")
    assert r.get_json()["size"] == 9


def test_word_seed_is_stable(client):
    a = client.get("/api/maze?seed=dragon&size=9").get_json()
    b = client.get("/api/maze?seed=dragon&size=9").get_json()
    assert a["seed"] == b["seed"]
    assert a["placements"] == b["placements"]


def test_even_size_rejected(client):
    r = client.get("/api/maze?seed=1&size=20")
    assert r.status_code == 400
    data = r.get_json()
    assert data["field"] == "size"
    assert data["code"] == "odd"


def test_small_size_rejected(client):
    r = client.get("/api/maze?seed=1&size=3")
    assert r.status_code == 400
    assert r.get_json()["code"] == "min"


def test_oversized_maze_rejected(test_app):
    test_app.config["MAZE_MAX_SIZE"] = 31
    client = test_app.test_client()
    r = client.get("/api/maze?seed=1&size=33")
    assert r.status_code == 400
    data = r.get_json()
    assert (data["field"], data["code"]) == ("size", "max")
    assert client.get("/api/maze?seed=1&size=31").status_code == 200


def test_default_max_size(client):
    r = client.get("/api/maze?seed=1&size=40001")
    assert r.status_code == 400
    assert r.get_json()["code"] == "max"


def test_unicode_digit_seed_served(client):
    r = client.get("/api/maze?seed=%C2%B2&size=5")
    assert r.status_code == 200
    assert r.get_json()["size"] == 5


def test_negative_seed_matches_integer_seed(client):
    from mazecrawl.maze.seeds import coerce_seed

    data = client.get("/api/maze?seed=-5&size=7").get_json()
    assert data["seed"] == coerce_seed(-5)
    assert data["placements"] == [p.to_dict() for p in Maze(seed=coerce_seed(-5), size=7).placements]


def test_non_numeric_size_rejected(client):
    r = client.get("/api/maze?size=huge")
    assert r.status_code == 400
    assert r.get_json()["code"] == "type"


def test_ascii_endpoint(client):
    r = client.get("/api/maze/ascii?seed=5&size=7")
    assert r.status_code == 200
    assert r.mimetype == "text/plain"
    assert r.headers["X-Maze-Seed"] == "5"
    lines = r.get_data(as_text=True).strip().splitlines()
    assert len(lines) == 7
    assert lines[1][1] == "E"
    assert lines[5][5] == "X"
    assert Maze(seed=5, size=7).to_ascii().splitlines() == lines


def test_cache_reuses_instances(test_app):
    with test_app.app_context():
        a = get_cached_maze(11, 9)
        b = get_cached_maze(11, 9)
    assert a is b


def test_cache_can_be_disabled(test_app):
    test_app.config["MAZE_DISABLE_CACHE"] = True
    with test_app.app_context():
        a = get_cached_maze(11, 9)
        b = get_cached_maze(11, 9)
    assert a is not b
    assert a.placements == b.placements


def test_cache_is_bounded(test_app):
    from mazecrawl.routes import maze_api

    test_app.config["MAZE_CACHE_MAX"] = 2
    with test_app.app_context():
        for s in range(5):
            get_cached_maze(s, 5)
    assert len(maze_api._maze_cache) == 2
