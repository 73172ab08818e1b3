import pytest

import bstree.app as app_module


@pytest.fixture
def client(capsys):
    app_module.warm_start("5,3,8,1,4,7,9")
    capsys.readouterr()
    app_module.app.config["TESTING"] = True
    return app_module.app.test_client()


def test_warm_start_without_keys(capsys):
    app_module.warm_start("")
    assert app_module.tree.is_empty()
    assert app_module.STATE["seeded"] is False
    assert "No initial keys" in capsys.readouterr().out


def test_parse_key_list_skips_junk():
    assert app_module.parse_key_list(" 3, x,,7 ,-2") == [3, 7, -2]


def test_status(client):
    data = client.get("/api/status").get_json()
    assert data["ok"] is True
    assert data["data"]["size"] == 7
    assert data["data"]["height"] == 3
    assert data["data"]["balanced"] is True
    assert data["data"]["keys"] == [1, 3, 4, 5, 7, 8, 9]


def test_status_on_empty_tree(client):
    client.post("/api/tree/build", json={"keys": []})
    data = client.get("/api/status").get_json()["data"]
    assert data["size"] == 0
    assert data["balanced"] is None


def test_build(client):
    resp = client.post("/api/tree/build", json={"keys": [3, 1, 2, 2]})
    assert resp.status_code == 200
    assert resp.get_json()["data"]["keys"] == [1, 2, 3]


def test_build_rejects_bad_body(client):
    assert client.post("/api/tree/build", json={}).status_code == 400
    assert client.post("/api/tree/build", json={"keys": ["a"]}).status_code == 400
    resp = client.post("/api/tree/build", json=[1, 2])
    assert resp.status_code == 400
    assert resp.get_json()["ok"] is False


def test_find(client):
    data = client.get("/api/tree/find/4").get_json()["data"]
    assert data == {"key": 4, "depth": 3, "height": 1}


def test_find_missing_and_invalid(client):
    resp = client.get("/api/tree/find/6")
    assert resp.status_code == 404
    assert resp.get_json()["ok"] is False
    assert client.get("/api/tree/find/abc").status_code == 400


def test_insert_and_duplicate(client):
    data = client.post("/api/tree/insert/6").get_json()["data"]
    assert data["inserted"] is True
    assert 6 in data["keys"]
    data = client.post("/api/tree/insert/6").get_json()["data"]
    assert data["inserted"] is False
    assert data["size"] == 8


def test_delete(client):
    data = client.post("/api/tree/delete/5").get_json()["data"]
    assert data["deleted"] is True
    assert data["keys"] == [1, 3, 4, 7, 8, 9]
    data = client.post("/api/tree/delete/5").get_json()["data"]
    assert data["deleted"] is False


def test_traverse(client):
    resp = client.get("/api/tree/traverse/level")
    assert resp.get_json()["data"]["keys"] == [5, 3, 8, 1, 4, 7, 9]
    resp = client.get("/api/tree/traverse/post")
    assert resp.get_json()["data"]["keys"] == [1, 4, 3, 7, 9, 8, 5]
    assert client.get("/api/tree/traverse/sideways").status_code == 400


def test_depth(client):
    assert client.get("/api/tree/depth/5").get_json()["data"]["depth"] == 1
    assert client.get("/api/tree/depth/2").status_code == 404


def test_rebalance(client):
    for k in (10, 11, 12, 13):
        client.post(f"/api/tree/insert/{k}")
    data = client.post("/api/tree/rebalance").get_json()["data"]
    assert data["height_before"] == 7
    assert data["height"] == 4
    assert data["balanced"] is True


def test_diagram(client):
    client.post("/api/tree/build", json={"keys": [3, 5, 8]})
    data = client.get("/api/tree/diagram").get_json()["data"]
    assert data["diagram"] == "│   ┌── 8\n└── 5\n    └── 3"


def test_deep_tree_routes(client):
    client.post("/api/tree/build", json={"keys": []})
    for key in range(1200):
        app_module.tree.insert(key)

    data = client.post("/api/tree/insert/1200").get_json()["data"]
    assert data["size"] == 1201
    assert data["height"] == 1201
    assert client.get("/api/tree/depth/1200").get_json()["data"]["depth"] == 1201
    assert len(client.get("/api/tree/diagram").get_json()["data"]["diagram"].splitlines()) == 1201
    assert client.post("/api/tree/rebalance").get_json()["data"]["height"] == 11
