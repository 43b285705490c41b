"""Tests for the web API."""

from pathlib import Path

import pytest

# Only run if fastapi/httpx are installed
try:
    from fastapi.testclient import TestClient
    from ts_depgraph.web import create_app
    from ts_depgraph.config import AppConfig
    HAS_WEB = True
except ImportError:
    HAS_WEB = False

pytestmark = pytest.mark.skipif(not HAS_WEB, reason="web dependencies not installed")

PROJECT = Path(__file__).parent / "fixtures" / "project"


@pytest.fixture
def client():
    app = create_app(AppConfig(default_root_dir=PROJECT, port=4555))
    return TestClient(app)


def test_config(client):
    res = client.get("/api/config")
    assert res.status_code == 200
    data = res.json()
    assert data["port"] == 4555
    assert data["defaultRootDir"] == str(PROJECT)
    assert data["ui"]["nodeRadius"] == 8


def test_graph_default_root(client):
    res = client.get("/api/graph")
    assert res.status_code == 200
    data = res.json()
    ids = {n["id"] for n in data["nodes"]}
    assert "src/app.ts" in ids
    assert "src/example/a.test.ts" in ids
    assert any(e["circular"] for e in data["edges"])


def test_graph_query_params(client):
    res = client.get("/api/graph", params={
        "rootDir": str(PROJECT),
        "exclude": [r"\.test\.", "circular"],
        "showFullPath": "false",
    })
    assert res.status_code == 200
    data = res.json()
    ids = {n["id"] for n in data["nodes"]}
    assert "src/example/a.test.ts" not in ids
    assert not any("circular" in i for i in ids)
    app = next(n for n in data["nodes"] if n["id"] == "src/app.ts")
    assert app["name"] == "app.ts"


def test_graph_post(client):
    res = client.post("/api/graph", json={"root_dir": str(PROJECT), "exclude": [r"\.test\."]})
    assert res.status_code == 200
    assert len(res.json()["nodes"]) == 9


def test_graph_missing_dir(client, tmp_path):
    res = client.get("/api/graph", params={"rootDir": str(tmp_path / "nope")})
    assert res.status_code == 400
    assert "Directory not found" in res.json()["detail"]


def test_graph_not_a_directory(client):
    res = client.get("/api/graph", params={"rootDir": str(PROJECT / "tsconfig.json")})
    assert res.status_code == 400
    assert "not a directory" in res.json()["detail"]


def test_invalid_exclude_pattern_is_ignored(client):
    res = client.get("/api/graph", params={"exclude": ["([bad", r"\.test\."]})
    assert res.status_code == 200
    ids = {n["id"] for n in res.json()["nodes"]}
    assert "src/example/a.test.ts" not in ids


def test_cycles(client):
    res = client.get("/api/cycles")
    assert res.status_code == 200
    data = res.json()
    assert data["cycles"] == [[
        "src/circular/module1.ts",
        "src/circular/module2.ts",
        "src/circular/module3.ts",
        "src/circular/module1.ts",
    ]]
    assert len(data["circular_edges"]) == 3
    assert data["circular_count"] == 3
