from __future__ import annotations

from fastapi.testclient import TestClient


def test_health_endpoint(client: TestClient):
    res = client.get("/api/health")
    assert res.status_code == 200
    body = res.json()
    assert body["code"] == 0
    assert body["success"] is True
    assert body["data"]["status"] == "ok"


def test_root(client: TestClient):
    body = client.get("/").json()
    assert body["success"] is True
    assert "running" in body["data"]["message"]


def test_unknown_route_renders_not_found_envelope(client: TestClient):
    res = client.get("/api/does-not-exist")
    assert res.status_code == 404
    body = res.json()
    assert body["code"] == 404
    assert body["success"] is False
    assert body["data"] is None
