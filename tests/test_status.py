# File: tests/test_status.py

"""
The status endpoint is the platform's liveness probe; it must answer
without touching the database.
"""

from fastapi.testclient import TestClient


def test_status_ok(client):
    resp = client.get("/api/status")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "service": "getlocalbuddy-backend"}


def test_status_without_database(app):
    # No context manager: the lifespan never runs, so no database is attached
    client = TestClient(app)
    resp = client.get("/api/status")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_status_after_database_disposed(client, database):
    database.dispose()
    resp = client.get("/api/status")
    assert resp.status_code == 200


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert "error" in resp.json()


def test_unexpected_error_uses_error_envelope(app, monkeypatch):
    from getlocalbuddy.services import post_service

    def broken(db):
        raise RuntimeError("connection string postgres://secret")

    monkeypatch.setattr(post_service, "list_posts", broken)

    with TestClient(app, raise_server_exceptions=False) as client:
        resp = client.get("/api/posts")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error."}
    assert "secret" not in resp.text
