# File: tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from getlocalbuddy.db.session import Database
from getlocalbuddy.main import create_application


@pytest.fixture
def database():
    db = Database("sqlite://")
    yield db
    db.dispose()


@pytest.fixture
def app(database):
    return create_application(database=database)


@pytest.fixture
def client(app):
    # Entering the context runs the lifespan (connect + create tables)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def register(client):
    def _register(email="alice@example.com", password="s3cret-pass", **extra):
        resp = client.post("/api/register", json={"email": email, "password": password, **extra})
        assert resp.status_code == 201, resp.text
        return resp.json()["userId"]

    return _register
