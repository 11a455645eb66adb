# tests/conftest.py
"""Shared fixtures: every test gets its own SQLite file and a live app."""

import pytest
from fastapi.testclient import TestClient

from exercise_tracker.config import get_settings
from exercise_tracker.main import app


@pytest.fixture
def database_url(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'test.sqlite'}"
    monkeypatch.setenv("DATABASE_URL", url)
    get_settings.cache_clear()
    yield url
    get_settings.cache_clear()


@pytest.fixture
def client(database_url):
    # Entering the client runs the lifespan, which calls init_db()
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_user(client):
    def _make_user(username="alice"):
        r = client.post("/api/users", data={"username": username})
        assert r.status_code == 200
        return r.json()

    return _make_user


@pytest.fixture
def add_exercise(client):
    def _add_exercise(user_id, **fields):
        r = client.post(f"/api/users/{user_id}/exercises", data=fields)
        assert r.status_code == 200, r.text
        return r.json()

    return _add_exercise
