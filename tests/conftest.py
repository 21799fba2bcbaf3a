"""
conftest.py — Shared Test Fixtures for the exercise tracker

Provides a per-test SQLite database file, an initialised ExerciseStore,
a FastAPI TestClient whose lifespan owns the store, and helpers that
create users and exercises through the API.

Business Rules:
- Every test gets its own database file under tmp_path (no shared state)
- The settings cache is cleared around each test so DATABASE_URL changes apply
- The client fixture runs the real lifespan, so storage init/close is exercised

Called by: all test files via pytest autodiscovery
Depends on: app.config, app.database, app.main
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app.config import get_settings
from app.database import ExerciseStore


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def db_url(tmp_path, monkeypatch) -> str:
    """Point DATABASE_URL at a throwaway SQLite file."""
    url = f"sqlite:///{tmp_path / 'exercise.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    get_settings.cache_clear()
    return url


@pytest_asyncio.fixture()
async def store(db_url):
    """An initialised store on the test database."""
    s = ExerciseStore(get_settings().async_database_url)
    await s.init()
    yield s
    await s.close()


@pytest.fixture()
def client(db_url) -> TestClient:
    """TestClient running the app lifespan against the test database."""
    from app.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture()
def bob(client) -> dict:
    """A user named bob, created through the API."""
    resp = client.post("/api/exercise/new-user", data={"username": "bob"})
    assert resp.status_code == 200
    return resp.json()