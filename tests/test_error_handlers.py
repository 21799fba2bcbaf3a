"""
test_error_handlers.py — Tests for the generic error responder in main.py

Verifies the 404 page for unknown routes, plain-text 400s for structured
validation failures, and status/message passthrough for unhandled errors.

Called by: pytest
Depends on: app/main.py, conftest.py
"""

import pytest
from fastapi.testclient import TestClient

from app.services import user_service


@pytest.fixture()
def lenient_client(db_url) -> TestClient:
    """Client that returns 500 responses instead of re-raising."""
    from app.main import app

    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


class TestPages:
    def test_index_page(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        assert "/api/exercise/new-user" in resp.text

    def test_static_asset(self, client):
        resp = client.get("/static/style.css")
        assert resp.status_code == 200

    def test_unknown_route_serves_404_page(self, client):
        resp = client.get("/no/such/page")
        assert resp.status_code == 200
        assert "Page not found" in resp.text

    def test_missing_static_file_serves_404_page(self, client):
        resp = client.get("/static/missing.js")
        assert "Page not found" in resp.text

    def test_wrong_method_serves_404_page(self, client):
        resp = client.get("/api/exercise/add")
        assert resp.status_code == 200
        assert "Page not found" in resp.text


class TestUnhandledErrors:
    def test_plain_exception_is_500(self, lenient_client, monkeypatch):
        async def boom(store):
            raise RuntimeError("storage exploded")

        monkeypatch.setattr(user_service, "list_users", boom)
        resp = lenient_client.get("/api/exercise/users")
        assert resp.status_code == 500
        assert resp.headers["content-type"].startswith("text/plain")
        assert resp.text == "storage exploded"

    def test_exception_status_is_used(self, lenient_client, monkeypatch):
        class Teapot(Exception):
            status_code = 418

        async def boom(store):
            raise Teapot("short and stout")

        monkeypatch.setattr(user_service, "list_users", boom)
        resp = lenient_client.get("/api/exercise/users")
        assert resp.status_code == 418
        assert resp.text == "short and stout"

    def test_empty_message_gets_default(self, lenient_client, monkeypatch):
        async def boom(store):
            raise RuntimeError()

        monkeypatch.setattr(user_service, "list_users", boom)
        resp = lenient_client.get("/api/exercise/users")
        assert resp.text == "Internal Server Error"
