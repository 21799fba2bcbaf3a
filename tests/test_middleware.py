"""
test_middleware.py — Tests for request/response middleware

Verifies request ID generation and CORS headers on API responses.

Called by: pytest
Depends on: app/main.py (middleware), tests/conftest.py (client fixture)
"""


def test_request_id_header_present(client):
    """Every response should include X-Request-ID."""
    resp = client.get("/health")
    assert "X-Request-ID" in resp.headers
    req_id = resp.headers["X-Request-ID"]
    assert len(req_id) == 8  # uuid4().hex[:8]


def test_request_id_unique_per_request(client):
    """Each request gets a distinct ID."""
    id1 = client.get("/health").headers["X-Request-ID"]
    id2 = client.get("/health").headers["X-Request-ID"]
    assert id1 != id2


def test_health_returns_ok(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["database"] == "connected"


def test_404_still_gets_request_id(client):
    """The 404 page carries the request ID too."""
    resp = client.get("/nonexistent-route-xyz")
    assert "X-Request-ID" in resp.headers


def test_cors_allows_any_origin(client):
    resp = client.get("/api/exercise/users", headers={"Origin": "https://example.org"})
    assert resp.headers["access-control-allow-origin"] == "*"
