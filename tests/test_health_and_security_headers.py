from __future__ import annotations

from tests.conftest import DummyResponse, feature_collection


def test_health_ready(client):
    h = client.get("/health")
    assert h.status_code == 204

    r = client.get("/ready")
    assert r.status_code == 200
    assert r.get_json() == {"status": "ok"}


def test_security_headers_present_on_responses(client, upstream):
    upstream.queue(DummyResponse(200, feature_collection()))
    for path in ("/", "/ready", "/api/marineParks"):
        r = client.get(path)
        assert r.headers.get("X-Content-Type-Options") == "nosniff"
        assert r.headers.get("X-Frame-Options") == "DENY"
        assert r.headers.get("Referrer-Policy") == "same-origin"


def test_cors_allows_any_origin(client):
    r = client.get("/ready", headers={"Origin": "http://localhost:8080"})
    assert r.headers.get("Access-Control-Allow-Origin") == "*"


def test_cors_preflight_for_layer(client, upstream):
    r = client.options(
        "/api/marineParks",
        headers={"Origin": "http://localhost:8080", "Access-Control-Request-Method": "GET"},
    )
    assert r.status_code == 200
    assert r.headers.get("Access-Control-Allow-Origin") == "*"
    assert upstream.attempts == 0


def test_cors_does_not_echo_request_origin(client, upstream):
    upstream.queue(DummyResponse(200, feature_collection()))
    for origin in ("http://localhost:8080", "https://maps.example.org"):
        r = client.get("/api/marineParks", headers={"Origin": origin})
        assert r.status_code == 200
        assert r.headers.get("Access-Control-Allow-Origin") == "*"
