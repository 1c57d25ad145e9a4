"""Tests for the CORS allow-list policy."""

from fastapi.testclient import TestClient

from natrack.api.app import create_app
from natrack.api.cors import is_origin_allowed
from tests.conftest import ALLOWED_ORIGIN, InMemorySessionRepository, make_container


def test_missing_origin_is_always_allowed() -> None:
    assert is_origin_allowed(None, ["https://a.example"])
    assert is_origin_allowed("", ["https://a.example"])
    assert is_origin_allowed(None, [])


def test_empty_allow_list_allows_any_origin() -> None:
    assert is_origin_allowed("https://anything.example", [])


def test_listed_origin_is_allowed() -> None:
    assert is_origin_allowed(
        "https://a.example", ["https://b.example", "https://a.example"]
    )


def test_unlisted_origin_is_rejected() -> None:
    assert not is_origin_allowed("https://evil.example", ["https://a.example"])


def test_preflight_from_allowed_origin(client: TestClient) -> None:
    response = client.options(
        "/api/sessions",
        headers={
            "Origin": ALLOWED_ORIGIN,
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Authorization, X-API-Key, Content-Type",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == ALLOWED_ORIGIN
    assert response.headers["access-control-allow-credentials"] == "true"
    allowed_methods = response.headers["access-control-allow-methods"]
    for method in ("GET", "POST", "PUT", "DELETE", "OPTIONS"):
        assert method in allowed_methods
    allowed_headers = response.headers["access-control-allow-headers"].lower()
    assert "authorization" in allowed_headers
    assert "x-api-key" in allowed_headers


def test_preflight_from_unlisted_origin_is_refused(client: TestClient) -> None:
    response = client.options(
        "/sessions/abc",
        headers={
            "Origin": "https://evil.example",
            "Access-Control-Request-Method": "DELETE",
        },
    )

    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers


def test_simple_request_from_unlisted_origin_has_no_cors_headers(
    client: TestClient,
) -> None:
    response = client.get("/sessions", headers={"Origin": "https://evil.example"})

    assert response.status_code == 200
    assert "access-control-allow-origin" not in response.headers
    assert "access-control-allow-credentials" not in response.headers


def test_simple_request_from_allowed_origin_is_mirrored(client: TestClient) -> None:
    response = client.get("/sessions", headers={"Origin": ALLOWED_ORIGIN})

    assert response.headers["access-control-allow-origin"] == ALLOWED_ORIGIN


def test_empty_allow_list_mirrors_any_origin(settings) -> None:
    open_settings = settings.model_copy(update={"cors_origin": ""})
    client = TestClient(
        create_app(make_container(open_settings, InMemorySessionRepository()))
    )

    response = client.get("/sessions", headers={"Origin": "https://any.example"})

    assert response.headers["access-control-allow-origin"] == "https://any.example"
