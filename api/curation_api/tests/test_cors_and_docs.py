"""CORS preflight handling and public documentation routes."""

from __future__ import annotations

import pytest

ALLOWED_ORIGIN = "http://localhost:3000"


def _preflight_headers(origin: str, method: str = "POST", headers: str = "Authorization, Content-Type"):
    return {
        "Origin": origin,
        "Access-Control-Request-Method": method,
        "Access-Control-Request-Headers": headers,
    }


@pytest.mark.asyncio
async def test_preflight_from_unknown_origin_is_rejected(client):
    response = await client.options("/api/v1/playlists", headers=_preflight_headers("http://evil.example"))
    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers


@pytest.mark.asyncio
async def test_preflight_from_frontend_origin_is_accepted(client):
    response = await client.options("/api/v1/playlists", headers=_preflight_headers(ALLOWED_ORIGIN))
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == ALLOWED_ORIGIN
    assert response.headers["access-control-allow-credentials"] == "true"
    allowed_methods = {method.strip() for method in response.headers["access-control-allow-methods"].split(",")}
    assert allowed_methods == {"GET", "POST", "PUT", "DELETE", "OPTIONS"}


@pytest.mark.asyncio
async def test_preflight_rejects_unlisted_method_and_header(client):
    patch = await client.options("/api/v1/curation/1", headers=_preflight_headers(ALLOWED_ORIGIN, method="PATCH"))
    assert patch.status_code == 400

    custom_header = await client.options(
        "/api/v1/curation/1", headers=_preflight_headers(ALLOWED_ORIGIN, headers="X-Custom")
    )
    assert custom_header.status_code == 400


@pytest.mark.asyncio
async def test_simple_request_echoes_allowed_origin(client):
    response = await client.get("/api/v1/playlists", headers={"Origin": ALLOWED_ORIGIN})
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == ALLOWED_ORIGIN

    foreign = await client.get("/api/v1/playlists", headers={"Origin": "http://evil.example"})
    assert "access-control-allow-origin" not in foreign.headers


@pytest.mark.asyncio
async def test_policy_rejections_still_carry_cors_headers(client):
    response = await client.post("/api/v1/playlists", json={}, headers={"Origin": ALLOWED_ORIGIN})
    assert response.status_code == 401
    assert response.headers["access-control-allow-origin"] == ALLOWED_ORIGIN


@pytest.mark.asyncio
async def test_documentation_is_public(client):
    schema = await client.get("/v3/api-docs")
    assert schema.status_code == 200
    assert "/api/v1/playlists/{playlist_id}/recommendation" in schema.json()["paths"]

    ui = await client.get("/swagger-ui")
    assert ui.status_code == 200


@pytest.mark.asyncio
async def test_unlisted_routes_require_credentials(client):
    response = await client.get("/api/v1/unknown")
    assert response.status_code == 401
