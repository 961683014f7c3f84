import pytest

ALLOWED_ORIGIN = "http://localhost:5173"


@pytest.mark.asyncio
async def test_request_without_origin_allowed(client):
    resp = await client.get("/api/wishes")
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_allowed_origin(client):
    resp = await client.get("/api/wishes", headers={"Origin": ALLOWED_ORIGIN})
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == ALLOWED_ORIGIN
    assert resp.headers["access-control-allow-credentials"] == "true"


@pytest.mark.asyncio
async def test_client_url_is_allowed(client, settings):
    resp = await client.get("/api/wishes", headers={"Origin": settings.client_url})
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_unknown_origin_rejected(client):
    resp = await client.get("/api/wishes", headers={"Origin": "https://evil.example"})
    assert resp.status_code == 403
    assert resp.json() == {"error": "Not allowed by CORS"}
    assert "access-control-allow-origin" not in resp.headers


@pytest.mark.asyncio
async def test_unknown_origin_cannot_create(client):
    resp = await client.post(
        "/api/feedback",
        json={"feedback": "hi"},
        headers={"Origin": "https://evil.example"},
    )
    assert resp.status_code == 403


@pytest.mark.asyncio
async def test_preflight_from_unknown_origin(client):
    resp = await client.options(
        "/api/wish",
        headers={
            "Origin": "https://evil.example",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert resp.status_code >= 400
    assert "access-control-allow-origin" not in resp.headers


@pytest.mark.asyncio
async def test_preflight_from_allowed_origin(client):
    resp = await client.options(
        "/api/wish",
        headers={
            "Origin": ALLOWED_ORIGIN,
            "Access-Control-Request-Method": "POST",
        },
    )
    assert resp.status_code in (200, 204)
    assert resp.headers["access-control-allow-origin"] == ALLOWED_ORIGIN
