from datetime import datetime

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from app.models import Feedback


@pytest.mark.asyncio
async def test_submit_feedback(client):
    resp = await client.post("/api/feedback", json={"feedback": "Great!"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["message"] == "Thank you for your feedback!"
    assert data["feedback"]["feedback"] == "Great!"
    assert data["feedback"]["id"]
    assert data["feedback"]["createdAt"]


@pytest.mark.asyncio
async def test_feedback_is_trimmed(client, settings):
    resp = await client.post("/api/feedback", json={"feedback": "  Lovely site \n"})
    assert resp.status_code == 200
    assert resp.json()["feedback"]["feedback"] == "Lovely site"

    engine = create_async_engine(settings.database_url)
    try:
        async with engine.connect() as conn:
            rows = (await conn.execute(select(Feedback.feedback))).scalars().all()
    finally:
        await engine.dispose()
    assert rows == ["Lovely site"]


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{"feedback": "  "}, {"feedback": ""}, {}])
async def test_empty_feedback_rejected(client, payload):
    resp = await client.post("/api/feedback", json=payload)
    assert resp.status_code == 400
    assert resp.json() == {"error": "Feedback cannot be empty"}


@pytest.fixture()
def failing_commit(monkeypatch):
    """Make every session commit fail as if the database went away."""
    async def commit(self):
        raise OperationalError("INSERT", {}, Exception("database is gone"))
    monkeypatch.setattr(AsyncSession, "commit", commit)


@pytest.mark.asyncio
async def test_feedback_storage_failure(client, failing_commit):
    resp = await client.post("/api/feedback", json={"feedback": "Great!"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to save feedback"}


@pytest.mark.asyncio
async def test_feedback_timestamps_carry_offset(client):
    resp = await client.post("/api/feedback", json={"feedback": "Great!"})
    record = resp.json()["feedback"]
    for key in ("createdAt", "updatedAt"):
        assert datetime.fromisoformat(record[key].replace("Z", "+00:00")).tzinfo is not None
