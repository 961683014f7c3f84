import sys
from pathlib import Path
from typing import AsyncIterator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app.config import Settings
from app.main import create_app

ALLOWED_ORIGIN = "http://localhost:5173"


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        client_url="https://wishes.example",
        cors_origins=(ALLOWED_ORIGIN,),
        upload_dir=tmp_path / "uploads",
        frontend_dir=tmp_path / "frontend" / "dist",
        debug=True,
        create_all=True,
    )


@pytest.fixture()
def app(settings: Settings):
    return create_app(settings)


@pytest_asyncio.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
            yield ac


@pytest.fixture()
def create_wish(client):
    """Post a wish form; extra keyword args go to ``client.post``."""
    async def _create(name="Ana", message="Happy birthday!", sender="Leo", **kwargs):
        data = {"name": name, "message": message, "sender": sender}
        data = {k: v for k, v in data.items() if v is not None}
        return await client.post("/api/wish", data=data, **kwargs)
    return _create
