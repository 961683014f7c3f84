#!/usr/bin/env python3
"""
Create the wishes and feedback tables.

Run once against a fresh production database (where DB_CREATE_ALL is off).
Existing tables are left untouched.
"""
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.ext.asyncio import create_async_engine

from app.config import Settings
from app.models import Base


async def init_db(database_url: str) -> None:
    """Create all tables."""
    engine = create_async_engine(database_url, echo=True)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    finally:
        await engine.dispose()
    print(f"Created tables: {', '.join(sorted(Base.metadata.tables))}")


if __name__ == "__main__":
    asyncio.run(init_db(Settings.from_env().database_url))
