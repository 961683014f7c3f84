"""Wish repository: create, fetch by id, list."""

import logging
import uuid
from typing import List, Optional, Sequence

from sqlalchemy import desc, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import InvalidIdError, NotFoundError, StorageError
from app.models import Wish

logger = logging.getLogger("Wishwell.repositories.wishes")


def parse_wish_id(raw: str) -> uuid.UUID:
    """
    Check that ``raw`` has the shape of a document id.

    Malformed ids are rejected outright; there is no fallback lookup by the
    raw string.
    """
    try:
        return uuid.UUID(str(raw))
    except (TypeError, ValueError) as exc:
        raise InvalidIdError("Invalid wish ID") from exc


async def create_wish(
    session: AsyncSession,
    name: str,
    message: str,
    sender: str,
    images: Optional[Sequence[str]] = None,
    video: Optional[str] = None,
) -> Wish:
    """Insert one wish. Model validation errors propagate unchanged."""
    wish = Wish(
        name=name,
        message=message,
        sender=sender,
        images=list(images or []),
        video=video,
    )
    session.add(wish)
    try:
        await session.commit()
        await session.refresh(wish)
    except SQLAlchemyError as e:
        await session.rollback()
        raise StorageError(f"Failed to save wish: {e}") from e
    return wish


async def get_wish(session: AsyncSession, wish_id: str) -> Wish:
    """Fetch a wish by id; ``InvalidIdError`` or ``NotFoundError`` otherwise."""
    key = parse_wish_id(wish_id)
    try:
        wish = await session.get(Wish, key)
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to load wish: {e}") from e
    if wish is None:
        raise NotFoundError("Wish not found")
    return wish


async def list_wishes(session: AsyncSession) -> List[Wish]:
    """All wishes, most recent first."""
    try:
        result = await session.execute(select(Wish).order_by(desc(Wish.created_at)))
    except SQLAlchemyError as e:
        raise StorageError(f"Failed to list wishes: {e}") from e
    return list(result.scalars().all())
