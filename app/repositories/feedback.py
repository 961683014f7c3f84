"""Feedback repository."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import StorageError
from app.models import Feedback


async def create_feedback(session: AsyncSession, text: str) -> Feedback:
    """Insert one feedback record; the model trims and validates ``text``."""
    feedback = Feedback(feedback=text)
    session.add(feedback)
    try:
        await session.commit()
        await session.refresh(feedback)
    except SQLAlchemyError as e:
        await session.rollback()
        raise StorageError(f"Failed to save feedback: {e}") from e
    return feedback
