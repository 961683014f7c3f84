"""Feedback API endpoints."""

import logging
from datetime import datetime
from typing import Optional

from litestar import Controller, post
from litestar.status_codes import HTTP_200_OK
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import StorageError, ValidationError
from app.models import Feedback, as_utc
from app.repositories import create_feedback
from app.utils.logging import error_log

logger = logging.getLogger("Wishwell.feedback")


# --- Request/Response Schemas ---

class FeedbackRequest(BaseModel):
    """Request to submit feedback."""
    feedback: Optional[str] = None


class FeedbackRecord(BaseModel):
    """Stored feedback document."""
    id: str
    feedback: str
    createdAt: datetime
    updatedAt: datetime

    @classmethod
    def from_feedback(cls, feedback: Feedback) -> "FeedbackRecord":
        return cls(
            id=str(feedback.id),
            feedback=feedback.feedback,
            createdAt=as_utc(feedback.created_at),
            updatedAt=as_utc(feedback.updated_at),
        )


class FeedbackResponse(BaseModel):
    """Response after submitting feedback."""
    message: str
    feedback: FeedbackRecord


# --- Controller ---

class FeedbackController(Controller):
    """API endpoints for feedback submission."""

    path = "/api/feedback"
    tags = ["feedback"]

    @post("/", status_code=HTTP_200_OK)
    async def submit_feedback(
        self,
        data: FeedbackRequest,
        session: AsyncSession,
    ) -> FeedbackResponse:
        """Submit user feedback."""
        if not data.feedback or not data.feedback.strip():
            raise ValidationError("Feedback cannot be empty")

        try:
            feedback = await create_feedback(session, data.feedback)
        except StorageError as e:
            error_log("Failed to save feedback", exc=e)
            raise StorageError("Failed to save feedback") from e

        logger.info(f"Saved feedback {feedback.id}")
        return FeedbackResponse(
            message="Thank you for your feedback!",
            feedback=FeedbackRecord.from_feedback(feedback),
        )
