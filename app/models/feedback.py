"""Feedback model for user feedback submissions."""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column, validates

from app.errors import ValidationError
from app.models.base import Base, utcnow


class Feedback(Base):
    """Free-text feedback. Write-only from the API's point of view."""

    __tablename__ = "feedback"

    feedback: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
    )

    @validates("feedback")
    def validate_feedback(self, key: str, value: Optional[str]) -> str:
        text = value.strip() if isinstance(value, str) else ""
        if not text:
            raise ValidationError("Feedback cannot be empty")
        return text

    def __repr__(self) -> str:
        return f"<Feedback {self.id} ({self.created_at})>"
