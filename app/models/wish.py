"""Wish document: a greeting with optional media attachments."""

from typing import List, Optional

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column, validates

from app.errors import ValidationError
from app.models.base import Base

MAX_IMAGES = 3


class Wish(Base):
    """A user-submitted wish. Created once, never updated."""

    __tablename__ = "wishes"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    sender: Mapped[str] = mapped_column(Text, nullable=False)

    # Absolute URLs into the upload store
    images: Mapped[List[str]] = mapped_column(JSON, default=list, nullable=False)
    video: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)

    @validates("name", "message", "sender")
    def validate_text(self, key: str, value: Optional[str]) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"{key} is required")
        return value

    @validates("images")
    def validate_images(self, key: str, value: Optional[List[str]]) -> List[str]:
        images = list(value or [])
        if len(images) > MAX_IMAGES:
            raise ValidationError(f"A wish can have at most {MAX_IMAGES} images")
        return images

    def __repr__(self) -> str:
        return f"<Wish {self.id} from {self.sender!r}>"
