"""Wishwell database models."""

from app.models.base import Base, as_utc
from app.models.wish import Wish, MAX_IMAGES
from app.models.feedback import Feedback

__all__ = [
    "Base",
    "as_utc",
    "Wish",
    "MAX_IMAGES",
    "Feedback",
]
