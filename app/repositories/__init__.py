"""Data access for the Wishes and Feedback collections."""

from app.repositories.wishes import create_wish, get_wish, list_wishes, parse_wish_id
from app.repositories.feedback import create_feedback

__all__ = ["create_wish", "get_wish", "list_wishes", "parse_wish_id", "create_feedback"]
