"""Wishwell API routes."""

from app.api.wishes import WishesController, VideoController
from app.api.feedback import FeedbackController

__all__ = ["WishesController", "VideoController", "FeedbackController"]
