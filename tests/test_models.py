"""Model-level validation."""

import pytest

from app.errors import ValidationError
from app.models import Feedback, Wish


def test_wish_requires_text_fields():
    with pytest.raises(ValidationError, match="name is required"):
        Wish(name="", message="hi", sender="me")
    with pytest.raises(ValidationError, match="sender is required"):
        Wish(name="Ana", message="hi", sender="  ")


def test_wish_limits_images():
    Wish(name="Ana", message="hi", sender="me", images=["a", "b", "c"])
    with pytest.raises(ValidationError):
        Wish(name="Ana", message="hi", sender="me", images=["a", "b", "c", "d"])


def test_feedback_is_trimmed():
    assert Feedback(feedback="  thanks \t").feedback == "thanks"


def test_feedback_rejects_blank():
    with pytest.raises(ValidationError, match="Feedback cannot be empty"):
        Feedback(feedback=" \n ")
