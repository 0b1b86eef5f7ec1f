"""SQLAlchemy models."""

from src.models.comment import Comment
from src.models.tip import Tip
from src.models.user import User

__all__ = [
    "User",
    "Tip",
    "Comment",
]
