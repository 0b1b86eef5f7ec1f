"""Comment model."""

from sqlalchemy import JSON, Column, String, Text

from src.database import Base
from src.models.mixins import IdentifierMixin, TimestampMixin


class Comment(Base, IdentifierMixin, TimestampMixin):
    """Comment on a tip. Both references are soft (no foreign keys)."""

    __tablename__ = "comments"

    tip_id = Column(String(36), nullable=False, index=True)
    owner_id = Column(String(36), nullable=False, index=True)
    content = Column(Text, nullable=False)
    up_votes_by = Column(JSON, nullable=False, default=list)
    down_votes_by = Column(JSON, nullable=False, default=list)
