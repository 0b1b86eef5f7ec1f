"""Tip model."""

from sqlalchemy import JSON, Column, String, Text

from src.database import Base
from src.models.mixins import IdentifierMixin, TimestampMixin


class Tip(Base, IdentifierMixin, TimestampMixin):
    """A shared tip.

    ``owner_id`` points at ``users.id`` without a foreign key: the owner may
    have been removed and readers must handle that.
    """

    __tablename__ = "tips"

    title = Column(String(255), nullable=False)
    body = Column(Text, nullable=False)
    category = Column(String(100), nullable=True)
    owner_id = Column(String(36), nullable=False, index=True)
    # Lists of user ids
    up_votes_by = Column(JSON, nullable=False, default=list)
    down_votes_by = Column(JSON, nullable=False, default=list)
