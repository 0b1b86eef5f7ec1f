"""User model."""

from sqlalchemy import Column, String

from src.database import Base
from src.models.mixins import IdentifierMixin, TimestampMixin


class User(Base, IdentifierMixin, TimestampMixin):
    """User model for authentication and content ownership."""

    __tablename__ = "users"

    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    avatar = Column(String(1024), nullable=False)
