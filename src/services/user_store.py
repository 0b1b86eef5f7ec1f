"""Credential store backed by the users table."""

import logging
from collections.abc import Iterable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.models.user import User
from src.services.errors import DuplicateEmailError
from src.services.identifiers import parse_identifier, try_parse_identifier

logger = logging.getLogger(__name__)


class UserStore:
    """Persistence operations for user records."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        return self.db.query(User).filter(User.email == email).first()

    def find_by_id(self, user_id: str) -> User | None:
        """Get a user by id. Malformed ids raise InvalidIdentifierError."""
        return self.db.get(User, parse_identifier(user_id))

    def find_many_by_ids(self, user_ids: Iterable[str]) -> dict[str, User]:
        """Get users keyed by id. Ids that are malformed or unknown are left out."""
        wanted = {try_parse_identifier(uid) for uid in user_ids} - {None}
        if not wanted:
            return {}
        users = self.db.query(User).filter(User.id.in_(wanted)).all()
        return {user.id: user for user in users}

    def list_all(self) -> list[User]:
        """Get every user."""
        return self.db.query(User).all()

    def insert(self, name: str, email: str, password_hash: str, avatar: str) -> User:
        """Persist a new user.

        Raises:
            DuplicateEmailError: another user already holds ``email``.
        """
        user = User(name=name, email=email, password_hash=password_hash, avatar=avatar)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Rejected duplicate registration for {email}")
            raise DuplicateEmailError() from e
        self.db.refresh(user)
        return user
