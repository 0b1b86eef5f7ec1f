"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from src.config import get_settings
from src.models.user import User
from src.services.errors import AuthenticationError, DuplicateEmailError, InvalidTokenError
from src.services.user_store import UserStore

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.bcrypt_rounds
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def issue_token(claims: dict[str, Any], ttl: timedelta | None = None) -> str:
    """Sign ``claims`` into a JWT that expires after ``ttl``."""
    if ttl is None:
        ttl = timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = dict(claims)
    to_encode["exp"] = datetime.now(UTC) + ttl
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> dict[str, Any]:
    """Decode and validate a JWT token.

    Raises:
        InvalidTokenError: signature mismatch, malformed token or expired.
    """
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e


def create_access_token(user: User) -> str:
    """Create the access token handed out on registration and login."""
    return issue_token(
        {
            "sub": str(user.id),
            "email": user.email,
            "name": user.name,
            "avatar": user.avatar,
        }
    )


def register_user(
    users: UserStore, name: str, email: str, password: str, avatar: str | None = None
) -> User:
    """Create a new user with a hashed password.

    The existence check gives a fast rejection; the unique index on
    ``users.email`` decides concurrent registrations.
    """
    if users.find_by_email(email) is not None:
        raise DuplicateEmailError()

    user = users.insert(
        name=name,
        email=email,
        password_hash=get_password_hash(password),
        avatar=avatar or settings.default_avatar_url,
    )
    logger.info(f"Registered user {user.id}")
    return user


def authenticate_user(users: UserStore, email: str, password: str) -> User:
    """Authenticate a user by email and password."""
    user = users.find_by_email(email)
    if not user or not verify_password(password, user.password_hash):
        raise AuthenticationError()
    return user
