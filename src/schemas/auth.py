"""Authentication and user schemas."""

from datetime import datetime

from pydantic import BaseModel

from src.schemas.common import CamelModel


class UserRegister(BaseModel):
    """User registration request. Presence is checked by the endpoint."""

    name: str | None = None
    email: str | None = None
    password: str | None = None
    avatar: str | None = None


class UserLogin(BaseModel):
    """User login request."""

    email: str | None = None
    password: str | None = None


class TokenClaims(BaseModel):
    """Decoded access token payload."""

    sub: str
    email: str | None = None
    name: str | None = None
    avatar: str | None = None
    exp: int


class UserSummary(CamelModel):
    """Public user information."""

    id: str
    name: str
    email: str
    avatar: str


class UserResponse(UserSummary):
    """Public user information with creation time."""

    created_at: datetime


class RegisterData(CamelModel):
    """Registration result."""

    user: UserResponse
    token: str


class TokenData(CamelModel):
    """Login result."""

    token: str


class UserData(CamelModel):
    """Single user payload."""

    user: UserSummary


class UserDetailData(CamelModel):
    """Single user payload with creation time."""

    user: UserResponse


class UsersData(CamelModel):
    """User list payload."""

    users: list[UserSummary]
