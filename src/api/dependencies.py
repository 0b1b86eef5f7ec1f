"""FastAPI dependencies for authentication, stores and services."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from src.database import get_db
from src.schemas.auth import TokenClaims
from src.services.auth import verify_token
from src.services.content_store import ContentStore
from src.services.errors import InvalidTokenError, TokenInvalidError, TokenMissingError
from src.services.tip_service import TipService
from src.services.user_store import UserStore

# Missing credentials are reported by get_current_claims, not by HTTPBearer
security = HTTPBearer(auto_error=False)


def get_user_store(
    db: Annotated[Session, Depends(get_db)],
) -> UserStore:
    """Get the credential store for this request."""
    return UserStore(db)


def get_content_store(
    db: Annotated[Session, Depends(get_db)],
) -> ContentStore:
    """Get the tip/comment store for this request."""
    return ContentStore(db)


def get_tip_service(
    users: Annotated[UserStore, Depends(get_user_store)],
    content: Annotated[ContentStore, Depends(get_content_store)],
) -> TipService:
    """Get tip service with dependencies."""
    return TipService(users, content)


def get_current_claims(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenClaims:
    """Get the claims of the bearer token sent with the request.

    No token gives 401, a token that does not verify gives 403.
    """
    if credentials is None or not credentials.credentials:
        raise TokenMissingError()

    try:
        payload = verify_token(credentials.credentials)
        claims = TokenClaims.model_validate(payload)
    except (InvalidTokenError, PydanticValidationError) as e:
        raise TokenInvalidError() from e

    request.state.claims = claims
    return claims
