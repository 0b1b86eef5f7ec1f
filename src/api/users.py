"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_current_claims, get_user_store
from src.schemas.auth import (
    TokenClaims,
    UserData,
    UserDetailData,
    UserResponse,
    UsersData,
    UserSummary,
)
from src.schemas.common import ApiResponse
from src.services.errors import InvalidIdentifierError, NotFoundError
from src.services.user_store import UserStore

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=ApiResponse[UsersData])
def get_users(
    users: Annotated[UserStore, Depends(get_user_store)],
):
    """Get all users without credentials."""
    return ApiResponse[UsersData](
        message="ok",
        data=UsersData(users=[UserSummary.model_validate(u) for u in users.list_all()]),
    )


# Declared before /{user_id} so "me" is not taken for an id
@router.get("/me", response_model=ApiResponse[UserData])
def get_me(
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
    users: Annotated[UserStore, Depends(get_user_store)],
):
    """Get the user the bearer token was issued to."""
    try:
        user = users.find_by_id(claims.sub)
    except InvalidIdentifierError:
        user = None
    if user is None:
        raise NotFoundError("User not found")

    return ApiResponse[UserData](message="ok", data=UserData(user=UserSummary.model_validate(user)))


@router.get("/{user_id}", response_model=ApiResponse[UserDetailData])
def get_user(
    user_id: str,
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
    users: Annotated[UserStore, Depends(get_user_store)],
):
    """Get a specific user."""
    user = users.find_by_id(user_id)
    if user is None:
        raise NotFoundError("User not found")

    return ApiResponse[UserDetailData](
        message="User retrieved",
        data=UserDetailData(user=UserResponse.model_validate(user)),
    )
