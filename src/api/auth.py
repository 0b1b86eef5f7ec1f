"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_user_store
from src.schemas.auth import RegisterData, TokenData, UserLogin, UserRegister, UserResponse
from src.schemas.common import ApiResponse
from src.services.auth import authenticate_user, create_access_token, register_user
from src.services.errors import ValidationError
from src.services.user_store import UserStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post(
    "/register",
    response_model=ApiResponse[RegisterData],
    status_code=status.HTTP_201_CREATED,
)
def register(
    user_data: UserRegister,
    users: Annotated[UserStore, Depends(get_user_store)],
):
    """Register a new user."""
    if not user_data.name or not user_data.email or not user_data.password:
        raise ValidationError("Name, email, and password are required")

    user = register_user(
        users,
        name=user_data.name,
        email=user_data.email,
        password=user_data.password,
        avatar=user_data.avatar,
    )

    return ApiResponse[RegisterData](
        message="User registered",
        data=RegisterData(
            user=UserResponse.model_validate(user),
            token=create_access_token(user),
        ),
    )


@router.post("/login", response_model=ApiResponse[TokenData])
def login(
    credentials: UserLogin,
    users: Annotated[UserStore, Depends(get_user_store)],
):
    """Login with email and password."""
    if not credentials.email or not credentials.password:
        raise ValidationError("Email and password are required")

    user = authenticate_user(users, credentials.email, credentials.password)
    logger.info(f"User {user.id} logged in")

    return ApiResponse[TokenData](
        message="User logged in",
        data=TokenData(token=create_access_token(user)),
    )
