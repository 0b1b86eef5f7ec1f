"""Pydantic schemas for API requests and responses."""

from src.schemas.auth import (
    RegisterData,
    TokenClaims,
    TokenData,
    UserData,
    UserDetailData,
    UserLogin,
    UserRegister,
    UserResponse,
    UsersData,
    UserSummary,
)
from src.schemas.common import ApiResponse, ErrorResponse
from src.schemas.tip import (
    DetailedComment,
    DetailedTip,
    DetailTipData,
    OwnerSummary,
    TipCreate,
    TipData,
    TipResponse,
    TipsData,
)

__all__ = [
    "ApiResponse",
    "ErrorResponse",
    "UserRegister",
    "UserLogin",
    "TokenClaims",
    "UserSummary",
    "UserResponse",
    "RegisterData",
    "TokenData",
    "UserData",
    "UserDetailData",
    "UsersData",
    "TipCreate",
    "TipResponse",
    "OwnerSummary",
    "DetailedComment",
    "DetailedTip",
    "TipData",
    "TipsData",
    "DetailTipData",
]
