"""Tip API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_content_store, get_current_claims, get_tip_service
from src.schemas.auth import TokenClaims
from src.schemas.common import ApiResponse
from src.schemas.tip import DetailTipData, TipCreate, TipData, TipResponse, TipsData
from src.services.content_store import ContentStore
from src.services.errors import ValidationError
from src.services.tip_service import TipService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tips"])


@router.post(
    "/add-tips",
    response_model=ApiResponse[TipData],
    status_code=status.HTTP_201_CREATED,
)
def add_tip(
    tip_data: TipCreate,
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
    content: Annotated[ContentStore, Depends(get_content_store)],
):
    """Create a tip owned by the current user."""
    if not tip_data.title or not tip_data.body:
        raise ValidationError("Title and body are required")

    tip = content.insert_tip(
        title=tip_data.title,
        body=tip_data.body,
        category=tip_data.category,
        owner_id=claims.sub,
    )
    logger.info(f"User {claims.sub} added tip {tip.id}")

    return ApiResponse[TipData](
        message="Tip added",
        data=TipData(tip=TipResponse.model_validate(tip)),
    )


@router.get("/tips", response_model=ApiResponse[TipsData])
def get_tips(
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
    content: Annotated[ContentStore, Depends(get_content_store)],
):
    """Get all tips."""
    tips = [TipResponse.model_validate(tip) for tip in content.list_tips()]
    return ApiResponse[TipsData](message="ok", data=TipsData(tips=tips))


@router.get("/tips/{tip_id}", response_model=ApiResponse[DetailTipData])
def get_tip(
    tip_id: str,
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
    tip_service: Annotated[TipService, Depends(get_tip_service)],
):
    """Get a tip with its author and comments."""
    detail_tip = tip_service.get_detailed_tip(tip_id)
    return ApiResponse[DetailTipData](
        message="Tip retrieved",
        data=DetailTipData(detail_tip=detail_tip),
    )
