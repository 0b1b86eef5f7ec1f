"""Tip and comment schemas."""

from datetime import datetime

from pydantic import BaseModel

from src.schemas.common import CamelModel


class TipCreate(BaseModel):
    """Create a new tip. Presence of title and body is checked by the endpoint."""

    title: str | None = None
    body: str | None = None
    category: str | None = None


class TipResponse(CamelModel):
    """Tip as stored."""

    id: str
    title: str
    body: str
    category: str | None
    owner_id: str
    created_at: datetime
    up_votes_by: list[str]
    down_votes_by: list[str]


class OwnerSummary(CamelModel):
    """Author shown next to a tip or comment. ``id`` is None for unknown authors."""

    id: str | None
    name: str
    avatar: str


UNKNOWN_OWNER = OwnerSummary(id=None, name="Unknown", avatar="")


class DetailedComment(CamelModel):
    """Comment with its resolved author."""

    id: str
    content: str
    created_at: datetime
    owner: OwnerSummary
    up_votes_by: list[str]
    down_votes_by: list[str]


class DetailedTip(CamelModel):
    """Tip with its resolved author and comment thread."""

    id: str
    title: str
    body: str
    category: str | None
    created_at: datetime
    owner: OwnerSummary
    up_votes_by: list[str]
    down_votes_by: list[str]
    comments: list[DetailedComment]


class TipData(CamelModel):
    """Single tip payload."""

    tip: TipResponse


class TipsData(CamelModel):
    """Tip list payload."""

    tips: list[TipResponse]


class DetailTipData(CamelModel):
    """Detailed tip payload."""

    detail_tip: DetailedTip
