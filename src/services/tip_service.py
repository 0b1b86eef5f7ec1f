"""Tip service for assembling the detailed tip view."""

import logging

from src.models.user import User
from src.schemas.tip import UNKNOWN_OWNER, DetailedComment, DetailedTip, OwnerSummary
from src.services.content_store import ContentStore
from src.services.errors import NotFoundError
from src.services.identifiers import try_parse_identifier
from src.services.user_store import UserStore

logger = logging.getLogger(__name__)


def owner_summary(user: User) -> OwnerSummary:
    """Public author fields of a user."""
    return OwnerSummary(id=user.id, name=user.name, avatar=user.avatar)


class TipService:
    """Service for tip read operations that span several tables."""

    def __init__(self, users: UserStore, content: ContentStore):
        self.users = users
        self.content = content

    def get_detailed_tip(self, tip_id: str) -> DetailedTip:
        """
        Resolve a tip together with its author and comment thread.

        A tip without a resolvable author is reported as missing. A comment
        whose author is gone is kept and shown with the "Unknown" placeholder.

        Raises:
            InvalidIdentifierError: ``tip_id`` is malformed.
            NotFoundError: the tip or its owner does not exist.
        """
        tip = self.content.find_tip_by_id(tip_id)
        if tip is None:
            logger.warning(f"Tip not found with ID {tip_id}")
            raise NotFoundError("Tip not found")

        owner_id = try_parse_identifier(tip.owner_id)
        owner = self.users.find_by_id(owner_id) if owner_id else None
        if owner is None:
            logger.warning(f"Owner not found for tip with ID {tip_id} and ownerId {tip.owner_id}")
            raise NotFoundError("Owner not found")

        comments = self.content.find_comments_by_tip_id(tip.id)
        comment_owners = self.users.find_many_by_ids(c.owner_id for c in comments)

        detailed_comments = []
        for comment in comments:
            comment_owner = comment_owners.get(try_parse_identifier(comment.owner_id))
            if comment_owner is None:
                logger.warning(
                    f"Comment owner not found for comment with ID {comment.id} "
                    f"and ownerId {comment.owner_id}"
                )
                author = UNKNOWN_OWNER.model_copy()
            else:
                author = owner_summary(comment_owner)

            detailed_comments.append(
                DetailedComment(
                    id=comment.id,
                    content=comment.content,
                    created_at=comment.created_at,
                    owner=author,
                    up_votes_by=comment.up_votes_by or [],
                    down_votes_by=comment.down_votes_by or [],
                )
            )

        return DetailedTip(
            id=tip.id,
            title=tip.title,
            body=tip.body,
            category=tip.category,
            created_at=tip.created_at,
            owner=owner_summary(owner),
            up_votes_by=tip.up_votes_by or [],
            down_votes_by=tip.down_votes_by or [],
            comments=detailed_comments,
        )
