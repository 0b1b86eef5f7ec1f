"""Content store for tips and comments."""

from sqlalchemy.orm import Session

from src.models.comment import Comment
from src.models.tip import Tip
from src.services.identifiers import parse_identifier


class ContentStore:
    """Persistence operations over the independent tips and comments tables."""

    def __init__(self, db: Session):
        self.db = db

    def insert_tip(self, title: str, body: str, category: str | None, owner_id: str) -> Tip:
        """Persist a new tip with empty vote lists."""
        tip = Tip(
            title=title,
            body=body,
            category=category,
            owner_id=owner_id,
            up_votes_by=[],
            down_votes_by=[],
        )
        self.db.add(tip)
        self.db.commit()
        self.db.refresh(tip)
        return tip

    def list_tips(self) -> list[Tip]:
        """Get every tip."""
        return self.db.query(Tip).all()

    def find_tip_by_id(self, tip_id: str) -> Tip | None:
        """Get a tip by id. Malformed ids raise InvalidIdentifierError."""
        return self.db.get(Tip, parse_identifier(tip_id))

    def find_comments_by_tip_id(self, tip_id: str) -> list[Comment]:
        """Get all comments on a tip, oldest first."""
        return (
            self.db.query(Comment)
            .filter(Comment.tip_id == tip_id)
            .order_by(Comment.created_at)
            .all()
        )

    def insert_comment(self, tip_id: str, owner_id: str, content: str) -> Comment:
        """Persist a comment. Neither reference is checked."""
        comment = Comment(
            tip_id=tip_id,
            owner_id=owner_id,
            content=content,
            up_votes_by=[],
            down_votes_by=[],
        )
        self.db.add(comment)
        self.db.commit()
        self.db.refresh(comment)
        return comment
