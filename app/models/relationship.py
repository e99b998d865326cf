"""ORM model for directed follow edges (follower -> followed)."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    UniqueConstraint,
)

from app.models.base import Base, utcnow


class Relationship(Base):
    """
    Follow edge: follower's feed includes followed's microposts.

    One row per ordered pair; self-follow is rejected by a CHECK constraint.
    """

    __tablename__ = "relationships"
    __table_args__ = (
        UniqueConstraint(
            "follower_id", "followed_id", name="uq_relationships_follower_followed"
        ),
        CheckConstraint(
            "follower_id <> followed_id", name="ck_relationships_not_self"
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    follower_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    followed_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
