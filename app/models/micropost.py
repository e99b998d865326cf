"""ORM model for microposts (short status messages)."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String

from app.models.base import Base, utcnow

MICROPOST_MAX_LEN = 140


class Micropost(Base):
    """Status message authored by one user; listed newest first."""

    __tablename__ = "microposts"
    __table_args__ = (
        Index("ix_microposts_user_id_created_at", "user_id", "created_at"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    content = Column(String(MICROPOST_MAX_LEN), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )
