"""ORM model for application users (identity, credentials and roles)."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from app.models.base import Base, utcnow
from app.models.role import user_roles


class User(Base):
    """
    User account.

    email is always stored lower-cased, so the unique index is effectively
    case-insensitive. remember_token is regenerated on every save.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    remember_token = Column(String(255), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    roles = relationship(
        "Role",
        secondary=user_roles,
        back_populates="users",
        order_by="Role.id",
    )

    @property
    def role_names(self) -> list[str]:
        return [role.name for role in self.roles]

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
