"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.micropost import Micropost
from app.models.relationship import Relationship
from app.models.role import Role, user_roles
from app.models.user import User

__all__ = ["Base", "Micropost", "Relationship", "Role", "User", "user_roles"]
