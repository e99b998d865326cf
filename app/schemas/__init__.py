"""Pydantic request/response schemas."""

from app.schemas.micropost import MicropostRead
from app.schemas.user import UserCreate, UserRead, UserUpdate
from app.schemas.validation import FieldError

__all__ = [
    "FieldError",
    "MicropostRead",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
