"""Request/response schemas for user records."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """
    Registration input. Rules are checked by app.services.validation so that
    all field errors are reported together.
    """

    name: str = ""
    email: str = ""
    password: str = ""
    password_confirmation: str = ""
    role_ids: list[int] = Field(
        default_factory=list,
        description="Explicit roles; the default role is assigned when empty",
    )


class UserUpdate(BaseModel):
    """
    Profile update. Omitted name or email keep their current value; password
    and confirmation are required on every save.
    """

    name: str | None = None
    email: str | None = None
    password: str | None = None
    password_confirmation: str | None = None


class UserRead(BaseModel):
    """User as exposed to callers (no credential hash, no remember-token)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    roles: list[str] = Field(default_factory=list, validation_alias="role_names")
    created_at: datetime
