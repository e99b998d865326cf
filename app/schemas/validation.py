"""Pydantic schema for field-level validation failures."""

from pydantic import BaseModel, Field


class FieldError(BaseModel):
    """One failed rule on one field, enough for a caller to render a per-field message."""

    field: str = Field(..., description="Field that failed (e.g. email)")
    rule: str = Field(..., description="Rule identifier (required, too_long, invalid, ...)")
    message: str = Field(..., description="Human-readable message")
