"""
Pure validation rules for user and micropost input.

Each function returns the list of failed rules (empty when valid) so callers
can accumulate errors across fields before touching the store.
"""

import re

from app.core.security import (
    NAME_MAX_LEN,
    PASSWORD_MAX_BYTES,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
)
from app.models.micropost import MICROPOST_MAX_LEN
from app.schemas.validation import FieldError

EMAIL_RE = re.compile(r"\A[\w+\-.]+@[a-z\d\-.]+\.[a-z]+\Z", re.IGNORECASE | re.ASCII)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def normalize_email(email: str) -> str:
    """Canonical stored form of an email: trimmed and lower-cased."""
    return email.strip().lower()


def validate_name(name: str | None) -> list[FieldError]:
    if _is_blank(name):
        return [FieldError(field="name", rule="required", message="Name can't be blank")]
    if len(name.strip()) > NAME_MAX_LEN:
        return [
            FieldError(
                field="name",
                rule="too_long",
                message=f"Name is too long (maximum is {NAME_MAX_LEN} characters)",
            )
        ]
    return []


def validate_email(email: str | None) -> list[FieldError]:
    if _is_blank(email):
        return [FieldError(field="email", rule="required", message="Email can't be blank")]
    if not EMAIL_RE.match(email.strip()):
        return [FieldError(field="email", rule="invalid", message="Email is invalid")]
    return []


def validate_password(password: str | None, confirmation: str | None) -> list[FieldError]:
    """Password presence, length window and confirmation match."""
    errors: list[FieldError] = []
    if _is_blank(password):
        errors.append(
            FieldError(field="password", rule="required", message="Password can't be blank")
        )
    elif len(password) < PASSWORD_MIN_LEN:
        errors.append(
            FieldError(
                field="password",
                rule="too_short",
                message=f"Password is too short (minimum is {PASSWORD_MIN_LEN} characters)",
            )
        )
    elif len(password) > PASSWORD_MAX_LEN:
        errors.append(
            FieldError(
                field="password",
                rule="too_long",
                message=f"Password is too long (maximum is {PASSWORD_MAX_LEN} characters)",
            )
        )
    elif len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        errors.append(
            FieldError(
                field="password",
                rule="too_long",
                message=f"Password is too long (maximum is {PASSWORD_MAX_BYTES} bytes)",
            )
        )

    if _is_blank(confirmation):
        errors.append(
            FieldError(
                field="password_confirmation",
                rule="required",
                message="Password confirmation can't be blank",
            )
        )
    elif password != confirmation:
        errors.append(
            FieldError(
                field="password_confirmation",
                rule="mismatch",
                message="Password confirmation doesn't match Password",
            )
        )
    return errors


def validate_user_fields(
    name: str | None,
    email: str | None,
    password: str | None,
    confirmation: str | None,
) -> list[FieldError]:
    """All user rules, accumulated."""
    return (
        validate_name(name)
        + validate_email(email)
        + validate_password(password, confirmation)
    )


def validate_micropost_content(content: str | None) -> list[FieldError]:
    if _is_blank(content):
        return [
            FieldError(field="content", rule="required", message="Content can't be blank")
        ]
    if len(content) > MICROPOST_MAX_LEN:
        return [
            FieldError(
                field="content",
                rule="too_long",
                message=f"Content is too long (maximum is {MICROPOST_MAX_LEN} characters)",
            )
        ]
    return []
