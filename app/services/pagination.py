"""Offset pagination for listing queries."""

from sqlalchemy.orm import Query

from app.core.config import get_settings
from app.schemas.validation import FieldError
from app.services.errors import ValidationError

MAX_PER_PAGE = 100


def paginate(query: Query, page: int | None, per_page: int | None = None) -> Query:
    """
    Restrict an ordered query to one page (1-based).

    page=None returns the query unchanged; per_page defaults to PER_PAGE.
    """
    if page is None:
        return query
    if per_page is None:
        per_page = get_settings().PER_PAGE
    errors: list[FieldError] = []
    if page < 1:
        errors.append(FieldError(field="page", rule="invalid", message="Page must be at least 1"))
    if per_page < 1 or per_page > MAX_PER_PAGE:
        errors.append(
            FieldError(
                field="per_page",
                rule="invalid",
                message=f"Per page must be between 1 and {MAX_PER_PAGE}",
            )
        )
    if errors:
        raise ValidationError(errors)
    return query.limit(per_page).offset((page - 1) * per_page)
