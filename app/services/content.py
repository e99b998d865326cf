"""Content store: microposts authored by users, listed newest first."""

import logging
from collections.abc import Iterator

from sqlalchemy.orm import Session

from app.models import Micropost, User
from app.services.authorization import authorize_micropost_delete
from app.services.errors import NotFoundError, ValidationError
from app.services.pagination import paginate
from app.services.validation import validate_micropost_content

logger = logging.getLogger(__name__)

# Newest first; equal timestamps fall back to the most recently inserted row.
NEWEST_FIRST = (Micropost.created_at.desc(), Micropost.id.desc())


def post_micropost(session: Session, user: User, content: str) -> Micropost:
    """
    Persist a micropost for user with a server-assigned timestamp.

    Raises:
        ValidationError: content is blank or too long.
    """
    errors = validate_micropost_content(content)
    if errors:
        raise ValidationError(errors)
    micropost = Micropost(user_id=user.id, content=content)
    session.add(micropost)
    session.commit()
    session.refresh(micropost)
    logger.info("Micropost created: micropost_id=%s, user_id=%s", micropost.id, user.id)
    return micropost


def microposts_by_user(
    session: Session,
    user: User,
    page: int | None = None,
    per_page: int | None = None,
) -> Iterator[Micropost]:
    """Iterate the user's microposts newest first. Each call runs a fresh query."""
    query = (
        session.query(Micropost)
        .filter(Micropost.user_id == user.id)
        .order_by(*NEWEST_FIRST)
    )
    return iter(paginate(query, page, per_page))


def get_micropost(session: Session, micropost_id: int) -> Micropost:
    micropost = session.get(Micropost, micropost_id)
    if micropost is None:
        raise NotFoundError("micropost", micropost_id)
    return micropost


def delete_micropost(session: Session, actor: User, micropost: Micropost) -> None:
    """Delete a micropost; only its author may do so."""
    authorize_micropost_delete(actor, micropost)
    micropost_id = micropost.id
    session.delete(micropost)
    session.commit()
    logger.info("Micropost deleted: micropost_id=%s, user_id=%s", micropost_id, actor.id)


def delete_all_by_user(session: Session, user: User) -> int:
    """
    Delete every micropost authored by user. Does not commit; part of the
    account destruction transaction. Returns rows deleted.
    """
    return (
        session.query(Micropost)
        .filter(Micropost.user_id == user.id)
        .delete(synchronize_session=False)
    )
