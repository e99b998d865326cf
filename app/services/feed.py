"""Feed resolver: a user's own microposts plus those of every user they follow."""

from collections.abc import Iterator

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from app.models import Micropost, Relationship, User
from app.services.content import NEWEST_FIRST
from app.services.pagination import paginate


def feed(
    session: Session,
    user: User,
    page: int | None = None,
    per_page: int | None = None,
) -> Iterator[Micropost]:
    """
    Iterate the user's feed newest first.

    Computed in one query against the live follow edges
    (user_id = me OR user_id IN followed ids); nothing is persisted.
    """
    followed_ids = select(Relationship.followed_id).where(
        Relationship.follower_id == user.id
    )
    query = (
        session.query(Micropost)
        .filter(
            or_(
                Micropost.user_id == user.id,
                Micropost.user_id.in_(followed_ids),
            )
        )
        .order_by(*NEWEST_FIRST)
    )
    return iter(paginate(query, page, per_page))
