"""Social graph: directed follow edges between users."""

import logging

from sqlalchemy import exists, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models import Relationship, User
from app.services.errors import AlreadyFollowing, InvalidTarget, NotFollowing, NotFoundError

logger = logging.getLogger(__name__)


def follow(session: Session, follower: User, followed: User) -> Relationship:
    """
    Create the edge follower -> followed.

    Duplicates are rejected by the (follower_id, followed_id) unique constraint.

    Raises:
        InvalidTarget: follower and followed are the same user.
        AlreadyFollowing: the edge already exists.
        NotFoundError: follower or followed no longer exists.
    """
    follower_id, followed_id = follower.id, followed.id
    if follower_id == followed_id:
        raise InvalidTarget(follower_id)

    edge = Relationship(follower_id=follower_id, followed_id=followed_id)
    session.add(edge)
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        for user_id in (follower_id, followed_id):
            if session.get(User, user_id) is None:
                raise NotFoundError("user", user_id) from exc
        if _edge_exists(session, follower_id, followed_id):
            raise AlreadyFollowing(follower_id, followed_id) from exc
        raise
    logger.info("Follow: follower_id=%s, followed_id=%s", follower_id, followed_id)
    return edge


def unfollow(session: Session, follower: User, followed: User) -> None:
    """
    Remove the edge follower -> followed.

    Raises:
        NotFollowing: there is no such edge.
    """
    follower_id, followed_id = follower.id, followed.id
    deleted = (
        session.query(Relationship)
        .filter(
            Relationship.follower_id == follower_id,
            Relationship.followed_id == followed_id,
        )
        .delete(synchronize_session=False)
    )
    if deleted == 0:
        session.rollback()
        raise NotFollowing(follower_id, followed_id)
    session.commit()
    logger.info("Unfollow: follower_id=%s, followed_id=%s", follower_id, followed_id)


def _edge_exists(session: Session, follower_id: int, followed_id: int) -> bool:
    stmt = exists().where(
        Relationship.follower_id == follower_id,
        Relationship.followed_id == followed_id,
    )
    return bool(session.query(stmt).scalar())


def is_following(session: Session, follower: User, followed: User) -> bool:
    return _edge_exists(session, follower.id, followed.id)


def followed_users(session: Session, user: User) -> list[User]:
    """Users that user follows, by id."""
    return (
        session.query(User)
        .join(Relationship, Relationship.followed_id == User.id)
        .filter(Relationship.follower_id == user.id)
        .order_by(User.id)
        .all()
    )


def followers(session: Session, user: User) -> list[User]:
    """Users following user, by id."""
    return (
        session.query(User)
        .join(Relationship, Relationship.follower_id == User.id)
        .filter(Relationship.followed_id == user.id)
        .order_by(User.id)
        .all()
    )


def remove_all_edges(session: Session, user: User) -> int:
    """
    Delete every edge where user is follower or followed. Does not commit;
    part of the account destruction transaction. Returns rows deleted.
    """
    return (
        session.query(Relationship)
        .filter(
            or_(
                Relationship.follower_id == user.id,
                Relationship.followed_id == user.id,
            )
        )
        .delete(synchronize_session=False)
    )
