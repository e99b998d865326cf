"""
Identity store: registration, authentication, profile updates and account
destruction.

Writes rely on the unique index on users.email to reject duplicates (emails
are stored lower-cased, so the check is case-insensitive) instead of checking
first and inserting afterwards.
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.security import generate_remember_token, hash_password, verify_password
from app.models import User
from app.schemas.user import UserCreate, UserUpdate
from app.services import content, social_graph
from app.services.authorization import authorize_destroy, authorize_edit
from app.services.errors import ConflictError, NotFoundError, ValidationError
from app.services.pagination import paginate
from app.services.roles import assign_default_role, load_roles
from app.services.validation import normalize_email, validate_user_fields

logger = logging.getLogger(__name__)


def _email_taken(email: str) -> ConflictError:
    return ConflictError(f"Email '{email}' has already been taken", field="email")


def _email_in_use(session: Session, email: str, user_id: int | None) -> bool:
    query = session.query(User.id).filter(User.email == email)
    if user_id is not None:
        query = query.filter(User.id != user_id)
    return bool(session.query(query.exists()).scalar())


def _save(session: Session, user: User) -> None:
    """
    Commit the user. Every save normalizes the email and rotates the remember-token.

    An integrity failure is reported as a taken email only when another row
    holds that email; any other constraint failure propagates.
    """
    email = normalize_email(user.email)
    user_id = user.id
    user.email = email
    user.remember_token = generate_remember_token()
    session.add(user)
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        if _email_in_use(session, email, user_id):
            raise _email_taken(email) from exc
        raise


def create_user(session: Session, data: UserCreate) -> User:
    """
    Validate and persist a new user.

    Assigns data.role_ids when given, otherwise the default role, in the same
    transaction as the user row.

    Raises:
        ValidationError: one or more field rules failed (all are reported).
        NotFoundError: a requested role id does not exist.
        ConflictError: the email is already registered (any letter case).
    """
    errors = validate_user_fields(
        data.name, data.email, data.password, data.password_confirmation
    )
    if errors:
        raise ValidationError(errors)

    user = User(
        name=data.name.strip(),
        email=data.email,
        password_hash=hash_password(data.password),
    )
    if data.role_ids:
        user.roles = load_roles(session, data.role_ids)
    else:
        assign_default_role(session, user)

    _save(session, user)
    logger.info("User created: user_id=%s, roles=%s", user.id, user.role_names)
    return user


def authenticate(session: Session, email: str, password: str) -> User | None:
    """
    Return the user when email and password match, else None.

    Unknown email and wrong password are indistinguishable to the caller.
    """
    if not email or not password:
        return None
    user = session.query(User).filter(User.email == normalize_email(email)).first()
    if user is None or not verify_password(password, user.password_hash):
        return None
    return user


def update_user(
    session: Session, user: User, data: UserUpdate, actor: User | None = None
) -> User:
    """
    Apply a partial update after re-validating the resulting record.

    Password and confirmation are required on every save, as at sign-up.
    When actor is given it must be the user being edited.
    """
    if actor is not None:
        authorize_edit(actor, user)
    name = data.name if data.name is not None else user.name
    email = data.email if data.email is not None else user.email
    errors = validate_user_fields(name, email, data.password, data.password_confirmation)
    if errors:
        raise ValidationError(errors)

    user.name = name.strip()
    user.email = email
    user.password_hash = hash_password(data.password)

    _save(session, user)
    logger.info("User updated: user_id=%s", user.id)
    return user


def get_user(session: Session, user_id: int) -> User:
    user = session.get(User, user_id)
    if user is None:
        raise NotFoundError("user", user_id)
    return user


def list_users(
    session: Session, page: int | None = None, per_page: int | None = None
) -> list[User]:
    query = session.query(User).order_by(User.id)
    return paginate(query, page, per_page).all()


def find_by_remember_token(session: Session, token: str) -> User | None:
    """Look up the user holding a remember-token (persistent-session re-authentication)."""
    if not token:
        return None
    return session.query(User).filter(User.remember_token == token).first()


def destroy_user(session: Session, actor: User, target: User) -> None:
    """
    Delete target with its microposts, follow edges (both directions) and
    role memberships, all in one transaction.

    Raises:
        AuthorizationError: actor is not an admin, or actor is target.
    """
    authorize_destroy(actor, target)
    target_id = target.id
    try:
        posts_deleted = content.delete_all_by_user(session, target)
        edges_deleted = social_graph.remove_all_edges(session, target)
        session.delete(target)
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise
    logger.info(
        "User destroyed: user_id=%s, by=%s, microposts_deleted=%s, edges_deleted=%s",
        target_id,
        actor.id,
        posts_deleted,
        edges_deleted,
    )
