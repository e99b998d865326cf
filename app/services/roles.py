"""Role registry: static roles, membership checks and membership changes."""

import logging
import re

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.models import Role, User
from app.schemas.validation import FieldError
from app.services.errors import ConflictError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

USER_ROLE = "user"
ADMIN_ROLE = "admin"

# Static reference data, in id order (user=1, admin=2).
STATIC_ROLES = (USER_ROLE, ADMIN_ROLE)

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_SEPARATOR_RE = re.compile(r"[\s\-]+")


def normalize_role_name(name: str) -> str:
    """Canonical role name: trimmed lower snake case ('SuperUser' -> 'super_user')."""
    s = _CAMEL_BOUNDARY_RE.sub("_", name.strip())
    return _SEPARATOR_RE.sub("_", s).lower()


def has_role(user: User, role_name: str) -> bool:
    wanted = normalize_role_name(role_name)
    return any(normalize_role_name(role.name) == wanted for role in user.roles)


def get_role_by_name(session: Session, name: str) -> Role:
    canonical = normalize_role_name(name)
    role = session.query(Role).filter(Role.name == canonical).first()
    if role is None:
        raise NotFoundError("role", canonical)
    return role


def load_roles(session: Session, role_ids: list[int]) -> list[Role]:
    """Fetch roles by id (duplicates collapse). Raises NotFoundError for the first unknown id."""
    wanted = sorted(set(role_ids))
    roles = session.query(Role).filter(Role.id.in_(wanted)).order_by(Role.id).all()
    found = {role.id for role in roles}
    for role_id in wanted:
        if role_id not in found:
            raise NotFoundError("role", role_id)
    return roles


def assign_default_role(session: Session, user: User) -> bool:
    """
    Give the user the configured default role if they have no roles yet.

    Does not commit; runs inside the caller's creation transaction.
    Returns True when a role was assigned.
    """
    if user.roles:
        return False
    user.roles.append(get_role_by_name(session, get_settings().DEFAULT_ROLE))
    return True


def set_roles(session: Session, user: User, role_ids: list[int]) -> User:
    """Replace the user's full membership set in one commit."""
    if not role_ids:
        raise ValidationError(
            [FieldError(field="role_ids", rule="required", message="At least one role is required")]
        )
    roles = load_roles(session, role_ids)
    user.roles = roles
    try:
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise
    logger.info(
        "Roles replaced: user_id=%s, roles=%s", user.id, [r.name for r in roles]
    )
    return user


def grant_role(session: Session, user: User, role_name: str) -> User:
    """Add one membership. Raises ConflictError if the user already has the role."""
    role = get_role_by_name(session, role_name)
    if role in user.roles:
        raise ConflictError(
            f"User {user.id} already has role '{role.name}'", field="role_ids"
        )
    user.roles.append(role)
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        raise ConflictError(
            f"User {user.id} already has role '{role.name}'", field="role_ids"
        ) from exc
    logger.info("Role granted: user_id=%s, role=%s", user.id, role.name)
    return user


def ensure_roles(session: Session) -> list[str]:
    """
    Insert any missing static roles. Idempotent: safe to run repeatedly.

    Returns the names of roles that were created.
    """
    existing = {name for (name,) in session.query(Role.name).all()}
    created = [name for name in STATIC_ROLES if name not in existing]
    for name in created:
        session.add(Role(name=name))
    session.commit()
    if created:
        logger.info("Roles seeded: created=%s", created)
    return created
