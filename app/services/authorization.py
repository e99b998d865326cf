"""Ownership and role guards for destructive or personal operations."""

from app.models import Micropost, User
from app.services.errors import AuthorizationError
from app.services.roles import ADMIN_ROLE, has_role


def authorize_edit(actor: User, user: User) -> None:
    """Only the user themself may edit their record."""
    if actor.id != user.id:
        raise AuthorizationError("Users may only edit their own account")


def authorize_destroy(actor: User, target: User) -> None:
    """Admins may destroy other users, never themselves."""
    if not has_role(actor, ADMIN_ROLE):
        raise AuthorizationError("Admin access required")
    if actor.id == target.id:
        raise AuthorizationError("Admins cannot destroy their own account")


def authorize_micropost_delete(actor: User, micropost: Micropost) -> None:
    """Only the author may delete a micropost."""
    if micropost.user_id != actor.id:
        raise AuthorizationError("Users may only delete their own microposts")
