"""Errors raised by the service layer. Each carries a message; some carry field detail."""

from app.schemas.validation import FieldError


class ServiceError(Exception):
    """Base class for all service-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ServiceError):
    """Raised when one or more field rules fail. All failures are reported together."""

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(e.message for e in self.errors) or "Invalid input")

    @property
    def fields(self) -> set[str]:
        return {e.field for e in self.errors}

    def by_field(self) -> dict[str, list[str]]:
        """Group messages per field, preserving rule order."""
        grouped: dict[str, list[str]] = {}
        for e in self.errors:
            grouped.setdefault(e.field, []).append(e.message)
        return grouped


class NotFoundError(ServiceError):
    """Raised when a referenced user, role or micropost does not exist."""

    def __init__(self, resource: str, identifier: object) -> None:
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} '{identifier}' not found")


class ConflictError(ServiceError):
    """Raised on a uniqueness violation (email, role membership, follow edge)."""

    def __init__(self, message: str, field: str | None = None, rule: str = "taken") -> None:
        self.field = field
        self.rule = rule
        super().__init__(message)


class AuthorizationError(ServiceError):
    """Raised when a role or ownership check fails."""


class AlreadyFollowing(ConflictError):
    """Raised when a follow edge already exists."""

    def __init__(self, follower_id: int, followed_id: int) -> None:
        self.follower_id = follower_id
        self.followed_id = followed_id
        super().__init__(
            f"User {follower_id} already follows user {followed_id}",
            field="followed_id",
        )


class NotFollowing(NotFoundError):
    """Raised when unfollowing a user that is not followed."""

    def __init__(self, follower_id: int, followed_id: int) -> None:
        self.follower_id = follower_id
        self.followed_id = followed_id
        super().__init__("relationship", f"{follower_id}->{followed_id}")


class InvalidTarget(ValidationError):
    """Raised when a user tries to follow themselves."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(
            [
                FieldError(
                    field="followed_id",
                    rule="self_follow",
                    message="Users cannot follow themselves",
                )
            ]
        )
