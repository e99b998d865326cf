"""Password hashing and remember-token generation."""

import secrets

import bcrypt

from app.core.config import get_settings

# Min/max lengths for name and password validation.
NAME_MAX_LEN = 50
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 40
# bcrypt ignores everything past this many bytes of the encoded password.
PASSWORD_MAX_BYTES = 72


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # Validation rejects longer passwords; truncation only keeps bcrypt from raising.
    pw_bytes = plain_password.encode("utf-8")[:PASSWORD_MAX_BYTES]
    rounds = get_settings().BCRYPT_ROUNDS
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")
    if len(pw_bytes) > PASSWORD_MAX_BYTES:
        # bcrypt would compare only a prefix; no stored password is this long.
        return False
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def generate_remember_token() -> str:
    """Return a fresh URL-safe random token for persistent sessions."""
    return secrets.token_urlsafe(get_settings().REMEMBER_TOKEN_BYTES)
