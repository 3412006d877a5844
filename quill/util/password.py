"""Password hashing utilities."""

import bcrypt

from quill.config import AuthSettings


def hash_password(password: str, settings: AuthSettings) -> str:
    """Hash a password using bcrypt.

    Args:
        password: Plain text password
        settings: Authentication settings (bcrypt cost)

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain text password against a bcrypt hash.

    Args:
        password: Plain text password
        password_hash: Stored bcrypt hash

    Returns:
        True if the password matches
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash
        return False
