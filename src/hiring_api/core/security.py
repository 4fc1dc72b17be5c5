"""
Password hashing utilities.

bcrypt is used for the admin credential: salted, slow and one-way.
Never log the plaintext password or the stored hash.
"""

import logging

import bcrypt

from hiring_api.core.config import settings

logger = logging.getLogger(__name__)


def hash_password(password: str, rounds: int | None = None) -> str:
    """
    Hash a plaintext password with a fresh bcrypt salt.

    Args:
        password: Plaintext password
        rounds: bcrypt cost factor (defaults to settings.bcrypt_rounds)

    Returns:
        The encoded bcrypt hash as text
    """
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a plaintext password against a stored bcrypt hash.

    A malformed stored hash is treated as a mismatch.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False
