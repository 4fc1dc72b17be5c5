"""
Authentication Service

Verifies the admin credential and issues the single session token.
Also seeds the admin credential at startup.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hiring_api.core.auth import SessionTokenIssuer
from hiring_api.core.exceptions import InvalidCredentialsError, StorageError
from hiring_api.core.security import hash_password, verify_password
from hiring_api.modules.users.repository import UserRepository

logger = logging.getLogger(__name__)


async def login(
    db: AsyncSession,
    issuer: SessionTokenIssuer,
    username: str,
    password: str,
) -> str:
    """
    Authenticate the admin and issue a new session token.

    Unknown usernames and wrong passwords raise the same error so callers
    cannot tell which one happened.

    Raises:
        StorageError: If the credential lookup fails
        InvalidCredentialsError: If the username or password is wrong
    """
    try:
        user = await UserRepository.find_admin(db, username)
    except SQLAlchemyError as e:
        logger.error(f"DB user select error: {e}")
        raise StorageError() from e

    if user is None:
        logger.warning(f"Login attempt for non-existent user: {username}")
        raise InvalidCredentialsError()

    if not verify_password(password, user.password_hash):
        logger.warning(f"Invalid password for user: {username}")
        raise InvalidCredentialsError()

    token = issuer.issue()
    logger.info(f"User logged in: {username}")
    return token


async def ensure_admin(db: AsyncSession, username: str, password: str) -> bool:
    """
    Seed the admin credential if it does not exist yet.

    Returns:
        True if the admin row was created

    Raises:
        StorageError: If the lookup or insert fails
    """
    try:
        return await UserRepository.seed_admin_if_absent(
            db,
            username=username,
            password_hash=hash_password(password),
        )
    except SQLAlchemyError as e:
        logger.error(f"DB admin seed error: {e}")
        raise StorageError() from e
