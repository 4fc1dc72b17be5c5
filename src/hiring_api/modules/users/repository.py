"""
User Repository

Database operations for the admin credential.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hiring_api.modules.users.models import AdminUser

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for admin credential database operations."""

    @staticmethod
    async def find_admin(db: AsyncSession, username: str) -> AdminUser | None:
        """
        Get the admin credential by username.

        Args:
            db: Database session
            username: Unique username

        Returns:
            AdminUser instance or None if not found
        """
        result = await db.execute(select(AdminUser).where(AdminUser.username == username))
        return result.scalar_one_or_none()

    @staticmethod
    async def seed_admin_if_absent(
        db: AsyncSession,
        username: str,
        password_hash: str,
    ) -> bool:
        """
        Insert the admin credential unless a row with that username exists.

        Args:
            db: Database session
            username: Admin username (unique)
            password_hash: bcrypt hash of the admin password

        Returns:
            True if a row was inserted, False if it already existed
        """
        existing = await UserRepository.find_admin(db, username)
        if existing:
            logger.info(f"Admin user already exists: {username}")
            return False

        db.add(AdminUser(username=username, password_hash=password_hash))
        try:
            await db.commit()
        except IntegrityError:
            # Another process seeded the same username between check and insert
            await db.rollback()
            logger.warning(f"Admin user {username} was inserted concurrently; skipping seed")
            return False

        logger.info(f"Admin user inserted: {username}")
        return True
