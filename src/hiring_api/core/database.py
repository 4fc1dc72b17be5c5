"""
Database Configuration

Async SQLAlchemy engine and session factory backed by a local SQLite file.
Tables are created on startup if absent; there are no migrations.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from hiring_api.core.config import settings

engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that yields a database session.

    The session is rolled back if the request handler raises.
    """
    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """
    Create all tables if they do not exist.

    Call this on application startup. Model modules must be imported
    first so their tables are registered on Base.metadata.
    """
    # Register models on the metadata
    from hiring_api.modules.applications import models as _applications_models  # noqa: F401
    from hiring_api.modules.users import models as _users_models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Dispose of the engine's connection pool."""
    await engine.dispose()
