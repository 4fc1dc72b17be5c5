"""
Applications Repository

Database operations for job applications. Only inserts and reads: the
service never updates or deletes an application.

Design Principles:
- All queries are parameterized (no SQL injection)
- Async operations for non-blocking I/O
- Only database operations, no business logic
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Application
from .schemas import ApplicationCreate


async def insert_application(db: AsyncSession, data: ApplicationCreate) -> int:
    """Store a new application and return its generated id."""

    new_application = Application(
        name=data.name,
        email=data.email,
        mobile=data.mobile,
        gender=data.gender,
        degree=data.degree,
        experience=data.experience,
        how_know=data.how_know,
        resume=data.resume,
        position=data.position,
    )

    db.add(new_application)
    await db.commit()

    return new_application.id


async def get_application(db: AsyncSession, id: int) -> Application | None:
    """Get application by ID."""
    return await db.get(Application, id)


async def list_applications(db: AsyncSession) -> list[Application]:
    """
    Get every application, most recently submitted first.

    Ties on submitted_at fall back to the newest id.
    """
    result = await db.execute(
        select(Application).order_by(Application.submitted_at.desc(), Application.id.desc())
    )
    return list(result.scalars().all())
