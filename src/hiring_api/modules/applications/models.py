"""
Application Models

One row per job-application submission. Rows are created once and never
updated or deleted by this service.
"""

from datetime import UTC, datetime

from sqlalchemy import DateTime, Index, Integer, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from hiring_api.core.database import Base


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Application(Base):
    """
    Job application submitted through the public form.

    All applicant fields are free text and nullable. The resume is stored
    as an opaque reference (a path or a link), never as a binary blob.
    """

    __tablename__ = "applications"

    # Primary key (monotonic)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Applicant details
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str | None] = mapped_column(Text, nullable=True)
    mobile: Mapped[str | None] = mapped_column(Text, nullable=True)
    gender: Mapped[str | None] = mapped_column(Text, nullable=True)
    degree: Mapped[str | None] = mapped_column(Text, nullable=True)
    experience: Mapped[str | None] = mapped_column(Text, nullable=True)
    how_know: Mapped[str | None] = mapped_column("howKnow", Text, nullable=True)
    resume: Mapped[str | None] = mapped_column(Text, nullable=True)
    position: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Assigned by the server at insert time, with sub-second precision
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        server_default=func.now(),
        nullable=False,
    )

    __table_args__ = (Index("ix_applications_submitted_at", "submitted_at"),)

    def __repr__(self) -> str:
        return f"<Application(id={self.id}, position={self.position})>"
