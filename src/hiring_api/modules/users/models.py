"""
User Models

The admin credential table. One row is expected in normal operation.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from hiring_api.core.database import Base


class AdminUser(Base):
    """
    Admin credential used to log in to the staff listing.

    Only the bcrypt hash of the password is stored.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(150), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # Load created_at right after insert; async sessions cannot lazy-load it
    __mapper_args__ = {"eager_defaults": True}

    def __repr__(self) -> str:
        return f"<AdminUser(id={self.id}, username={self.username})>"
