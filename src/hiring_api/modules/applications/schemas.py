"""
Application Schemas

Pydantic schemas for request validation and response serialization.
The referral source travels as `howKnow` on the wire.
"""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ApplicationCreate(BaseModel):
    """Request body for POST /api/apply.

    Form clients may send numbers (a phone number, years of experience);
    they are stored as text.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    name: str | None = None
    email: str | None = None
    mobile: str | None = None
    gender: str | None = None
    degree: str | None = None
    experience: str | None = None
    how_know: str | None = Field(None, alias="howKnow")
    resume: str | None = None
    position: str | None = None


class ApplicationSubmitResponse(BaseModel):
    """Response after submitting an application."""

    message: str
    id: int


class ApplicationResponse(BaseModel):
    """A stored application as returned by GET /api/applications.

    SQLite keeps submitted_at as naive UTC; it is returned with a UTC offset.
    """

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str | None = None
    email: str | None = None
    mobile: str | None = None
    gender: str | None = None
    degree: str | None = None
    experience: str | None = None
    how_know: str | None = Field(None, alias="howKnow")
    resume: str | None = None
    position: str | None = None
    submitted_at: datetime

    @field_validator("submitted_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
