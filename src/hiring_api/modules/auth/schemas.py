"""Authentication schemas."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Login request schema."""

    username: str
    password: str


class LoginResponse(BaseModel):
    """Login response schema."""

    token: str
